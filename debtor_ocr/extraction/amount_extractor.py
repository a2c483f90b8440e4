"""Right-to-left amount token extraction from OCR lines.

Debt amounts sit in the rightmost column of the debtor list, so each OCR
line is scanned from its end towards its start, keeping digits and a single
separator until the first letter (the end of the debtor name) is reached.
"""

import string

from debtor_ocr.utils.logger import get_logger

logger = get_logger(__name__)

_DIGITS = frozenset(string.digits)


def extract_amount(line: str, separator: str = ",") -> str:
    """Extract the trailing numeric token from a single line of text.

    Walks the line from right to left. A letter stops the scan, the first
    separator seen is kept, later separators and any other non-digit
    characters are skipped.

    Args:
        line: One line of recognized text.
        separator: The decimal/thousands marker to keep inside the token.

    Returns:
        Digits with at most one separator, or an empty string when no
        character was accepted before a letter or the start of the line.
    """
    found_separator = False
    result_rev: list[str] = []

    for ch in reversed(line):
        if ch.isalpha():
            break
        if ch == separator:
            if not found_separator:
                result_rev.append(ch)
                found_separator = True
        elif ch in _DIGITS:
            result_rev.append(ch)

    return "".join(reversed(result_rev))


def is_amount_token(token: str, separator: str = ",") -> bool:
    """Whether an extracted token looks like a monetary amount.

    Tokens without a separator are treated as OCR noise (page numbers,
    identifiers), and a lone separator carries no value.
    """
    return bool(token) and token != separator and separator in token


def extract_amounts(text: str, separator: str = ",") -> list[str]:
    """Extract the amount tokens from the recognized text of one page.

    Args:
        text: Raw OCR output for a page, possibly spanning many lines.
        separator: The decimal/thousands marker.

    Returns:
        Amount tokens in line order.
    """
    lines = text.split("\n")
    amounts = [extract_amount(line, separator) for line in lines]
    kept = [a for a in amounts if is_amount_token(a, separator)]
    logger.debug("Kept %d of %d lines as amounts", len(kept), len(lines))
    return kept
