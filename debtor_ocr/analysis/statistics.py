"""Numeric parsing, plausibility filtering and summary statistics.

OCR output still contains misread figures after token extraction, so the
parsed values are restricted to a range found by visual inspection of the
source list before any statistics are computed.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from debtor_ocr.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class DebtSummary:
    """Summary statistics of the filtered debt amounts."""

    count: int
    minimum: float
    median: float
    mean: float
    maximum: float


def parse_amount(token: str, separator: str = ",") -> float:
    """Convert an amount token to a float, or ``NaN`` if it is malformed.

    Only digits with at most one separator are accepted, so forms such as
    ``"1_000,5"`` or ``"inf"`` that ``float`` would take are rejected.
    """
    sep = re.escape(separator)
    if not re.fullmatch(rf"[0-9]+(?:{sep}[0-9]*)?|{sep}[0-9]+", token):
        return float("nan")
    return float(token.replace(separator, "."))


def parse_amounts(tokens: Iterable[str], separator: str = ",") -> np.ndarray:
    """Convert amount tokens to floats.

    The separator is read as a decimal point. Tokens that do not parse
    become ``NaN`` and are left for the range filter to drop.

    Args:
        tokens: Amount tokens as extracted from OCR.
        separator: The separator used in the tokens.

    Returns:
        Array of parsed values, same length and order as ``tokens``.
    """
    values = np.array([parse_amount(t, separator) for t in tokens], dtype=float)
    malformed = int(np.isnan(values).sum())
    if malformed:
        logger.warning("%d of %d tokens could not be parsed", malformed, len(values))
    return values


def filter_plausible(
    values: np.ndarray, minimum: float = 600000, maximum: float = 277813329.41
) -> np.ndarray:
    """Keep values inside the inclusive ``[minimum, maximum]`` range.

    ``NaN`` never satisfies the comparison and is always dropped.

    Args:
        values: Parsed amounts.
        minimum: Smallest plausible amount.
        maximum: Largest plausible amount.

    Returns:
        Filtered values in their original order.
    """
    values = np.asarray(values, dtype=float)
    kept = values[(values >= minimum) & (values <= maximum)]
    logger.info(
        "Kept %d of %d amounts within [%.2f, %.2f]",
        len(kept),
        len(values),
        minimum,
        maximum,
    )
    return kept


def summarize(values: np.ndarray) -> DebtSummary:
    """Compute minimum, median, mean and maximum of the amounts.

    Raises:
        ValueError: If ``values`` is empty.
    """
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        raise ValueError("Cannot summarize an empty set of amounts")
    return DebtSummary(
        count=int(values.size),
        minimum=float(values.min()),
        median=float(np.median(values)),
        mean=float(values.mean()),
        maximum=float(values.max()),
    )
