"""Flat text file output, one amount token per line."""

from collections.abc import Iterable
from pathlib import Path

from debtor_ocr.utils.logger import get_logger

logger = get_logger(__name__)


def write_amounts(amounts: Iterable[str], output_path: Path) -> int:
    """Write amount tokens to a text file, skipping empty entries.

    Args:
        amounts: Amount tokens in output order.
        output_path: Destination file, parent directories are created.

    Returns:
        Number of lines written.
    """
    lines = [a for a in amounts if a]
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    logger.info("Wrote %d amounts to %s", len(lines), output_path)
    return len(lines)


def read_amounts(input_path: Path) -> list[str]:
    """Read amount tokens back from a text file, dropping blank lines."""
    with open(input_path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]
