"""Histogram of the debt distribution.

Amounts are plotted in millions. Everything above the cap is grouped into
the last bin so the long tail of very large debtors does not flatten the
rest of the distribution.
"""

from pathlib import Path

import numpy as np
from matplotlib.figure import Figure

from debtor_ocr.utils.config import HistogramConfig
from debtor_ocr.utils.logger import get_logger

from .statistics import DebtSummary

logger = get_logger(__name__)

_MILLION = 1e6


def _millions(value: float) -> str:
    return f"{round(value / _MILLION, 1):g}"


def cap_in_millions(values: np.ndarray, cap: float) -> np.ndarray:
    """Clip amounts to the cap and express them in millions."""
    return np.minimum(np.asarray(values, dtype=float), cap) / _MILLION


def format_title(title: str, summary: DebtSummary) -> str:
    """Build the two-line plot title with the summary in millions."""
    return (
        f"{title}\n"
        f"(min={_millions(summary.minimum)}, med={_millions(summary.median)}, "
        f"avg={_millions(summary.mean)}, max={_millions(summary.maximum)})"
    )


def plot_histogram(
    values: np.ndarray,
    summary: DebtSummary,
    output_path: Path,
    config: HistogramConfig | None = None,
) -> Path:
    """Render the debt histogram to a PNG file.

    Args:
        values: Filtered debt amounts.
        summary: Statistics of ``values``, drawn as red dashed lines.
        output_path: Destination PNG path.
        config: Histogram settings. Defaults to ``HistogramConfig()``.

    Returns:
        The path the image was written to.
    """
    config = config or HistogramConfig()
    output_path = Path(output_path)

    capped = cap_in_millions(values, config.cap)
    x_max = config.cap / _MILLION

    dpi = 100
    fig = Figure(figsize=(config.width / dpi, config.height / dpi), dpi=dpi)
    ax = fig.add_subplot()
    ax.hist(capped, bins=config.bins, range=(0, x_max), color="blue", linewidth=0)
    ax.set_xlim(0, x_max)
    ax.set_xticks(np.arange(0, x_max + 1, 1))
    ax.set_xlabel("Debt (million €)")
    ax.set_title(format_title(config.title, summary), fontsize=10)
    ax.get_yaxis().set_visible(False)
    for side in ("top", "right", "left"):
        ax.spines[side].set_visible(False)

    stats = [summary.minimum, summary.median, summary.mean, summary.maximum]
    for value in stats:
        ax.axvline(value / _MILLION, color="red", linestyle="--", linewidth=1)
    for value in config.reference_amounts:
        ax.axvline(value / _MILLION, color="black", linewidth=1)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, format="png")
    logger.info("Histogram of %d amounts written to %s", len(capped), output_path)
    return output_path
