"""Command-line interface for debtor list extraction and analysis.

Provides subcommands to OCR a debtor list PDF into a flat amounts file,
to analyze an existing amounts file, or to do both in one run.
"""

import argparse
import sys
from pathlib import Path

from debtor_ocr.analysis.histogram import plot_histogram
from debtor_ocr.analysis.statistics import (
    DebtSummary,
    filter_plausible,
    parse_amounts,
    summarize,
)
from debtor_ocr.ocr.document_processor import DocumentProcessor
from debtor_ocr.output.text_writer import read_amounts, write_amounts
from debtor_ocr.utils.config import AppConfig, load_config
from debtor_ocr.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def extract_document(pdf_path: Path, output_path: Path, config: AppConfig) -> int:
    """OCR a debtor list PDF and write its amounts to a text file.

    Args:
        pdf_path: Path to the debtor list PDF.
        output_path: Destination amounts file.
        config: Application configuration.

    Returns:
        Number of amounts written.
    """
    processor = DocumentProcessor(config)
    result = processor.process(pdf_path)
    return write_amounts(result.amounts, output_path)


def analyze_amounts(
    amounts_path: Path, histogram_path: Path, config: AppConfig
) -> DebtSummary:
    """Filter the amounts in a text file, summarize and plot them.

    Args:
        amounts_path: File with one amount token per line.
        histogram_path: Destination PNG for the histogram.
        config: Application configuration.

    Returns:
        Summary statistics of the plausible amounts.
    """
    tokens = read_amounts(amounts_path)
    values = parse_amounts(tokens, config.extraction.separator)
    values = filter_plausible(
        values, config.analysis.min_amount, config.analysis.max_amount
    )
    summary = summarize(values)
    plot_histogram(values, summary, histogram_path, config.histogram)
    _print_summary(summary, histogram_path)
    return summary


def _print_summary(summary: DebtSummary, histogram_path: Path) -> None:
    """Print the debt summary to stdout.

    Args:
        summary: Statistics of the plausible amounts.
        histogram_path: Path to the histogram image.
    """
    print(f"\n{'=' * 50}")
    print("Debt Distribution")
    print(f"{'=' * 50}")
    print(f"Debtors:   {summary.count}")
    print(f"Minimum:   {summary.minimum:,.2f}")
    print(f"Median:    {summary.median:,.2f}")
    print(f"Mean:      {summary.mean:,.2f}")
    print(f"Maximum:   {summary.maximum:,.2f}")
    print(f"Histogram: {histogram_path}")


def _require_file(path: Path) -> None:
    """Exit with status 1 if an input file is missing.

    Args:
        path: Input file given on the command line.
    """
    if not path.exists():
        print(f"Error: {path} does not exist", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(
        description="Debtor list OCR and debt distribution analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("configs/config.yaml"),
        help="YAML configuration file (default: configs/config.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    extract_parser = subparsers.add_parser(
        "extract", help="OCR a debtor list PDF into an amounts file"
    )
    extract_parser.add_argument("pdf", type=Path, help="Debtor list PDF")
    extract_parser.add_argument(
        "-o", "--output", type=Path, help="Output amounts file"
    )
    extract_parser.add_argument("--dpi", type=int, help="PDF rendering resolution")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Filter, summarize and plot an amounts file"
    )
    analyze_parser.add_argument("amounts", type=Path, help="Amounts file")
    analyze_parser.add_argument(
        "--histogram", type=Path, help="Output histogram PNG"
    )

    run_parser = subparsers.add_parser("run", help="Extract and analyze in one go")
    run_parser.add_argument("pdf", type=Path, help="Debtor list PDF")
    run_parser.add_argument("-o", "--output", type=Path, help="Output amounts file")
    run_parser.add_argument("--histogram", type=Path, help="Output histogram PNG")
    run_parser.add_argument("--dpi", type=int, help="PDF rendering resolution")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = load_config(args.config)
    setup_logging(config.log_level)

    if getattr(args, "dpi", None):
        config.ocr.pdf_dpi = args.dpi

    amounts_path = getattr(args, "output", None) or Path(
        config.analysis.amounts_path
    )
    histogram_path = getattr(args, "histogram", None) or Path(
        config.histogram.output_path
    )

    if args.command == "extract":
        _require_file(args.pdf)
        count = extract_document(args.pdf, amounts_path, config)
        print(f"{count} amounts written to {amounts_path}")
    elif args.command == "analyze":
        _require_file(args.amounts)
        analyze_amounts(args.amounts, histogram_path, config)
    elif args.command == "run":
        _require_file(args.pdf)
        extract_document(args.pdf, amounts_path, config)
        analyze_amounts(amounts_path, histogram_path, config)


if __name__ == "__main__":
    main()
