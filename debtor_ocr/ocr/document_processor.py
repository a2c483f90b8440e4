"""Page-by-page OCR pipeline for debtor list PDFs.

Renders each page after the cover, preprocesses and recognizes it, and
keeps only the amount tokens found in the recognized text.
"""

from dataclasses import dataclass
from pathlib import Path

from debtor_ocr.extraction.amount_extractor import extract_amounts
from debtor_ocr.preprocessing.pipeline import PreprocessingPipeline
from debtor_ocr.utils.config import AppConfig
from debtor_ocr.utils.logger import get_logger

from .pdf_handler import PDFHandler
from .tesseract_engine import TesseractEngine

logger = get_logger(__name__)


@dataclass
class PageResult:
    """Amount tokens extracted from a single document page."""

    page_number: int
    amounts: list[str]


@dataclass
class DocumentResult:
    """Extraction results for a whole document."""

    source_file: str
    page_count: int
    pages: list[PageResult]

    @property
    def amounts(self) -> list[str]:
        """All amount tokens in page order, then line order."""
        return [amount for page in self.pages for amount in page.amounts]


class DocumentProcessor:
    """End-to-end OCR pipeline from a PDF path to amount tokens.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.pdf_handler = PDFHandler(dpi=config.ocr.pdf_dpi)
        self.preprocessing = PreprocessingPipeline(config.preprocessing)
        self.ocr_engine = TesseractEngine(
            tesseract_cmd=config.ocr.tesseract_cmd,
            default_lang=config.ocr.default_lang,
        )

    def process(self, pdf_path: Path) -> DocumentResult:
        """Extract amount tokens from every page after the cover pages.

        Args:
            pdf_path: Path to the PDF file.

        Returns:
            Per-page and flattened amount tokens.
        """
        pdf_path = Path(pdf_path)
        logger.info("Processing document: %s", pdf_path)
        page_count = self.pdf_handler.get_page_count(pdf_path)
        first_page = self.config.ocr.skip_pages + 1

        pages: list[PageResult] = []
        for page_number in range(first_page, page_count + 1):
            logger.info("Processing page %d/%d pages...", page_number, page_count)
            pages.append(
                PageResult(
                    page_number=page_number,
                    amounts=self.process_page(pdf_path, page_number),
                )
            )

        result = DocumentResult(
            source_file=pdf_path.name,
            page_count=page_count,
            pages=pages,
        )
        logger.info(
            "Extracted %d amounts from %d pages of %s",
            len(result.amounts),
            len(pages),
            pdf_path.name,
        )
        return result

    def process_page(self, pdf_path: Path, page_number: int) -> list[str]:
        """Render, preprocess and recognize one page, then extract amounts.

        Args:
            pdf_path: Path to the PDF file.
            page_number: 1-based page index.

        Returns:
            Amount tokens of the page in line order.
        """
        image = self.pdf_handler.render_page(pdf_path, page_number)
        processed = self.preprocessing.process(image)
        text = self.ocr_engine.extract_text(processed, psm=self.config.ocr.psm)
        return extract_amounts(text, self.config.extraction.separator)
