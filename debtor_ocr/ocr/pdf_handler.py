"""PDF page counting and single-page rendering.

Pages are rendered one at a time so that a long debtor list never holds
more than one high-resolution page image in memory.
"""

from pathlib import Path

import numpy as np
from pdf2image import convert_from_path
from pdf2image.pdf2image import pdfinfo_from_path

from debtor_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class PDFHandler:
    """Renders PDF pages to images for OCR processing.

    Args:
        dpi: Resolution for PDF rendering. Higher values produce
            better OCR results but use more memory.
    """

    def __init__(self, dpi: int = 500) -> None:
        self.dpi = dpi

    def get_page_count(self, pdf_path: Path) -> int:
        """Get the number of pages in a PDF without rendering it.

        Args:
            pdf_path: Path to the PDF file.

        Returns:
            Number of pages in the PDF.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(pdf_path)
        if not path.exists():
            raise FileNotFoundError(f"PDF file not found: {path}")
        info = pdfinfo_from_path(str(path))
        count = info["Pages"]
        logger.debug("PDF %s has %d pages", path, count)
        return count

    def render_page(self, pdf_path: Path, page_number: int) -> np.ndarray:
        """Render a single page of a PDF.

        Args:
            pdf_path: Path to the PDF file.
            page_number: 1-based page index.

        Returns:
            Page image as a numpy array (RGB format).

        Raises:
            FileNotFoundError: If the file does not exist.
            RuntimeError: If rendering fails or yields no image.
        """
        path = Path(pdf_path)
        if not path.exists():
            raise FileNotFoundError(f"PDF file not found: {path}")

        try:
            pil_images = convert_from_path(
                str(path),
                dpi=self.dpi,
                first_page=page_number,
                last_page=page_number,
            )
        except Exception as exc:
            raise RuntimeError(
                f"Rendering page {page_number} of {path} failed: {exc}"
            ) from exc

        if not pil_images:
            raise RuntimeError(f"Page {page_number} of {path} produced no image")

        image = np.array(pil_images[0])
        logger.debug(
            "Rendered page %d at %d DPI to shape %s", page_number, self.dpi, image.shape
        )
        return image
