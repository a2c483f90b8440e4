"""Tesseract OCR engine wrapper for page text recognition."""

import numpy as np
import pytesseract
from PIL import Image

from debtor_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class TesseractEngine:
    """Wrapper around Tesseract OCR for page text extraction.

    Args:
        tesseract_cmd: Path to the Tesseract executable.
            If ``None``, uses the system default.
        default_lang: Default OCR language code.
    """

    def __init__(
        self,
        tesseract_cmd: str | None = None,
        default_lang: str = "eng",
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.default_lang = default_lang

    def extract_text(
        self,
        image: np.ndarray,
        lang: str | None = None,
        psm: int = 3,
    ) -> str:
        """Recognize the text of a preprocessed page image.

        Args:
            image: Input image as a numpy array.
            lang: OCR language code. Defaults to the engine default.
            psm: Tesseract page segmentation mode.

        Returns:
            Recognized text, one OCR line per ``\\n``-separated line.
        """
        lang = lang or self.default_lang
        config = f"--psm {psm}"

        pil_image = Image.fromarray(image)
        text = pytesseract.image_to_string(pil_image, lang=lang, config=config)

        logger.debug(
            "OCR recognized %d characters (lang=%s, psm=%d)", len(text), lang, psm
        )
        return text
