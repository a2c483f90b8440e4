"""Configurable page preprocessing ahead of OCR.

Runs grayscale conversion followed by a percentage threshold, each step
switchable through the preprocessing configuration.
"""

import numpy as np

from debtor_ocr.utils.config import PreprocessingConfig
from debtor_ocr.utils.logger import get_logger

from .binarize import threshold, to_gray

logger = get_logger(__name__)


class PreprocessingPipeline:
    """Page image preprocessing pipeline.

    Args:
        config: Preprocessing configuration controlling which steps to apply.
    """

    def __init__(self, config: PreprocessingConfig) -> None:
        self.config = config

    def process(self, image: np.ndarray) -> np.ndarray:
        """Run the configured preprocessing steps on a page image.

        Args:
            image: Rendered page image (RGB or grayscale).

        Returns:
            Processed image ready for OCR.
        """
        result = image

        if self.config.grayscale:
            result = to_gray(result)

        if self.config.threshold_enabled:
            result = threshold(
                result,
                method=self.config.threshold_type,
                percent=self.config.threshold_percent,
            )

        logger.debug("Preprocessed page image to shape %s", result.shape)
        return result
