"""Grayscale conversion and percentage thresholding for page images.

Thresholds are given as a percentage of the full intensity range, the way
scanned debtor pages were tuned by eye.
"""

import cv2
import numpy as np

from debtor_ocr.utils.logger import get_logger

logger = get_logger(__name__)


def to_gray(image: np.ndarray) -> np.ndarray:
    """Convert an image to grayscale if it has color channels.

    Args:
        image: Input image (RGB, RGBA or grayscale).

    Returns:
        Single-channel grayscale image.
    """
    if len(image.shape) == 3:
        if image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_RGBA2GRAY)
        return cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)
    return image


def _percent_to_level(percent: float) -> float:
    """Map a 0-100 percentage to an 8-bit intensity level, unrounded."""
    return percent / 100.0 * 255


def threshold_white(image: np.ndarray, percent: float = 70.0) -> np.ndarray:
    """Force every pixel brighter than the threshold to white.

    Pixels at or below the threshold keep their value, so faint paper
    texture disappears while text strokes keep their shading.

    Args:
        image: Input image (color or grayscale).
        percent: Threshold as a percentage of full intensity.

    Returns:
        Grayscale image.
    """
    gray = to_gray(image)
    level = _percent_to_level(percent)
    _, mask = cv2.threshold(gray, level, 255, cv2.THRESH_BINARY)
    result = cv2.max(gray, mask)
    logger.debug("Applied white threshold at %.1f%% (level=%.1f)", percent, level)
    return result


def threshold_black(image: np.ndarray, percent: float = 70.0) -> np.ndarray:
    """Force every pixel at or below the threshold to black.

    Args:
        image: Input image (color or grayscale).
        percent: Threshold as a percentage of full intensity.

    Returns:
        Grayscale image.
    """
    gray = to_gray(image)
    level = _percent_to_level(percent)
    _, result = cv2.threshold(gray, level, 255, cv2.THRESH_TOZERO)
    logger.debug("Applied black threshold at %.1f%% (level=%.1f)", percent, level)
    return result


def threshold(
    image: np.ndarray, method: str = "white", percent: float = 70.0
) -> np.ndarray:
    """Apply a percentage threshold using the specified method.

    Args:
        image: Input image.
        method: Threshold type, either ``"white"`` or ``"black"``.
        percent: Threshold as a percentage of full intensity.

    Returns:
        Thresholded grayscale image.

    Raises:
        ValueError: If an unsupported method is specified.
    """
    if method == "white":
        return threshold_white(image, percent)
    if method == "black":
        return threshold_black(image, percent)
    raise ValueError(f"Unsupported threshold method: {method}")
