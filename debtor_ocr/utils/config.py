"""Configuration management for the debtor OCR pipeline.

Loads and validates YAML configuration. Every default matches the values
used for the 2024 Tax Agency debtor list, so running without a config file
reproduces that analysis.
"""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class OCRConfig(BaseModel):
    """Configuration for PDF rendering and the Tesseract engine."""

    tesseract_cmd: str | None = None
    default_lang: str = "eng"
    psm: int = 3
    pdf_dpi: int = 500
    skip_pages: int = Field(default=1, ge=0)


class PreprocessingConfig(BaseModel):
    """Configuration for page image preprocessing."""

    grayscale: bool = True
    threshold_enabled: bool = True
    threshold_type: Literal["white", "black"] = "white"
    threshold_percent: float = Field(default=70.0, ge=0.0, le=100.0)


class ExtractionConfig(BaseModel):
    """Configuration for amount token extraction."""

    separator: str = Field(default=",", min_length=1, max_length=1)


class AnalysisConfig(BaseModel):
    """Plausible value range and token file location."""

    min_amount: float = 600000.0
    max_amount: float = 277813329.41
    amounts_path: str = "Cifras_deudores.csv"


class HistogramConfig(BaseModel):
    """Configuration for the debt distribution histogram."""

    output_path: str = "hist_deudores.png"
    bins: int = 800
    cap: float = 10e6
    width: int = 610
    height: int = 400
    title: str = "Distr. Tax Agency (Hacienda) debtors - 2024"
    reference_amounts: list[float] = Field(
        default_factory=lambda: [1009253.55, 865601.41]
    )


class AppConfig(BaseModel):
    """Top-level application configuration."""

    ocr: OCRConfig = Field(default_factory=OCRConfig)
    preprocessing: PreprocessingConfig = Field(default_factory=PreprocessingConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    histogram: HistogramConfig = Field(default_factory=HistogramConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()
