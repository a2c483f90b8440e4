"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from debtor_ocr.utils.config import (
    AnalysisConfig,
    AppConfig,
    ExtractionConfig,
    HistogramConfig,
    OCRConfig,
    PreprocessingConfig,
    load_config,
)


class TestOCRConfig:
    """Tests for OCRConfig defaults and overrides."""

    def test_defaults(self) -> None:
        cfg = OCRConfig()
        assert cfg.default_lang == "eng"
        assert cfg.psm == 3
        assert cfg.pdf_dpi == 500
        assert cfg.skip_pages == 1
        assert cfg.tesseract_cmd is None

    def test_negative_skip_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OCRConfig(skip_pages=-1)


class TestPreprocessingConfig:
    """Tests for PreprocessingConfig defaults and validation."""

    def test_defaults(self) -> None:
        cfg = PreprocessingConfig()
        assert cfg.grayscale is True
        assert cfg.threshold_enabled is True
        assert cfg.threshold_type == "white"
        assert cfg.threshold_percent == 70.0

    def test_unknown_threshold_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PreprocessingConfig(threshold_type="otsu")

    def test_percent_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PreprocessingConfig(threshold_percent=120)


class TestExtractionConfig:
    """Tests for ExtractionConfig."""

    def test_default_separator(self) -> None:
        assert ExtractionConfig().separator == ","

    def test_multi_char_separator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExtractionConfig(separator=",.")


class TestAnalysisAndHistogramConfig:
    """Tests for analysis and histogram defaults."""

    def test_analysis_defaults(self) -> None:
        cfg = AnalysisConfig()
        assert cfg.min_amount == 600000
        assert cfg.max_amount == 277813329.41
        assert cfg.amounts_path == "Cifras_deudores.csv"

    def test_histogram_defaults(self) -> None:
        cfg = HistogramConfig()
        assert cfg.bins == 800
        assert cfg.cap == 10e6
        assert (cfg.width, cfg.height) == (610, 400)
        assert cfg.reference_amounts == [1009253.55, 865601.41]


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_load_shipped_config(self, config_dir: Path) -> None:
        cfg = load_config(config_dir / "config.yaml")
        assert cfg == AppConfig()

    def test_load_missing_file_returns_defaults(self) -> None:
        cfg = load_config(Path("/nonexistent/path/config.yaml"))
        assert isinstance(cfg, AppConfig)
        assert cfg.ocr.pdf_dpi == 500

    def test_load_custom_yaml(self, tmp_path: Path) -> None:
        config_data = {
            "ocr": {"default_lang": "spa", "pdf_dpi": 300},
            "analysis": {"min_amount": 1000},
            "log_level": "DEBUG",
        }
        config_file = tmp_path / "config.yaml"
        with open(config_file, "w") as f:
            yaml.dump(config_data, f)

        cfg = load_config(config_file)
        assert cfg.ocr.default_lang == "spa"
        assert cfg.ocr.pdf_dpi == 300
        assert cfg.ocr.psm == 3
        assert cfg.analysis.min_amount == 1000
        assert cfg.log_level == "DEBUG"

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_config(config_file) == AppConfig()
