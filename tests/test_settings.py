"""
Tests for settings and logging configuration.
"""

import pytest
import structlog
from pydantic import ValidationError

from hibc.barcode.validator import HibcValidator
from hibc.config import Settings, configure_logging, get_settings


class TestSettings:
    """Tests for environment driven settings."""

    def test_defaults(self):
        """Test default configuration."""
        settings = Settings(_env_file=None)

        assert settings.labeler_code == ""
        assert settings.modulus == 43
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_from_environment(self, monkeypatch):
        """Test values are read from HIBC_* variables."""
        monkeypatch.setenv("HIBC_LABELER_CODE", " +H123 ")
        monkeypatch.setenv("HIBC_MODULUS", "41")
        monkeypatch.setenv("HIBC_LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.labeler_code == "+H123"
        assert settings.modulus == 41
        assert settings.log_format == "json"

    @pytest.mark.parametrize("modulus", ["0", "44"])
    def test_modulus_out_of_range(self, monkeypatch, modulus):
        """Test rejection of a modulus outside the table."""
        monkeypatch.setenv("HIBC_MODULUS", modulus)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_format(self):
        """Test rejection of an unknown log format."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    def test_get_settings_cached(self):
        """Test settings are cached."""
        assert get_settings() is get_settings()

    def test_validator_from_cached_settings(self, monkeypatch):
        """Test a validator built from environment settings."""
        monkeypatch.setenv("HIBC_LABELER_CODE", "AB")

        validator = HibcValidator.from_settings()

        assert validator.prefix == "AB"
        assert validator.modulus == 43


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def test_json_format(self, capsys):
        """Test JSON rendering to stderr."""
        configure_logging(Settings(_env_file=None, log_format="json"))

        structlog.get_logger("test").info("Barcode parsed", code="A12345P")

        err = capsys.readouterr().err
        assert '"event": "Barcode parsed"' in err
        assert '"code": "A12345P"' in err

    def test_level_filter(self, capsys):
        """Test events below the configured level are dropped."""
        configure_logging(Settings(_env_file=None, log_level="warning", log_format="json"))

        structlog.get_logger("test").debug("Check digit mismatch")

        assert capsys.readouterr().err == ""

    def test_unknown_level(self):
        """Test rejection of an unknown log level."""
        with pytest.raises(ValueError):
            configure_logging(Settings(_env_file=None, log_level="LOUD"))
