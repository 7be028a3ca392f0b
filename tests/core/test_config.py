"""Tests for config module."""

import pytest
from pydantic import ValidationError

from lttb_decimal.config import LttbSettings, get_settings, is_validation_enabled, reset_settings


class TestLttbSettings:
    """Tests for LttbSettings."""

    def test_defaults(self):
        settings = LttbSettings.from_env()

        assert settings.decimal_precision == 28
        assert settings.log_level == "INFO"

    def test_precision_from_env(self, monkeypatch):
        monkeypatch.setenv("LTTB_DECIMAL_PRECISION", "64")

        assert LttbSettings.from_env().decimal_precision == 64

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LTTB_DECIMAL_LOG_LEVEL", " debug ")

        assert LttbSettings.from_env().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LTTB_DECIMAL_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            LttbSettings.from_env()

    def test_precision_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("LTTB_DECIMAL_PRECISION", "0")

        with pytest.raises(ValidationError):
            LttbSettings.from_env()


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_cached_instance(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("LTTB_DECIMAL_PRECISION", "40")

        assert get_settings() is first
        assert get_settings().decimal_precision == 28

    def test_reset_rereads_environment(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("LTTB_DECIMAL_PRECISION", "40")
        reset_settings()

        assert get_settings().decimal_precision == 40


class TestIsValidationEnabled:
    def test_disabled_by_default(self):
        assert is_validation_enabled() is False

    def test_enabled_with_one(self, monkeypatch):
        monkeypatch.setenv("LTTB_DECIMAL_VALIDATE", "1")
        assert is_validation_enabled() is True

    def test_other_values_do_not_enable(self, monkeypatch):
        monkeypatch.setenv("LTTB_DECIMAL_VALIDATE", "true")
        assert is_validation_enabled() is False
