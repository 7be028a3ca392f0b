"""Configuration and environment handling for lttb_decimal."""

import os

from pydantic import BaseModel, Field, field_validator

__all__ = [
    "LttbSettings",
    "get_settings",
    "reset_settings",
    "is_validation_enabled",
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LttbSettings(BaseModel):
    """Runtime settings for the downsampler.

    All settings can be customized via environment variables.
    """

    decimal_precision: int = Field(
        default=28,  # same significant digits as a 96-bit fixed-point decimal
        ge=1,
        description="Significant digits used for bucket averages and triangle areas",
    )

    log_level: str = Field(
        default="INFO",
        description="Level of the lttb_decimal logger",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls) -> "LttbSettings":
        """Create LttbSettings from environment variables.

        Environment variables:
        - LTTB_DECIMAL_PRECISION: Decimal context precision (default: 28)
        - LTTB_DECIMAL_LOG_LEVEL: Logger level name (default: INFO)
        """
        return cls(
            decimal_precision=int(os.environ.get("LTTB_DECIMAL_PRECISION", cls.model_fields["decimal_precision"].default)),
            log_level=os.environ.get("LTTB_DECIMAL_LOG_LEVEL", cls.model_fields["log_level"].default),
        )


# Global settings instance
_settings: LttbSettings | None = None


def get_settings() -> LttbSettings:
    """Get downsampler settings.

    Returns cached instance if already initialized.
    """
    global _settings
    if _settings is None:
        _settings = LttbSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def is_validation_enabled() -> bool:
    """Check if input validation should run when no validators are given.

    Returns:
        True if LTTB_DECIMAL_VALIDATE is set to "1", False otherwise.
    """
    return os.environ.get("LTTB_DECIMAL_VALIDATE") == "1"
