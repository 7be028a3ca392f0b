"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from lttb_decimal.config import reset_settings
from lttb_decimal.logger import logger
from lttb_decimal.models import DataPoint


@pytest.fixture(autouse=True)
def clean_env_for_tests(monkeypatch):
    """Clean environment variables for test isolation.

    Clears every LTTB_DECIMAL_* variable and the cached settings so that
    each test starts from the defaults, and restores the logger levels.

    This fixture is applied automatically to all tests (autouse=True).
    """
    monkeypatch.delenv("LTTB_DECIMAL_PRECISION", raising=False)
    monkeypatch.delenv("LTTB_DECIMAL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LTTB_DECIMAL_VALIDATE", raising=False)
    levels = [logger.level] + [handler.level for handler in logger.handlers]
    reset_settings()
    yield
    reset_settings()
    logger.setLevel(levels[0])
    for handler, level in zip(logger.handlers, levels[1:]):
        handler.setLevel(level)


def first_day_of_month(month: int) -> datetime:
    """Midnight UTC on the first day of ``month`` in 2022."""
    return datetime(2022, month, 1, tzinfo=timezone.utc)


@pytest.fixture
def monthly_points():
    """Build one DataPoint per month of 2022, starting in January."""

    def _build(values):
        return [DataPoint.new(first_day_of_month(i + 1), Decimal(v)) for i, v in enumerate(values)]

    return _build
