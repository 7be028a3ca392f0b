"""Logging configuration for lttb_decimal."""

import logging
import sys

from lttb_decimal.config import get_settings

# Create logger for lttb_decimal
logger = logging.getLogger("lttb_decimal")


def setup_logger(level: int = logging.INFO) -> None:
    """Setup the lttb_decimal logger with default configuration.

    Args:
        level: Logging level (default: INFO)
    """
    if logger.handlers:
        # Already configured
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter("lttb_decimal: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def apply_log_level() -> None:
    """Set the logger and its handlers to LTTB_DECIMAL_LOG_LEVEL.

    Raises:
        pydantic.ValidationError: If LTTB_DECIMAL_LOG_LEVEL is not a level name
    """
    level = get_settings().log_level
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


# Initialize logger on import
setup_logger()
