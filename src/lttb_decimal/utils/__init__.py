"""Utility modules for lttb_decimal."""

from lttb_decimal.utils.timestamp import (
    Datetime64Adapter,
    DatetimeAdapter,
    TimeAdapter,
    from_epoch_seconds,
    parse_to_datetime,
    to_epoch_seconds,
)

__all__ = [
    "Datetime64Adapter",
    "DatetimeAdapter",
    "TimeAdapter",
    "from_epoch_seconds",
    "parse_to_datetime",
    "to_epoch_seconds",
]
