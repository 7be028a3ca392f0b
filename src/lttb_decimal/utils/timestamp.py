"""Timestamp parsing and epoch-seconds adapters.

This module converts external time values to whole seconds since the UNIX
epoch and back. The downsampler only ever sees the integer seconds; the
adapters below are the boundary to ``datetime`` and ``numpy.datetime64``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Protocol

import numpy as np

from lttb_decimal.exceptions import TimeBeforeEpochError, TimeOutOfRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_SECOND = timedelta(seconds=1)


def parse_to_datetime(ts_value: str | int | float | date | datetime | np.datetime64) -> datetime:
    """Parse various timestamp formats to UTC datetime.

    Args:
        ts_value: Timestamp in one of:
            - datetime: returned as-is (UTC ensured)
            - date: midnight UTC of that day
            - numpy.datetime64: converted through its nanosecond count
            - int/float: Unix timestamp in milliseconds
            - str: ISO 8601 format string

    Returns:
        datetime object in UTC timezone.

    Raises:
        ValueError: If input is None, empty string, or invalid format.
    """
    if ts_value is None:
        raise ValueError("Timestamp cannot be None")

    if isinstance(ts_value, datetime):
        # Ensure timezone-aware
        if ts_value.tzinfo is None:
            return ts_value.replace(tzinfo=timezone.utc)
        return ts_value

    if isinstance(ts_value, date):
        return datetime(ts_value.year, ts_value.month, ts_value.day, tzinfo=timezone.utc)

    if isinstance(ts_value, np.datetime64):
        if np.isnat(ts_value):
            raise ValueError("Timestamp cannot be NaT")
        us = int(ts_value.astype("datetime64[us]").astype(np.int64))
        return EPOCH + timedelta(microseconds=us)

    # bool is an int subclass but never a timestamp
    if isinstance(ts_value, (int, float)) and not isinstance(ts_value, bool):
        return datetime.fromtimestamp(ts_value / 1000, tz=timezone.utc)

    if isinstance(ts_value, str):
        ts_str = ts_value.strip()
        if not ts_str:
            raise ValueError("Timestamp string cannot be empty")

        # Handle ISO 8601 format with 'Z' suffix
        if ts_str.endswith("Z"):
            ts_str = ts_str[:-1] + "+00:00"

        try:
            parsed = datetime.fromisoformat(ts_str)
        except ValueError as exc:
            raise ValueError("Invalid timestamp format. Expected ISO 8601 string or UNIX milliseconds.") from exc

        # Ensure timezone-aware
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise ValueError(f"Unsupported timestamp type: {type(ts_value)}. Expected datetime, date, datetime64, int, float, or ISO 8601 string.")


def _checked_seconds(value: Decimal | int) -> int:
    """Return ``value`` as a non-negative integer number of seconds."""
    seconds = Decimal(value)
    if not seconds.is_finite() or seconds != seconds.to_integral_value() or seconds < 0:
        raise TimeOutOfRangeError(f"Epoch seconds must be a non-negative integer, got {value}")
    return int(seconds)


class TimeAdapter(Protocol):
    """Conversion between an external time type and whole epoch seconds."""

    def to_epoch_seconds(self, value: Any) -> int: ...

    def from_epoch_seconds(self, seconds: Decimal | int) -> Any: ...


class DatetimeAdapter:
    """Adapter for timezone-aware ``datetime`` values in UTC."""

    def to_epoch_seconds(self, value: Any) -> int:
        """Convert ``value`` to whole seconds since the epoch.

        Sub-second precision is truncated.

        Raises:
            TimeBeforeEpochError: If ``value`` is earlier than 1970-01-01T00:00:00Z.
        """
        dt = parse_to_datetime(value)
        delta = dt - EPOCH
        if delta < timedelta(0):
            raise TimeBeforeEpochError(f"Timestamp {dt.isoformat()} is before the UNIX epoch")
        return delta // _ONE_SECOND

    def from_epoch_seconds(self, seconds: Decimal | int) -> datetime:
        """Rebuild a UTC ``datetime`` from epoch seconds.

        Raises:
            TimeOutOfRangeError: If ``seconds`` is negative, fractional or past ``datetime.max``.
        """
        secs = _checked_seconds(seconds)
        try:
            return EPOCH + timedelta(seconds=secs)
        except OverflowError as exc:
            raise TimeOutOfRangeError(f"Epoch seconds {secs} cannot be represented as a datetime") from exc


class Datetime64Adapter:
    """Adapter for ``numpy.datetime64`` values with second resolution."""

    def to_epoch_seconds(self, value: Any) -> int:
        if isinstance(value, np.datetime64):
            if np.isnat(value):
                raise ValueError("Timestamp cannot be NaT")
            if value < np.datetime64(0, "s"):
                raise TimeBeforeEpochError(f"Timestamp {value} is before the UNIX epoch")
            return int(value.astype("datetime64[s]").astype(np.int64))
        return DatetimeAdapter().to_epoch_seconds(value)

    def from_epoch_seconds(self, seconds: Decimal | int) -> np.datetime64:
        secs = _checked_seconds(seconds)
        if secs > np.iinfo(np.int64).max:
            raise TimeOutOfRangeError(f"Epoch seconds {secs} cannot be represented as a datetime64")
        return np.datetime64(secs, "s")


default_adapter = DatetimeAdapter()


def to_epoch_seconds(ts_value: Any) -> int:
    """Convert ``ts_value`` to whole epoch seconds with the default adapter."""
    return default_adapter.to_epoch_seconds(ts_value)


def from_epoch_seconds(seconds: Decimal | int) -> datetime:
    """Convert epoch seconds back to a UTC ``datetime`` with the default adapter."""
    return default_adapter.from_epoch_seconds(seconds)
