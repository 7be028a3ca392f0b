"""
Data point models for the downsampler.

``DataPoint`` is the input side: both coordinates are exact decimals, with
``x`` holding whole seconds since the UNIX epoch. ``DataOutput`` is the same
point after its ``x`` has been turned back into an external time value.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from lttb_decimal.utils.timestamp import TimeAdapter, default_adapter


class DataPoint(BaseModel):
    """Single point of a time series.

    Instances are immutable. Build them with :meth:`new` from an external
    timestamp, or directly from numeric coordinates.
    """

    model_config = ConfigDict(frozen=True)

    x: Decimal = Field(..., description="Seconds since the UNIX epoch")
    y: Decimal = Field(..., description="Value at x")

    @classmethod
    def new(cls, time: Any, y: Decimal | int | str, adapter: TimeAdapter | None = None) -> DataPoint:
        """Create a point from an external timestamp and a value.

        Args:
            time: External time value (datetime, date, datetime64, ISO 8601 string, UNIX ms)
            y: Value, stored as an exact ``Decimal``
            adapter: Time adapter used for the conversion (default: DatetimeAdapter)

        Returns:
            DataPoint with ``x`` set to whole epoch seconds

        Raises:
            TimeBeforeEpochError: If ``time`` is before the UNIX epoch
        """
        adapter = adapter or default_adapter
        return cls(x=Decimal(adapter.to_epoch_seconds(time)), y=y)

    def __str__(self) -> str:
        return f"DataPoint(x={self.x}, y={self.y})"


class DataOutput(BaseModel):
    """Downsampled point with its x converted back to an external time."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    x: datetime | np.datetime64 = Field(..., description="External time of the point")
    y: Decimal = Field(..., description="Value at x")

    @classmethod
    def from_point(cls, point: DataPoint, adapter: TimeAdapter | None = None) -> DataOutput:
        """Project a DataPoint to output form.

        Raises:
            TimeOutOfRangeError: If ``point.x`` cannot be represented by the adapter's time type
        """
        adapter = adapter or default_adapter
        return cls(x=adapter.from_epoch_seconds(point.x), y=point.y)
