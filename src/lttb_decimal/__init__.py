"""
lttb_decimal - Largest-Triangle-Three-Buckets downsampling on exact decimals.

Examples:
    >>> from datetime import datetime, timezone
    >>> from decimal import Decimal
    >>> import lttb_decimal
    >>> points = [lttb_decimal.DataPoint.new(datetime(2022, m, 1, tzinfo=timezone.utc), Decimal(v)) for m, v in [(1, 10), (2, 12), (3, 8), (4, 10), (5, 12)]]
    >>> [p.y for p in lttb_decimal.downsample(points, 3)]
    [Decimal('10'), Decimal('8'), Decimal('12')]
"""

from lttb_decimal.exceptions import InvalidThresholdError, LttbError, TimeBeforeEpochError, TimeOutOfRangeError
from lttb_decimal.lttb import downsample, downsample_array, lttb_indices
from lttb_decimal.models import DataOutput, DataPoint
from lttb_decimal.utils.timestamp import Datetime64Adapter, DatetimeAdapter

__version__ = "0.1.0"
__all__ = [
    "DataPoint",
    "DataOutput",
    "DatetimeAdapter",
    "Datetime64Adapter",
    "downsample",
    "downsample_array",
    "lttb_indices",
    "LttbError",
    "InvalidThresholdError",
    "TimeBeforeEpochError",
    "TimeOutOfRangeError",
]
