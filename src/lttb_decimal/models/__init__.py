"""
lttb_decimal data models package.

This package contains the point types consumed and produced by the downsampler.
"""

from lttb_decimal.models.point import DataOutput, DataPoint

__all__ = ["DataPoint", "DataOutput"]
