"""LTTB (Largest Triangle Three Buckets) downsampling on exact decimals.

This module is based on lttb-rs by Jerome Froelich, licensed under the MIT License.
Original source: https://github.com/jeromefroe/lttb-rs
Copyright (c) 2017 Jerome Froelich

See LICENSE file for full license text.
See lttb.py for details on modifications applied.
"""

from .array import downsample_array
from .lttb import downsample, lttb_indices

__all__ = ["downsample", "downsample_array", "lttb_indices"]
