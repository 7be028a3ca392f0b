"""Downsample data using the Largest-Triangle-Three-Buckets algorithm.

This module is based on lttb-rs by Jerome Froelich, licensed under the MIT License.
Original source: https://github.com/jeromefroe/lttb-rs
Copyright (c) 2017 Jerome Froelich

Modifications for lttb_decimal:
- Coordinates are exact ``Decimal`` values, so bucket averages and triangle
  areas do not depend on floating point rounding
- Bucket edges are computed as ``floor(k * (n - 2) / (threshold - 2))`` on
  integers, which is the exact floor of the fractional bucket width
- Degenerate thresholds raise ``InvalidThresholdError`` instead of dividing by zero

Reference
---------
Sveinn Steinarsson. 2013. Downsampling Time Series for Visual
Representation. MSc thesis. University of Iceland.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from decimal import Decimal, localcontext
from typing import Any

from lttb_decimal.config import get_settings, is_validation_enabled
from lttb_decimal.exceptions import InvalidThresholdError
from lttb_decimal.logger import apply_log_level, logger
from lttb_decimal.models import DataOutput, DataPoint
from lttb_decimal.utils.timestamp import TimeAdapter

from .validators import points_x_strictly_increasing, validate

default_validators = (points_x_strictly_increasing,)

_TWO = Decimal(2)


def _bucket_average(points: Sequence[DataPoint], start: int, end: int) -> tuple[Decimal, Decimal]:
    """Mean of x and y over ``points[start:end]``."""
    sum_x = Decimal(0)
    sum_y = Decimal(0)
    for idx in range(start, end):
        sum_x += points[idx].x
        sum_y += points[idx].y
    count = Decimal(end - start)
    return sum_x / count, sum_y / count


def _area_of_triangle(a: DataPoint, b: DataPoint, c_x: Decimal, c_y: Decimal) -> Decimal:
    """Area of the triangle with vertices ``a``, ``b`` and ``(c_x, c_y)``."""
    return abs((a.x - c_x) * (b.y - a.y) - (a.x - b.x) * (c_y - a.y)) / _TWO


def lttb_indices(points: Sequence[DataPoint], threshold: int) -> list[int]:
    """Select the indices of ``points`` kept by LTTB.

    Parameters
    ----------
    points : sequence of DataPoint
        Input series, ordered by x
    threshold : int
        Number of points to keep. ``0`` or anything ``>= len(points)``
        keeps every point.

    Returns
    -------
    list of int
        Strictly increasing indices into ``points``. The first and last
        indices are always ``0`` and ``len(points) - 1``.

    Raises
    ------
    InvalidThresholdError
        If ``threshold`` is below 3 but still smaller than ``len(points)``.
    """
    apply_log_level()
    n_points = len(points)

    if threshold == 0 or threshold >= n_points:
        # Nothing to do.
        return list(range(n_points))

    if threshold < 3:
        logger.warning(f"Rejected threshold {threshold} for {n_points} points")
        raise InvalidThresholdError(threshold, n_points)

    # Leave room for the start and end points.
    n_buckets = threshold - 2
    n_middle = n_points - 2

    # Exact floor(k * every) on integers; a rounded Decimal width floors 3 * (10 / 3) to 9.
    def edge(k: int) -> int:
        return k * n_middle // n_buckets + 1

    sampled = [0]

    # Initially a is the first point in the triangle.
    a = 0

    with localcontext() as ctx:
        ctx.prec = get_settings().decimal_precision

        for i in range(n_buckets):
            # Point average for the next bucket (containing c).
            avg_x, avg_y = _bucket_average(points, edge(i + 1), min(edge(i + 2), n_points))

            point_a = points[a]
            max_area = Decimal(-1)
            next_a = edge(i)

            for idx in range(edge(i), edge(i + 1)):
                area = _area_of_triangle(point_a, points[idx], avg_x, avg_y)
                # Strict comparison: ties keep the earliest candidate.
                if area > max_area:
                    max_area = area
                    next_a = idx

            sampled.append(next_a)
            a = next_a

    # Always add the last point.
    sampled.append(n_points - 1)
    return sampled


def downsample(
    points: Iterable[DataPoint],
    threshold: int,
    validators: Iterable[Callable[[Any], None]] | None = None,
    adapter: TimeAdapter | None = None,
    return_indices: bool = False,
) -> list[DataOutput] | tuple[list[DataOutput], list[int]]:
    """Downsample ``points`` to ``threshold`` points using the LTTB algorithm.

    Parameters
    ----------
    points : iterable of DataPoint
        Input series, ordered by x. It is not sorted or deduplicated.
    threshold : int
        Number of data points to downsample to
    validators : sequence of callables, optional
        Validation functions that take the point sequence as argument and
        raise ``ValueError`` if it fails some criterion. Defaults to no
        validation unless ``LTTB_DECIMAL_VALIDATE=1`` is set.
    adapter : TimeAdapter, optional
        Converts epoch seconds back to an external time (default: UTC datetime)
    return_indices : bool, optional
        If True, also return the indices of selected points

    Returns
    -------
    list or tuple
        If return_indices is False: list of DataOutput
        If return_indices is True: Tuple of (list of DataOutput, list of indices)

    Raises
    ------
    InvalidThresholdError
        If ``threshold`` is 1 or 2 and there are more points than that.
    ValueError
        If ``points`` fails the validation checks.
    TimeOutOfRangeError
        If a selected x cannot be converted back by ``adapter``.
    pydantic.ValidationError
        If an LTTB_DECIMAL_* setting is malformed.
    """
    if not isinstance(points, Sequence):
        points = list(points)

    if validators is None:
        validators = default_validators if is_validation_enabled() else []
    validate(points, validators)

    indices = lttb_indices(points, threshold)
    if len(indices) < len(points):
        logger.debug(f"Downsampled {len(points)} points to {len(indices)}")

    sampled = [DataOutput.from_point(points[idx], adapter) for idx in indices]

    if return_indices:
        return sampled, indices
    return sampled
