"""Input checks for the downsampler.

Each validator takes the input as its only argument and raises
``ValueError`` if the input fails the check. The array validators work on
``(n, 2)`` numpy arrays with x in the first column; the point validators
work on sequences of :class:`~lttb_decimal.models.DataPoint`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

import numpy as np

from lttb_decimal.models import DataPoint

__all__ = [
    "validate",
    "has_two_columns",
    "contains_no_nans",
    "x_is_strictly_increasing",
    "points_x_strictly_increasing",
]


def has_two_columns(data: np.ndarray) -> None:
    if len(data.shape) != 2:
        raise ValueError("data is not a 2D array")

    if data.shape[1] != 2:
        raise ValueError("data does not have 2 columns")


def contains_no_nans(data: np.ndarray) -> None:
    if np.any(np.isnan(data)):
        raise ValueError("data contains NaN values")


def x_is_strictly_increasing(data: np.ndarray) -> None:
    if np.any(np.diff(data[:, 0]) <= 0):
        raise ValueError("first column is not strictly increasing")


def points_x_strictly_increasing(points: Sequence[DataPoint]) -> None:
    for i in range(1, len(points)):
        if points[i].x <= points[i - 1].x:
            raise ValueError(f"x is not strictly increasing at index {i}")


def validate(data: Any, validators: Iterable[Callable[[Any], None]]) -> None:
    """Check an input object against the given criteria.

    Raises
    ------
    ValueError
        If ``data`` fails any of the checks.
    """
    for validator in validators:
        validator(data)
