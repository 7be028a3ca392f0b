"""Numpy interface to the exact-decimal downsampler.

Values in the array are converted to ``Decimal`` without rounding (a float
becomes the exact binary value it stores), the indices are chosen by
:func:`lttb_indices`, and the selected rows of the original array are
returned with their original dtype.
"""

from __future__ import annotations

from decimal import Decimal

import numpy as np

from lttb_decimal.models import DataPoint

from .lttb import lttb_indices
from .validators import (
    contains_no_nans,
    has_two_columns,
    validate,
    x_is_strictly_increasing,
)

default_array_validators = (has_two_columns, contains_no_nans, x_is_strictly_increasing)


def downsample_array(data, n_out, validators=default_array_validators, return_indices=False):
    """Downsample ``data`` to ``n_out`` rows.

    Parameters
    ----------
    data : numpy.array
        A 2-dimensional array with time values in the first column
    n_out : int
        Number of data points to downsample to
    validators : sequence of callables, optional
        Validation functions that take an array as argument and
        raise ``ValueError`` if the array fails some criterion
    return_indices : bool, optional
        If True, also return the indices of selected rows

    Returns
    -------
    numpy.array or tuple
        If return_indices is False: Array of shape (n_out, 2)
        If return_indices is True: Tuple of (array of shape (n_out, 2), array of indices)

    Raises
    ------
    ValueError
        If ``data`` fails the validation checks.
    InvalidThresholdError
        If ``n_out`` is 1 or 2 and ``data`` has more rows than that.
    """
    validate(data, validators)

    points = [DataPoint(x=Decimal(x), y=Decimal(y)) for x, y in data.tolist()]
    indices = np.asarray(lttb_indices(points, n_out), dtype=np.intp)

    out = data[indices]
    if return_indices:
        return out, indices
    return out
