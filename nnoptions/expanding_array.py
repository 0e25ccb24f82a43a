"""
expanding_array.py — Per-dimension tuples for option records

Pooling records describe windows, strides and output sizes with one entry
per spatial dimension. Callers may pass a single number, which is repeated
for every dimension, or an explicit sequence, which must have exactly one
entry per dimension.

Functions
---------
expanding_array
    Broadcast a scalar or check a sequence against a dimensionality.
"""

import numbers
from typing import Any, Callable, Tuple

import numpy as np

from .utils.exceptions import ShapeMismatchError
from .utils.validators import InputValidator


def expanding_array(value: Any, dims: int, dtype: Callable = int,
                    name: str = 'value') -> Tuple:
    """
    Normalize ``value`` into a tuple with ``dims`` entries.

    Parameters
    ----------
    value : int, float, sequence or numpy.ndarray
        A single number, broadcast to every dimension, or one entry per
        dimension.
    dims : int
        Number of spatial dimensions.
    dtype : callable, optional
        Conversion applied to every entry. Default is ``int``.
    name : str, optional
        Field name used in error messages.

    Returns
    -------
    tuple
        ``dims`` entries, each converted with ``dtype``.

    Raises
    ------
    ShapeMismatchError
        If a sequence is given whose length is not ``dims``.
    TypeError
        If an entry is not a number, or has a fractional part when
        ``dtype`` is ``int``.

    Examples
    --------
    >>> expanding_array(3, 2)
    (3, 3)
    >>> expanding_array([3, 2], 2)
    (3, 2)
    >>> expanding_array(0.5, 3, dtype=float)
    (0.5, 0.5, 0.5)
    """
    if isinstance(value, np.ndarray):
        value = value.item() if value.ndim == 0 else value.tolist()

    # int entries must not lose a fractional part
    validate = InputValidator.validate_integral if dtype is int else InputValidator.validate_number

    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        validate(value, name)
        return (dtype(value),) * dims

    if isinstance(value, (str, bytes)) or not hasattr(value, '__iter__'):
        raise TypeError(
            f"{name} must be a number or a sequence of {dims} numbers, "
            f"got {type(value).__name__}"
        )

    entries = list(value)
    if len(entries) != dims:
        raise ShapeMismatchError(
            f"{name} expected {dims} values, got {len(entries)}: {tuple(entries)}"
        )
    for entry in entries:
        validate(entry, name)
    return tuple(dtype(entry) for entry in entries)
