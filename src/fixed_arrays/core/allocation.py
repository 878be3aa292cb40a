"""
Allocation of fresh fixed-capacity arrays.

Every array produced by this package (grown replacements, resized copies,
empty subranges) comes from :func:`allocate`, so default slot values are
consistent: ``0`` for numeric dtypes, ``False`` for bool and ``None`` for
object arrays.
"""

from __future__ import annotations
import numpy as np
from numpy.typing import DTypeLike


def allocate(length: int, dtype: DTypeLike = np.float64) -> np.ndarray:
    """
    Allocate a one-dimensional array of ``length`` default-filled slots.

    Args:
        length: Number of slots (capacity) of the new array
        dtype: Element type of the new array

    Returns:
        New array with every slot set to the dtype's default value
    """
    dtype = np.dtype(dtype)
    if dtype == np.dtype(object):
        return np.full(length, None, dtype=object)
    return np.zeros(length, dtype=dtype)


def as_1d(array: np.ndarray, name: str = "array") -> np.ndarray:
    """Require a one-dimensional ndarray; operations never coerce silently."""
    if not isinstance(array, np.ndarray):
        raise TypeError(f"{name} must be a numpy.ndarray, got {type(array).__name__}")
    if array.ndim != 1:
        raise TypeError(f"{name} must be 1D, got {array.ndim}D")
    return array
