"""
Copy and subrange primitives.

All functions here return freshly allocated arrays (or fill a caller-provided
one) and never alias their input.
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from ..errors import ArrayArgumentError
from .allocation import allocate, as_1d


def copy_of(array: np.ndarray, new_length: Optional[int] = None) -> np.ndarray:
    """
    Copy ``array`` into a new array of exactly ``new_length`` slots.

    The first ``min(len(array), new_length)`` elements are copied; any slots
    past that are default-filled. Without ``new_length`` this is a full clone.

    Args:
        array: Source array, left unmodified
        new_length: Length of the result (default: ``len(array)``)

    Returns:
        New array of the same dtype
    """
    as_1d(array)
    if new_length is None:
        new_length = len(array)
    if new_length < 0:
        raise ArrayArgumentError(f"Negative new_length: {new_length}")
    result = allocate(new_length, array.dtype)
    n = min(len(array), new_length)
    result[:n] = array[:n]
    return result


def copy(src: np.ndarray, dest: np.ndarray) -> None:
    """Copy ``src`` into ``dest`` element-wise; lengths must match exactly."""
    as_1d(src, "src")
    as_1d(dest, "dest")
    if len(src) != len(dest):
        raise ArrayArgumentError(
            f"src.length '{len(src)}' != dest.length '{len(dest)}'"
        )
    if not np.can_cast(src.dtype, dest.dtype, casting="same_kind"):
        raise ArrayArgumentError(f"Cannot copy {src.dtype} into {dest.dtype} (not a same-kind cast)")
    np.copyto(dest, src, casting="same_kind")


def subarray(array: Optional[np.ndarray], start: int, end: int) -> Optional[np.ndarray]:
    """
    Extract ``[start, end)`` as a new array, clamping the bounds.

    ``start`` is clamped up to 0 and ``end`` down to ``len(array)``. An empty
    or inverted range yields a zero-length array of the same dtype. A missing
    array (``None``) yields ``None``, so "no array" and "empty array" stay
    distinguishable.

    Args:
        array: Source array or ``None``
        start: Inclusive start index
        end: Exclusive end index

    Returns:
        New array, or ``None`` when ``array`` is ``None``

    Example:
        >>> subarray(np.arange(5), -5, 10)
        array([0, 1, 2, 3, 4])
        >>> subarray(np.arange(5), 3, 3)
        array([], dtype=int64)
    """
    if array is None:
        return None
    as_1d(array)
    start = max(start, 0)
    end = min(end, len(array))
    new_size = end - start
    if new_size <= 0:
        return allocate(0, array.dtype)
    return array[start:end].copy()
