"""Bounded linear search."""

from __future__ import annotations
from typing import Any, Optional

import numpy as np

from ..errors import ArrayArgumentError
from .allocation import as_1d

# Returned when an element is not found (or there is no array to search).
INDEX_NOT_FOUND = -1


def index_of(array: Optional[np.ndarray], target: Any,
             start: int = 0, end: Optional[int] = None) -> int:
    """
    Find the first ``i`` in ``[start, min(end, len(array)))`` with ``array[i] == target``.

    Args:
        array: Array to search, or ``None``
        target: Value to look for
        start: Inclusive start of the search window
        end: Exclusive end of the window (default and upper clamp: ``len(array)``)

    Returns:
        Index of the first match, or ``INDEX_NOT_FOUND`` if there is none or
        ``array`` is ``None``

    Raises:
        ArrayArgumentError: If ``start`` is negative or past the clamped end
    """
    if array is None:
        return INDEX_NOT_FOUND
    as_1d(array)
    til = len(array) if end is None else min(end, len(array))
    if start < 0 or start > til:
        raise ArrayArgumentError(f"Illegal start index: {start}")

    hits = np.flatnonzero(array[start:til] == target)
    if hits.size == 0:
        return INDEX_NOT_FOUND
    return start + int(hits[0])
