"""Conversions between primitive arrays and boxed / list views."""

from __future__ import annotations
from typing import Any, List, Sequence

import numpy as np
from numpy.typing import DTypeLike

from .allocation import as_1d


def to_object(array: np.ndarray) -> np.ndarray:
    """Boxed copy: an object array holding Python scalars."""
    as_1d(array)
    result = np.empty(len(array), dtype=object)
    result[:] = array.tolist()
    return result


def to_list(array: np.ndarray) -> List[Any]:
    as_1d(array)
    return array.tolist()


def to_array(values: Sequence[Any], dtype: DTypeLike = np.float32) -> np.ndarray:
    """Primitive array of ``dtype`` built from a sequence of scalars."""
    return np.array(values, dtype=dtype)
