"""
Comparison of every array element against a single scalar.

Used to check that numeric state is uniform, e.g. that a weight vector is
still all zeros after initialization.
"""

from __future__ import annotations

import numpy as np

from .allocation import as_1d

ALMOST_EQUALS_DELTA = 1e-15


def equals_all(array: np.ndarray, value: float) -> bool:
    """True iff every element exactly equals ``value`` (vacuously true when empty)."""
    as_1d(array)
    return bool(np.all(array == value))


def almost_equals_all(array: np.ndarray, value: float) -> bool:
    """``equals_within`` with the fixed absolute tolerance ``ALMOST_EQUALS_DELTA``."""
    return equals_within(array, value, ALMOST_EQUALS_DELTA)


def equals_within(array: np.ndarray, value: float, delta: float) -> bool:
    """
    True unless some element lies further than ``delta`` from ``value``.

    An element fails when ``|value - element| > delta``. A negative ``delta``
    therefore fails every element, exact matches included; this is accepted
    degenerate input, not an error. Because the test is phrased as "fails
    when greater", a NaN difference never fails.

    Args:
        array: Numeric array
        value: Expected value
        delta: Absolute tolerance

    Returns:
        Whether all elements are within tolerance
    """
    as_1d(array)
    diff = np.abs(value - _widened(array))
    return not bool(np.any(diff > delta))


def _widened(array: np.ndarray) -> np.ndarray:
    # Fixed-width subtraction wraps; integers go to exact Python ints.
    if np.issubdtype(array.dtype, np.integer) or array.dtype == np.bool_:
        return array.astype(object)
    if np.issubdtype(array.dtype, np.floating):
        return array.astype(np.result_type(array.dtype, np.float64))
    return array
