"""
Stateless primitives on fixed-capacity one-dimensional arrays.

Every function operates on a caller-owned ``numpy.ndarray``; logical size is
always passed in explicitly and never inferred.
"""

from .allocation import allocate
from .growth import (
    GrowthPolicy, DoubleCapacity, DoubleSize,
    DOUBLE_CAPACITY, DOUBLE_SIZE, GROWTH_POLICIES,
    get_growth_policy, set_at, append, insert
)
from .copying import copy_of, copy, subarray
from .search import INDEX_NOT_FOUND, index_of
from .randomization import make_rng, shuffle, swap, fill
from .comparison import ALMOST_EQUALS_DELTA, equals_all, almost_equals_all, equals_within
from .conversion import to_object, to_list, to_array

__all__ = [
    "allocate",
    "GrowthPolicy", "DoubleCapacity", "DoubleSize",
    "DOUBLE_CAPACITY", "DOUBLE_SIZE", "GROWTH_POLICIES",
    "get_growth_policy", "set_at", "append", "insert",
    "copy_of", "copy", "subarray",
    "INDEX_NOT_FOUND", "index_of",
    "make_rng", "shuffle", "swap", "fill",
    "ALMOST_EQUALS_DELTA", "equals_all", "almost_equals_all", "equals_within",
    "to_object", "to_list", "to_array",
]
