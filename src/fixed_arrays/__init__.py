from .__about__ import __version__

# Stateless primitives
from .core import (
    allocate,
    GrowthPolicy, DoubleCapacity, DoubleSize,
    DOUBLE_CAPACITY, DOUBLE_SIZE, GROWTH_POLICIES,
    get_growth_policy, set_at, append, insert,
    copy_of, copy, subarray,
    INDEX_NOT_FOUND, index_of,
    make_rng, shuffle, swap, fill,
    ALMOST_EQUALS_DELTA, equals_all, almost_equals_all, equals_within,
    to_object, to_list, to_array,
)

from .errors import ArrayArgumentError
from .config import ArrayConfig, load_config
from .buffer import GrowableBuffer

__all__ = [
    # Version
    "__version__",

    # Growth & assignment
    "GrowthPolicy", "DoubleCapacity", "DoubleSize",
    "DOUBLE_CAPACITY", "DOUBLE_SIZE", "GROWTH_POLICIES",
    "get_growth_policy", "set_at", "append", "insert",

    # Copy & subrange
    "allocate", "copy_of", "copy", "subarray",

    # Search
    "INDEX_NOT_FOUND", "index_of",

    # Randomization
    "make_rng", "shuffle", "swap", "fill",

    # Comparison
    "ALMOST_EQUALS_DELTA", "equals_all", "almost_equals_all", "equals_within",

    # Conversion
    "to_object", "to_list", "to_array",

    # Errors, configuration, buffer
    "ArrayArgumentError", "ArrayConfig", "load_config", "GrowableBuffer",
]
