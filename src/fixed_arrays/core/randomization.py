"""
In-place randomization of array prefixes.

Shuffling uses the decreasing Durstenfeld form of the Fisher-Yates algorithm:
for ``i`` from ``size`` down to 2, draw ``j`` uniformly from ``[0, i)`` and
swap positions ``i - 1`` and ``j``. Given an unbiased generator every one of
the ``size!`` permutations of the prefix is equally likely.

No generator is shared at module level. Functions accept an explicit
``numpy.random.Generator`` (or a seed) and otherwise create a fresh,
independently seeded one per call. Pass one explicitly for reproducibility.

References:
    Fisher, R. A., & Yates, F. (1938). Statistical tables for biological,
    agricultural and medical research.
    Durstenfeld, R. (1964). Algorithm 235: Random permutation. CACM 7(7), 420.
"""

from __future__ import annotations
from typing import Optional, Union

import numpy as np

from ..errors import ArrayArgumentError, check_index
from .allocation import as_1d

RandomState = Union[None, int, np.random.Generator]


def make_rng(random_state: RandomState = None) -> np.random.Generator:
    """
    Turn ``random_state`` into a generator.

    ``None`` gives a freshly seeded generator, an ``int`` seeds a new one and
    an existing ``Generator`` is returned unchanged.
    """
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def swap(array: np.ndarray, i: int, j: int) -> None:
    """Exchange ``array[i]`` and ``array[j]``."""
    check_index(i, "i")
    check_index(j, "j")
    tmp = array[i]
    array[i] = array[j]
    array[j] = tmp


def shuffle(array: np.ndarray, size: Optional[int] = None,
            rng: RandomState = None) -> None:
    """
    Shuffle the first ``size`` elements of ``array`` in place.

    Args:
        array: Array to permute
        size: Length of the prefix to shuffle (default: ``len(array)``)
        rng: Generator or seed; a new generator is created when omitted

    Example:
        >>> a = np.arange(5)
        >>> shuffle(a, rng=42)
        >>> sorted(a.tolist())
        [0, 1, 2, 3, 4]
    """
    as_1d(array)
    if size is None:
        size = len(array)
    rng = make_rng(rng)
    for i in range(size, 1, -1):
        j = int(rng.integers(0, i))
        swap(array, i - 1, j)


def fill(array: np.ndarray, rng: RandomState = None) -> None:
    """Overwrite every slot with a uniform draw from ``[0, 1)``; floating arrays only."""
    as_1d(array)
    if not np.issubdtype(array.dtype, np.floating):
        raise ArrayArgumentError(f"fill requires a floating dtype, got {array.dtype}")
    rng = make_rng(rng)
    array[:] = rng.random(len(array))
