"""
Test configuration and fixtures for array primitive tests.

Provides common fixtures and assertion helpers shared by all test modules.
"""

import numpy as np
import pytest


@pytest.fixture
def random_seed():
    """Fixed random seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(random_seed):
    """Seeded generator; a fresh one per test."""
    return np.random.default_rng(random_seed)


@pytest.fixture
def int_array():
    """Full capacity-5 int array: logical size equals capacity."""
    return np.array([10, 20, 30, 40, 50], dtype=np.int32)


@pytest.fixture
def partially_filled():
    """Capacity-8 array whose first 4 slots are live, spare slots marked -1."""
    a = np.full(8, -1, dtype=np.int64)
    a[:4] = [1, 2, 3, 4]
    return a, 4


@pytest.fixture
def object_array():
    """Generic reference-typed array."""
    a = np.empty(4, dtype=object)
    a[:] = ["a", "b", "c", "d"]
    return a


@pytest.fixture
def tolerance():
    """Fixed absolute tolerance used by almost_equals_all."""
    return 1e-15


def assert_prefix_preserved(original, grown, n, skip=None):
    """Assert grown[:n] equals original[:n], ignoring position ``skip``."""
    for i in range(n):
        if i == skip:
            continue
        assert grown[i] == original[i], (
            f"Element {i} changed during growth: {original[i]!r} -> {grown[i]!r}"
        )


def permutation_counts(n, trials, seed):
    """Count how often each permutation of range(n) results from shuffle."""
    from fixed_arrays import shuffle

    rng = np.random.default_rng(seed)
    counts = {}
    for _ in range(trials):
        a = np.arange(n)
        shuffle(a, rng=rng)
        key = tuple(a.tolist())
        counts[key] = counts.get(key, 0) + 1
    return counts
