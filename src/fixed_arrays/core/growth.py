"""
Growth and assignment on caller-sized arrays.

Arrays here carry only their capacity (``len(array)``). How many slots hold
meaningful data, the logical size, is tracked by the caller and passed in
explicitly. When a write does not fit, the operation allocates a larger
replacement array, copies the live elements over and returns it; the caller
must continue with the returned array and drop its old reference.

Two growth policies are used and they are not interchangeable:

- ``DOUBLE_CAPACITY``: new capacity is ``2 * capacity`` (``set_at``)
- ``DOUBLE_SIZE``: new capacity is ``2 * logical_size`` (``append``, ``insert``)

Both are exposed so callers can pick one explicitly, e.g. when wrapping the
primitives in :class:`fixed_arrays.buffer.GrowableBuffer`.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Protocol, Union, runtime_checkable

import numpy as np

from ..errors import ArrayArgumentError, check_index, check_logical_size
from .allocation import allocate, as_1d


@runtime_checkable
class GrowthPolicy(Protocol):
    """Sizing rule for a replacement array once capacity is exhausted."""

    name: str

    def new_capacity(self, capacity: int, logical_size: int) -> int:
        ...


@dataclass(frozen=True)
class DoubleCapacity:
    """Grow to twice the current physical capacity."""
    name: str = "double_capacity"

    def new_capacity(self, capacity: int, logical_size: int) -> int:
        return 2 * capacity


@dataclass(frozen=True)
class DoubleSize:
    """Grow to twice the caller's logical size."""
    name: str = "double_size"

    def new_capacity(self, capacity: int, logical_size: int) -> int:
        return 2 * logical_size


DOUBLE_CAPACITY = DoubleCapacity()
DOUBLE_SIZE = DoubleSize()

GROWTH_POLICIES: Dict[str, GrowthPolicy] = {
    DOUBLE_CAPACITY.name: DOUBLE_CAPACITY,
    DOUBLE_SIZE.name: DOUBLE_SIZE,
}

PolicyLike = Union[str, GrowthPolicy]


def get_growth_policy(policy: PolicyLike) -> GrowthPolicy:
    """
    Resolve a growth policy by name.

    Args:
        policy: Policy name (``"double_capacity"``, ``"double_size"``) or a
            policy object, which is returned unchanged

    Raises:
        ArrayArgumentError: If the name is not registered
    """
    if isinstance(policy, str):
        try:
            return GROWTH_POLICIES[policy]
        except KeyError:
            raise ArrayArgumentError(
                f"Unknown growth policy '{policy}'. Must be one of: {sorted(GROWTH_POLICIES)}"
            ) from None
    if not isinstance(policy, GrowthPolicy):
        raise ArrayArgumentError(f"Not a growth policy: {policy!r}")
    return policy


def _regrow(array: np.ndarray, new_capacity: int, n_copy: int) -> np.ndarray:
    grown = allocate(new_capacity, array.dtype)
    grown[:n_copy] = array[:n_copy]
    return grown


def set_at(array: np.ndarray, index: int, value: Any,
           policy: PolicyLike = DOUBLE_CAPACITY) -> np.ndarray:
    """
    Write ``value`` at ``index``, growing the array first if it is too short.

    With the default policy a write at ``index >= capacity`` reallocates to
    ``2 * capacity`` and copies every existing element to the same position.
    Growth happens once: an index beyond the grown capacity raises
    ``IndexError``, as does any write into a zero-capacity array.

    Args:
        array: Target array, capacity ``len(array)``
        index: Non-negative write position
        value: Element to store
        policy: Growth policy used when ``index >= capacity``

    Returns:
        The array holding the write; a new array if growth occurred

    Example:
        >>> a = np.array([1, 2], dtype=np.int32)
        >>> set_at(a, 3, 9)
        array([1, 2, 0, 9], dtype=int32)
    """
    as_1d(array)
    check_index(index)
    capacity = len(array)
    if index >= capacity:
        new_capacity = get_growth_policy(policy).new_capacity(capacity, capacity)
        array = _regrow(array, new_capacity, capacity)
    array[index] = value
    return array


def append(array: np.ndarray, logical_size: int, element: Any,
           policy: PolicyLike = DOUBLE_SIZE) -> np.ndarray:
    """
    Write ``element`` at position ``logical_size``.

    If the array is full (``logical_size + 1 > capacity``) it is replaced by
    one of capacity ``2 * logical_size`` holding the first ``logical_size``
    elements. The caller increments its own logical size afterwards.

    Args:
        array: Target array
        logical_size: Caller-tracked number of live elements
        element: Element to append
        policy: Growth policy used when the array is full

    Returns:
        The array holding the appended element

    Example:
        >>> append(np.zeros(3, dtype=int), 3, 7)
        array([0, 0, 0, 7, 0, 0])
    """
    as_1d(array)
    capacity = len(array)
    check_logical_size(logical_size, capacity)
    if logical_size + 1 > capacity:
        new_capacity = get_growth_policy(policy).new_capacity(capacity, logical_size)
        array = _regrow(array, new_capacity, logical_size)
    array[logical_size] = element
    return array


def insert(array: np.ndarray, logical_size: int, index: int, element: Any,
           policy: PolicyLike = DOUBLE_SIZE) -> np.ndarray:
    """
    Insert ``element`` at ``index``, shifting ``[index, logical_size)`` right.

    Without growth exactly ``logical_size - index`` elements move one slot to
    the right. When the array is full it is replaced by one of capacity
    ``2 * logical_size``: the prefix ``[0, index)`` is copied unchanged, the
    element is written, and the tail ``[index, capacity)`` is copied one slot
    to the right. The tail copy runs to the physical capacity, so any slots
    past the logical size are carried along as well.

    Args:
        array: Target array
        logical_size: Caller-tracked number of live elements
        index: Insert position, ``0 <= index <= logical_size``
        element: Element to insert
        policy: Growth policy used when the array is full

    Returns:
        The array holding the inserted element

    Raises:
        ArrayArgumentError: If ``index`` is negative or past ``logical_size``
    """
    as_1d(array)
    capacity = len(array)
    check_logical_size(logical_size, capacity)
    check_index(index)
    if index > logical_size:
        raise ArrayArgumentError(
            f"Illegal index: {index} (logical_size={logical_size})"
        )

    if logical_size + 1 <= capacity:
        array[index + 1:logical_size + 1] = array[index:logical_size].copy()
        array[index] = element
        return array

    new_capacity = get_growth_policy(policy).new_capacity(capacity, logical_size)
    grown = allocate(new_capacity, array.dtype)
    grown[:index] = array[:index]
    grown[index] = element
    # Tail is bounded by capacity, not logical_size.
    grown[index + 1:index + 1 + capacity - index] = array[index:capacity]
    return grown
