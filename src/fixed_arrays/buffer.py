"""
Growable buffer: the ``(buffer, len)`` pair made explicit.

The core primitives leave logical size to the caller. ``GrowableBuffer``
keeps both halves together so callers that do not need the raw protocol get
``push``/``insert_at``/``set_at`` with the same growth rules, and can choose
the growth policy per operation kind instead of having it hardcoded.
"""

from __future__ import annotations
from typing import Any, Iterator

import numpy as np
from numpy.typing import DTypeLike

from .config import ArrayConfig
from .core import growth
from .core.allocation import allocate
from .core.growth import DOUBLE_CAPACITY, DOUBLE_SIZE, PolicyLike, get_growth_policy
from .core.randomization import RandomState, shuffle
from .core.search import index_of
from .errors import ArrayArgumentError
from .jsonlog import log


class GrowableBuffer:
    """
    Fixed-capacity storage plus a logical length.

    Args:
        capacity: Initial physical capacity, must be positive
        dtype: Element type of the storage
        push_policy: Growth policy for ``push`` and ``insert_at``
        set_policy: Growth policy for ``set_at``
        log_growth: Emit a ``buffer_grow`` JSON event on every reallocation

    Example:
        >>> buf = GrowableBuffer.with_capacity(1, dtype=np.int64)
        >>> for v in (3, 1, 4):
        ...     buf.push(v)
        >>> buf.to_numpy()
        array([3, 1, 4])
        >>> buf.capacity
        4
    """

    def __init__(self, capacity: int, dtype: DTypeLike = np.float64,
                 push_policy: PolicyLike = DOUBLE_SIZE,
                 set_policy: PolicyLike = DOUBLE_CAPACITY,
                 log_growth: bool = False):
        if capacity <= 0:
            raise ArrayArgumentError(f"capacity must be positive, got {capacity}")
        self._buffer = allocate(capacity, dtype)
        self._len = 0
        self.push_policy = get_growth_policy(push_policy)
        self.set_policy = get_growth_policy(set_policy)
        self.log_growth = log_growth

    @classmethod
    def with_capacity(cls, capacity: int, dtype: DTypeLike = np.float64,
                      **kwargs) -> 'GrowableBuffer':
        return cls(capacity, dtype=dtype, **kwargs)

    @classmethod
    def from_config(cls, config: ArrayConfig) -> 'GrowableBuffer':
        return cls(
            config.initial_capacity,
            dtype=config.dtype,
            push_policy=config.push_policy,
            set_policy=config.set_policy,
            log_growth=config.log_growth,
        )

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def buffer(self) -> np.ndarray:
        """Underlying storage, including unused capacity. Replaced on growth."""
        return self._buffer

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    def _replace(self, new_buffer: np.ndarray, op: str) -> None:
        if self.log_growth and new_buffer is not self._buffer:
            log("buffer_grow", op=op, size=self._len,
                old_capacity=len(self._buffer), new_capacity=len(new_buffer))
        self._buffer = new_buffer

    def push(self, element: Any) -> None:
        self._replace(growth.append(self._buffer, self._len, element, self.push_policy), "push")
        self._len += 1

    def insert_at(self, index: int, element: Any) -> None:
        """Insert before position ``index``; ``index == len(self)`` appends."""
        self._replace(growth.insert(self._buffer, self._len, index, element, self.push_policy),
                      "insert_at")
        self._len += 1

    def set_at(self, index: int, value: Any) -> None:
        """
        Write ``value`` at ``index``, growing storage once if needed.

        Writing past the current length extends the logical length to
        ``index + 1``; skipped slots keep their default value.
        """
        self._replace(growth.set_at(self._buffer, index, value, self.set_policy), "set_at")
        self._len = max(self._len, index + 1)

    def index_of(self, target: Any) -> int:
        return index_of(self._buffer, target, 0, self._len)

    def shuffle(self, rng: RandomState = None) -> None:
        shuffle(self._buffer, self._len, rng)

    def to_numpy(self) -> np.ndarray:
        """Copy of the logical prefix."""
        return self._buffer[:self._len].copy()

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, index: int) -> Any:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(
                f"GrowableBuffer indices must be integers, not {type(index).__name__}; "
                "use to_numpy() for slicing"
            )
        if not 0 <= index < self._len:
            raise IndexError(f"index {index} out of range for length {self._len}")
        return self._buffer[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._buffer[:self._len])

    def __repr__(self) -> str:
        return (f"GrowableBuffer({self._buffer[:self._len]!r}, "
                f"len={self._len}, capacity={self.capacity})")
