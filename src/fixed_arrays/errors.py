"""
Error types for fixed-capacity array operations.

Out-of-range reads and writes are left to NumPy, which raises ``IndexError``.
Only caller mistakes that NumPy would otherwise accept silently (negative
indices, inconsistent logical sizes, mismatched lengths) get a dedicated type.
"""


class ArrayArgumentError(ValueError):
    """Invalid argument passed to an array operation."""
    pass


def check_index(index: int, name: str = "index") -> int:
    """Reject negative indices instead of letting NumPy wrap them."""
    if index < 0:
        raise ArrayArgumentError(f"Illegal {name}: {index}")
    return index


def check_logical_size(logical_size: int, capacity: int) -> int:
    if logical_size < 0 or logical_size > capacity:
        raise ArrayArgumentError(
            f"logical_size {logical_size} outside [0, {capacity}]"
        )
    return logical_size
