"""
Test suite for fixed-capacity array primitives.

Covers growth arithmetic, copy boundaries, search windows, Fisher-Yates
shuffling and tolerance comparison, plus the growable buffer and config layers.
"""
