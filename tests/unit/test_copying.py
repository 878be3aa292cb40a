"""Tests for copy_of, copy and subarray."""

import numpy as np
import pytest

from fixed_arrays import copy_of, copy, subarray, ArrayArgumentError


class TestCopyOf:

    def test_same_length_clone(self, int_array):
        clone = copy_of(int_array)
        np.testing.assert_array_equal(clone, int_array)
        assert clone is not int_array
        clone[0] = -1
        assert int_array[0] == 10

    def test_truncating_copy(self):
        a = np.arange(6, dtype=np.uint8)
        result = copy_of(a, 3)
        np.testing.assert_array_equal(result, [0, 1, 2])
        assert result.dtype == np.uint8

    def test_extending_copy_zero_fills(self):
        a = np.array([5, 6], dtype=np.uint8)
        np.testing.assert_array_equal(copy_of(a, 5), [5, 6, 0, 0, 0])

    def test_zero_length(self, int_array):
        assert len(copy_of(int_array, 0)) == 0

    def test_negative_length_rejected(self, int_array):
        with pytest.raises(ArrayArgumentError):
            copy_of(int_array, -1)


class TestCopy:

    def test_copy_into_destination(self, int_array):
        dest = np.zeros(5, dtype=np.int32)
        copy(int_array, dest)
        np.testing.assert_array_equal(dest, int_array)

    def test_length_mismatch_rejected(self, int_array):
        dest = np.zeros(4, dtype=np.int32)
        with pytest.raises(ArrayArgumentError) as excinfo:
            copy(int_array, dest)
        assert "'5'" in str(excinfo.value) and "'4'" in str(excinfo.value)
        np.testing.assert_array_equal(dest, 0)

    def test_argument_error_is_value_error(self, int_array):
        with pytest.raises(ValueError):
            copy(int_array, np.zeros(6, dtype=np.int32))

    def test_lossy_cross_kind_copy_rejected(self):
        src = np.array([1.5, 2.5, 3.5])
        dest = np.zeros(3, dtype=np.int32)
        with pytest.raises(ArrayArgumentError, match="float64"):
            copy(src, dest)
        np.testing.assert_array_equal(dest, 0)

    def test_widening_copy_allowed(self, int_array):
        dest = np.zeros(5, dtype=np.float64)
        copy(int_array, dest)
        np.testing.assert_array_equal(dest, [10.0, 20.0, 30.0, 40.0, 50.0])

    def test_object_arrays_copy(self, object_array):
        dest = np.empty(4, dtype=object)
        copy(object_array, dest)
        assert dest.tolist() == ["a", "b", "c", "d"]


class TestSubarray:
    """Test clamping and the absent-vs-empty distinction."""

    def test_out_of_range_bounds_clamp_to_full_clone(self, int_array):
        result = subarray(int_array, -5, len(int_array) + 5)
        np.testing.assert_array_equal(result, subarray(int_array, 0, len(int_array)))
        np.testing.assert_array_equal(result, int_array)
        assert result is not int_array

    def test_none_input_gives_none(self):
        assert subarray(None, 0, 3) is None

    def test_empty_range_gives_empty_array(self, int_array):
        result = subarray(int_array, 3, 3)
        assert result is not None
        assert len(result) == 0
        assert result.dtype == int_array.dtype

    def test_inverted_range_gives_empty_array(self, int_array):
        result = subarray(int_array, 4, 1)
        assert result is not None and len(result) == 0

    def test_start_past_end_of_array(self, int_array):
        assert len(subarray(int_array, 10, 20)) == 0

    def test_inner_range(self, int_array):
        np.testing.assert_array_equal(subarray(int_array, 1, 3), [20, 30])

    def test_result_does_not_alias_input(self, int_array):
        result = subarray(int_array, 0, 2)
        result[0] = 0
        assert int_array[0] == 10

    def test_object_array_empty_keeps_dtype(self, object_array):
        result = subarray(object_array, 2, 2)
        assert result.dtype == object and len(result) == 0
