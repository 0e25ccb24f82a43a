import numpy as np
import pytest

from nnoptions import expanding_array, ShapeMismatchError


def test_scalar_is_broadcast_to_every_dimension():
    assert expanding_array(3, 1) == (3,)
    assert expanding_array(3, 2) == (3, 3)
    assert expanding_array(3, 3) == (3, 3, 3)


def test_sequence_with_matching_length_is_kept():
    assert expanding_array([3, 2], 2) == (3, 2)
    assert expanding_array((1, 2, 3), 3) == (1, 2, 3)


def test_numpy_inputs_are_accepted():
    assert expanding_array(np.int64(4), 2) == (4, 4)
    assert expanding_array(np.array([1, 2, 3]), 3) == (1, 2, 3)
    assert expanding_array(np.array(5), 2) == (5, 5)


def test_float_dtype():
    assert expanding_array(0.5, 2, dtype=float) == (0.5, 0.5)
    assert expanding_array([1, 0.25], 2, dtype=float) == (1.0, 0.25)


def test_length_mismatch_is_rejected():
    with pytest.raises(ShapeMismatchError):
        expanding_array([1, 2, 3], 2)
    with pytest.raises(ValueError):
        expanding_array([1], 3)


def test_non_numeric_entries_are_rejected():
    with pytest.raises(TypeError):
        expanding_array(True, 2)
    with pytest.raises(TypeError):
        expanding_array("ab", 2)
    with pytest.raises(TypeError):
        expanding_array(["a", 1], 2)
    with pytest.raises(TypeError):
        expanding_array(None, 2)


def test_int_dtype_rejects_fractional_values():
    with pytest.raises(TypeError):
        expanding_array(2.7, 2)
    with pytest.raises(TypeError):
        expanding_array([1, 1.5], 2)
    with pytest.raises(TypeError):
        expanding_array(np.array([1.0, 2.5]), 2)
    assert expanding_array(3.0, 2) == (3, 3)
    assert expanding_array(np.float64(2.0), 1) == (2,)
