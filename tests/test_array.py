import numpy as np
import pytest

from extfrac import ExtendedRational as Fraction
from extfrac import from_arrays, to_arrays


def test_to_arrays_python_ints():
    nums, denoms = to_arrays([Fraction(3, 4), Fraction(1, 0), Fraction(-2, 4)])
    assert nums.dtype == object
    assert list(nums) == [3, 1, -1]
    assert list(denoms) == [4, 0, 2]


def test_to_arrays_explicit_dtype():
    nums, denoms = to_arrays([Fraction(3, 4), 5], dtype=np.int32)
    assert nums.dtype == np.int32
    assert denoms.dtype == np.int32
    assert np.array_equal(nums, np.array([3, 5], dtype=np.int32))
    assert np.array_equal(denoms, np.array([4, 1], dtype=np.int32))


def test_to_arrays_uses_common_fixed_width_domain():
    values = [Fraction(np.int16(1), np.int16(3)), Fraction(2, 5)]
    nums, denoms = to_arrays(values)
    assert nums.dtype == np.int16


def test_to_arrays_keeps_shape():
    values = np.empty((2, 2), dtype=object)
    values[0, 0] = Fraction(1, 2)
    values[0, 1] = Fraction(0, 0)
    values[1, 0] = Fraction(-1, 0)
    values[1, 1] = Fraction(7)
    nums, denoms = to_arrays(values)
    assert nums.shape == (2, 2)
    assert nums[1, 0] == -1
    assert denoms[0, 1] == 0


def test_from_arrays():
    nums = np.array([1, 2, 0, 5], dtype=np.int64)
    denoms = np.array([2, 4, 0, 0], dtype=np.int64)
    result = from_arrays(nums, denoms)
    assert result.dtype == object
    assert result[0] == Fraction(1, 2)
    assert result[1] == Fraction(1, 2)
    assert result[2].is_nan()
    assert result[3] == Fraction(1, 0)
    assert isinstance(result[0].numerator, np.int64)


def test_from_arrays_shape_mismatch():
    with pytest.raises(ValueError):
        from_arrays(np.array([1, 2]), np.array([1, 2, 3]))


def test_from_arrays_rejects_floats():
    with pytest.raises(TypeError):
        from_arrays(np.array([1.0]), np.array([2.0]))
