"""Tests for construction-time validation and the weight accessor."""

import numpy as np
import pytest

from pybarycentric import BarycentricRational, floater_hormann_weights


class TestInvalidSamples:
    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            BarycentricRational([], [])

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="len"):
            BarycentricRational([0.0, 1.0, 2.0], [1.0, 2.0])

    def test_not_1d(self):
        with pytest.raises(ValueError, match="1-D"):
            BarycentricRational(np.zeros((2, 3)), np.zeros((2, 3)))

    def test_scalar_input(self):
        with pytest.raises(ValueError, match="1-D"):
            BarycentricRational(1.0, 2.0)

    @pytest.mark.parametrize("x", [
        [0.0, 2.0, 1.0],
        [0.0, 1.0, 1.0],
        [3.0, 2.0, 1.0],
    ])
    def test_not_strictly_increasing(self, x):
        with pytest.raises(ValueError, match="strictly increasing"):
            BarycentricRational(x, [1.0, 2.0, 3.0])

    def test_error_names_offending_pair(self):
        with pytest.raises(ValueError, match=r"x\[2\]=5\.0 >= x\[3\]=4\.0"):
            BarycentricRational([0.0, 1.0, 5.0, 4.0], [0.0] * 4)

    def test_object_not_increasing(self):
        mpmath = pytest.importorskip("mpmath")
        x = [mpmath.mpf(0), mpmath.mpf(2), mpmath.mpf(1)]
        with pytest.raises(ValueError, match="strictly increasing"):
            BarycentricRational(x, x)

    @pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
    def test_non_finite_x(self, bad):
        with pytest.raises(ValueError, match="x contains NaN or Inf"):
            BarycentricRational([0.0, 1.0, bad], [1.0, 2.0, 3.0])

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_non_finite_y(self, bad):
        with pytest.raises(ValueError, match="y contains NaN or Inf"):
            BarycentricRational([0.0, 1.0, 2.0], [1.0, bad, 3.0])

    def test_complex_rejected(self):
        with pytest.raises(TypeError, match="real"):
            BarycentricRational([0.0, 1.0], [1.0 + 1j, 2.0])

    def test_strings_rejected(self):
        with pytest.raises(TypeError, match="unsupported dtype"):
            BarycentricRational(["a", "b"], [1.0, 2.0])

    def test_not_sorted_for_caller(self):
        x = np.array([0.0, 2.0, 1.0])
        with pytest.raises(ValueError):
            BarycentricRational(x, [10.0, 20.0, 30.0])
        np.testing.assert_array_equal(x, [0.0, 2.0, 1.0])


class TestInvalidOrder:
    def test_negative(self):
        with pytest.raises(ValueError, match=">= 0"):
            BarycentricRational([0.0, 1.0], [1.0, 2.0], d=-1)

    @pytest.mark.parametrize("d", [1.5, "3", None])
    def test_non_integer(self, d):
        with pytest.raises(TypeError, match="integer"):
            BarycentricRational([0.0, 1.0], [1.0, 2.0], d=d)

    def test_numpy_integer_accepted(self):
        interp = BarycentricRational([0.0, 1.0, 2.0], [1.0, 2.0, 0.0], d=np.int64(1))
        assert interp.d == 1

    def test_weights_function_validates(self):
        with pytest.raises(ValueError, match="empty"):
            floater_hormann_weights(np.array([]), 2)
        with pytest.raises(ValueError, match=">= 0"):
            floater_hormann_weights(np.array([0.0, 1.0]), -2)


class TestWeightAccessor:
    def test_in_range(self, parabola_d1):
        assert [parabola_d1.weight(i) for i in range(3)] == [-1.0, 2.0, -1.0]

    @pytest.mark.parametrize("i", [-1, 3, 100])
    def test_out_of_range(self, parabola_d1, i):
        with pytest.raises(IndexError, match="out of range"):
            parabola_d1.weight(i)
