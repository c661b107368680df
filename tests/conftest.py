"""Shared test fixtures for pybarycentric tests."""

import numpy as np
import pytest

from pybarycentric import BarycentricRational


# ---------------------------------------------------------------------------
# Numeric types
# ---------------------------------------------------------------------------

class RealType:
    """A numeric type the interpolator is instantiated with.

    ``convert`` builds a scalar of the type from a Python float, ``dtype``
    is the NumPy dtype holding it, and ``eps`` is its machine epsilon.
    """

    def __init__(self, name, convert, dtype, eps, sqrt):
        self.name = name
        self.convert = convert
        self.dtype = dtype
        self.eps = eps
        self.sqrt_eps = sqrt(eps)

    def array(self, values):
        return np.array([self.convert(v) for v in values], dtype=self.dtype)

    def __repr__(self):
        return self.name


def _numpy_real(dtype):
    dtype = np.dtype(dtype)
    return RealType(dtype.name, dtype.type, dtype, np.finfo(dtype).eps, np.sqrt)


@pytest.fixture(params=["float32", "float64", "longdouble", "mpf50"])
def real(request):
    """Each numeric type the interpolator must work with unchanged."""
    if request.param != "mpf50":
        yield _numpy_real(request.param)
        return

    mpmath = pytest.importorskip("mpmath")
    saved_dps = mpmath.mp.dps
    mpmath.mp.dps = 50
    try:
        yield RealType(
            "mpf50", mpmath.mpf, np.dtype(object), mpmath.mp.eps, mpmath.sqrt
        )
    finally:
        mpmath.mp.dps = saved_dps


# ---------------------------------------------------------------------------
# Sample generators
# ---------------------------------------------------------------------------

def increasing_nodes(rng, real, n, low, high, start=None):
    """Strictly increasing nodes built by accumulating U(low, high) steps in *real*."""
    steps = [real.convert(s) for s in rng.uniform(low, high, size=n)]
    nodes = [steps[0] if start is None else real.convert(start)]
    for step in steps[1:]:
        nodes.append(nodes[-1] + step)
    return real.array(nodes)


def runge(t):
    """Runge's function 1/(1+25t^2)."""
    return 1 / (1 + 25 * t * t)


def relative_error(approx, exact):
    return abs(approx - exact) / abs(exact)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    return np.random.default_rng(20180131)


@pytest.fixture
def uniform_constant():
    """x = [0, 1, 2, 3, 4], y = 1, Berrut weights (d=0)."""
    return BarycentricRational([0.0, 1.0, 2.0, 3.0, 4.0], [1.0] * 5, d=0)


@pytest.fixture
def parabola_d1():
    """x = [0, 1, 2], y = x^2, d=1."""
    return BarycentricRational([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], d=1)


@pytest.fixture(scope="module")
def runge_d5():
    """Runge's function on a near-uniform grid in [-2, 2], d=5, float64."""
    rng = np.random.default_rng(7)
    x = -2.0 + np.concatenate([[0.0], np.cumsum(rng.uniform(0.005, 0.01, 499))])
    return BarycentricRational(x, runge(x), d=5)
