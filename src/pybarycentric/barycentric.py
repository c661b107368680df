"""Barycentric rational interpolation with Floater-Hormann weights.

This module implements the core algorithm: a pole-free rational interpolant
of samples on strictly increasing, arbitrarily spaced abscissas. The
barycentric weights depend only on node positions and the blending order
``d``, so they are computed once at construction and every evaluation is a
single O(n) weighted sum.

The code is generic over the numeric type. float32, float64 and longdouble
arrays keep their precision end to end; sequences of Python number objects
(``mpmath.mpf``, ``decimal.Decimal``, ``fractions.Fraction``) are held in
``object`` arrays and evaluated with their own arithmetic.

References
----------
- Floater & Hormann (2007), "Barycentric rational interpolation with no
  poles and high rates of approximation", Numerische Mathematik
  107(2):315-331
- Berrut (1988), "Rational functions for guaranteed and experimentally
  well-conditioned global interpolation", Computers & Mathematics with
  Applications 15(1):1-16
"""

from __future__ import annotations

import os
import pickle
import time
import warnings
from typing import Callable

import numpy as np

from pybarycentric._jit import barycentric_rational_jit
from pybarycentric._validation import (
    _as_real_array,
    _clamp_order,
    _coerce_samples,
    _one_like,
    _to_real,
    _warn_close_nodes,
)

DEFAULT_ORDER = 3


def floater_hormann_weights(nodes: np.ndarray, d: int = DEFAULT_ORDER) -> np.ndarray:
    """Compute Floater-Hormann barycentric weights for given nodes.

    Weight ``i`` sums the contributions of every window of ``d + 1``
    consecutive nodes that contains node ``i``::

        w_i = sum_{k=max(0, i-d)}^{min(i, n-1-d)} (-1)^k prod_{j=k, j!=i}^{k+d} 1 / (x_i - x_j)

    Nodes near either end belong to fewer windows than interior nodes, so
    boundary weights differ from interior ones.

    Parameters
    ----------
    nodes : ndarray
        Strictly increasing interpolation nodes of shape (n,).
    d : int, optional
        Blending order, clamped to ``n - 1``. ``d = 0`` gives Berrut's
        weights ``(-1)^i``; ``d = n - 1`` gives polynomial interpolation.
        Default is 3.

    Returns
    -------
    ndarray
        Weights of shape (n,) with the dtype of *nodes*.
    """
    nodes = _as_real_array(nodes, "nodes")
    n = len(nodes)
    if n == 0:
        raise ValueError("Cannot compute weights for an empty set of nodes")
    d = _clamp_order(d, n)
    _warn_close_nodes(nodes, stacklevel=2)
    return _weight_table(nodes, d)


def _weight_table(nodes: np.ndarray, d: int) -> np.ndarray:
    """Window-sum weights for validated nodes and an already clamped order."""
    n = len(nodes)
    one = _one_like(nodes)
    zero = one - one
    weights = np.empty(n, dtype=nodes.dtype)
    for i in range(n):
        w = zero
        for k in range(max(0, i - d), min(i, n - 1 - d) + 1):
            inv_product = one
            for j in range(k, k + d + 1):
                if j != i:
                    inv_product /= (nodes[i] - nodes[j])
            if k % 2 == 0:
                w += inv_product
            else:
                w -= inv_product
        weights[i] = w
    return weights


def barycentric_rational_interpolate(t, nodes: np.ndarray, values: np.ndarray,
                                     weights: np.ndarray):
    """Evaluate the barycentric rational interpolant at a single point.

    Computes ``sum(w * y / (t - x)) / sum(w / (t - x))``. If *t* equals a
    node exactly, the stored value at that node is returned unchanged.
    Points outside ``[nodes[0], nodes[-1]]`` are extrapolated with the same
    formula.

    Parameters
    ----------
    t : scalar
        Evaluation point, converted to the dtype of *nodes*.
    nodes : ndarray
        Strictly increasing interpolation nodes.
    values : ndarray
        Sample values at the nodes, same dtype as *nodes*.
    weights : ndarray
        Barycentric weights, same dtype as *nodes*.

    Returns
    -------
    scalar
        Interpolated value in the dtype of *nodes* (a Python object for
        ``object`` arrays).
    """
    t = _to_real(t, nodes)
    hits = np.flatnonzero(np.array(nodes == t, dtype=bool))
    if hits.size:
        return values[hits[0]]

    if nodes.dtype == np.float64:
        return np.float64(barycentric_rational_jit(t, nodes, values, weights))

    w_over_diff = weights / (t - nodes)
    return np.dot(w_over_diff, values) / np.sum(w_over_diff)


class BarycentricRational:
    """Pole-free rational interpolant of samples on strictly increasing nodes.

    Pre-computes the Floater-Hormann weights at construction, after which
    the object is read-only: every evaluation is an O(n) barycentric sum
    and instances can be shared between threads.

    Parameters
    ----------
    x : array_like
        Strictly increasing abscissas of shape (n,), ``n >= 1``. The input
        is copied and never re-sorted.
    y : array_like
        Sample values of shape (n,).
    d : int, optional
        Blending order. Values above ``n - 1`` are clamped. The interpolant
        has approximation order ``d + 1`` and reproduces polynomials of
        degree at most ``d``. Default is 3.

    Raises
    ------
    ValueError
        If the samples are empty, not 1-D, of different lengths, contain
        NaN or Inf, if *x* is not strictly increasing, or if *d* < 0.
    TypeError
        If *d* is not an integer, or the elements of *x* and *y* cannot
        be converted to one number type.

    Examples
    --------
    >>> interp = BarycentricRational([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], d=1)
    >>> [float(w) for w in interp.weights]
    [-1.0, 2.0, -1.0]
    >>> float(interp(1.0))
    1.0
    """

    def __init__(self, x, y, d: int = DEFAULT_ORDER):
        x, y = _coerce_samples(x, y)
        self._d = _clamp_order(d, len(x))
        self._x = x
        self._y = y
        _warn_close_nodes(x, stacklevel=2)
        self._weights = _weight_table(x, self._d)
        self.build_time: float = 0.0
        self._freeze()

    def _freeze(self) -> None:
        for arr in (self._x, self._y, self._weights):
            arr.flags.writeable = False

    @classmethod
    def from_function(
        cls,
        function: Callable,
        x,
        d: int = DEFAULT_ORDER,
        verbose: bool = False,
    ) -> "BarycentricRational":
        """Sample *function* at the nodes *x* and interpolate the result.

        Parameters
        ----------
        function : callable
            Function to approximate. Signature: ``f(t) -> Real``.
        x : array_like
            Strictly increasing nodes at which *function* is sampled.
        d : int, optional
            Blending order. Default is 3.
        verbose : bool, optional
            If True, print build progress. Default is False.

        Returns
        -------
        BarycentricRational
            The interpolant of ``function`` on *x*.
        """
        nodes = np.asarray(x)
        if verbose:
            print(f"Building barycentric rational interpolant "
                  f"({len(nodes):,} evaluations, d={d})...")

        start = time.time()
        values = [function(t) for t in nodes]
        obj = cls(nodes, values, d)
        obj.build_time = time.time() - start

        if verbose:
            print(f"  Built in {obj.build_time:.3f}s "
                  f"(n={obj.n}, d={obj.d}, dtype={obj.dtype})")
        return obj

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def x(self) -> np.ndarray:
        """Interpolation nodes (read-only)."""
        return self._x

    @property
    def y(self) -> np.ndarray:
        """Sample values at the nodes (read-only)."""
        return self._y

    @property
    def weights(self) -> np.ndarray:
        """Barycentric weights (read-only)."""
        return self._weights

    @property
    def n(self) -> int:
        """Number of samples."""
        return len(self._x)

    @property
    def d(self) -> int:
        """Effective blending order, after clamping to ``n - 1``."""
        return self._d

    @property
    def dtype(self) -> np.dtype:
        return self._x.dtype

    def __len__(self) -> int:
        return len(self._x)

    def weight(self, i: int):
        """Return the barycentric weight of node *i*.

        Raises
        ------
        IndexError
            If *i* is outside ``[0, n)``.
        """
        if not 0 <= i < len(self._weights):
            raise IndexError(
                f"Weight index {i} out of range [0, {len(self._weights) - 1}]"
            )
        return self._weights[i]

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def eval(self, t):
        """Evaluate the interpolant at *t*.

        Exact at the nodes; points outside ``[x[0], x[-1]]`` are
        extrapolated.

        Parameters
        ----------
        t : scalar
            Evaluation point.

        Returns
        -------
        scalar
            Interpolated value in the dtype of the interpolant.
        """
        return barycentric_rational_interpolate(t, self._x, self._y, self._weights)

    __call__ = eval

    def eval_batch(self, points) -> np.ndarray:
        """Evaluate at multiple points.

        Parameters
        ----------
        points : array_like
            Evaluation points of shape (N,).

        Returns
        -------
        ndarray
            Interpolated values of shape (N,) in the dtype of the interpolant.
        """
        points = np.asarray(points, dtype=self._x.dtype)
        if points.ndim != 1:
            raise ValueError(f"points must be 1-D, got shape {points.shape}")
        results = np.empty(len(points), dtype=self._x.dtype)
        for i, t in enumerate(points):
            results[i] = self.eval(t)
        return results

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __getstate__(self) -> dict:
        """Return picklable state stamped with the library version."""
        from pybarycentric._version import __version__

        state = self.__dict__.copy()
        state["_pybarycentric_version"] = __version__
        return state

    def __setstate__(self, state: dict) -> None:
        """Restore state and make the arrays read-only again."""
        from pybarycentric._version import __version__

        saved_version = state.pop("_pybarycentric_version", None)
        if saved_version is not None and saved_version != __version__:
            warnings.warn(
                f"This object was saved with pybarycentric {saved_version}, "
                f"but you are loading it with {__version__}. "
                f"Evaluation results may differ if internal data layout changed.",
                UserWarning,
                stacklevel=2,
            )

        self.__dict__.update(state)
        if not hasattr(self, "build_time"):
            self.build_time = 0.0
        self._freeze()

    def save(self, path: str | os.PathLike) -> None:
        """Save the interpolant to a file.

        Parameters
        ----------
        path : str or path-like
            Destination file path.
        """
        with open(os.fspath(path), "wb") as f:
            pickle.dump(self, f, protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def load(cls, path: str | os.PathLike) -> "BarycentricRational":
        """Load a previously saved interpolant from a file.

        Parameters
        ----------
        path : str or path-like
            Path to the saved file.

        Returns
        -------
        BarycentricRational
            The restored interpolant.

        Warns
        -----
        UserWarning
            If the file was saved with a different pybarycentric version.

        .. warning::

            This method uses :mod:`pickle` internally. Pickle can execute
            arbitrary code during deserialization. **Only load files you
            trust.**
        """
        with open(os.fspath(path), "rb") as f:
            obj = pickle.load(f)  # noqa: S301
        if not isinstance(obj, cls):
            raise TypeError(
                f"Expected a {cls.__name__} instance, got {type(obj).__name__}"
            )
        return obj

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"BarycentricRational("
            f"n={self.n}, "
            f"d={self._d}, "
            f"dtype={self._x.dtype})"
        )

    def __str__(self) -> str:
        lines = [
            f"BarycentricRational (Floater-Hormann, d={self._d})",
            f"  Nodes:  {self.n:,}",
            f"  Domain: [{self._x[0]}, {self._x[-1]}]",
            f"  Dtype:  {self._x.dtype}",
        ]
        if self.build_time:
            lines.append(f"  Build:  {self.build_time:.3f}s")
        return "\n".join(lines)
