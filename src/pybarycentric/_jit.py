"""Optional Numba JIT-compiled kernel for float64 rational interpolation.

If Numba is not installed, falls back to a pure NumPy implementation.
Install with: pip install pybarycentric[jit]
"""

import numpy as np

try:
    from numba import njit

    @njit(cache=True)
    def barycentric_rational_jit(t: float, nodes: np.ndarray, values: np.ndarray,
                                 weights: np.ndarray) -> float:
        """JIT-compiled barycentric rational interpolation (no node coincidence check).

        Parameters
        ----------
        t : float
            Evaluation point.
        nodes : ndarray
            Strictly increasing abscissas (float64).
        values : ndarray
            Sample values at the nodes (float64).
        weights : ndarray
            Barycentric weights (float64).

        Returns
        -------
        float
            Interpolated value.
        """
        numerator = 0.0
        denominator = 0.0

        for i in range(len(nodes)):
            w_i = weights[i] / (t - nodes[i])
            numerator += w_i * values[i]
            denominator += w_i

        return numerator / denominator

    HAS_NUMBA = True

except ImportError:

    def barycentric_rational_jit(t: float, nodes: np.ndarray, values: np.ndarray,
                                 weights: np.ndarray) -> float:
        """Pure NumPy barycentric rational interpolation fallback (no Numba)."""
        w_over_diff = weights / (t - nodes)
        return float(np.dot(w_over_diff, values) / np.sum(w_over_diff))

    HAS_NUMBA = False
