"""Profile evaluation cost across numeric types and the float64 JIT kernel."""

import time

import numpy as np

from pybarycentric import BarycentricRational
from pybarycentric._jit import HAS_NUMBA


def runge(t):
    return 1 / (1 + 25 * t * t)


rng = np.random.default_rng(42)
n = 500
x = -2.0 + np.concatenate([[0.0], np.cumsum(rng.uniform(0.005, 0.01, n - 1))])
points = x[:-1] + 0.37 * np.diff(x)
n_evals = len(points)

print(f"Numba available: {HAS_NUMBA}")
print(f"\n{'='*70}")
print(f"Evaluation cost per point (n={n}, d=5, {n_evals} points)")
print(f"{'='*70}")

results = {}
for dtype in (np.float32, np.float64, np.longdouble):
    xs = x.astype(dtype)
    start = time.time()
    interp = BarycentricRational(xs, runge(xs), d=5)
    build_ms = (time.time() - start) * 1e3

    # Warm up JIT compilation
    interp(points[0])

    start = time.time()
    values = interp.eval_batch(points)
    elapsed = time.time() - start
    results[np.dtype(dtype).name] = values

    print(f"\n{np.dtype(dtype).name}:")
    print(f"  Build:         {build_ms:.2f} ms")
    print(f"  Time per eval: {elapsed / n_evals * 1e6:.2f} µs")
    print(f"  Throughput:    {n_evals / elapsed:.0f} evals/sec")
    print(f"  Max error:     {np.max(np.abs(values - runge(points.astype(dtype)))):.2e}")

# Verify results agree across precisions
diff = np.max(np.abs(results["float64"] - results[np.dtype(np.longdouble).name]))
print(f"\n{'='*70}")
print(f"float64 vs longdouble max difference: {diff:.2e}")
if diff < 1e-12:
    print("  ✓ Results match!")
else:
    print("  ✗ Results differ!")
