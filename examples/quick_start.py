"""Quick start example: interpolate scattered samples of Runge's function."""

import numpy as np

from pybarycentric import BarycentricRational


def f(t):
    """Runge's function 1/(1+25t^2)."""
    return 1.0 / (1.0 + 25.0 * t * t)


# Unevenly spaced nodes on [-1, 1]
rng = np.random.default_rng(0)
x = np.sort(np.concatenate([[-1.0, 1.0], rng.uniform(-1, 1, 48)]))

# Build interpolant (blending order 4)
interp = BarycentricRational.from_function(f, x, d=4, verbose=True)
print(interp)

# Exact at the nodes
i = 17
print(f"\nAt node x[{i}] = {x[i]:.6f}: "
      f"interp = {interp(x[i]):.10f}, f = {f(x[i]):.10f}")

# Between the nodes
t = 0.1234
print(f"\nExact:  {f(t):.10f}")
print(f"Approx: {interp(t):.10f}")
print(f"Error:  {abs(interp(t) - f(t)):.2e}")

# Maximum error on a fine grid
grid = np.linspace(-1, 1, 2001)
err = np.max(np.abs(interp.eval_batch(grid) - f(grid)))
print(f"\nMax error on [-1, 1]: {err:.2e}")
