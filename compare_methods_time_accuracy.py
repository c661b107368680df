"""
Comparison of 1-D Interpolation Methods on Unevenly Spaced Nodes

Compares speed and accuracy of:
1. Floater-Hormann barycentric rational (pybarycentric), d = 0..8
2. Polynomial interpolation (scipy BarycentricInterpolator)
3. Cubic spline (scipy CubicSpline)

Test functions: Runge 1/(1+25x^2), |x|^3, and exp(sin(3x)) on [-1, 1].

Requires: scipy

Usage:
    python compare_methods_time_accuracy.py

NOTE: This script is for local benchmarking only. It is NOT part of the
test suite.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List

import numpy as np
from scipy.interpolate import BarycentricInterpolator, CubicSpline

from pybarycentric import BarycentricRational


@dataclass
class MethodResult:
    """Results for a single method on a single test function."""
    name: str
    build_time: float
    eval_time_us: float
    errors: List[float] = field(default_factory=list)

    @property
    def max_error(self) -> float:
        return float(np.max(self.errors))


TEST_FUNCTIONS: Dict[str, Callable] = {
    "runge": lambda t: 1.0 / (1.0 + 25.0 * t * t),
    "abs_cubed": lambda t: np.abs(t) ** 3,
    "exp_sin": lambda t: np.exp(np.sin(3.0 * t)),
}


def generate_nodes(n: int, seed: int = 42) -> np.ndarray:
    """Uneven nodes on [-1, 1]: uniform grid jittered by up to 40% of h."""
    rng = np.random.default_rng(seed)
    h = 2.0 / (n - 1)
    x = np.linspace(-1, 1, n)
    x[1:-1] += rng.uniform(-0.4 * h, 0.4 * h, n - 2)
    return x


def run_method(name: str, build: Callable, evaluate: Callable,
               f: Callable, test_points: np.ndarray) -> MethodResult:
    start = time.time()
    model = build()
    build_time = time.time() - start

    start = time.time()
    approx = evaluate(model, test_points)
    eval_time_us = (time.time() - start) / len(test_points) * 1e6

    return MethodResult(
        name=name,
        build_time=build_time,
        eval_time_us=eval_time_us,
        errors=list(np.abs(approx - f(test_points))),
    )


def compare(f_name: str, n: int, test_points: np.ndarray) -> List[MethodResult]:
    f = TEST_FUNCTIONS[f_name]
    x = generate_nodes(n)
    y = f(x)
    results = []

    for d in (0, 1, 3, 5, 8):
        results.append(run_method(
            f"Floater-Hormann d={d}",
            lambda d=d: BarycentricRational(x, y, d=d),
            lambda m, t: m.eval_batch(t),
            f, test_points,
        ))

    results.append(run_method(
        "Polynomial",
        lambda: BarycentricInterpolator(x, y),
        lambda m, t: m(t),
        f, test_points,
    ))
    results.append(run_method(
        "Cubic spline",
        lambda: CubicSpline(x, y),
        lambda m, t: m(t),
        f, test_points,
    ))
    return results


def print_table(f_name: str, n: int, results: List[MethodResult]) -> None:
    print("\n" + "=" * 72)
    print(f"{f_name}, n={n}")
    print("=" * 72)
    print(f"{'Method':<22} | {'Build (ms)':>10} | {'Eval (µs/pt)':>12} | {'Max error':>10}")
    print("-" * 72)
    for r in results:
        print(f"{r.name:<22} | {r.build_time * 1e3:>10.3f} | "
              f"{r.eval_time_us:>12.2f} | {r.max_error:>10.2e}")
    print("=" * 72)


def main():
    print("=" * 72)
    print("COMPARISON: 1-D interpolation on unevenly spaced nodes")
    print("=" * 72)

    test_points = np.linspace(-0.999, 0.999, 1000)
    for f_name in TEST_FUNCTIONS:
        for n in (21, 81, 321):
            print_table(f_name, n, compare(f_name, n, test_points))


if __name__ == "__main__":
    main()
