"""Shared helpers for coercing and validating interpolation samples."""

from __future__ import annotations

import numbers
import operator
import warnings

import numpy as np


def _object_real_type(*arrays):
    """Pick the number type of ``object`` arrays.

    The type of the first element that is neither an integer nor a plain
    float wins, so ``[0, mpf("0.5"), 1]`` and ``[0, Fraction(1, 3), 1]``
    resolve to ``mpf`` and ``Fraction``. Returns None when every element is
    an integer or a float.
    """
    for arr in arrays:
        if arr.dtype != object:
            continue
        for v in arr:
            if not isinstance(v, (numbers.Integral, float)):
                return type(v)
    return None


def _convert_objects(arr: np.ndarray, real, name: str) -> np.ndarray:
    """Convert every element of *arr* to *real*, in a fresh ``object`` array."""
    out = np.empty(len(arr), dtype=object)
    for i, v in enumerate(arr):
        if isinstance(v, np.generic):
            v = v.item()
        if type(v) is real:
            out[i] = v
            continue
        try:
            out[i] = real(v)
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise TypeError(
                f"{name}[{i}]={v!r} cannot be converted to {real.__name__}"
            ) from exc
    return out


def _as_real_array(values, name: str) -> np.ndarray:
    """Copy *values* into a fresh 1-D array of a real numeric dtype.

    Integer and boolean input is promoted to float64. Sequences of Python
    number objects (``mpmath.mpf``, ``decimal.Decimal``, ...) end up in an
    ``object`` array whose elements all share one number type.
    """
    arr = np.array(values, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-D, got shape {arr.shape}")
    if arr.dtype.kind in "biu":
        arr = arr.astype(np.float64)
    elif arr.dtype.kind == "c":
        raise TypeError(f"{name} must be real, got dtype {arr.dtype}")
    elif arr.dtype.kind == "O":
        real = _object_real_type(arr)
        if real is None:
            arr = arr.astype(np.float64)
        else:
            arr = _convert_objects(arr, real, name)
    elif arr.dtype.kind != "f":
        raise TypeError(f"{name} has unsupported dtype {arr.dtype}")
    return arr


def _is_floating(arr: np.ndarray) -> bool:
    """Return True if *arr* holds native IEEE floats (not Python objects)."""
    return arr.dtype.kind == "f"


def _coerce_samples(x, y) -> tuple[np.ndarray, np.ndarray]:
    """Validate abscissas and values and bring them to one common type.

    Raises
    ------
    ValueError
        If either input is empty or not 1-D, the lengths differ, a floating
        input contains NaN or Inf, or *x* is not strictly increasing.
    TypeError
        If the elements of *x* and *y* cannot be converted to one number
        type.
    """
    x_arr = _as_real_array(x, "x")
    y_arr = _as_real_array(y, "y")

    if x_arr.size == 0:
        raise ValueError("Cannot interpolate with no samples: x is empty")
    if x_arr.size != y_arr.size:
        raise ValueError(
            f"len(x)={x_arr.size} and len(y)={y_arr.size} must be equal"
        )

    real = _object_real_type(x_arr, y_arr)
    if real is None:
        dtype = np.result_type(x_arr, y_arr)
        x_arr = x_arr.astype(dtype, copy=False)
        y_arr = y_arr.astype(dtype, copy=False)
    else:
        x_arr = _convert_objects(x_arr, real, "x")
        y_arr = _convert_objects(y_arr, real, "y")

    if _is_floating(x_arr):
        if not np.isfinite(x_arr).all():
            raise ValueError("x contains NaN or Inf")
        if not np.isfinite(y_arr).all():
            raise ValueError("y contains NaN or Inf")

    increasing = np.array(x_arr[1:] > x_arr[:-1], dtype=bool)
    if not increasing.all():
        i = int(np.flatnonzero(~increasing)[0])
        raise ValueError(
            f"x must be strictly increasing, but x[{i}]={x_arr[i]} "
            f">= x[{i + 1}]={x_arr[i + 1]}"
        )

    return x_arr, y_arr


def _clamp_order(d, n: int) -> int:
    """Validate the blending order and clamp it to ``n - 1``."""
    try:
        d = operator.index(d)
    except TypeError:
        raise TypeError(
            f"Blending order d must be an integer, got {type(d).__name__}"
        ) from None
    if d < 0:
        raise ValueError(f"Blending order d must be >= 0, got {d}")
    return min(d, n - 1)


def _warn_close_nodes(nodes: np.ndarray, stacklevel: int) -> None:
    """Warn if adjacent floating nodes are closer than machine epsilon.

    *stacklevel* is counted from the caller of this helper.
    """
    if not _is_floating(nodes) or nodes.size < 2:
        return
    eps = np.finfo(nodes.dtype).eps
    spacing = np.diff(nodes)
    close = np.flatnonzero(spacing < eps)
    if close.size:
        i = int(close[0])
        warnings.warn(
            f"Spacing between x[{i}]={nodes[i]} and x[{i + 1}]={nodes[i + 1]} "
            f"is smaller than the {nodes.dtype} epsilon {eps}; "
            f"the weights may be inaccurate.",
            RuntimeWarning,
            stacklevel=stacklevel + 1,
        )


def _real_type(arr: np.ndarray):
    """Return the scalar type of *arr*: its NumPy scalar type or its object type."""
    if arr.dtype == object:
        return _object_real_type(arr) or float
    return arr.dtype.type


def _one_like(arr: np.ndarray):
    """Return the number 1 in the Real type of *arr*."""
    return _real_type(arr)(1)


def _to_real(t, like: np.ndarray):
    """Convert a query point *t* to the Real type of *like*."""
    real = _real_type(like)
    return t if type(t) is real else real(t)
