"""Validation utilities for finitediff."""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from finitediff.logger import finitediff_logger

__all__ = [
    "validate_point",
    "validate_step_size",
    "validate_tolerance",
    "check_scalar_output",
    "check_vector_output",
    "validate_same_shape",
    "warn_if_nonfinite",
]


def validate_point(x: ArrayLike) -> NDArray[np.float64]:
    """Converts a point into a private 1D float array.

    The returned array is always a copy, so callers may perturb it freely
    without touching the caller's data.

    Args:
        x: The point at which derivatives are evaluated.

    Returns:
        A new 1D ``float64`` array.

    Raises:
        ValueError: If ``x`` is not 1D or is empty.
    """
    arr = np.array(x, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"x must be a 1D array; got shape {arr.shape}.")
    if arr.size == 0:
        raise ValueError("x must be a non-empty 1D array.")
    return arr


def validate_step_size(eps: float, name: str = "eps") -> float:
    """Checks that a finite-difference step size is usable.

    Args:
        eps: The step size.
        name: Argument name used in error messages.

    Returns:
        ``eps`` as a float.

    Raises:
        ValueError: If ``eps`` is zero or not finite.
    """
    step = float(eps)
    if not math.isfinite(step):
        raise ValueError(f"{name} must be finite; got {step}.")
    if step == 0.0:
        raise ValueError(f"{name} must be non-zero; a zero step divides by zero.")
    return step


def validate_tolerance(tolerance: float) -> float:
    """Checks that a comparison tolerance is finite and non-negative."""
    tol = float(tolerance)
    if not math.isfinite(tol) or tol < 0.0:
        raise ValueError(f"tolerance must be finite and non-negative; got {tol}.")
    return tol


def check_scalar_output(value: Any, name: str = "function") -> float:
    """Converts a function output that must be scalar into a float.

    Args:
        value: The raw function output.
        name: Caller name used in error messages.

    Returns:
        The output as a float.

    Raises:
        TypeError: If ``value`` does not hold exactly one number.
    """
    arr = np.asarray(value, dtype=np.float64)
    if arr.size != 1:
        raise TypeError(
            f"{name} expects a scalar-valued function; got output with shape {arr.shape}."
        )
    return float(arr.reshape(()))


def check_vector_output(
    value: Any,
    expected_size: int | None = None,
    name: str = "finite_jacobian",
) -> NDArray[np.float64]:
    """Converts a function output that must be a vector into a 1D float array.

    Scalars are promoted to vectors of length one.

    Args:
        value: The raw function output.
        expected_size: If given, the required number of components.
        name: Caller name used in error messages.

    Returns:
        A 1D ``float64`` array.

    Raises:
        TypeError: If ``value`` has more than one dimension.
        ValueError: If the number of components differs from ``expected_size``.
    """
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim > 1:
        raise TypeError(
            f"{name} expects f: R^n -> R^m with 1D vector output; got shape {arr.shape}."
        )
    arr = np.atleast_1d(arr)
    if expected_size is not None and arr.size != expected_size:
        raise ValueError(
            f"{name} expected function output of length {expected_size}; got {arr.size}."
        )
    return arr


def validate_same_shape(
    x: ArrayLike,
    y: ArrayLike,
    ndim: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validates two containers that are compared element by element.

    Args:
        x: First container.
        y: Second container.
        ndim: Required number of dimensions (1 for vectors, 2 for matrices).

    Returns:
        Tuple of (x_array, y_array) as float arrays.

    Raises:
        ValueError: If either input has the wrong number of dimensions or
            the shapes differ.
    """
    x_arr = np.asarray(x, dtype=np.float64)
    y_arr = np.asarray(y, dtype=np.float64)

    kind = "vectors" if ndim == 1 else "matrices"
    if x_arr.ndim != ndim or y_arr.ndim != ndim:
        raise ValueError(
            f"expected {kind} ({ndim}D); got shapes {x_arr.shape} and {y_arr.shape}."
        )
    if x_arr.shape != y_arr.shape:
        raise ValueError(
            f"cannot compare {kind} of different shapes {x_arr.shape} and {y_arr.shape}."
        )
    return x_arr, y_arr


def warn_if_nonfinite(arr: NDArray[np.floating], name: str) -> None:
    """Logs a warning when a derivative result contains inf or nan."""
    if not np.isfinite(arr).all():
        n_bad = int(np.count_nonzero(~np.isfinite(arr)))
        finitediff_logger.warning(
            "Non-finite values encountered in %s (%d of %d entries).",
            name,
            n_bad,
            arr.size,
        )
