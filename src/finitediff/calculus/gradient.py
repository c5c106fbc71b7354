"""Contains functions used to construct the gradient of scalar-valued functions."""

from __future__ import annotations

from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from finitediff.finite.config import DEFAULT_ACCURACY, DEFAULT_STEP_SIZE
from finitediff.finite.core import axis_finite_step
from finitediff.finite.stencil import AccuracyOrder
from finitediff.utils.types import ScalarFunction
from finitediff.utils.validate import (
    check_scalar_output,
    validate_point,
    validate_step_size,
    warn_if_nonfinite,
)

__all__ = ["finite_gradient"]


def finite_gradient(
    x: ArrayLike,
    f: ScalarFunction,
    accuracy: AccuracyOrder | int | str = DEFAULT_ACCURACY,
    eps: float = DEFAULT_STEP_SIZE,
) -> NDArray[np.float64]:
    """Returns the finite difference gradient of a scalar-valued function.

    Each entry is a central difference along one coordinate, with all other
    coordinates held at ``x``. The function is evaluated
    ``len(x) * accuracy.num_points`` times and never at ``x`` itself.

    Args:
        x: The point at which the gradient is evaluated. Not modified.
        f: The function to be differentiated. Must accept a 1D array and
            return a scalar.
        accuracy: Truncation order of the stencil (see :class:`AccuracyOrder`).
        eps: Step size. Must be finite and non-zero.

    Returns:
        A 1D array of shape ``(len(x),)``.

    Raises:
        ValueError: If ``x`` is empty or not 1D, ``eps`` is zero or
            non-finite, or ``accuracy`` is not a supported order.
        TypeError: If ``f`` does not return a scalar value.
    """
    theta = validate_point(x)
    accuracy = AccuracyOrder.coerce(accuracy)
    eps = validate_step_size(eps)

    convert = partial(check_scalar_output, name="finite_gradient")
    grad = np.empty(theta.size, dtype=np.float64)
    for d in range(theta.size):
        grad[d] = axis_finite_step(f, theta, d, accuracy, eps, convert=convert)

    warn_if_nonfinite(grad, "finite_gradient")
    return grad
