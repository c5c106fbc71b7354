"""Contains functions used to construct the Jacobian matrix."""

from __future__ import annotations

from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from finitediff.finite.config import DEFAULT_ACCURACY, DEFAULT_STEP_SIZE
from finitediff.finite.core import axis_finite_step
from finitediff.finite.stencil import AccuracyOrder
from finitediff.utils.types import VectorFunction
from finitediff.utils.validate import (
    check_vector_output,
    validate_point,
    validate_step_size,
    warn_if_nonfinite,
)

__all__ = ["finite_jacobian"]


def finite_jacobian(
    x: ArrayLike,
    f: VectorFunction,
    accuracy: AccuracyOrder | int | str = DEFAULT_ACCURACY,
    eps: float = DEFAULT_STEP_SIZE,
    n_outputs: int | None = None,
) -> NDArray[np.float64]:
    """Computes the finite difference Jacobian of a vector-valued function.

    Each column in the Jacobian is the derivative with respect to one
    coordinate of ``x``, computed with the same stencil as
    :func:`finite_gradient` applied componentwise to the output of ``f``.

    When ``n_outputs`` is not given, ``f(x)`` is evaluated once, unperturbed,
    only to learn the output length; its value is otherwise unused. Passing
    ``n_outputs`` skips that evaluation.

    Args:
        x: The point at which the Jacobian is evaluated. Not modified.
        f: The vector-valued function to be differentiated. Must accept a
            1D array and return a 1D array-like (a scalar counts as length 1).
        accuracy: Truncation order of the stencil (see :class:`AccuracyOrder`).
        eps: Step size. Must be finite and non-zero.
        n_outputs: Length of the output of ``f``, if known.

    Returns:
        A 2D array of shape ``(n_outputs, len(x))``.

    Raises:
        ValueError: If ``x`` is empty or not 1D, ``eps`` is zero or
            non-finite, ``accuracy`` is not a supported order, ``n_outputs``
            is not positive, or an output of ``f`` has the wrong length.
        TypeError: If ``f`` returns an array with more than one dimension.
    """
    theta = validate_point(x)
    accuracy = AccuracyOrder.coerce(accuracy)
    eps = validate_step_size(eps)

    if n_outputs is None:
        m = check_vector_output(f(theta.copy())).size
    else:
        m = int(n_outputs)
        if m < 1:
            raise ValueError(f"n_outputs must be a positive integer; got {n_outputs}.")

    convert = partial(check_vector_output, expected_size=m)
    jac = np.empty((m, theta.size), dtype=np.float64)
    for d in range(theta.size):
        jac[:, d] = axis_finite_step(f, theta, d, accuracy, eps, convert=convert)

    warn_if_nonfinite(jac, "finite_jacobian")
    return jac
