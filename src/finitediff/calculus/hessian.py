"""Contains functions used in constructing the Hessian of a scalar-valued function."""

from __future__ import annotations

from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from finitediff.finite.config import DEFAULT_HESSIAN_STEP_SIZE
from finitediff.utils.types import ScalarFunction
from finitediff.utils.validate import (
    check_scalar_output,
    validate_point,
    validate_step_size,
    warn_if_nonfinite,
)

__all__ = ["finite_hessian"]


def finite_hessian(
    x: ArrayLike,
    f: ScalarFunction,
    eps: float = DEFAULT_HESSIAN_STEP_SIZE,
    symmetric: bool = False,
) -> NDArray[np.float64]:
    """Returns the finite difference Hessian of a scalar-valued function.

    Every entry uses the forward mixed difference

    .. math::

        H_{ij} \\approx \\frac{f(x + h e_i + h e_j) - f(x + h e_i) - f(x + h e_j) + f(x)}{h^2}

    which needs four evaluations per entry. The scheme is fixed; there is no
    accuracy order.

    Args:
        x: The point at which the Hessian is evaluated. Not modified.
        f: The function to be differentiated. Must accept a 1D array and
            return a scalar.
        eps: Step size ``h``. Must be finite and non-zero.
        symmetric: If ``False`` (default) every ``(i, j)`` entry is evaluated
            independently, ``4 * n**2`` evaluations. If ``True`` only the
            upper triangle and diagonal are evaluated and mirrored,
            ``2 * n * (n + 1)`` evaluations.

    Returns:
        A 2D array of shape ``(len(x), len(x))``.

    Raises:
        ValueError: If ``x`` is empty or not 1D, or ``eps`` is zero or non-finite.
        TypeError: If ``f`` does not return a scalar value.
    """
    theta = validate_point(x)
    eps = validate_step_size(eps)
    value = partial(_evaluate, f)

    p = int(theta.size)
    hess = np.empty((p, p), dtype=np.float64)
    for i in range(p):
        for j in range(i if symmetric else 0, p):
            hij = _mixed_difference(value, theta, i, j, eps)
            hess[i, j] = hij
            if symmetric:
                hess[j, i] = hij

    warn_if_nonfinite(hess, "finite_hessian")
    return hess


def _evaluate(f: ScalarFunction, point: NDArray[np.float64]) -> float:
    """Evaluates ``f`` on a copy of ``point`` and checks the output is scalar."""
    return check_scalar_output(f(point.copy()), name="finite_hessian")


def _mixed_difference(
    value,
    theta: NDArray[np.float64],
    i: int,
    j: int,
    eps: float,
) -> float:
    """Returns one forward mixed second difference.

    For ``i == j`` this reduces to ``(f(x + 2h) - 2 f(x + h) + f(x)) / h**2``
    along coordinate ``i``.
    """
    f0 = value(theta)

    xx = theta.copy()
    xx[i] += eps
    xx[j] += eps
    f_ij = value(xx)

    xx = theta.copy()
    xx[i] += eps
    f_i = value(xx)

    xx = theta.copy()
    xx[j] += eps
    f_j = value(xx)

    return (f_ij - f_i - f_j + f0) / (eps * eps)
