"""Single-axis finite difference estimates with a fixed step size."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from finitediff.finite.stencil import AccuracyOrder, get_stencil
from finitediff.utils.sandbox import get_partial_function

__all__ = [
    "axis_finite_step",
]


def axis_finite_step(
    function: Callable,
    x: NDArray[np.float64],
    index: int,
    accuracy: AccuracyOrder | int | str,
    eps: float,
    convert: Callable = np.asarray,
) -> NDArray | float:
    """Returns one central first-derivative estimate along a single coordinate.

    Only ``x[index]`` is perturbed; every other coordinate keeps its value,
    so this is a partial derivative and not a multi-dimensional stencil.

    Args:
        function:
            The function whose partial derivative is estimated. Must accept a
            1D float array.
        x:
            The point at which to evaluate the derivative.
        index:
            The coordinate to perturb.
        accuracy:
            Accuracy order of the stencil.
        eps:
            The step size multiplying the stencil offsets.
        convert:
            Applied to each function value before it is weighted, e.g. to
            check and flatten the output.

    Returns:
        ``sum(outer * f(x + inner * eps * e_index)) / (denominator * eps)``,
        a float for scalar conversions or an array otherwise.
    """
    stencil = get_stencil(accuracy)
    partial_function = get_partial_function(function, index, x)
    x0 = float(x[index])

    total = 0.0
    for outer, inner in zip(stencil.outer, stencil.inner):
        total = total + outer * convert(partial_function(x0 + inner * eps))

    return total / (stencil.denominator * eps)
