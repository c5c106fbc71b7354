"""Numerical utilities shared by the comparison helpers."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "scaled_difference",
    "max_relative_error",
]


def scaled_difference(
    a: ArrayLike,
    b: ArrayLike,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Returns the elementwise absolute difference and its comparison scale.

    The scale is ``max(|a|, |b|, 1)``, which makes a single tolerance act
    relative for large values and absolute for values below one.

    Args:
        a: First array-like input.
        b: Second array-like input, same shape as ``a``.

    Returns:
        Tuple ``(abs_diff, scale)`` with the shape of the inputs.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    abs_diff = np.abs(a - b)
    scale = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
    return abs_diff, scale


def max_relative_error(a: ArrayLike, b: ArrayLike) -> float:
    """Computes the relative error metric between a and b.

    This metric is defined as the maximum over all components of a and b of
    the absolute difference divided by the maximum of 1.0 and the absolute values of
    a and b. It is the smallest tolerance for which the comparators report a match.

    Args:
        a: First array-like input.
        b: Second array-like input.

    Returns:
        The relative error metric as a float (0.0 for empty inputs).
    """
    abs_diff, scale = scaled_difference(a, b)
    if abs_diff.size == 0:
        return 0.0
    return float(np.max(abs_diff / scale))
