"""Stencil definitions for first-derivative central finite differences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "AccuracyOrder",
    "Stencil",
    "STENCILS",
    "get_stencil",
    "truncation_order_from_coeffs",
]


class AccuracyOrder(Enum):
    """Truncation-error order of a central first-derivative stencil.

    The value of each member is its index in :data:`STENCILS`.
    """

    SECOND = 0
    FOURTH = 1
    SIXTH = 2
    EIGHTH = 3

    @property
    def order(self) -> int:
        """The truncation order (2, 4, 6 or 8)."""
        return 2 * (self.value + 1)

    @property
    def num_points(self) -> int:
        """Number of function evaluations per perturbed coordinate."""
        return 2 * (self.value + 1)

    @classmethod
    def coerce(cls, value: AccuracyOrder | int | str) -> AccuracyOrder:
        """Converts a member, table index or name into an :class:`AccuracyOrder`.

        Accepted inputs are a member itself, its table index ``0..3`` (so
        ``1`` is ``FOURTH``) or a member name such as ``"fourth"``
        (case-insensitive).

        Args:
            value: The value to convert.

        Returns:
            The matching member.

        Raises:
            TypeError: If ``value`` is not a member, an integer or a string.
            ValueError: If ``value`` does not name a supported accuracy order.
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass
        if isinstance(value, (bool, np.bool_)):
            raise TypeError("accuracy must be an AccuracyOrder, int or str; got bool.")
        if isinstance(value, (int, np.integer)):
            i = int(value)
            if 0 <= i < len(cls):
                return cls(i)
            raise ValueError(
                f"Unsupported accuracy order index: {i}. "
                f"Must be in [0, {len(cls) - 1}]."
            )
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            raise ValueError(
                f"Unsupported accuracy order: {value!r}. "
                f"Must be one of {[m.name.lower() for m in cls]}."
            )
        raise TypeError(
            f"accuracy must be an AccuracyOrder, int or str; got {type(value).__name__}."
        )


@dataclass(frozen=True)
class Stencil:
    """Central first-derivative stencil ``sum(outer * f(x + inner * h)) / (denominator * h)``.

    Attributes:
        outer: Weights applied to the function values.
        inner: Offsets, in multiples of the step size, of the sampled points.
        denominator: Scale dividing the weighted sum (before the step size).
    """

    outer: tuple[float, ...]
    inner: tuple[float, ...]
    denominator: float

    def __post_init__(self):
        if len(self.outer) != len(self.inner):
            raise ValueError(
                f"outer and inner coefficients must have the same length; "
                f"got {len(self.outer)} and {len(self.inner)}."
            )
        if 0.0 in self.inner:
            raise ValueError("inner offsets must not contain zero.")
        if sorted(self.inner) != sorted(-c for c in self.inner):
            raise ValueError("inner offsets must be symmetric around zero.")

    @property
    def weights(self) -> NDArray[np.float64]:
        """Normalised weights ``outer / denominator`` for a unit step size."""
        return np.asarray(self.outer, dtype=np.float64) / self.denominator

    @property
    def offsets(self) -> NDArray[np.float64]:
        """Offsets as a float array."""
        return np.asarray(self.inner, dtype=np.float64)


# See https://en.wikipedia.org/wiki/Finite_difference_coefficient
#: Stencils indexed by :class:`AccuracyOrder`.
STENCILS: dict[AccuracyOrder, Stencil] = {
    AccuracyOrder.SECOND: Stencil(
        outer=(1.0, -1.0),
        inner=(1.0, -1.0),
        denominator=2.0,
    ),
    AccuracyOrder.FOURTH: Stencil(
        outer=(1.0, -8.0, 8.0, -1.0),
        inner=(-2.0, -1.0, 1.0, 2.0),
        denominator=12.0,
    ),
    AccuracyOrder.SIXTH: Stencil(
        outer=(-1.0, 9.0, -45.0, 45.0, -9.0, 1.0),
        inner=(-3.0, -2.0, -1.0, 1.0, 2.0, 3.0),
        denominator=60.0,
    ),
    AccuracyOrder.EIGHTH: Stencil(
        outer=(3.0, -32.0, 168.0, -672.0, 672.0, -168.0, 32.0, -3.0),
        inner=(-4.0, -3.0, -2.0, -1.0, 1.0, 2.0, 3.0, 4.0),
        denominator=840.0,
    ),
}


def get_stencil(accuracy: AccuracyOrder | int | str) -> Stencil:
    """Returns the stencil for an accuracy order.

    Args:
        accuracy: Anything accepted by :meth:`AccuracyOrder.coerce`.

    Returns:
        The constant stencil for that order.
    """
    return STENCILS[AccuracyOrder.coerce(accuracy)]


def truncation_order_from_coeffs(
    offsets: NDArray[np.float64],
    coeffs: NDArray[np.float64],
    deriv_order: int,
    tol: float = 1e-12,
) -> int:
    """Computes the truncation order of a stencil from its moments.

    The first moment ``sum(coeffs * offsets**r)`` with ``r > deriv_order``
    that does not vanish determines the leading error term.

    Args:
        offsets: Offsets of the stencil points.
        coeffs: Normalised stencil weights.
        deriv_order: The derivative order the stencil approximates.
        tol: Numerical tolerance below which a moment counts as zero.

    Returns:
        The truncation order.

    Raises:
        RuntimeError: If no non-vanishing moment is found.
    """
    offsets = np.asarray(offsets, dtype=np.float64)
    coeffs = np.asarray(coeffs, dtype=np.float64)

    max_r = 40  # plenty for 8 points
    for r in range(deriv_order + 1, max_r + 1):
        moment = float(np.dot(coeffs, offsets**r))
        if abs(moment) > tol:
            return r - deriv_order
    raise RuntimeError("Could not detect truncation order.")
