"""Comparison helpers for validating derivatives against finite differences.

A typical use is checking a hand-written gradient against
:func:`finitediff.finite_gradient`:

>>> import numpy as np
>>> from finitediff import compare_gradient, finite_gradient
>>> f = lambda x: float(np.sum(x**2))
>>> x = np.array([1.0, -2.0])
>>> compare_gradient(2 * x, finite_gradient(x, f), 1e-6, "sum of squares")
True

Elements are close enough when ``|x - y| <= tolerance * max(|x|, |y|, 1)``.
A mismatch is not an error: the comparators return ``False`` and pass one
:class:`Mismatch` per failing element to a diagnostic sink. The default
sink writes each record to the ``finitediff`` logger at ``DEBUG`` level.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from finitediff.logger import finitediff_logger
from finitediff.utils.numerics import scaled_difference
from finitediff.utils.validate import validate_same_shape, validate_tolerance

__all__ = [
    "Mismatch",
    "DiagnosticSink",
    "log_mismatch",
    "silent_sink",
    "compare_gradient",
    "compare_jacobian",
    "compare_hessian",
]


@dataclass(frozen=True)
class Mismatch:
    """One element pair that failed a comparison.

    Attributes:
        label: Caller-supplied description of what was compared.
        tolerance: Tolerance used for the comparison.
        index: Position of the element, ``(r,)`` for vectors and ``(r, c)``
            for matrices.
        x: Value from the first container.
        y: Value from the second container.
        abs_diff: ``|x - y|``.
        rel_diff_x: ``|x - y| / |x|``; ``inf`` or ``nan`` when ``x == 0``.
        rel_diff_y: ``|x - y| / |y|``; ``inf`` or ``nan`` when ``y == 0``.
    """

    label: str
    tolerance: float
    index: tuple[int, ...]
    x: float
    y: float
    abs_diff: float
    rel_diff_x: float
    rel_diff_y: float

    def format(self) -> str:
        """Returns the record as a single log line."""
        where = " ".join(f"{name}={i}" for name, i in zip(("r", "c"), self.index))
        return (
            f"{self.label} eps={self.tolerance:.3e} {where} x={self.x:.3e} y={self.y:.3e} "
            f"|x-y|={self.abs_diff:.3e} |x-y|/|x|={self.rel_diff_x:.3e} "
            f"|x-y|/|y|={self.rel_diff_y:.3e}"
        )


DiagnosticSink = Callable[[Mismatch], None]


def log_mismatch(mismatch: Mismatch) -> None:
    """Default sink: logs the record on the ``finitediff`` logger at DEBUG level."""
    finitediff_logger.debug("%s", mismatch.format())


def silent_sink(mismatch: Mismatch) -> None:
    """Sink that discards every record."""


def compare_gradient(
    x: ArrayLike,
    y: ArrayLike,
    tolerance: float,
    label: str = "",
    sink: DiagnosticSink | None = None,
) -> bool:
    """Returns whether two gradients agree elementwise within ``tolerance``.

    Args:
        x: First gradient (1D).
        y: Second gradient, same shape as ``x``.
        tolerance: Relative tolerance for values above one in magnitude,
            absolute below. Must be finite and non-negative.
        label: Text prefixed to every diagnostic.
        sink: Receives one :class:`Mismatch` per failing element. Defaults
            to :func:`log_mismatch`.

    Returns:
        ``True`` if every element pair is close enough.

    Raises:
        ValueError: If ``x`` and ``y`` are not 1D arrays of the same shape,
            or ``tolerance`` is invalid.
    """
    x_arr, y_arr = validate_same_shape(x, y, ndim=1)
    return _compare(x_arr, y_arr, validate_tolerance(tolerance), label, sink)


def compare_jacobian(
    x: ArrayLike,
    y: ArrayLike,
    tolerance: float,
    label: str = "",
    sink: DiagnosticSink | None = None,
) -> bool:
    """Returns whether two Jacobians agree elementwise within ``tolerance``.

    Same rules as :func:`compare_gradient` for 2D inputs; diagnostics carry
    the row and column of each failing element.

    Raises:
        ValueError: If ``x`` and ``y`` are not 2D arrays of the same shape,
            or ``tolerance`` is invalid.
    """
    x_arr, y_arr = validate_same_shape(x, y, ndim=2)
    return _compare(x_arr, y_arr, validate_tolerance(tolerance), label, sink)


def compare_hessian(
    x: ArrayLike,
    y: ArrayLike,
    tolerance: float,
    label: str = "",
    sink: DiagnosticSink | None = None,
) -> bool:
    """Returns whether two Hessians agree elementwise within ``tolerance``.

    Identical to :func:`compare_jacobian`.
    """
    return compare_jacobian(x, y, tolerance, label, sink)


def _compare(
    x: np.ndarray,
    y: np.ndarray,
    tolerance: float,
    label: str,
    sink: DiagnosticSink | None,
) -> bool:
    with np.errstate(invalid="ignore"):
        abs_diff, scale = scaled_difference(x, y)
    # nan differences never satisfy <=, so they count as mismatches
    close = abs_diff <= tolerance * scale
    if close.all():
        return True

    if sink is None:
        sink = log_mismatch

    # diagnostic ratios only; division by zero yields inf/nan here
    with np.errstate(divide="ignore", invalid="ignore"):
        rel_x = abs_diff / np.abs(x)
        rel_y = abs_diff / np.abs(y)

    failing = np.argwhere(~close)
    for idx in failing:
        index = tuple(int(i) for i in idx)
        sink(
            Mismatch(
                label=label,
                tolerance=tolerance,
                index=index,
                x=float(x[index]),
                y=float(y[index]),
                abs_diff=float(abs_diff[index]),
                rel_diff_x=float(rel_x[index]),
                rel_diff_y=float(rel_y[index]),
            )
        )

    finitediff_logger.debug(
        "%s: %d of %d elements differ by more than eps=%.3e.",
        label or "comparison",
        len(failing),
        close.size,
        tolerance,
    )
    return False
