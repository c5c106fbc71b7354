"""Provides all finitediff methods."""

from importlib.metadata import PackageNotFoundError, version

from finitediff.calculus import finite_gradient, finite_hessian, finite_jacobian
from finitediff.calculus_kit import CalculusKit
from finitediff.compare import (
    Mismatch,
    compare_gradient,
    compare_hessian,
    compare_jacobian,
    log_mismatch,
    silent_sink,
)
from finitediff.finite.config import DifferencingConfig
from finitediff.finite.stencil import AccuracyOrder

try:
    __version__ = version("finitediff")
except PackageNotFoundError:
    pass

__all__ = [
    "AccuracyOrder",
    "CalculusKit",
    "DifferencingConfig",
    "Mismatch",
    "compare_gradient",
    "compare_hessian",
    "compare_jacobian",
    "finite_gradient",
    "finite_hessian",
    "finite_jacobian",
    "log_mismatch",
    "silent_sink",
]
