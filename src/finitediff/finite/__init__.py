"""Finite difference stencils and single-axis estimates."""

from .config import (
    DEFAULT_ACCURACY,
    DEFAULT_HESSIAN_STEP_SIZE,
    DEFAULT_STEP_SIZE,
    DifferencingConfig,
)
from .core import axis_finite_step
from .stencil import STENCILS, AccuracyOrder, Stencil, get_stencil

__all__ = [
    "AccuracyOrder",
    "Stencil",
    "STENCILS",
    "get_stencil",
    "axis_finite_step",
    "DifferencingConfig",
    "DEFAULT_ACCURACY",
    "DEFAULT_STEP_SIZE",
    "DEFAULT_HESSIAN_STEP_SIZE",
]
