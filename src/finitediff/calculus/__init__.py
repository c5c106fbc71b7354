"""Calculus utilities.

Provides finite difference constructors for gradient, Jacobian, and Hessian computations.
"""

from .gradient import finite_gradient
from .hessian import finite_hessian
from .jacobian import finite_jacobian

__all__ = ["finite_gradient", "finite_jacobian", "finite_hessian"]
