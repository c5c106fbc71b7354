"""Configuration for finite difference derivative estimates.

This config controls which stencil the gradient and Jacobian use, which
step sizes perturb the point, and whether the Hessian exploits symmetry.
"""

from __future__ import annotations

from finitediff.finite.stencil import AccuracyOrder
from finitediff.utils.validate import validate_step_size

__all__ = [
    "DEFAULT_ACCURACY",
    "DEFAULT_STEP_SIZE",
    "DEFAULT_HESSIAN_STEP_SIZE",
    "DifferencingConfig",
]

#: Default stencil for gradients and Jacobians.
DEFAULT_ACCURACY = AccuracyOrder.SECOND
#: Default step size for gradients and Jacobians.
DEFAULT_STEP_SIZE = 1e-8
#: Default step size for Hessians; the forward mixed difference divides by eps**2.
DEFAULT_HESSIAN_STEP_SIZE = 1e-5


class DifferencingConfig:
    """Configuration for finite difference derivative estimates."""

    def __init__(
        self,
        accuracy: AccuracyOrder | int | str = DEFAULT_ACCURACY,
        eps: float = DEFAULT_STEP_SIZE,
        hessian_eps: float = DEFAULT_HESSIAN_STEP_SIZE,
        symmetric_hessian: bool = False,
    ):
        """Initialize configuration.

        Args:
            accuracy:
                Truncation order of the central stencil used for gradients
                and Jacobians. Anything accepted by
                :meth:`AccuracyOrder.coerce`, e.g. ``AccuracyOrder.FOURTH``,
                ``1`` (table index) or ``"fourth"``. Higher orders need more function
                evaluations per coordinate (``2, 4, 6, 8``).

            eps:
                Step size for gradients and Jacobians. Must be finite and
                non-zero.

            hessian_eps:
                Step size for Hessians. Must be finite and non-zero.

            symmetric_hessian:
                If ``True``, only the upper triangle of the Hessian is
                evaluated and mirrored.
        """
        self.accuracy = AccuracyOrder.coerce(accuracy)
        self.eps = validate_step_size(eps, "eps")
        self.hessian_eps = validate_step_size(hessian_eps, "hessian_eps")
        self.symmetric_hessian = bool(symmetric_hessian)

    def __repr__(self) -> str:
        return (
            f"DifferencingConfig(accuracy={self.accuracy.name}, eps={self.eps!r}, "
            f"hessian_eps={self.hessian_eps!r}, symmetric_hessian={self.symmetric_hessian})"
        )
