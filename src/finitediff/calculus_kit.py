"""Provides the CalculusKit class.

A light wrapper around the finite difference helpers that exposes a simple
API for gradient, Jacobian, and Hessian computations, and for checking
analytic derivatives against them.

Typical usage examples:

>>> import numpy as np
>>> from finitediff.calculus_kit import CalculusKit  # noqa: F401
>>> from finitediff.finite.config import DifferencingConfig  # noqa: F401
>>>
>>> def sin_function(x):
...     # scalar-valued function: f(θ) = sin(θ0)
...     return np.sin(x[0])
>>>
>>> def identity_function(x):
...     # vector-valued function: f(θ) = θ
...     return np.asarray(x, dtype=float)
>>>
>>> calc = CalculusKit(sin_function, x0=np.array([0.5]))
>>> grad = calc.gradient()
>>> hess = calc.hessian()
>>> calc.check_gradient(np.array([np.cos(0.5)]), tolerance=1e-6)
True
>>>
>>> config = DifferencingConfig(accuracy="fourth", eps=1e-4)
>>> jac = CalculusKit(identity_function, x0=np.array([1.0, 2.0]), config=config).jacobian()
"""

from collections.abc import Callable
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .calculus import finite_gradient, finite_hessian, finite_jacobian
from .compare import DiagnosticSink, compare_gradient, compare_hessian, compare_jacobian
from .finite.config import DifferencingConfig


class CalculusKit:
    """Provides access to finite difference gradient, Jacobian, and Hessian arrays."""

    def __init__(
        self,
        function: Callable[[Sequence[float] | np.ndarray], float | NDArray[np.floating]],
        x0: Sequence[float] | np.ndarray,
        config: DifferencingConfig | None = None,
    ):
        """Initialise with function, evaluation point and configuration.

        Args:
            function: Maps a 1D parameter array to a scalar (for gradient and
                Hessian) or to a 1D array (for Jacobian).
            x0: Point at which to evaluate derivatives (shape (P,)).
            config: Stencil and step size settings. Defaults to
                ``DifferencingConfig()``.
        """
        self.function = function
        self.x0 = np.asarray(x0, dtype=float)
        self.config = config if config is not None else DifferencingConfig()

    def gradient(self) -> NDArray[np.floating]:
        """Returns the gradient of a scalar-valued function."""
        return finite_gradient(
            self.x0, self.function, accuracy=self.config.accuracy, eps=self.config.eps
        )

    def jacobian(self, *, n_outputs: int | None = None) -> NDArray[np.floating]:
        """Returns the Jacobian of a vector-valued function.

        Args:
            n_outputs: Output length of the function, if known; skips the
                sizing evaluation at ``x0``.
        """
        return finite_jacobian(
            self.x0,
            self.function,
            accuracy=self.config.accuracy,
            eps=self.config.eps,
            n_outputs=n_outputs,
        )

    def hessian(self) -> NDArray[np.floating]:
        """Returns the Hessian of a scalar-valued function."""
        return finite_hessian(
            self.x0,
            self.function,
            eps=self.config.hessian_eps,
            symmetric=self.config.symmetric_hessian,
        )

    def check_gradient(
        self,
        analytic: ArrayLike,
        tolerance: float,
        label: str = "gradient",
        sink: DiagnosticSink | None = None,
    ) -> bool:
        """Compares an analytic gradient at ``x0`` with the finite difference one."""
        return compare_gradient(analytic, self.gradient(), tolerance, label, sink)

    def check_jacobian(
        self,
        analytic: ArrayLike,
        tolerance: float,
        label: str = "jacobian",
        sink: DiagnosticSink | None = None,
    ) -> bool:
        """Compares an analytic Jacobian at ``x0`` with the finite difference one.

        The analytic Jacobian's row count is used as ``n_outputs``.
        """
        analytic = np.asarray(analytic, dtype=float)
        n_outputs = analytic.shape[0] if analytic.ndim == 2 else None
        return compare_jacobian(
            analytic, self.jacobian(n_outputs=n_outputs), tolerance, label, sink
        )

    def check_hessian(
        self,
        analytic: ArrayLike,
        tolerance: float,
        label: str = "hessian",
        sink: DiagnosticSink | None = None,
    ) -> bool:
        """Compares an analytic Hessian at ``x0`` with the finite difference one."""
        return compare_hessian(analytic, self.hessian(), tolerance, label, sink)
