"""Single-axis function views and analytic test functions."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

__all__ = [
    "get_partial_function",
    "generate_test_function",
]


def get_partial_function(
    full_function: Callable,
    variable_index: int,
    fixed_values: list | np.ndarray,
) -> Callable:
    """Returns a single-variable version of a multivariate function.

    A single parameter must be specified by index. All other parameters
    are held fixed at ``fixed_values``.

    Args:
        full_function (callable): A function of a 1D parameter array.
        variable_index (int): The index of the parameter to treat as the
            variable.
        fixed_values (list or np.ndarray): The parameter values used for
            every parameter except the one being varied.

    Returns:
        callable: A function of a single float returning the raw output of
            ``full_function``.

    Raises:
        ValueError: If ``fixed_values`` is not 1D.
        TypeError: If ``variable_index`` is not an integer.
        IndexError: If ``variable_index`` is out of bounds for the size of ``fixed_values``.
    """
    fixed_arr = np.array(fixed_values, dtype=float, copy=True)
    if fixed_arr.ndim != 1:
        raise ValueError(
            f"fixed_values must be 1D; got shape {fixed_arr.shape}."
        )
    if isinstance(variable_index, bool) or not isinstance(variable_index, (int, np.integer)):
        raise TypeError(
            f"variable_index must be an integer; got {type(variable_index).__name__}."
        )
    if variable_index < 0 or variable_index >= fixed_arr.size:
        raise IndexError(
            f"variable_index {variable_index} out of bounds for size {fixed_arr.size}."
        )

    def partial_function(x):
        params = fixed_arr.copy()
        params[variable_index] = x
        return full_function(params)

    return partial_function


def _sum_of_squares():
    def f(x):
        x = np.asarray(x, dtype=float)
        return float(np.sum(x**2))

    def grad(x):
        return 2.0 * np.asarray(x, dtype=float)

    def hess(x):
        return 2.0 * np.eye(np.asarray(x).size)

    return f, grad, hess


def _sin_cubic():
    def f(x):
        x = np.asarray(x, dtype=float)
        return float(np.sin(x[0]) + x[1] ** 3)

    def grad(x):
        x = np.asarray(x, dtype=float)
        return np.array([np.cos(x[0]), 3.0 * x[1] ** 2])

    def hess(x):
        x = np.asarray(x, dtype=float)
        return np.array([[-np.sin(x[0]), 0.0], [0.0, 6.0 * x[1]]])

    return f, grad, hess


def _rosenbrock():
    def f(x):
        x = np.asarray(x, dtype=float)
        return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))

    def grad(x):
        x = np.asarray(x, dtype=float)
        g = np.zeros_like(x)
        g[:-1] += -400.0 * x[:-1] * (x[1:] - x[:-1] ** 2) - 2.0 * (1.0 - x[:-1])
        g[1:] += 200.0 * (x[1:] - x[:-1] ** 2)
        return g

    def hess(x):
        x = np.asarray(x, dtype=float)
        n = x.size
        h = np.zeros((n, n))
        for i in range(n - 1):
            h[i, i] += 1200.0 * x[i] ** 2 - 400.0 * x[i + 1] + 2.0
            h[i + 1, i + 1] += 200.0
            h[i, i + 1] = h[i + 1, i] = -400.0 * x[i]
        return h

    return f, grad, hess


_TEST_FUNCTIONS = {
    "sum_of_squares": _sum_of_squares,
    "sin_cubic": _sin_cubic,
    "rosenbrock": _rosenbrock,
}


def generate_test_function(name: str = "sum_of_squares"):
    """Return (f, grad, hess) for a named scalar test function of a 1D array.

    Args:
        name: One of ``"sum_of_squares"``, ``"sin_cubic"`` (two parameters)
            or ``"rosenbrock"`` (at least two parameters).

    Returns:
        Tuple of callables (f, grad, hess) for testing.
    """
    try:
        return _TEST_FUNCTIONS[name]()
    except KeyError:
        raise ValueError(f"Unknown test function: {name!r}") from None
