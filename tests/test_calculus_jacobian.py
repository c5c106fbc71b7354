"""Unit tests for finitediff.calculus.jacobian."""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from finitediff.calculus import finite_gradient, finite_jacobian
from finitediff.finite.stencil import AccuracyOrder


def model_nonlinear(x):
    """f(x) = [sin(x0) + x1^3, exp(x0) * x1]."""
    return np.array([np.sin(x[0]) + x[1] ** 3, np.exp(x[0]) * x[1]])


def jac_nonlinear(x):
    """Analytic Jacobian of model_nonlinear."""
    return np.array(
        [
            [np.cos(x[0]), 3.0 * x[1] ** 2],
            [np.exp(x[0]) * x[1], np.exp(x[0])],
        ]
    )


@pytest.mark.parametrize("accuracy", list(AccuracyOrder))
@pytest.mark.parametrize("shape", [(1, 1), (3, 4), (5, 2)])
def test_jacobian_of_affine_map_is_the_matrix(accuracy, shape, rng):
    """Tests that the Jacobian of A x + b equals A."""
    matrix = rng.normal(size=shape)
    offset = rng.normal(size=shape[0])
    x = rng.uniform(-1.0, 1.0, size=shape[1])

    jac = finite_jacobian(x, lambda t: matrix @ t + offset, accuracy=accuracy)
    assert jac.shape == shape
    assert_allclose(jac, matrix, rtol=1e-6, atol=1e-5)


def test_jacobian_columns_follow_input_coordinates():
    """Tests that column d holds the derivative with respect to x[d]."""
    x = np.array([0.4, -0.9])
    jac = finite_jacobian(x, model_nonlinear, accuracy=AccuracyOrder.SIXTH, eps=1e-3)
    assert jac.shape == (2, 2)
    assert_allclose(jac, jac_nonlinear(x), rtol=1e-9, atol=1e-10)


def test_higher_accuracy_strictly_reduces_error():
    """Tests that with eps fixed the error shrinks as the accuracy order grows."""
    x = np.array([0.7, 1.3])
    expected = jac_nonlinear(x)
    errors = [
        np.max(np.abs(finite_jacobian(x, model_nonlinear, accuracy=a, eps=0.1) - expected))
        for a in AccuracyOrder
    ]
    assert all(e_lo > e_hi for e_lo, e_hi in zip(errors, errors[1:]))


def test_scalar_function_jacobian_is_gradient_row():
    """Tests that a scalar output gives a single-row Jacobian equal to the gradient."""
    x = np.array([0.7, 1.3])

    def f(t):
        return float(np.sin(t[0]) + t[1] ** 3)

    jac = finite_jacobian(x, f, accuracy=AccuracyOrder.FOURTH, eps=1e-3)
    grad = finite_gradient(x, f, accuracy=AccuracyOrder.FOURTH, eps=1e-3)
    assert jac.shape == (1, 2)
    assert_allclose(jac[0], grad)


@pytest.mark.parametrize("accuracy", list(AccuracyOrder))
def test_jacobian_sizing_call_costs_one_extra_evaluation(accuracy, counting):
    """Tests that without n_outputs f(x) is evaluated once, unperturbed, to size the result."""
    x = np.array([0.1, 0.2, 0.3])
    f = counting(model_nonlinear)
    finite_jacobian(x, f, accuracy=accuracy)
    assert f.calls == x.size * 2 * (accuracy.value + 1) + 1
    assert np.array_equal(f.points[0], x)


@pytest.mark.parametrize("accuracy", list(AccuracyOrder))
def test_jacobian_with_n_outputs_skips_sizing_call(accuracy, counting):
    """Tests that passing n_outputs avoids the evaluation at x."""
    x = np.array([0.1, 0.2, 0.3])
    f = counting(model_nonlinear)
    jac = finite_jacobian(x, f, accuracy=accuracy, n_outputs=2)
    assert jac.shape == (2, 3)
    assert f.calls == x.size * 2 * (accuracy.value + 1)
    assert not any(np.array_equal(p, x) for p in f.points)


def test_jacobian_with_and_without_n_outputs_agree():
    """Tests that the sizing call does not change the result."""
    x = np.array([0.7, 1.3])
    assert_allclose(
        finite_jacobian(x, model_nonlinear, n_outputs=2),
        finite_jacobian(x, model_nonlinear),
    )


def test_jacobian_rejects_wrong_n_outputs():
    """Tests that outputs disagreeing with n_outputs raise ValueError."""
    with pytest.raises(ValueError):
        finite_jacobian(np.array([0.7, 1.3]), model_nonlinear, n_outputs=3)


@pytest.mark.parametrize("n_outputs", [0, -2])
def test_jacobian_rejects_non_positive_n_outputs(n_outputs):
    """Tests that n_outputs must be positive."""
    with pytest.raises(ValueError):
        finite_jacobian(np.array([0.7, 1.3]), model_nonlinear, n_outputs=n_outputs)


def test_jacobian_rejects_changing_output_length():
    """Tests that an output whose length changes between points is rejected."""

    def unstable(x):
        return np.zeros(2) if x[0] == 1.0 else np.zeros(3)

    with pytest.raises(ValueError):
        finite_jacobian(np.array([1.0]), unstable)


def test_jacobian_rejects_matrix_output():
    """Tests that a 2D function output raises TypeError."""
    with pytest.raises(TypeError):
        finite_jacobian(np.array([1.0, 2.0]), lambda x: np.outer(x, x))


def test_jacobian_does_not_modify_input():
    """Tests that the caller's point is left untouched."""
    x = np.array([0.7, 1.3])
    before = x.copy()
    finite_jacobian(x, model_nonlinear, accuracy=AccuracyOrder.EIGHTH)
    assert np.array_equal(x, before)


@pytest.mark.parametrize("eps", [0.0, np.nan])
def test_jacobian_rejects_degenerate_step(eps):
    """Tests that a zero or non-finite step size is rejected."""
    with pytest.raises(ValueError):
        finite_jacobian(np.array([1.0]), model_nonlinear, eps=eps)


def test_jacobian_warns_on_non_finite_values(caplog):
    """Tests that non-finite entries are logged as a warning."""

    def f(x):
        return np.array([x[0], np.inf])

    with caplog.at_level(logging.WARNING, logger="finitediff"):
        jac = finite_jacobian(np.array([1.0]), f)
    assert np.isfinite(jac[0]).all()
    assert np.isnan(jac[1]).all()
    assert any("finite_jacobian" in record.getMessage() for record in caplog.records)
