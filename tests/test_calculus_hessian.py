"""Unit tests for finitediff.calculus.hessian."""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from finitediff.calculus import finite_hessian
from finitediff.compare import compare_hessian
from finitediff.utils.sandbox import generate_test_function


def model_sum_of_squares(x):
    """f(x) = sum(x_i^2), Hessian 2I."""
    return float(np.sum(np.asarray(x) ** 2))


def model_quad_2d(x):
    """A quadratic form with a known, non-diagonal Hessian."""
    matrix = np.array([[4.0, 1.0], [1.0, 3.0]])
    return float(0.5 * x @ matrix @ x + np.array([-1.0, 2.5]) @ x + 0.3)


@pytest.mark.parametrize("n", range(1, 8))
def test_hessian_of_sum_of_squares_is_twice_identity(n, rng):
    """Tests that the Hessian of sum(x^2) is 2I independent of the size."""
    x = rng.uniform(-1.0, 1.0, size=n)
    hess = finite_hessian(x, model_sum_of_squares)
    assert hess.shape == (n, n)
    assert_allclose(hess, 2.0 * np.eye(n), atol=1e-3)


def test_hessian_of_quadratic_form():
    """Tests a quadratic form with off-diagonal entries."""
    x = np.array([0.2, -0.4])
    hess = finite_hessian(x, model_quad_2d)
    assert_allclose(hess, [[4.0, 1.0], [1.0, 3.0]], atol=1e-3)


def test_hessian_rosenbrock_from_sandbox():
    """Tests the Rosenbrock Hessian against its analytic form."""
    f, _, hess = generate_test_function("rosenbrock")
    x = np.array([1.2, 1.0, 0.8])
    assert compare_hessian(hess(x), finite_hessian(x, f), 5e-3, "rosenbrock")


def test_hessian_diagonal_is_forward_second_difference(counting):
    """Tests that H[i, i] is (f(x+2h) - 2 f(x+h) + f(x)) / h^2."""
    h = 0.1
    x = np.array([0.5])
    hess = finite_hessian(x, lambda t: float(np.exp(t[0])), eps=h)
    expected = (np.exp(0.5 + 2 * h) - 2 * np.exp(0.5 + h) + np.exp(0.5)) / h**2
    assert_allclose(hess[0, 0], expected, rtol=1e-12)


@pytest.mark.parametrize("n", [1, 2, 4])
def test_hessian_evaluation_count(n, counting):
    """Tests that the full Hessian costs 4 * n^2 evaluations."""
    f = counting(model_sum_of_squares)
    finite_hessian(np.ones(n), f)
    assert f.calls == 4 * n * n


@pytest.mark.parametrize("n", [1, 2, 4])
def test_symmetric_hessian_evaluation_count(n, counting):
    """Tests that the mirrored Hessian costs 2 * n * (n + 1) evaluations."""
    f = counting(model_sum_of_squares)
    finite_hessian(np.ones(n), f, symmetric=True)
    assert f.calls == 2 * n * (n + 1)


def test_symmetric_hessian_matches_full_upper_triangle():
    """Tests that symmetric=True mirrors the upper triangle of the full result."""
    f, _, _ = generate_test_function("sin_cubic")
    x = np.array([0.7, 1.3])
    full = finite_hessian(x, f)
    mirrored = finite_hessian(x, f, symmetric=True)
    iu = np.triu_indices(2)
    assert_allclose(mirrored[iu], full[iu])
    assert_allclose(mirrored, mirrored.T)


def test_hessian_evaluation_pattern(counting):
    """Tests the four points used for one off-diagonal entry."""
    h = 0.5
    x = np.array([1.0, 2.0])
    f = counting(model_sum_of_squares)
    finite_hessian(x, f, eps=h)
    # entries are visited row-major; (0, 1) is the second group of four
    points = f.points[4:8]
    assert_allclose(points[0], x)
    assert_allclose(points[1], [1.5, 2.5])
    assert_allclose(points[2], [1.5, 2.0])
    assert_allclose(points[3], [1.0, 2.5])


def test_hessian_does_not_modify_input():
    """Tests that the caller's point is left untouched."""
    x = np.array([0.1, 0.2, 0.3])
    before = x.copy()
    finite_hessian(x, model_sum_of_squares)
    assert np.array_equal(x, before)


def test_hessian_rejects_non_scalar_output():
    """Tests that a vector-valued function raises TypeError."""
    with pytest.raises(TypeError):
        finite_hessian(np.array([1.0, 2.0]), lambda x: x)


def test_hessian_rejects_empty_point():
    """Tests that an empty point raises ValueError."""
    with pytest.raises(ValueError):
        finite_hessian(np.array([]), model_sum_of_squares)


def test_hessian_rejects_zero_step():
    """Tests that eps == 0 is rejected instead of dividing by zero."""
    with pytest.raises(ValueError):
        finite_hessian(np.array([1.0]), model_sum_of_squares, eps=0.0)


def test_hessian_warns_on_non_finite_values(caplog):
    """Tests that non-finite entries are logged as a warning."""
    with caplog.at_level(logging.WARNING, logger="finitediff"):
        hess = finite_hessian(np.array([1.0]), lambda x: np.inf)
    assert np.isnan(hess).all()
    assert any("finite_hessian" in record.getMessage() for record in caplog.records)
