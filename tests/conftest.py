"""Pytest configuration shared by the finitediff test suite."""

import os

import numpy as np
import pytest

__all__ = ["rng", "counting"]


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")
    os.environ.setdefault("VECLIB_MAXIMUM_THREADS", "1")
    os.environ.setdefault("NUMEXPR_NUM_THREADS", "1")


@pytest.fixture
def rng():
    """Seeded random generator so point/matrix draws are reproducible."""
    return np.random.default_rng(12345)


class CountingFunction:
    """Wraps a function and records every point it is evaluated at."""

    def __init__(self, function):
        self.function = function
        self.points = []

    def __call__(self, x):
        self.points.append(np.array(x, dtype=float, copy=True))
        return self.function(x)

    @property
    def calls(self) -> int:
        return len(self.points)


@pytest.fixture
def counting():
    """Return a factory wrapping a function in a :class:`CountingFunction`."""
    return CountingFunction
