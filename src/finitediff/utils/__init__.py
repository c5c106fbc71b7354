"""Utility functions for the finitediff package."""

from .numerics import max_relative_error
from .sandbox import generate_test_function, get_partial_function

__all__ = [
    "max_relative_error",
    "get_partial_function",
    "generate_test_function",
]
