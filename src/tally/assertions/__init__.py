"""Assertion primitives that report instead of raising."""

from .base import assert_check, check
from .result import AssertionResult

__all__ = [
    "AssertionResult",
    "assert_check",
    "check",
]
