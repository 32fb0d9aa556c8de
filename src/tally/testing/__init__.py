"""Test blocks and result aggregation."""

from .aggregate import Tally
from .context import TestContext, reporter_scope
from .runner import TestBlockResult, TestStatus, run_test


__all__ = [
    "Tally",
    "TestBlockResult",
    "TestContext",
    "TestStatus",
    "reporter_scope",
    "run_test",
]
