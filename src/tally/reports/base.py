"""Base reporter protocol for tally trace output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tally.assertions.result import AssertionResult
    from tally.testing.aggregate import Tally
    from tally.testing.runner import TestBlockResult


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the interface for trace reporters.

    Every method must write each line in full before returning so that
    lines from concurrent callers never interleave.
    """

    def on_test_start(self, description: str) -> None:
        """Called before a test block body runs."""
        ...

    def on_assertion(self, result: AssertionResult) -> None:
        """Called once per checked condition."""
        ...

    def on_test_complete(self, result: TestBlockResult) -> None:
        """Called after a test block body returns or raises."""
        ...

    def on_summary(self, tally: Tally) -> None:
        """Called by aggregating callers once counting is finished."""
        ...
