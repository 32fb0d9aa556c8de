"""Colored trace reporter built on rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from tally.reports.trace import output_lock

if TYPE_CHECKING:
    from tally.assertions.result import AssertionResult
    from tally.testing.aggregate import Tally
    from tally.testing.runner import TestBlockResult


class ConsoleReporter:
    """Same trace tags as :class:`TraceReporter`, styled for a terminal.

    ``verbosity`` below zero hides passed assertions; above zero adds a
    per-block status line with its duration.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        verbosity: int = 0,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.verbosity = verbosity

    def on_test_start(self, description: str) -> None:
        with output_lock:
            self.console.print(f"[bold]Running test:[/bold] {escape(description)}")

    def on_assertion(self, result: AssertionResult) -> None:
        label = escape(result.condition_text)
        with output_lock:
            if result.passed:
                if self.verbosity >= 0:
                    self.console.print(f"  [green]Assertion passed:[/green] {label}")
            else:
                self.err_console.print(f"  [red]Assertion failed:[/red] {label}")

    def on_test_complete(self, result: TestBlockResult) -> None:
        if self.verbosity <= 0:
            return
        color = {"passed": "green", "failed": "red", "error": "yellow"}[result.status.value]
        with output_lock:
            self.console.print(
                f"  [{color}]{result.status.value.upper()}[/{color}] "
                f"{escape(result.description)} ({result.duration_ms:.1f} ms)"
            )

    def on_summary(self, tally: Tally) -> None:
        color = "green" if tally.ok else "red"
        with output_lock:
            self.console.print(
                f"[{color}]{tally.passed} passed, {tally.failed} failed, "
                f"{tally.errors} errors[/{color}] in {len(tally.blocks)} test blocks"
            )
