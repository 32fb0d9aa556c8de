"""Plain-text trace reporter."""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from tally.assertions.result import AssertionResult
    from tally.testing.aggregate import Tally
    from tally.testing.runner import TestBlockResult


# Shared by every reporter so a trace line is always written as one unit.
output_lock = threading.Lock()


class TraceReporter:
    """Writes the ``Running test`` / ``Assertion passed`` / ``Assertion failed`` trace.

    Streams are looked up at write time unless given explicitly, so the
    reporter follows any later replacement of ``sys.stdout``/``sys.stderr``.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def _write_line(self, stream: TextIO, line: str) -> None:
        with output_lock:
            stream.write(line + "\n")
            stream.flush()

    def on_test_start(self, description: str) -> None:
        self._write_line(self.stdout, f"Running test: {description}")

    def on_assertion(self, result: AssertionResult) -> None:
        if result.passed:
            self._write_line(self.stdout, f"Assertion passed: {result.condition_text}")
        else:
            self._write_line(self.stderr, f"Assertion failed: {result.condition_text}")

    def on_test_complete(self, result: TestBlockResult) -> None:
        pass

    def on_summary(self, tally: Tally) -> None:
        self._write_line(
            self.stdout,
            f"{tally.passed} passed, {tally.failed} failed, {tally.errors} errors "
            f"in {len(tally.blocks)} test blocks",
        )
