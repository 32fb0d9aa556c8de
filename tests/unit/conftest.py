"""Shared fixtures for unit tests."""

import pytest

from tally.testing import reporter_scope


class RecordingReporter:
    """Reporter that keeps every event instead of printing it."""

    def __init__(self, verbosity: int = 0):
        self.verbosity = verbosity
        self.events: list[tuple[str, object]] = []

    def on_test_start(self, description) -> None:
        self.events.append(("start", description))

    def on_assertion(self, result) -> None:
        self.events.append(("assertion", result))

    def on_test_complete(self, result) -> None:
        self.events.append(("complete", result))

    def on_summary(self, tally) -> None:
        self.events.append(("summary", tally))


@pytest.fixture
def recording_reporter():
    """Route trace output of the test into a RecordingReporter."""
    reporter = RecordingReporter()
    with reporter_scope(reporter):
        yield reporter
