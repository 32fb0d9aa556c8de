"""Reporting module for tally trace output."""

from tally.reports.base import Reporter
from tally.reports.console import ConsoleReporter
from tally.reports.registry import BUILTIN_REPORTERS, reporter_class, resolve_reporter
from tally.reports.trace import TraceReporter


__all__ = [
    "BUILTIN_REPORTERS",
    "ConsoleReporter",
    "Reporter",
    "TraceReporter",
    "reporter_class",
    "resolve_reporter",
]
