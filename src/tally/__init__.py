"""tally - inline continue-on-failure checks and bounds-checked sequence helpers."""

from .assertions import AssertionResult, assert_check, check
from .errors import ConfigError, InvalidStepError, OutOfRangeError, SequenceError
from .sequences import extract_slice, generate_range
from .testing import Tally, TestBlockResult, TestStatus, reporter_scope, run_test
from .version import __version__


__all__ = [
    # Test blocks
    "run_test",
    "assert_check",
    "check",
    "AssertionResult",
    "TestBlockResult",
    "TestStatus",
    # Aggregation
    "Tally",
    "reporter_scope",
    # Sequences
    "extract_slice",
    "generate_range",
    # Errors
    "SequenceError",
    "OutOfRangeError",
    "InvalidStepError",
    "ConfigError",
    "__version__",
]
