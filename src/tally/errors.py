"""Error types raised by tally."""


class SequenceError(ValueError):
    """Base class for rejected slice and range requests."""


class OutOfRangeError(SequenceError, IndexError):
    """Raised when slice offsets fall outside the source sequence."""

    def __init__(self, start: int, end: int, length: int) -> None:
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"Invalid slice indices: [{start}:{end}] for sequence of length {length}"
        )


class InvalidStepError(SequenceError):
    """Raised when a range is requested with a step that never advances."""

    def __init__(self, start: int, end: int, step: int) -> None:
        self.start = start
        self.end = end
        self.step = step
        super().__init__(f"Range step must be nonzero: range({start}, {end}, {step})")


class ConfigError(Exception):
    """Raised when tally configuration is invalid."""
