"""Bounds-checked slicing and stepped range generation."""

from __future__ import annotations

import logging
import operator
from collections.abc import Sequence
from typing import TypeVar

from tally.errors import InvalidStepError, OutOfRangeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def extract_slice(source: Sequence[T], start: int, end: int) -> list[T]:
    """Return a copy of ``source[start:end]``, rejecting invalid offsets.

    Unlike built-in slicing, out-of-range offsets are never clamped.

    Parameters
    ----------
    source:
        Ordered sequence to copy from.
    start:
        First offset to include. Must satisfy ``0 <= start < len(source)``.
    end:
        Offset one past the last element. Must satisfy
        ``start < end <= len(source)``.

    Returns:
    -------
    list
        New list holding ``end - start`` elements in source order.

    Raises:
    ------
    OutOfRangeError
        If the offsets do not describe a non-empty range inside ``source``.
    """
    start = operator.index(start)
    end = operator.index(end)
    length = len(source)

    if start < 0 or end < 0 or start >= length or end > length or start >= end:
        logger.debug("Rejected slice [%d:%d] of length %d", start, end, length)
        raise OutOfRangeError(start, end, length)

    return [source[i] for i in range(start, end)]


def generate_range(start: int, end: int, step: int = 1) -> list[int]:
    """Materialize the arithmetic progression from ``start`` towards ``end``.

    ``end`` is exclusive. A positive step counts up while the value is below
    ``end``; a negative step counts down while it is above ``end``.

    Raises:
    ------
    InvalidStepError
        If ``step`` is zero.
    """
    start = operator.index(start)
    end = operator.index(end)
    step = operator.index(step)

    if step == 0:
        logger.debug("Rejected zero-step range(%d, %d)", start, end)
        raise InvalidStepError(start, end, step)

    return list(range(start, end, step))


__all__ = ["extract_slice", "generate_range"]
