"""Demonstration programs exercising the test blocks and sequence helpers."""

from __future__ import annotations

import sys
from collections.abc import Callable

from tally.assertions import check
from tally.errors import SequenceError
from tally.sequences import extract_slice, generate_range
from tally.testing import run_test


def add(a: int, b: int) -> int:
    return a + b


def is_even(number: int) -> bool:
    return number % 2 == 0


def inline_testing() -> None:
    def addition() -> None:
        check(add(2, 3) == 5)
        check(add(-1, 1) == 0)

    def even_number() -> None:
        check(is_even(4) == True)  # noqa: E712
        check(is_even(5) == False)  # noqa: E712

    def string_equality() -> None:
        hello = "Hello"
        world = "World"
        check(hello + " " + world == "Hello World")

    run_test("Addition Test", addition)
    run_test("Even Number Test", even_number)
    run_test("String Equality Test", string_equality)


def slices_ranges() -> None:
    nums = [10, 20, 30, 40, 50]
    try:
        sub_array = extract_slice(nums, 1, 4)
        print("Sliced Array:", *sub_array)
    except SequenceError as exc:
        print(exc, file=sys.stderr)

    print("Range-based Loop:", *generate_range(0, 10, 2))


DEMOS: dict[str, Callable[[], None]] = {
    "inline-testing": inline_testing,
    "slices-ranges": slices_ranges,
}
