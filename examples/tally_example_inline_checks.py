"""Example: inline checks that report and keep going.

Run with:
    tally run examples/tally_example_inline_checks.py

The script exits 1 under ``tally run`` because one check fails on purpose.
"""

from tally import OutOfRangeError, check, extract_slice, generate_range, run_test


def slices():
    nums = [10, 20, 30, 40, 50]
    check(extract_slice(nums, 1, 4) == [20, 30, 40])
    check(extract_slice(nums, 0, len(nums)) == nums)

    try:
        extract_slice(nums, 4, 2)
    except OutOfRangeError as exc:
        check(exc.length == 5)


def ranges():
    check(generate_range(0, 10, 2) == [0, 2, 4, 6, 8])
    check(generate_range(10, 0, -5) == [10, 5])
    # Deliberately wrong: the end is exclusive.
    check(generate_range(0, 3) == [0, 1, 2, 3])


run_test("Slice Test", slices)
run_test("Range Test", ranges)
