"""Tests for tally.sequences."""

import math

import pytest

from tally.errors import InvalidStepError, OutOfRangeError, SequenceError
from tally.sequences import extract_slice, generate_range


NUMS = [10, 20, 30, 40, 50]


class TestExtractSlice:
    def test_middle_slice(self):
        assert extract_slice(NUMS, 1, 4) == [20, 30, 40]

    def test_full_copy(self):
        assert extract_slice(NUMS, 0, len(NUMS)) == NUMS

    def test_single_element(self):
        assert extract_slice(NUMS, 2, 3) == [30]

    @pytest.mark.parametrize(
        ("start", "end"),
        [(0, 1), (0, 5), (1, 4), (3, 5), (4, 5)],
    )
    def test_elements_follow_source_offsets(self, start, end):
        result = extract_slice(NUMS, start, end)
        assert len(result) == end - start
        assert all(result[i] == NUMS[start + i] for i in range(len(result)))

    def test_result_does_not_alias_source(self):
        source = [1, 2, 3]
        result = extract_slice(source, 0, 3)

        result.append(4)
        source[0] = 99

        assert result == [1, 2, 3, 4]
        assert source == [99, 2, 3]

    def test_accepts_any_sequence(self):
        assert extract_slice((1, 2, 3), 1, 3) == [2, 3]
        assert extract_slice("hello", 1, 3) == ["e", "l"]

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            (4, 2),  # start after end
            (2, 2),  # empty range
            (5, 5),  # start at length
            (7, 9),  # start past length
            (0, 6),  # end past length
            (-1, 3),  # negative start
        ],
    )
    def test_rejects_invalid_offsets(self, start, end):
        with pytest.raises(OutOfRangeError) as exc_info:
            extract_slice(NUMS, start, end)

        assert exc_info.value.start == start
        assert exc_info.value.end == end
        assert exc_info.value.length == len(NUMS)

    def test_empty_source_rejects_everything(self):
        with pytest.raises(OutOfRangeError):
            extract_slice([], 0, 0)

    def test_out_of_range_error_is_catchable_as_builtin_errors(self):
        with pytest.raises(IndexError):
            extract_slice(NUMS, 4, 2)
        with pytest.raises(SequenceError):
            extract_slice(NUMS, 4, 2)

    def test_error_message_names_offsets(self):
        with pytest.raises(OutOfRangeError, match=r"Invalid slice indices: \[4:2\]"):
            extract_slice(NUMS, 4, 2)

    def test_rejects_non_integer_offsets(self):
        with pytest.raises(TypeError):
            extract_slice(NUMS, 1.0, 3)


class TestGenerateRange:
    def test_stepped_range(self):
        assert generate_range(0, 10, 2) == [0, 2, 4, 6, 8]

    def test_default_step_is_one(self):
        assert generate_range(3, 6) == [3, 4, 5]

    def test_empty_when_start_not_below_end(self):
        assert generate_range(5, 5, 1) == []
        assert generate_range(6, 5, 1) == []

    @pytest.mark.parametrize(
        ("start", "end", "step"),
        [(0, 10, 3), (-5, 5, 2), (1, 2, 10), (0, 100, 7)],
    )
    def test_forward_properties(self, start, end, step):
        values = generate_range(start, end, step)

        assert values[0] == start
        assert values[-1] < end
        assert all(b > a for a, b in zip(values, values[1:]))
        assert len(values) == math.ceil((end - start) / step)

    @pytest.mark.parametrize(("start", "end"), [(0, 10), (10, 0), (3, 3)])
    def test_zero_step_rejected(self, start, end):
        with pytest.raises(InvalidStepError) as exc_info:
            generate_range(start, end, 0)

        assert exc_info.value.step == 0
        assert isinstance(exc_info.value, ValueError)

    def test_negative_step_counts_down(self):
        assert generate_range(10, 0, -3) == [10, 7, 4, 1]

    def test_negative_step_empty_when_start_not_above_end(self):
        assert generate_range(0, 10, -1) == []
        assert generate_range(4, 4, -1) == []

    def test_negative_step_is_strictly_decreasing(self):
        values = generate_range(5, -5, -2)
        assert values == [5, 3, 1, -1, -3]
        assert all(b < a for a, b in zip(values, values[1:]))

    def test_is_deterministic(self):
        assert generate_range(0, 20, 3) == generate_range(0, 20, 3)


@pytest.mark.parametrize(
    ("start", "end", "step"),
    [(0, 10, 2), (10, 0, -3), (-4, 4, 3), (5, 5, 1), (0, 7, -1)],
)
def test_generate_range_matches_builtin_range(start, end, step):
    assert generate_range(start, end, step) == list(range(start, end, step))
