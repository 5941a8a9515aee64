"""Unit tests for numeric and sequence helpers."""

import pytest

from psychoscore.utils.helpers import (
    answer_key,
    clamp,
    likert_values,
    longest_identical_run,
    mean,
    parse_int,
    percent_of,
    round_half_up,
)


class TestRoundHalfUp:
    """Test suite for round_half_up."""

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (2.49, 2),
        (9.0, 9),
        (-2.5, -2),
        (-2.6, -3),
        (0.5, 1),
    ])
    def test_ties_round_toward_positive_infinity(self, value, expected):
        assert round_half_up(value) == expected


class TestParseInt:
    """Test suite for parse_int."""

    @pytest.mark.parametrize("value,expected", [
        ("4", 4),
        ("4.7", 4),
        ("3abc", 3),
        (" -2", -2),
        ("+5", 5),
        (4.9, 4),
        (7, 7),
    ])
    def test_leading_integer_prefix(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", None, True, False, ".5"])
    def test_no_integer_prefix_gives_zero(self, value):
        assert parse_int(value) == 0


class TestAnswerKey:
    """Test suite for answer_key."""

    def test_integral_float_matches_int(self):
        assert answer_key(4.0) == answer_key(4) == "4"

    def test_none_is_empty(self):
        assert answer_key(None) == ""

    def test_strings_are_kept(self):
        assert answer_key("B") == "B"
        assert answer_key(2.5) == "2.5"


class TestSequenceHelpers:
    """Tests for run detection and small numeric helpers."""

    def test_longest_identical_run(self):
        assert longest_identical_run([]) == 0
        assert longest_identical_run(["3"]) == 1
        assert longest_identical_run(["3", "3", "4", "4", "4", "3"]) == 3

    def test_mean(self):
        assert mean([]) is None
        assert mean([4, 5]) == 4.5

    def test_percent_of(self):
        assert percent_of(1, 3) == 33
        assert percent_of(2, 3) == 67
        assert percent_of(5, 0) == 0

    def test_clamp(self):
        assert clamp(120, 0, 100) == 100
        assert clamp(-5, 0, 100) == 0
        assert clamp(50, 0, 100) == 50

    def test_likert_values_drops_out_of_range(self):
        assert likert_values([0, 1, 3, 5, 6, -2]) == [1, 3, 5]
