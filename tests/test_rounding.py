"""Tests for src.draft_luck.rounding."""

import pytest

from src.draft_luck.config import ROUND_DECIMALS
from src.draft_luck.rounding import (
    decimal_scale,
    format_percentage,
    round_half_up,
    round_to_places,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3), (3.5, 4), (2.4, 2), (0.0, 0), (-2.5, -2), (-2.6, -3)],
    )
    def test_ties_go_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round(self):
        # Built-in round() sends 2.5 to the even neighbour.
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3


class TestRoundToPlaces:
    def test_tie_rounds_up(self):
        assert round_to_places(0.25) == 0.3

    def test_repeating_fraction(self):
        assert round_to_places(7 / 3) == 2.3

    def test_already_rounded(self):
        assert round_to_places(2.5) == 2.5

    def test_other_precision(self):
        # 0.125 * 100 = 12.5 exactly -> 13
        assert round_to_places(0.125, decimals=2) == 0.13

    def test_default_precision_follows_config(self):
        assert round_to_places(1 / 3) == round_half_up(
            (1 / 3) * 10 ** ROUND_DECIMALS
        ) / 10 ** ROUND_DECIMALS


class TestDecimalScale:
    def test_default_follows_config(self):
        assert decimal_scale() == 10 ** ROUND_DECIMALS

    def test_explicit_places(self):
        assert decimal_scale(0) == 1
        assert decimal_scale(2) == 100


class TestFormatPercentage:
    def test_whole_number_gets_one_decimal(self):
        assert format_percentage(100.0) == "100.0%"

    def test_zero(self):
        assert format_percentage(0.0) == "0.0%"

    def test_exact_binary_tie_rounds_up(self):
        assert format_percentage(0.25) == "0.3%"

    def test_uses_exact_binary_value(self):
        """12.35 is stored as 12.3499999..., so it rounds down."""
        assert format_percentage(12.35) == "12.3%"

    def test_inverted_percentile(self):
        assert format_percentage(100 - 66.7) == "33.3%"

    def test_custom_decimals(self):
        assert format_percentage(33.333, decimals=2) == "33.33%"
