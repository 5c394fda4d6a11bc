"""Tests for CNPJ mask formatting."""

from __future__ import annotations

import pytest

from cnpj_util import format
from cnpj_util.mask import separator_for


class TestFormat:
    def test_empty_string(self):
        assert format("") == ""

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            ("4", "4"),
            ("46", "46"),
            ("468", "46.8"),
            ("4684", "46.84"),
            ("46843", "46.843"),
            ("468434", "46.843.4"),
            ("4684348", "46.843.48"),
            ("46843485", "46.843.485"),
            ("468434850", "46.843.485/0"),
            ("4684348500", "46.843.485/00"),
            ("46843485000", "46.843.485/000"),
            ("468434850001", "46.843.485/0001"),
            ("4684348500018", "46.843.485/0001-8"),
            ("46843485000186", "46.843.485/0001-86"),
        ],
    )
    def test_partial_masks(self, digits, expected):
        result = format(digits)
        assert result == expected
        assert result[-1].isdigit()

    def test_ignores_digits_after_the_fourteenth(self):
        assert format("468434850001860000000000") == "46.843.485/0001-86"

    def test_removes_non_numeric_characters(self):
        assert format("46.?ABC843.485/0001-86abc") == "46.843.485/0001-86"

    def test_only_non_numeric_characters(self):
        assert format("abc./-") == ""

    def test_already_masked_value_is_unchanged(self):
        assert format("46.843.485/0001-86") == "46.843.485/0001-86"


def test_separator_positions():
    assert [separator_for(i) for i in range(14)] == [
        "", "", ".", "", "", ".", "", "", "/", "", "", "", "-", "",
    ]
