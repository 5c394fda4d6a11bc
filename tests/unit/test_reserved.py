"""Tests for the reserved-number set."""

from __future__ import annotations

from cnpj_util import reserved_numbers
from cnpj_util.reserved import is_reserved


def test_has_ten_entries():
    assert len(reserved_numbers()) == 10


def test_each_entry_is_one_digit_repeated():
    for number in reserved_numbers():
        assert len(number) == 14
        assert len(set(number)) == 1


def test_covers_every_digit():
    assert {number[0] for number in reserved_numbers()} == set("0123456789")


def test_is_reserved_is_exact_match():
    assert is_reserved("00000000000000")
    assert not is_reserved("00.000.000/0000-00")
    assert not is_reserved("0000000000000")
