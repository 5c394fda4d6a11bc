"""Modulo-11 check digits for CNPJ numbers.

The first check digit is weighted over the 12 base digits, the second over
the base digits plus the first check digit.
"""

from __future__ import annotations

from collections.abc import Sequence

from cnpj_util.core.exceptions import ChecksumInputError, MalformedCNPJError
from cnpj_util.core.types import Weights

FIRST_DIGIT_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_DIGIT_WEIGHTS: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

BASE_LENGTH = len(FIRST_DIGIT_WEIGHTS)


def check_sum(digits: Sequence[int], weights: Weights) -> int:
    """Weighted modulo-11 check digit: 0 when the remainder is below 2, else 11 - remainder."""
    if len(digits) != len(weights):
        raise ChecksumInputError(len(digits), len(weights))

    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_check_digits(base: str) -> str:
    """Return the two check digits for a 12-digit CNPJ base.

    Raises:
        MalformedCNPJError: ``base`` is not exactly 12 ASCII digits.
    """
    if len(base) != BASE_LENGTH or not base.isascii() or not base.isdigit():
        raise MalformedCNPJError(base, sum(c in "0123456789" for c in base))

    values = [int(c) for c in base]
    first = check_sum(values, FIRST_DIGIT_WEIGHTS)
    second = check_sum(values + [first], SECOND_DIGIT_WEIGHTS)
    return f"{first}{second}"
