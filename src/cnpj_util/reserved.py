"""Reserved CNPJ numbers: well-formed but never issued."""

from __future__ import annotations

from cnpj_util.mask import CNPJ_LENGTH

RESERVED_NUMBERS: frozenset[str] = frozenset(str(d) * CNPJ_LENGTH for d in range(10))


def reserved_numbers() -> frozenset[str]:
    """The ten all-equal-digit sentinels, '00000000000000' to '99999999999999'."""
    return RESERVED_NUMBERS


def is_reserved(digits: str) -> bool:
    return digits in RESERVED_NUMBERS
