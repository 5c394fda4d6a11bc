"""CNPJ mask formatting (DD.DDD.DDD/DDDD-DD)."""

from __future__ import annotations

from cnpj_util.core.types import MaskedCNPJ
from cnpj_util.digits import extract_digits

CNPJ_LENGTH = 14

# Separator emitted before the digit at each position.
_SEPARATORS: dict[int, str] = {2: ".", 5: ".", 8: "/", 12: "-"}


def separator_for(position: int) -> str:
    return _SEPARATORS.get(position, "")


def format(text: str) -> MaskedCNPJ:  # noqa: A001
    """Mask the digits of ``text``, partially if fewer than 14 are present.

    Non-digits are discarded and digits past the 14th are ignored, so an
    already-masked value comes back unchanged.
    """
    digits = extract_digits(text)[:CNPJ_LENGTH]
    return "".join(separator_for(i) + digit for i, digit in enumerate(digits))
