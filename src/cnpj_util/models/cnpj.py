"""CNPJ value model: a validated 14-digit company registration number."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from cnpj_util.checksum import BASE_LENGTH, compute_check_digits
from cnpj_util.core.exceptions import InvalidCNPJError
from cnpj_util.core.types import CNPJDigits, MaskedCNPJ
from cnpj_util.digits import extract_digits
from cnpj_util.mask import CNPJ_LENGTH, format
from cnpj_util.reserved import is_reserved

HEADQUARTERS_BRANCH = "0001"


class CNPJ(BaseModel):
    """Immutable CNPJ, stored as 14 bare digits.

    Accepts masked or bare text; unlike ``is_valid`` the input is reduced
    to digits before any length check.
    """

    model_config = {"frozen": True}

    number: CNPJDigits

    @field_validator("number", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("CNPJ must be given as text")
        digits = extract_digits(value)
        if len(digits) != CNPJ_LENGTH:
            raise ValueError(f"expected 14 digits, found {len(digits)}")
        if is_reserved(digits):
            raise ValueError("reserved number")
        if digits[BASE_LENGTH:] != compute_check_digits(digits[:BASE_LENGTH]):
            raise ValueError("check digits do not match")
        return digits

    @classmethod
    def parse(cls, text: str) -> CNPJ:
        """Build a CNPJ, raising InvalidCNPJError instead of ValidationError."""
        try:
            return cls(number=text)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidCNPJError(text, reason) from exc

    @property
    def masked(self) -> MaskedCNPJ:
        return format(self.number)

    @property
    def base(self) -> str:
        """Company root (first 8 digits), shared by all branches."""
        return self.number[:8]

    @property
    def branch(self) -> str:
        return self.number[8:BASE_LENGTH]

    @property
    def check_digits(self) -> str:
        return self.number[BASE_LENGTH:]

    @property
    def is_headquarters(self) -> bool:
        return self.branch == HEADQUARTERS_BRANCH

    def __str__(self) -> str:
        return self.masked
