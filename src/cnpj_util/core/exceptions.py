"""cnpj-util exception hierarchy."""

from __future__ import annotations


class CNPJError(Exception):
    """Base exception for all cnpj-util errors."""


class MalformedCNPJError(CNPJError):
    """Input passed the raw-length gate but does not hold 14 digits."""

    def __init__(self, value: str, digit_count: int) -> None:
        self.value = value
        self.digit_count = digit_count
        super().__init__(f"Malformed CNPJ: expected 14 digits, found {digit_count}")


class InvalidCNPJError(CNPJError):
    """CNPJ failed validation (reserved number or wrong check digits)."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid CNPJ {value!r}: {reason}")


class ChecksumInputError(CNPJError):
    """Digit and weight sequences passed to the checksum differ in length."""

    def __init__(self, digit_count: int, weight_count: int) -> None:
        self.digit_count = digit_count
        self.weight_count = weight_count
        super().__init__(f"Checksum needs equal lengths: {digit_count} digits, {weight_count} weights")
