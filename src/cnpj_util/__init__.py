"""Formatting and validation of Brazilian CNPJ numbers."""

from __future__ import annotations

from cnpj_util.checksum import check_sum, compute_check_digits
from cnpj_util.core.config import CNPJSettings
from cnpj_util.core.exceptions import (
    ChecksumInputError,
    CNPJError,
    InvalidCNPJError,
    MalformedCNPJError,
)
from cnpj_util.digits import extract_digits
from cnpj_util.mask import format
from cnpj_util.models.cnpj import CNPJ
from cnpj_util.reserved import reserved_numbers
from cnpj_util.validation import is_valid

__all__ = [
    "CNPJ",
    "CNPJError",
    "CNPJSettings",
    "ChecksumInputError",
    "InvalidCNPJError",
    "MalformedCNPJError",
    "check_sum",
    "compute_check_digits",
    "extract_digits",
    "format",
    "is_valid",
    "reserved_numbers",
]
