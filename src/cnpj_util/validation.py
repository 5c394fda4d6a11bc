"""CNPJ validation: raw-length gate, reserved numbers, check digits."""

from __future__ import annotations

import logging

from cnpj_util.checksum import BASE_LENGTH, compute_check_digits
from cnpj_util.core.config import CNPJSettings
from cnpj_util.core.exceptions import MalformedCNPJError
from cnpj_util.digits import extract_digits
from cnpj_util.mask import CNPJ_LENGTH
from cnpj_util.reserved import is_reserved

logger = logging.getLogger(__name__)


def is_valid(text: str, *, settings: CNPJSettings | None = None) -> bool:
    """Return True when ``text`` is a bare, correctly check-digited CNPJ.

    The length gate counts raw characters, not digits, so masked input
    ('46.843.485/0001-86') is rejected. A 14-character input whose digit
    count is not 14 is handled per ``settings.on_malformed``.
    """
    if len(text) != CNPJ_LENGTH:
        logger.debug("Rejected CNPJ: raw length %d", len(text))
        return False

    digits = extract_digits(text)
    if not digits:
        logger.debug("Rejected CNPJ: no digits")
        return False
    if is_reserved(digits):
        logger.debug("Rejected CNPJ: reserved number")
        return False

    if len(digits) != CNPJ_LENGTH:
        if settings is None:
            settings = CNPJSettings()
        if settings.on_malformed == "raise":
            raise MalformedCNPJError(text, len(digits))
        logger.debug("Rejected CNPJ: %d digits in 14 characters", len(digits))
        return False

    expected = compute_check_digits(digits[:BASE_LENGTH])
    if digits[BASE_LENGTH:] != expected:
        logger.debug("Rejected CNPJ: check digits do not match")
        return False
    return True
