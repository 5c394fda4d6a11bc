"""Digit extraction from free-form text."""

from __future__ import annotations

import re

from cnpj_util.core.types import CNPJDigits

_NON_DIGIT = re.compile(r"[^0-9]")


def extract_digits(text: str) -> CNPJDigits:
    """Return the ASCII digits of ``text`` in their original order.

    Example: '46.843.485/0001-86' -> '46843485000186'
    """
    return _NON_DIGIT.sub("", text)
