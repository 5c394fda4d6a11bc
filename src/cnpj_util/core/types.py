"""Type aliases used across cnpj-util."""

from __future__ import annotations

from collections.abc import Sequence

CNPJDigits = str
MaskedCNPJ = str
Weights = Sequence[int]
