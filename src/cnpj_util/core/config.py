"""Library configuration using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class CNPJSettings(BaseSettings):
    """Validation and logging settings."""

    model_config = {"env_prefix": "CNPJ_UTIL_"}

    log_level: str = "INFO"
    # "reject": is_valid returns False; "raise": MalformedCNPJError
    on_malformed: Literal["reject", "raise"] = "reject"
