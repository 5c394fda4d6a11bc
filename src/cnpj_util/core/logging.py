"""Logger setup for the cnpj_util hierarchy."""

from __future__ import annotations

import logging

from cnpj_util.core.config import CNPJSettings

LOGGER_NAME = "cnpj_util"


def configure_logging(settings: CNPJSettings | None = None) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger and return it.

    Handlers are left to the host application.
    """
    if settings is None:
        settings = CNPJSettings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())
    return logger
