"""Package logger setup."""

from __future__ import annotations

import logging

from nhsnumber.core.config import ValidatorSettings

PACKAGE_LOGGER = "nhsnumber"


def configure_logging(settings: ValidatorSettings | None = None) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger and return it.

    Only the ``nhsnumber`` logger is touched; handlers and the root logger
    are left to the host application.
    """
    if settings is None:
        settings = ValidatorSettings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level.upper())
    return logger
