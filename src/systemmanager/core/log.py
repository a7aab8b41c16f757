"""Logging del SDK.

Los módulos piden su logger con `get_logger("area")` y cuelgan todos de
`systemmanager`. La librería nunca toca el root logger; quien la usa decide si
llama a `configure_logging` (handler Rich) o enruta los registros por su cuenta.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from systemmanager.core.config import AppSettings

ROOT_LOGGER_NAME = "systemmanager"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(area: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{area}")


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Adjunta un `RichHandler` al logger del SDK (idempotente)."""

    settings = settings or AppSettings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
