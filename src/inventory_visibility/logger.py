"""Logging setup shared by the API and the command line."""

from __future__ import annotations

import logging

LOGGER_NAME = "inventory_visibility"
_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_level(level: str) -> int:
    """Map a level name, including uvicorn's ``trace``, to a logging level."""

    name = level.strip().upper()
    if name == "TRACE":
        return logging.DEBUG
    value = logging.getLevelName(name)
    if isinstance(value, int):
        return value
    raise ValueError(f"Unknown log level '{level}'")


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a console handler to the package logger once and set its level."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    if not any(handler.get_name() == LOGGER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
