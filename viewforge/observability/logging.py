"""Centralised logging helpers for viewforge."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str = "viewforge") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def resolve_level(value: Optional[str]) -> int:
    return _LEVELS.get((value or "info").lower(), logging.INFO)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger (idempotent)."""

    logger = get_logger("viewforge")
    logger.setLevel(resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def log_compile_event(
    event: str,
    *,
    message: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    **data: Any,
) -> None:
    """Emit a structured compiler log entry."""

    target_logger = logger or get_logger("viewforge.compile")
    target_logger.log(
        level,
        message or event.replace("_", " ").capitalize(),
        extra={"viewforge_event": event, "viewforge_data": dict(data)},
    )
