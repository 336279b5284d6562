"""Logging helpers for the viewforge compiler."""

from .logging import get_logger, log_compile_event

__all__ = ["get_logger", "log_compile_event"]
