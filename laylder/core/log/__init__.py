"""Module loggers and CLI log setup for the layout engine."""

from .lib import get_logger, resolve_level, setup_logging

__all__ = ["get_logger", "resolve_level", "setup_logging"]
