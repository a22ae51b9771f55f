"""Loggers for the layout engine, all nested under the `laylder` logger."""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "resolve_level", "setup_logging"]

ROOT_LOGGER_NAME = "laylder"


def resolve_level(level: int | str) -> int:
    """Convert a level name ("debug", "INFO") or number to a logging level.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str = logging.INFO, stream=sys.stderr) -> None:
    """Send engine log records to `stream` (stderr unless given).

    Args:
        level: Threshold, as a number or a name such as "DEBUG".
        stream: File-like object the records are written to.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the engine logger for a module, e.g. "grid" -> `laylder.grid`.

    Names already under `laylder` are used as-is, so one level set on the
    `laylder` logger covers the whole engine.

    Args:
        name: Short module name; None or "laylder" gives the root logger.

    Returns:
        The `logging.Logger` for that name.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
