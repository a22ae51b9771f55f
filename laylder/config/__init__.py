"""Centralized configuration management for laylder.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from laylder.config import EnvVar, get_environment
    >>>
    >>> mode = get_environment(EnvVar.NORMALIZATION_MODE)  # "independent"
    >>> level = get_environment(EnvVar.LOG_LEVEL, override="DEBUG")

Environment Variable Categories:
    engine: Normalization policy and link lookup strictness
    logging: Log level for the CLI
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    get_normalization_mode,
    get_strict_links,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_normalization_mode",
    "get_log_level",
    "get_strict_links",
    # Introspection
    "list_environment_variables",
]
