"""Environment-driven settings for laylder.

Every setting is declared once as an `EnvVar` member carrying its variable
name, default, type and accepted values. Values are read through
`get_environment()`, which resolves an explicit override first, then the
process environment (a `.env` file is loaded by the CLI), then the default.

Example:
    >>> from laylder.config import EnvVar, get_environment
    >>>
    >>> get_environment(EnvVar.NORMALIZATION_MODE)
    'independent'
    >>> get_environment(EnvVar.NORMALIZATION_MODE, override="inherit")
    'inherit'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, overload

# =============================================================================
# Settings Registry
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Declaration of one setting.

    Attributes:
        name: Variable name in the environment, e.g. "LAYLDER_LOG_LEVEL".
        default: Value used when the variable is unset or unparseable.
        var_type: Target type of the raw string (str, int or bool).
        description: One-line explanation shown by introspection.
        category: Group the setting belongs to ("engine", "logging").
        choices: Accepted values for str settings; None accepts any string.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"
    choices: tuple[str, ...] | None = None


class EnvVar(Enum):
    """Every setting laylder reads from the environment.

    Categories:
        - engine: Normalization and link-graph behaviour
        - logging: Log output configuration
    """

    # -------------------------------------------------------------------------
    # Engine
    # -------------------------------------------------------------------------
    NORMALIZATION_MODE = EnvConfig(
        name="LAYLDER_NORMALIZATION_MODE",
        default="independent",
        var_type=str,
        description="Breakpoint policy for normalization: 'independent' or 'inherit'",
        category="engine",
        choices=("independent", "inherit"),
    )
    STRICT_LINKS = EnvConfig(
        name="LAYLDER_STRICT_LINKS",
        default=False,
        var_type=bool,
        description="Treat unlinked components as 'not found' in group lookups",
        category="engine",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="LAYLDER_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    )


# =============================================================================
# Parsing
# =============================================================================

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


def _to_bool(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _to_str(raw: str, choices: tuple[str, ...] | None) -> str:
    if choices is None:
        return raw
    wanted = raw.strip().lower()
    for choice in choices:
        if choice.lower() == wanted:
            return choice
    raise ValueError(f"{raw!r} is not one of {', '.join(choices)}")


_PARSERS: dict[type, Callable[[str, EnvConfig], Any]] = {
    str: lambda raw, config: _to_str(raw, config.choices),
    int: lambda raw, _config: int(raw.strip()),
    bool: lambda raw, _config: _to_bool(raw),
}


def _parse(raw: str | None, config: EnvConfig) -> Any:
    """Turn a raw environment string into a typed value.

    Unset variables and values that fail to parse yield the default.
    """
    if raw is None:
        return config.default
    parser = _PARSERS.get(config.var_type)
    if parser is None:
        return raw
    try:
        return parser(raw, config)
    except ValueError:
        return config.default


# =============================================================================
# Lookup
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Read a setting.

    Args:
        env_var: Setting to read.
        override: Value to use instead of the environment; returned as-is.

    Returns:
        The override, else the parsed environment value, else the default.

    Example:
        >>> get_environment(EnvVar.STRICT_LINKS, override=True)
        True
    """
    if override is not None:
        return override
    config: EnvConfig = env_var.value
    return _parse(os.environ.get(config.name), config)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Return the declaration behind a setting."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List settings, optionally only those of one category."""
    return [var for var in EnvVar if category is None or var.value.category == category]


# =============================================================================
# Shortcuts
# =============================================================================


def get_normalization_mode(override: str | None = None) -> str:
    """Breakpoint normalization policy ("independent" unless configured)."""
    return get_environment(EnvVar.NORMALIZATION_MODE, override=override)


def get_log_level(override: str | None = None) -> str:
    return get_environment(EnvVar.LOG_LEVEL, override=override)


def get_strict_links(override: bool | None = None) -> bool:
    """Whether link group lookups report unlinked ids as not found."""
    return get_environment(EnvVar.STRICT_LINKS, override=override)


__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
    "get_normalization_mode",
    "get_log_level",
    "get_strict_links",
]
