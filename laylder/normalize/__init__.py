"""Schema normalizer - canonical breakpoint order and document order.

Example:
    >>> from laylder.normalize import normalize_schema
    >>> normalized = normalize_schema(schema)               # independent breakpoints
    >>> cascaded = normalize_schema(schema, mode="inherit")  # mobile-first cascade
"""

from .lib import NormalizationMode, normalize_schema

__all__ = ["NormalizationMode", "normalize_schema"]
