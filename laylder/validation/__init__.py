"""Validation module - structural and canvas checks for layout schemas.

Example:
    >>> from laylder.validation import validate_schema, format_validation_result
    >>> result = validate_schema(schema)
    >>> print(format_validation_result(result))
"""

from .lib import (
    IssueCode,
    Severity,
    ValidationIssue,
    ValidationResult,
    format_validation_result,
    is_valid,
    validate_schema,
)

__all__ = [
    "IssueCode",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "format_validation_result",
    "is_valid",
    "validate_schema",
]
