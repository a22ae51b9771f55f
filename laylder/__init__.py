"""laylder: multi-breakpoint canvas layout schema engine."""

from laylder.grid import analyze_grid_complexity, canvas_to_grid_positions
from laylder.links import calculate_link_groups, validate_component_links
from laylder.normalize import NormalizationMode, normalize_schema
from laylder.schema import (
    Component,
    LayoutSchema,
    create_component,
    create_empty_schema,
    dump_schema,
    export_json_schema,
    load_schema,
)
from laylder.validation import (
    ValidationResult,
    format_validation_result,
    is_valid,
    validate_schema,
)

__all__ = [
    # Schema
    "LayoutSchema",
    "Component",
    "load_schema",
    "dump_schema",
    "create_component",
    "create_empty_schema",
    "export_json_schema",
    # Normalization
    "NormalizationMode",
    "normalize_schema",
    # Validation
    "ValidationResult",
    "validate_schema",
    "is_valid",
    "format_validation_result",
    # Grid
    "canvas_to_grid_positions",
    "analyze_grid_complexity",
    # Links
    "calculate_link_groups",
    "validate_component_links",
]
