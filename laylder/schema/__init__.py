"""Schema module - authoritative source for the multi-breakpoint layout document.

This module provides:
- Pydantic models for components, breakpoints and per-breakpoint layouts
- Enumerations for semantic tags, positioning and layout modes
- Default grid sizes and per-tag component templates
- Loading, dumping and construction helpers

Example usage:
    >>> from laylder.schema import create_empty_schema, create_component
    >>> schema = create_empty_schema()
    >>> header = create_component("header", existing=schema.components)
    >>> header.id
    'c1'
"""

from .lib import (
    COMPONENT_ID_PATTERN,
    COMPONENT_NAME_PATTERN,
    COMPONENT_TEMPLATES,
    DEFAULT_GRID_CONFIG,
    DEFAULT_MIN_WIDTHS,
    GRID_CONSTRAINTS,
    SCHEMA_VERSION,
    AlignItems,
    Breakpoint,
    CanvasLayout,
    Component,
    ComponentLayout,
    ComponentPositioning,
    ComponentStyling,
    ComponentTemplate,
    ContainerConfig,
    ContainerLayoutConfig,
    ContainerMaxWidth,
    FlexConfig,
    FlexDirection,
    FlexWrap,
    GridAutoFlow,
    GridConfig,
    GridSize,
    Justify,
    LayoutConfig,
    LayoutSchema,
    LayoutStructure,
    LayoutType,
    PositioningType,
    PositionOffsets,
    ResponsiveBehaviorConfig,
    SchemaModel,
    SemanticTag,
    create_component,
    create_empty_schema,
    create_schema_with_breakpoint,
    dump_schema,
    export_json_schema,
    generate_component_id,
    get_component_template,
    is_schema_dict,
    load_schema,
)

__all__ = [
    # Constants
    "SCHEMA_VERSION",
    "COMPONENT_ID_PATTERN",
    "COMPONENT_NAME_PATTERN",
    # Enums
    "SemanticTag",
    "PositioningType",
    "LayoutType",
    "LayoutStructure",
    "FlexDirection",
    "Justify",
    "AlignItems",
    "FlexWrap",
    "GridAutoFlow",
    "ContainerMaxWidth",
    # Models
    "SchemaModel",
    "PositionOffsets",
    "ComponentPositioning",
    "FlexConfig",
    "GridConfig",
    "ContainerConfig",
    "ComponentLayout",
    "ComponentStyling",
    "ResponsiveBehaviorConfig",
    "CanvasLayout",
    "Component",
    "ContainerLayoutConfig",
    "LayoutConfig",
    "Breakpoint",
    "LayoutSchema",
    # Defaults
    "GridSize",
    "DEFAULT_GRID_CONFIG",
    "DEFAULT_MIN_WIDTHS",
    "GRID_CONSTRAINTS",
    "ComponentTemplate",
    "COMPONENT_TEMPLATES",
    # Construction
    "get_component_template",
    "generate_component_id",
    "create_component",
    "create_empty_schema",
    "create_schema_with_breakpoint",
    # Serialization
    "load_schema",
    "dump_schema",
    "is_schema_dict",
    "export_json_schema",
]
