"""Authoritative Schema Module for multi-breakpoint canvas layouts.

This module is the single source of truth for the layout document that the
visual builder produces and every other laylder module consumes. It provides:
- Enumerations for every externally visible vocabulary (semantic tags,
  positioning and layout types, layout structures)
- Pydantic models for the document (camelCase on the wire)
- Immutable default tables (grid sizes per breakpoint kind, component
  templates per semantic tag)
- Loading, dumping and construction helpers

All schema-related queries should route through this module.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

SCHEMA_VERSION = "2.0"

COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*\Z")
COMPONENT_ID_PATTERN = re.compile(r"^c(\d+)\Z")

# Canvas coordinates may arrive fractional from drag handlers
Number = int | float


# === ENUMERATIONS ===


class SemanticTag(str, Enum):
    """HTML5 semantic tag a component renders as."""

    HEADER = "header"
    NAV = "nav"
    MAIN = "main"
    ASIDE = "aside"
    FOOTER = "footer"
    SECTION = "section"
    ARTICLE = "article"
    DIV = "div"
    FORM = "form"


class PositioningType(str, Enum):
    """CSS positioning strategy for a component.

    - STATIC: Normal document flow (default)
    - RELATIVE: Offset from its own normal position
    - FIXED: Pinned to the viewport (typical for headers)
    - STICKY: Pinned once scrolled past (headers, sidebars)
    - ABSOLUTE: Positioned against the nearest positioned ancestor
    """

    STATIC = "static"
    RELATIVE = "relative"
    FIXED = "fixed"
    STICKY = "sticky"
    ABSOLUTE = "absolute"


class LayoutType(str, Enum):
    """Internal layout mode of a component.

    - NONE: Plain wrapper, no layout of its own
    - FLEX: One-dimensional flexbox flow
    - GRID: Two-dimensional CSS grid
    - CONTAINER: Centered, width-limited content container
    """

    NONE = "none"
    FLEX = "flex"
    GRID = "grid"
    CONTAINER = "container"


class LayoutStructure(str, Enum):
    """Common page structures a breakpoint layout can declare."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    SIDEBAR_MAIN = "sidebar-main"
    SIDEBAR_MAIN_SIDEBAR = "sidebar-main-sidebar"
    CUSTOM = "custom"


class FlexDirection(str, Enum):
    """Main axis of a flex layout (CSS flex-direction)."""

    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row-reverse"
    COLUMN_REVERSE = "column-reverse"


class Justify(str, Enum):
    """Main-axis distribution (CSS justify-content)."""

    START = "start"
    END = "end"
    CENTER = "center"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


class AlignItems(str, Enum):
    """Cross-axis alignment (CSS align-items)."""

    START = "start"
    END = "end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class FlexWrap(str, Enum):
    """Wrap behaviour of a flex layout (CSS flex-wrap)."""

    WRAP = "wrap"
    NOWRAP = "nowrap"
    WRAP_REVERSE = "wrap-reverse"


class GridAutoFlow(str, Enum):
    """Auto placement direction of a grid layout."""

    ROW = "row"
    COLUMN = "column"
    ROW_DENSE = "row dense"
    COLUMN_DENSE = "column dense"


class ContainerMaxWidth(str, Enum):
    """Maximum width of a container layout, in breakpoint tokens."""

    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL7 = "7xl"
    FULL = "full"


# === DOCUMENT MODELS ===


class SchemaModel(BaseModel):
    """Base model: camelCase aliases on the wire, snake_case in Python."""

    model_config = {
        "use_enum_values": True,
        "validate_default": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "extra": "allow",
    }


class PositionOffsets(SchemaModel):
    """Offsets and stacking for non-static positioning."""

    top: Number | str | None = None
    right: Number | str | None = None
    bottom: Number | str | None = None
    left: Number | str | None = None
    z_index: int | None = None

    def is_empty(self) -> bool:
        """True when no offset or z-index is set."""
        return all(
            value is None
            for value in (self.top, self.right, self.bottom, self.left, self.z_index)
        )


class ComponentPositioning(SchemaModel):
    """Positioning descriptor: strategy plus optional offsets."""

    type: PositioningType = Field(
        default=PositioningType.STATIC, description="CSS positioning strategy"
    )
    position: PositionOffsets | None = None


class FlexConfig(SchemaModel):
    """Flexbox payload of a `flex` component layout."""

    direction: FlexDirection | None = None
    justify: Justify | None = None
    items: AlignItems | None = None
    wrap: FlexWrap | None = None
    gap: Number | str | None = None
    grow: Number | None = None
    shrink: Number | None = None


class GridConfig(SchemaModel):
    """CSS grid payload of a `grid` component layout."""

    cols: int | str | None = None
    rows: int | str | None = None
    gap: Number | str | None = None
    auto_flow: GridAutoFlow | None = None


class ContainerConfig(SchemaModel):
    """Payload of a `container` component layout."""

    max_width: ContainerMaxWidth | None = None
    padding: Number | str | None = None
    centered: bool | None = None


class ComponentLayout(SchemaModel):
    """Layout descriptor, tagged by `type` with type-specific payloads."""

    type: LayoutType = Field(default=LayoutType.NONE, description="Layout mode")
    flex: FlexConfig | None = None
    grid: GridConfig | None = None
    container: ContainerConfig | None = None


class ComponentStyling(SchemaModel):
    """Pure visual styling, kept apart from layout."""

    width: Number | str | None = None
    height: Number | str | None = None
    background: str | None = None
    border: str | None = None
    shadow: str | None = None
    class_name: str | None = None


class ResponsiveBehaviorConfig(SchemaModel):
    """Per-breakpoint behaviour override."""

    hidden: bool | None = None
    order: int | None = None
    width: str | None = None
    positioning: ComponentPositioning | None = None


class CanvasLayout(SchemaModel):
    """A rectangle on a breakpoint grid, in 0-based grid cells.

    Bounds are deliberately not enforced here: negative, zero-sized and
    fractional rectangles are reported by the validator instead of being
    rejected at parse time.
    """

    x: Number = Field(..., description="Start column (0-based)")
    y: Number = Field(..., description="Start row (0-based)")
    width: Number = Field(..., description="Column span")
    height: Number = Field(..., description="Row span")

    @property
    def right(self) -> Number:
        """Exclusive end column."""
        return self.x + self.width

    @property
    def bottom(self) -> Number:
        """Exclusive end row."""
        return self.y + self.height


class Component(SchemaModel):
    """A placeable UI block.

    Attributes:
        id: Stable unique identifier (e.g. "c1").
        name: PascalCase component name.
        semantic_tag: HTML5 tag the component renders as.
        positioning: Positioning strategy and offsets.
        layout: Internal layout mode and its payload.
        canvas_layout: Default placement used by every breakpoint that has
            no entry in `responsive_canvas_layout`.
        responsive_canvas_layout: Placement per breakpoint name.
    """

    id: str = Field(..., description="Unique component identifier")
    name: str = Field(..., description="PascalCase component name")
    semantic_tag: SemanticTag = Field(..., description="HTML5 semantic tag")
    positioning: ComponentPositioning = Field(default_factory=ComponentPositioning)
    layout: ComponentLayout = Field(default_factory=ComponentLayout)
    styling: ComponentStyling | None = None
    responsive: dict[str, ResponsiveBehaviorConfig] | None = None
    props: dict[str, Any] | None = None
    canvas_layout: CanvasLayout | None = None
    responsive_canvas_layout: dict[str, CanvasLayout] | None = None


class ContainerLayoutConfig(SchemaModel):
    """Layout applied to the page container of a breakpoint."""

    type: LayoutType = LayoutType.FLEX
    flex: FlexConfig | None = None
    grid: GridConfig | None = None


class LayoutConfig(SchemaModel):
    """Per-breakpoint layout: structure plus document order.

    `components` is the declared document order consumed by downstream
    renderers; `roles` maps a page role (header, sidebar, main, footer) to
    a component id that must also appear in `components`.
    """

    structure: LayoutStructure = LayoutStructure.VERTICAL
    components: list[str] = Field(default_factory=list)
    container_layout: ContainerLayoutConfig | None = None
    roles: dict[str, str | None] | None = None


class Breakpoint(SchemaModel):
    """A named viewport tier with its own canvas grid."""

    name: str = Field(..., description="Unique breakpoint name")
    min_width: int = Field(..., description="Minimum viewport width in px")
    grid_cols: int = Field(..., description="Canvas grid columns")
    grid_rows: int = Field(..., description="Canvas grid rows")


class LayoutSchema(SchemaModel):
    """The complete layout document."""

    schema_version: str = Field(default=SCHEMA_VERSION)
    components: list[Component] = Field(default_factory=list)
    breakpoints: list[Breakpoint] = Field(default_factory=list)
    layouts: dict[str, LayoutConfig] = Field(default_factory=dict)

    def get_component(self, component_id: str) -> Component | None:
        """Return the first component with the given id, if any."""
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def get_breakpoint(self, name: str) -> Breakpoint | None:
        """Return the first breakpoint with the given name, if any."""
        for breakpoint in self.breakpoints:
            if breakpoint.name == name:
                return breakpoint
        return None


# === DEFAULT TABLES ===


@dataclass(frozen=True)
class GridSize:
    """Default canvas grid dimensions."""

    grid_cols: int
    grid_rows: int


DEFAULT_GRID_CONFIG: Mapping[str, GridSize] = MappingProxyType(
    {
        "mobile": GridSize(grid_cols=4, grid_rows=8),
        "tablet": GridSize(grid_cols=8, grid_rows=8),
        "desktop": GridSize(grid_cols=12, grid_rows=8),
        "custom": GridSize(grid_cols=6, grid_rows=8),
    }
)

DEFAULT_MIN_WIDTHS: Mapping[str, int] = MappingProxyType(
    {"mobile": 0, "tablet": 768, "desktop": 1024}
)

GRID_CONSTRAINTS: Mapping[str, int] = MappingProxyType(
    {"min_cols": 2, "min_rows": 2, "max_cols": 24, "max_rows": 24}
)


@dataclass(frozen=True)
class ComponentTemplate:
    """Default component data for a semantic tag.

    Payload dictionaries use the wire (camelCase) shape so that templates
    can be validated straight into `Component` models.
    """

    semantic_tag: SemanticTag
    name: str
    description: str
    positioning: Mapping[str, Any]
    layout: Mapping[str, Any]
    styling: Mapping[str, Any] | None = None
    responsive: Mapping[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Component data in wire form, without an id."""
        data: dict[str, Any] = {
            "name": self.name,
            "semanticTag": self.semantic_tag.value,
            "positioning": _thaw(self.positioning),
            "layout": _thaw(self.layout),
        }
        if self.styling is not None:
            data["styling"] = _thaw(self.styling)
        if self.responsive is not None:
            data["responsive"] = _thaw(self.responsive)
        return data


def _freeze(value: Any) -> Any:
    """Recursively wrap dictionaries in read-only mapping proxies."""
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def _thaw(value: Any) -> Any:
    """Recursively copy read-only mappings back into plain dictionaries."""
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    return value


def _template(
    tag: SemanticTag,
    name: str,
    description: str,
    positioning: dict[str, Any],
    layout: dict[str, Any],
    styling: dict[str, Any] | None = None,
    responsive: dict[str, Any] | None = None,
) -> ComponentTemplate:
    return ComponentTemplate(
        semantic_tag=tag,
        name=name,
        description=description,
        positioning=_freeze(positioning),
        layout=_freeze(layout),
        styling=_freeze(styling) if styling is not None else None,
        responsive=_freeze(responsive) if responsive is not None else None,
    )


COMPONENT_TEMPLATES: Mapping[SemanticTag, ComponentTemplate] = MappingProxyType(
    {
        SemanticTag.HEADER: _template(
            SemanticTag.HEADER,
            "Header",
            "Sticky page header spanning the full width",
            positioning={"type": "sticky", "position": {"top": 0, "zIndex": 50}},
            layout={
                "type": "container",
                "container": {"maxWidth": "full", "padding": "1rem", "centered": True},
            },
            styling={"background": "white", "border": "b", "shadow": "sm"},
        ),
        SemanticTag.NAV: _template(
            SemanticTag.NAV,
            "Sidebar",
            "Sticky vertical navigation, hidden below desktop",
            positioning={"type": "sticky", "position": {"top": "4rem", "zIndex": 40}},
            layout={"type": "flex", "flex": {"direction": "column", "gap": "1rem"}},
            styling={"width": "16rem", "background": "gray-50", "border": "r"},
            responsive={
                "mobile": {"hidden": True},
                "tablet": {"hidden": True},
                "desktop": {"hidden": False},
            },
        ),
        SemanticTag.MAIN: _template(
            SemanticTag.MAIN,
            "Main",
            "Primary content area that grows to fill remaining space",
            positioning={"type": "static"},
            layout={
                "type": "container",
                "container": {"maxWidth": "7xl", "padding": "2rem", "centered": True},
            },
            styling={"className": "flex-1"},
        ),
        SemanticTag.ASIDE: _template(
            SemanticTag.ASIDE,
            "Aside",
            "Secondary content column",
            positioning={"type": "static"},
            layout={"type": "flex", "flex": {"direction": "column", "gap": "1rem"}},
            styling={"width": "16rem", "background": "gray-50"},
        ),
        SemanticTag.FOOTER: _template(
            SemanticTag.FOOTER,
            "Footer",
            "Static page footer spanning the full width",
            positioning={"type": "static"},
            layout={
                "type": "container",
                "container": {"maxWidth": "full", "padding": "2rem", "centered": True},
            },
            styling={"background": "gray-100", "border": "t"},
        ),
        SemanticTag.SECTION: _template(
            SemanticTag.SECTION,
            "Section",
            "Thematic content section",
            positioning={"type": "static"},
            layout={
                "type": "container",
                "container": {"maxWidth": "7xl", "padding": "2rem", "centered": True},
            },
        ),
        SemanticTag.ARTICLE: _template(
            SemanticTag.ARTICLE,
            "Article",
            "Self-contained content block",
            positioning={"type": "static"},
            layout={"type": "flex", "flex": {"direction": "column", "gap": "1rem"}},
        ),
        SemanticTag.DIV: _template(
            SemanticTag.DIV,
            "Container",
            "Generic grouping wrapper",
            positioning={"type": "static"},
            layout={"type": "flex", "flex": {"direction": "column"}},
        ),
        SemanticTag.FORM: _template(
            SemanticTag.FORM,
            "Form",
            "Vertical form card",
            positioning={"type": "static"},
            layout={"type": "flex", "flex": {"direction": "column", "gap": "1.5rem"}},
            styling={"className": "max-w-md p-6 bg-white rounded-lg shadow"},
        ),
    }
)


# === LOOKUP & CONSTRUCTION ===


def get_component_template(semantic_tag: SemanticTag | str) -> ComponentTemplate:
    """Get the default template for a semantic tag.

    Args:
        semantic_tag: Tag enum member or its string value.

    Returns:
        The ComponentTemplate for the tag.

    Raises:
        ValueError: If the tag is not a known semantic tag.
    """
    return COMPONENT_TEMPLATES[SemanticTag(semantic_tag)]


def generate_component_id(existing_components: Iterable[Component]) -> str:
    """Generate the next sequential component id ("c1", "c2", ...).

    Ids that do not follow the `c<number>` pattern are ignored.
    """
    max_id = 0
    for component in existing_components:
        match = COMPONENT_ID_PATTERN.fullmatch(component.id)
        if match:
            max_id = max(max_id, int(match.group(1)))
    return f"c{max_id + 1}"


def create_component(
    semantic_tag: SemanticTag | str,
    component_id: str | None = None,
    existing: Iterable[Component] = (),
    **overrides: Any,
) -> Component:
    """Create a component from its semantic tag template.

    Args:
        semantic_tag: Tag to take defaults from.
        component_id: Explicit id; generated from `existing` when omitted.
        existing: Components already in the schema, used for id generation.
        **overrides: Field values (snake_case or camelCase) replacing defaults.

    Returns:
        A new Component.
    """
    data = get_component_template(semantic_tag).to_dict()
    data["id"] = component_id or generate_component_id(existing)
    data.update(overrides)
    return Component.model_validate(data)


def _make_breakpoint(kind: str) -> Breakpoint:
    size = DEFAULT_GRID_CONFIG[kind]
    return Breakpoint(
        name=kind,
        min_width=DEFAULT_MIN_WIDTHS[kind],
        grid_cols=size.grid_cols,
        grid_rows=size.grid_rows,
    )


def create_empty_schema() -> LayoutSchema:
    """Create an empty schema with mobile, tablet and desktop breakpoints."""
    kinds = ("mobile", "tablet", "desktop")
    return LayoutSchema(
        schema_version=SCHEMA_VERSION,
        breakpoints=[_make_breakpoint(kind) for kind in kinds],
        layouts={kind: LayoutConfig() for kind in kinds},
    )


def create_schema_with_breakpoint(breakpoint_type: str) -> LayoutSchema:
    """Create an empty schema with a single standard breakpoint.

    Args:
        breakpoint_type: One of "mobile", "tablet" or "desktop".

    Raises:
        ValueError: If the breakpoint type is not a standard one.
    """
    if breakpoint_type not in DEFAULT_MIN_WIDTHS:
        raise ValueError(
            f"Unknown breakpoint type '{breakpoint_type}', "
            f"expected one of: {', '.join(DEFAULT_MIN_WIDTHS)}"
        )
    return LayoutSchema(
        schema_version=SCHEMA_VERSION,
        breakpoints=[_make_breakpoint(breakpoint_type)],
        layouts={breakpoint_type: LayoutConfig()},
    )


# === (DE)SERIALIZATION ===


def load_schema(data: Mapping[str, Any]) -> LayoutSchema:
    """Parse a wire document into a LayoutSchema.

    Args:
        data: Document in wire (camelCase) form.

    Returns:
        The parsed schema.

    Raises:
        pydantic.ValidationError: If the document has the wrong shape.
    """
    return LayoutSchema.model_validate(data)


def dump_schema(schema: LayoutSchema) -> dict[str, Any]:
    """Serialize a schema to its wire (camelCase) document.

    Unset optional fields are omitted; empty lists are kept so that an
    intentionally empty breakpoint layout survives a round trip.
    """
    return schema.model_dump(mode="json", by_alias=True, exclude_none=True)


def is_schema_dict(data: Any) -> bool:
    """Cheap shape check for a wire document, without full parsing."""
    if not isinstance(data, Mapping):
        return False
    return (
        data.get("schemaVersion") == SCHEMA_VERSION
        and isinstance(data.get("components"), list)
        and isinstance(data.get("breakpoints"), list)
        and isinstance(data.get("layouts"), Mapping)
    )


def export_json_schema() -> dict[str, Any]:
    """Export the LayoutSchema JSON Schema (wire field names)."""
    return LayoutSchema.model_json_schema(by_alias=True)


__all__ = [
    # Constants
    "SCHEMA_VERSION",
    "COMPONENT_NAME_PATTERN",
    "COMPONENT_ID_PATTERN",
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
    # Default tables
    "GridSize",
    "DEFAULT_GRID_CONFIG",
    "DEFAULT_MIN_WIDTHS",
    "GRID_CONSTRAINTS",
    "ComponentTemplate",
    "COMPONENT_TEMPLATES",
    # Lookup & construction
    "get_component_template",
    "generate_component_id",
    "create_component",
    "create_empty_schema",
    "create_schema_with_breakpoint",
    # (De)serialization
    "load_schema",
    "dump_schema",
    "is_schema_dict",
    "export_json_schema",
]
