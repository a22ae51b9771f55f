"""Layout schema validation and static analysis.

This module checks a layout schema for structural problems (errors) and
for placements that are usable but likely to mislead downstream consumers
(warnings). Every check runs to completion and all findings are returned
together; validation never raises for a well-typed schema.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from laylder.core.log import get_logger
from laylder.geometry import (
    bucket_components_by_spanned_row,
    find_overlapping_pairs,
    get_canvas_layout,
    has_canvas_layout,
    has_explicit_canvas_layout,
    iter_declared_layouts,
    sort_components_by_canvas,
)
from laylder.schema import (
    COMPONENT_NAME_PATTERN,
    SCHEMA_VERSION,
    Breakpoint,
    CanvasLayout,
    Component,
    LayoutConfig,
    LayoutSchema,
)

logger = get_logger("validation")

ZINDEX_RANGE = (0, 9999)


class Severity(str, Enum):
    """Errors block downstream use; warnings never do."""

    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    """Machine-readable validation codes. Consumers match on these."""

    # Schema
    INVALID_VERSION = "INVALID_VERSION"
    NO_COMPONENTS = "NO_COMPONENTS"
    DUPLICATE_COMPONENT_ID = "DUPLICATE_COMPONENT_ID"
    # Components
    INVALID_COMPONENT_ID = "INVALID_COMPONENT_ID"
    INVALID_COMPONENT_NAME = "INVALID_COMPONENT_NAME"
    MISSING_POSITION_VALUES = "MISSING_POSITION_VALUES"
    FIXED_WITHOUT_VERTICAL_POSITION = "FIXED_WITHOUT_VERTICAL_POSITION"
    UNUSUAL_ZINDEX = "UNUSUAL_ZINDEX"
    FLEX_WITHOUT_CONFIG = "FLEX_WITHOUT_CONFIG"
    GRID_WITHOUT_CONFIG = "GRID_WITHOUT_CONFIG"
    GRID_WITHOUT_COLS_OR_ROWS = "GRID_WITHOUT_COLS_OR_ROWS"
    CONTAINER_WITHOUT_CONFIG = "CONTAINER_WITHOUT_CONFIG"
    HEADER_NOT_FIXED_OR_STICKY = "HEADER_NOT_FIXED_OR_STICKY"
    FOOTER_NOT_STATIC = "FOOTER_NOT_STATIC"
    NAV_NOT_FLEX = "NAV_NOT_FLEX"
    MAIN_WITHOUT_FLEX1_OR_CONTAINER = "MAIN_WITHOUT_FLEX1_OR_CONTAINER"
    # Breakpoints
    NO_BREAKPOINTS = "NO_BREAKPOINTS"
    DUPLICATE_BREAKPOINT_NAME = "DUPLICATE_BREAKPOINT_NAME"
    INVALID_MIN_WIDTH = "INVALID_MIN_WIDTH"
    BREAKPOINTS_NOT_SORTED = "BREAKPOINTS_NOT_SORTED"
    # Layouts
    MISSING_LAYOUT = "MISSING_LAYOUT"
    EMPTY_LAYOUT = "EMPTY_LAYOUT"
    INVALID_COMPONENT_REFERENCE = "INVALID_COMPONENT_REFERENCE"
    ROLE_COMPONENT_NOT_IN_LAYOUT = "ROLE_COMPONENT_NOT_IN_LAYOUT"
    VERTICAL_STRUCTURE_NOT_COLUMN = "VERTICAL_STRUCTURE_NOT_COLUMN"
    HORIZONTAL_STRUCTURE_NOT_ROW = "HORIZONTAL_STRUCTURE_NOT_ROW"
    SIDEBAR_MAIN_WITHOUT_ROLES = "SIDEBAR_MAIN_WITHOUT_ROLES"
    # Canvas
    CANVAS_NEGATIVE_COORDINATE = "CANVAS_NEGATIVE_COORDINATE"
    CANVAS_ZERO_SIZE = "CANVAS_ZERO_SIZE"
    CANVAS_FRACTIONAL_COORDINATE = "CANVAS_FRACTIONAL_COORDINATE"
    CANVAS_OUT_OF_BOUNDS = "CANVAS_OUT_OF_BOUNDS"
    CANVAS_COMPONENT_NOT_IN_LAYOUT = "CANVAS_COMPONENT_NOT_IN_LAYOUT"
    CANVAS_COMPONENTS_OVERLAP = "CANVAS_COMPONENTS_OVERLAP"
    CANVAS_LAYOUT_ORDER_MISMATCH = "CANVAS_LAYOUT_ORDER_MISMATCH"
    COMPLEX_GRID_LAYOUT_DETECTED = "COMPLEX_GRID_LAYOUT_DETECTED"
    MISSING_CANVAS_LAYOUT = "MISSING_CANVAS_LAYOUT"


@dataclass
class ValidationIssue:
    """A single validation finding.

    Attributes:
        code: Machine-readable code.
        message: Human-readable description.
        severity: Error or warning.
        field: Dotted path of the offending field, if any.
        component_id: Component the finding is about, if any.
        breakpoint: Breakpoint the finding is about, if any.
    """

    code: IssueCode
    message: str
    severity: Severity
    field: str | None = None
    component_id: str | None = None
    breakpoint: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary with enum values and unset fields dropped."""
        data = asdict(self)
        data["code"] = self.code.value
        data["severity"] = self.severity.value
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class ValidationResult:
    """Collected findings; valid exactly when there are no errors."""

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def add(self, issue: ValidationIssue) -> None:
        """File an issue under errors or warnings by its severity."""
        if issue.severity == Severity.ERROR:
            self.errors.append(issue)
        else:
            self.warnings.append(issue)

    def extend(self, issues: list[ValidationIssue]) -> None:
        for issue in issues:
            self.add(issue)

    def codes(self) -> list[str]:
        """All codes, errors first."""
        return [issue.code.value for issue in self.errors + self.warnings]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }


def _error(code: IssueCode, message: str, **context: Any) -> ValidationIssue:
    return ValidationIssue(code=code, message=message, severity=Severity.ERROR, **context)


def _warning(code: IssueCode, message: str, **context: Any) -> ValidationIssue:
    return ValidationIssue(
        code=code, message=message, severity=Severity.WARNING, **context
    )


# =============================================================================
# Public API
# =============================================================================


def validate_schema(schema: LayoutSchema) -> ValidationResult:
    """Validate a layout schema.

    Performs the following checks:
        - Schema version and component presence
        - Component ids, names, positioning, layout and semantic usage
        - Breakpoint presence, uniqueness, ordering and min widths
        - Per-breakpoint layout presence, references and roles
        - Canvas geometry: coordinates, bounds, overlap, visual order

    Args:
        schema: The schema to validate, usually already normalized.

    Returns:
        ValidationResult with every error and warning found.

    Example:
        >>> result = validate_schema(normalize_schema(schema))
        >>> if not result.valid:
        ...     for issue in result.errors:
        ...         print(f"{issue.code.value}: {issue.message}")
    """
    result = ValidationResult()

    if schema.schema_version != SCHEMA_VERSION:
        result.add(
            _error(
                IssueCode.INVALID_VERSION,
                f'Schema version must be "{SCHEMA_VERSION}", '
                f'got "{schema.schema_version}"',
                field="schemaVersion",
            )
        )

    if not schema.components:
        result.add(
            _error(
                IssueCode.NO_COMPONENTS,
                "Schema must have at least one component",
                field="components",
            )
        )
    else:
        for component in schema.components:
            result.extend(_validate_component(component))
        result.extend(_validate_unique_component_ids(schema.components))

    result.extend(_validate_breakpoints(schema.breakpoints))

    for name in _unique_breakpoint_names(schema.breakpoints):
        layout = schema.layouts.get(name)
        if layout is None:
            result.add(
                _error(
                    IssueCode.MISSING_LAYOUT,
                    f"Missing layout configuration for breakpoint: {name}",
                    field=f"layouts.{name}",
                    breakpoint=name,
                )
            )
            continue
        result.extend(_validate_layout_config(layout, schema.components, name))

    result.extend(_validate_canvas_consistency(schema))
    result.extend(_validate_canvas_coordinates(schema))

    logger.debug(
        f"Validated schema: {len(result.errors)} errors, "
        f"{len(result.warnings)} warnings"
    )
    return result


def is_valid(schema: LayoutSchema) -> bool:
    """Check if a schema is valid.

    Convenience function that returns True if no validation errors exist.
    """
    return validate_schema(schema).valid


def format_validation_result(result: ValidationResult) -> str:
    """Format a validation result as a human-readable report.

    Args:
        result: Result from validate_schema.

    Returns:
        Multi-line report with numbered errors and warnings.
    """
    lines = [
        "Schema validation passed" if result.valid else "Schema validation failed"
    ]

    for title, issues in (("Errors", result.errors), ("Warnings", result.warnings)):
        if not issues:
            continue
        lines.append("")
        lines.append(f"{title}:")
        for index, issue in enumerate(issues, start=1):
            line = f"  {index}. [{issue.code.value}] {issue.message}"
            if issue.component_id:
                line += f" (Component: {issue.component_id})"
            if issue.field:
                line += f" (Field: {issue.field})"
            lines.append(line)

    return "\n".join(lines)


# =============================================================================
# Components
# =============================================================================


def _validate_component(component: Component) -> list[ValidationIssue]:
    """Identity, positioning, layout and semantic-tag checks."""
    issues: list[ValidationIssue] = []
    context = {"component_id": component.id}

    if not component.id or not component.id.strip():
        issues.append(
            _error(IssueCode.INVALID_COMPONENT_ID, "Component ID cannot be empty", **context)
        )

    if not COMPONENT_NAME_PATTERN.fullmatch(component.name):
        issues.append(
            _error(
                IssueCode.INVALID_COMPONENT_NAME,
                f'Component name must be PascalCase, got "{component.name}"',
                field="name",
                **context,
            )
        )

    issues.extend(_validate_positioning(component, context))
    issues.extend(_validate_component_layout(component, context))
    issues.extend(_validate_semantic_usage(component, context))
    return issues


def _validate_positioning(
    component: Component, context: dict[str, Any]
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    positioning = component.positioning
    position = positioning.position

    if positioning.type in ("fixed", "sticky", "absolute") and (
        position is None or position.is_empty()
    ):
        issues.append(
            _warning(
                IssueCode.MISSING_POSITION_VALUES,
                f'Positioning type "{positioning.type}" usually requires '
                "position values (top, left, etc.)",
                field="positioning.position",
                **context,
            )
        )

    if positioning.type == "fixed" and position is not None:
        if position.top is None and position.bottom is None:
            issues.append(
                _warning(
                    IssueCode.FIXED_WITHOUT_VERTICAL_POSITION,
                    'Fixed positioning usually needs either "top" or "bottom" value',
                    field="positioning.position",
                    **context,
                )
            )

    if position is not None and position.z_index is not None:
        low, high = ZINDEX_RANGE
        if not low <= position.z_index <= high:
            issues.append(
                _warning(
                    IssueCode.UNUSUAL_ZINDEX,
                    f"z-index value {position.z_index} is outside typical "
                    f"range ({low}-{high})",
                    field="positioning.position.zIndex",
                    **context,
                )
            )

    return issues


def _validate_component_layout(
    component: Component, context: dict[str, Any]
) -> list[ValidationIssue]:
    layout = component.layout

    if layout.type == "flex" and layout.flex is None:
        return [
            _warning(
                IssueCode.FLEX_WITHOUT_CONFIG,
                'Layout type is "flex" but no flex configuration provided',
                field="layout.flex",
                **context,
            )
        ]
    if layout.type == "grid":
        if layout.grid is None:
            return [
                _warning(
                    IssueCode.GRID_WITHOUT_CONFIG,
                    'Layout type is "grid" but no grid configuration provided',
                    field="layout.grid",
                    **context,
                )
            ]
        if not layout.grid.cols and not layout.grid.rows:
            return [
                _warning(
                    IssueCode.GRID_WITHOUT_COLS_OR_ROWS,
                    "Grid layout should specify either cols or rows (or both)",
                    field="layout.grid",
                    **context,
                )
            ]
    if layout.type == "container" and layout.container is None:
        return [
            _warning(
                IssueCode.CONTAINER_WITHOUT_CONFIG,
                'Layout type is "container" but no container configuration provided',
                field="layout.container",
                **context,
            )
        ]
    return []


def _validate_semantic_usage(
    component: Component, context: dict[str, Any]
) -> list[ValidationIssue]:
    """Recommendations for how semantic tags are usually laid out."""
    tag = component.semantic_tag
    positioning_type = component.positioning.type
    layout_type = component.layout.type

    if tag == "header" and positioning_type not in ("fixed", "sticky"):
        return [
            _warning(
                IssueCode.HEADER_NOT_FIXED_OR_STICKY,
                'Semantic tag "header" is typically fixed or sticky positioned',
                field="positioning.type",
                **context,
            )
        ]
    if tag == "footer" and positioning_type != "static":
        return [
            _warning(
                IssueCode.FOOTER_NOT_STATIC,
                'Semantic tag "footer" is typically static positioned',
                field="positioning.type",
                **context,
            )
        ]
    if tag == "nav" and layout_type != "flex":
        return [
            _warning(
                IssueCode.NAV_NOT_FLEX,
                'Semantic tag "nav" typically uses flex layout',
                field="layout.type",
                **context,
            )
        ]
    if tag == "main" and layout_type != "container":
        class_name = (component.styling.class_name if component.styling else None) or ""
        if "flex-1" not in class_name.split():
            return [
                _warning(
                    IssueCode.MAIN_WITHOUT_FLEX1_OR_CONTAINER,
                    'Semantic tag "main" typically uses container layout or flex-1 class',
                    field="layout.type",
                    **context,
                )
            ]
    return []


def _validate_unique_component_ids(components: list[Component]) -> list[ValidationIssue]:
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    for component in components:
        if component.id in seen:
            duplicates[component.id] = None
        seen.add(component.id)

    if not duplicates:
        return []
    return [
        _error(
            IssueCode.DUPLICATE_COMPONENT_ID,
            f"Duplicate component IDs found: {', '.join(duplicates)}",
            field="components",
        )
    ]


# =============================================================================
# Breakpoints and layouts
# =============================================================================


def _unique_breakpoint_names(breakpoints: list[Breakpoint]) -> list[str]:
    return list(dict.fromkeys(bp.name for bp in breakpoints))


def _validate_breakpoints(breakpoints: list[Breakpoint]) -> list[ValidationIssue]:
    if not breakpoints:
        return [
            _error(
                IssueCode.NO_BREAKPOINTS,
                "Schema must have at least one breakpoint",
                field="breakpoints",
            )
        ]

    issues: list[ValidationIssue] = []

    names = [bp.name for bp in breakpoints]
    duplicates = list(dict.fromkeys(n for i, n in enumerate(names) if n in names[:i]))
    if duplicates:
        issues.append(
            _error(
                IssueCode.DUPLICATE_BREAKPOINT_NAME,
                f"Duplicate breakpoint names found: {', '.join(duplicates)}",
                field="breakpoints",
            )
        )

    widths = [bp.min_width for bp in breakpoints]
    if widths != sorted(widths):
        issues.append(
            _warning(
                IssueCode.BREAKPOINTS_NOT_SORTED,
                "Breakpoints should be sorted by minWidth in ascending order",
                field="breakpoints",
            )
        )

    for bp in breakpoints:
        if bp.min_width < 0:
            issues.append(
                _error(
                    IssueCode.INVALID_MIN_WIDTH,
                    f'Breakpoint "{bp.name}" has negative minWidth: {bp.min_width}',
                    field=f"breakpoints.{bp.name}.minWidth",
                    breakpoint=bp.name,
                )
            )

    return issues


def _validate_layout_config(
    layout: LayoutConfig, components: list[Component], breakpoint: str
) -> list[ValidationIssue]:
    """References, roles and structure recommendations of one layout."""
    issues: list[ValidationIssue] = []
    prefix = f"layouts.{breakpoint}"

    if not layout.components:
        issues.append(
            _error(
                IssueCode.EMPTY_LAYOUT,
                f'Layout for "{breakpoint}" has no components',
                field=f"{prefix}.components",
                breakpoint=breakpoint,
            )
        )

    known_ids = {c.id for c in components}
    for component_id in layout.components:
        if component_id not in known_ids:
            issues.append(
                _error(
                    IssueCode.INVALID_COMPONENT_REFERENCE,
                    f"Layout references non-existent component: {component_id}",
                    field=f"{prefix}.components",
                    component_id=component_id,
                    breakpoint=breakpoint,
                )
            )

    for role, component_id in (layout.roles or {}).items():
        if component_id and component_id not in layout.components:
            issues.append(
                _error(
                    IssueCode.ROLE_COMPONENT_NOT_IN_LAYOUT,
                    f'Role "{role}" references component "{component_id}" '
                    "which is not in the layout",
                    field=f"{prefix}.roles.{role}",
                    component_id=component_id,
                    breakpoint=breakpoint,
                )
            )

    container = layout.container_layout
    direction = container.flex.direction if container and container.flex else None
    if layout.structure == "vertical":
        if container and container.type == "flex" and direction != "column":
            issues.append(
                _warning(
                    IssueCode.VERTICAL_STRUCTURE_NOT_COLUMN,
                    'Structure "vertical" typically uses flex direction "column"',
                    field=f"{prefix}.containerLayout.flex.direction",
                    breakpoint=breakpoint,
                )
            )
    elif layout.structure == "horizontal":
        if container and container.type == "flex" and direction != "row":
            issues.append(
                _warning(
                    IssueCode.HORIZONTAL_STRUCTURE_NOT_ROW,
                    'Structure "horizontal" typically uses flex direction "row"',
                    field=f"{prefix}.containerLayout.flex.direction",
                    breakpoint=breakpoint,
                )
            )
    elif layout.structure == "sidebar-main":
        roles = layout.roles or {}
        if not roles.get("sidebar") or not roles.get("main"):
            issues.append(
                _warning(
                    IssueCode.SIDEBAR_MAIN_WITHOUT_ROLES,
                    'Structure "sidebar-main" should specify sidebar and main roles',
                    field=f"{prefix}.roles",
                    breakpoint=breakpoint,
                )
            )

    return issues


# =============================================================================
# Canvas
# =============================================================================


def _describe(component: Component) -> str:
    return f"{component.name} ({component.id})"


def _layout_members(schema: LayoutSchema, layout: LayoutConfig) -> list[Component]:
    """Components listed in a layout, in declared order, each once."""
    by_id: dict[str, Component] = {}
    for component in schema.components:
        by_id.setdefault(component.id, component)
    return [by_id[cid] for cid in dict.fromkeys(layout.components) if cid in by_id]


def _validate_canvas_consistency(schema: LayoutSchema) -> list[ValidationIssue]:
    """Per-breakpoint agreement between canvas placement and document order.

    Only components listed in the breakpoint's layout are considered.
    """
    issues: list[ValidationIssue] = []

    for name in _unique_breakpoint_names(schema.breakpoints):
        layout = schema.layouts.get(name)
        if layout is None:
            continue
        prefix = f"layouts.{name}"

        members = _layout_members(schema, layout)
        placed = [c for c in members if has_canvas_layout(c, name)]
        if not placed:
            continue

        if len(placed) != len(members):
            missing = [c.id for c in members if not has_canvas_layout(c, name)]
            issues.append(
                _warning(
                    IssueCode.MISSING_CANVAS_LAYOUT,
                    f'Some components in "{name}" layout are missing Canvas layout '
                    f"information: {', '.join(missing)}. Canvas-based visual "
                    "layout may not be accurate.",
                    field=prefix,
                    breakpoint=name,
                )
            )

        declared_order = [c.id for c in placed]
        canvas_order = [c.id for c in sort_components_by_canvas(placed, name)]
        if canvas_order != declared_order:
            affected = [
                cid for cid, other in zip(canvas_order, declared_order) if cid != other
            ]
            issues.append(
                _warning(
                    IssueCode.CANVAS_LAYOUT_ORDER_MISMATCH,
                    f'Visual layout (Canvas Grid) differs from DOM order in "{name}" '
                    f"breakpoint. Components affected: {', '.join(affected)}. "
                    f"Canvas order: [{', '.join(canvas_order)}], "
                    f"Layout order: [{', '.join(declared_order)}]",
                    field=f"{prefix}.components",
                    breakpoint=name,
                )
            )

        busy_rows = {
            row: comps
            for row, comps in bucket_components_by_spanned_row(placed, name).items()
            if len(comps) > 1
        }
        if busy_rows:
            descriptions = "; ".join(
                f"Row {row}: {', '.join(_describe(c) for c in comps)}"
                for row, comps in busy_rows.items()
            )
            issues.append(
                _warning(
                    IssueCode.COMPLEX_GRID_LAYOUT_DETECTED,
                    f'Complex 2D Grid layout detected in "{name}" with components '
                    f"side-by-side: {descriptions}",
                    field=prefix,
                    breakpoint=name,
                )
            )

        for first, second in find_overlapping_pairs(placed, name):
            issues.append(
                _warning(
                    IssueCode.CANVAS_COMPONENTS_OVERLAP,
                    f"Components {_describe(first)} and {_describe(second)} have "
                    f'overlapping Canvas Grid positions in "{name}" breakpoint',
                    field=prefix,
                    component_id=first.id,
                    breakpoint=name,
                )
            )

    return issues


def _is_fractional(value: int | float) -> bool:
    return isinstance(value, float) and not value.is_integer()


def _validate_canvas_coordinates(schema: LayoutSchema) -> list[ValidationIssue]:
    """Coordinate, size, bounds and membership checks for every placement."""
    issues: list[ValidationIssue] = []
    in_any_layout = {cid for layout in schema.layouts.values() for cid in layout.components}

    for component in schema.components:
        for breakpoint, layout in iter_declared_layouts(component):
            issues.extend(_check_placement(component, layout, breakpoint))

        if has_canvas_layout(component) and component.id not in in_any_layout:
            issues.append(
                _warning(
                    IssueCode.CANVAS_COMPONENT_NOT_IN_LAYOUT,
                    f"Component {_describe(component)} has Canvas layout information "
                    "but is not included in any breakpoint's layout components",
                    field="canvasLayout",
                    component_id=component.id,
                )
            )

    first_breakpoint = schema.breakpoints[0].name if schema.breakpoints else None
    seen: set[str] = set()
    for bp in schema.breakpoints:
        if bp.name in seen:
            continue
        seen.add(bp.name)
        layout = schema.layouts.get(bp.name)
        members = set(layout.components) if layout else set()

        for component in schema.components:
            placement = get_canvas_layout(component, bp.name)
            if placement is None:
                continue
            explicit = has_explicit_canvas_layout(component, bp.name)
            orphan_default = (
                component.id not in in_any_layout and bp.name == first_breakpoint
            )
            if component.id in members or explicit or orphan_default:
                issues.extend(_check_bounds(component, placement, bp, explicit))

    return issues


def _placement_field(breakpoint: str | None) -> str:
    return f"responsiveCanvasLayout.{breakpoint}" if breakpoint else "canvasLayout"


def _check_placement(
    component: Component, layout: CanvasLayout, breakpoint: str | None
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    where = f' in "{breakpoint}" breakpoint' if breakpoint else ""
    context = {
        "field": _placement_field(breakpoint),
        "component_id": component.id,
        "breakpoint": breakpoint,
    }

    if layout.x < 0 or layout.y < 0:
        issues.append(
            _error(
                IssueCode.CANVAS_NEGATIVE_COORDINATE,
                f"Component {_describe(component)} has negative Canvas coordinates "
                f"(x: {layout.x}, y: {layout.y}){where}. "
                "Coordinates must be non-negative.",
                **context,
            )
        )

    if layout.width == 0 or layout.height == 0:
        issues.append(
            _warning(
                IssueCode.CANVAS_ZERO_SIZE,
                f"Component {_describe(component)} has zero width or height "
                f"(width: {layout.width}, height: {layout.height}){where}. "
                "This component will not be visible.",
                **context,
            )
        )

    if any(_is_fractional(v) for v in (layout.x, layout.y, layout.width, layout.height)):
        issues.append(
            _warning(
                IssueCode.CANVAS_FRACTIONAL_COORDINATE,
                f"Component {_describe(component)} has fractional Canvas coordinates "
                f"(x: {layout.x}, y: {layout.y}, width: {layout.width}, "
                f"height: {layout.height}){where}. "
                "Grid positions should be integers for consistent rendering.",
                **context,
            )
        )

    return issues


def _check_bounds(
    component: Component, layout: CanvasLayout, bp: Breakpoint, explicit: bool
) -> list[ValidationIssue]:
    exceeds_width = layout.right > bp.grid_cols
    exceeds_height = layout.bottom > bp.grid_rows
    if not (exceeds_width or exceeds_height):
        return []

    details = []
    if exceeds_width:
        details.append(f"Exceeds width ({layout.right} > {bp.grid_cols}).")
    if exceeds_height:
        details.append(f"Exceeds height ({layout.bottom} > {bp.grid_rows}).")

    return [
        _warning(
            IssueCode.CANVAS_OUT_OF_BOUNDS,
            f"Component {_describe(component)} exceeds grid boundaries in "
            f'"{bp.name}" breakpoint. Position: ({layout.x}, {layout.y}), '
            f"Size: {layout.width}x{layout.height}, "
            f"Grid: {bp.grid_cols}x{bp.grid_rows}. {' '.join(details)}",
            field=_placement_field(bp.name if explicit else None),
            component_id=component.id,
            breakpoint=bp.name,
        )
    ]


__all__ = [
    "Severity",
    "IssueCode",
    "ValidationIssue",
    "ValidationResult",
    "validate_schema",
    "is_valid",
    "format_validation_result",
]
