"""Grid resize constraints.

Answers whether a breakpoint's canvas grid can be resized without
clipping the components placed on it, and how far it can shrink.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable

from laylder.geometry import get_canvas_layout
from laylder.schema import GRID_CONSTRAINTS, CanvasLayout, Component


@dataclass(frozen=True)
class MinimumGridSize:
    """Smallest grid that still holds every placement."""

    rows: int
    cols: int


@dataclass
class AffectedComponent:
    """A component that a resize would clip."""

    id: str
    name: str
    current_position: CanvasLayout


@dataclass
class GridResizeValidation:
    """Outcome of a proposed grid resize.

    Attributes:
        safe: True when no placement would be clipped and the new size is
            within the allowed grid range.
        minimum_required: Smallest safe grid for the current placements.
        reason: Why the resize is unsafe.
        affected_components: Components that would be clipped.
    """

    safe: bool
    minimum_required: MinimumGridSize
    reason: str | None = None
    affected_components: list[AffectedComponent] = field(default_factory=list)


def _placed(
    components: Iterable[Component], breakpoint: str
) -> list[tuple[Component, CanvasLayout]]:
    pairs = []
    for component in components:
        layout = get_canvas_layout(component, breakpoint)
        if layout is not None:
            pairs.append((component, layout))
    return pairs


def calculate_minimum_grid_size(
    components: Iterable[Component], breakpoint: str
) -> MinimumGridSize:
    """Smallest grid holding every placement of a breakpoint.

    Never smaller than the minimum grid size; an empty canvas needs exactly
    the minimum.

    Example:
        >>> calculate_minimum_grid_size([footer], "mobile")  # footer at (0, 10, 12, 1)
        MinimumGridSize(rows=11, cols=12)
    """
    min_rows = GRID_CONSTRAINTS["min_rows"]
    min_cols = GRID_CONSTRAINTS["min_cols"]

    rows_used = 0
    cols_used = 0
    for _, layout in _placed(components, breakpoint):
        rows_used = max(rows_used, math.ceil(layout.bottom))
        cols_used = max(cols_used, math.ceil(layout.right))

    return MinimumGridSize(rows=max(min_rows, rows_used), cols=max(min_cols, cols_used))


def is_grid_resize_safe(
    new_rows: int, new_cols: int, components: Iterable[Component], breakpoint: str
) -> GridResizeValidation:
    """Check whether resizing a breakpoint grid clips any component.

    Rows are checked before columns; the first failing dimension is
    reported.

    Args:
        new_rows: Proposed number of rows.
        new_cols: Proposed number of columns.
        components: Components of the schema.
        breakpoint: Breakpoint being resized.

    Returns:
        GridResizeValidation describing the outcome.
    """
    placed = _placed(components, breakpoint)
    minimum = calculate_minimum_grid_size([c for c, _ in placed], breakpoint)

    max_rows = GRID_CONSTRAINTS["max_rows"]
    max_cols = GRID_CONSTRAINTS["max_cols"]
    if new_rows > max_rows or new_cols > max_cols:
        return GridResizeValidation(
            safe=False,
            minimum_required=minimum,
            reason=f"Grid cannot exceed {max_rows} rows x {max_cols} columns",
        )

    min_rows = GRID_CONSTRAINTS["min_rows"]
    min_cols = GRID_CONSTRAINTS["min_cols"]
    if new_rows < min_rows or new_cols < min_cols:
        return GridResizeValidation(
            safe=False,
            minimum_required=minimum,
            reason=f"Grid needs at least {min_rows} rows x {min_cols} columns",
        )

    if new_rows < minimum.rows:
        affected = [
            AffectedComponent(id=c.id, name=c.name, current_position=layout)
            for c, layout in placed
            if layout.bottom > new_rows
        ]
        return GridResizeValidation(
            safe=False,
            minimum_required=minimum,
            reason=(
                f"Cannot reduce to {new_rows} rows: {len(affected)} component(s) "
                f"will be clipped. Minimum required: {minimum.rows} rows"
            ),
            affected_components=affected,
        )

    if new_cols < minimum.cols:
        affected = [
            AffectedComponent(id=c.id, name=c.name, current_position=layout)
            for c, layout in placed
            if layout.right > new_cols
        ]
        return GridResizeValidation(
            safe=False,
            minimum_required=minimum,
            reason=(
                f"Cannot reduce to {new_cols} columns: {len(affected)} component(s) "
                f"will be clipped. Minimum required: {minimum.cols} columns"
            ),
            affected_components=affected,
        )

    return GridResizeValidation(safe=True, minimum_required=minimum)


def get_affected_component_ids(
    new_rows: int, new_cols: int, components: Iterable[Component], breakpoint: str
) -> list[str]:
    """Ids of the components a resize would clip."""
    validation = is_grid_resize_safe(new_rows, new_cols, components, breakpoint)
    return [affected.id for affected in validation.affected_components]


def suggest_grid_compaction(
    components: Iterable[Component], current_rows: int, current_cols: int, breakpoint: str
) -> tuple[int, int]:
    """How many empty trailing rows and columns could be trimmed.

    Returns:
        (rows, cols) that can be removed without clipping anything.
    """
    minimum = calculate_minimum_grid_size(components, breakpoint)
    return max(0, current_rows - minimum.rows), max(0, current_cols - minimum.cols)


def is_component_out_of_bounds(
    component: Component, grid_rows: int, grid_cols: int, breakpoint: str
) -> bool:
    """True when the component's placement leaves the grid (unplaced is in bounds)."""
    layout = get_canvas_layout(component, breakpoint)
    if layout is None:
        return False
    return (
        layout.x < 0
        or layout.y < 0
        or layout.right > grid_cols
        or layout.bottom > grid_rows
    )


__all__ = [
    "MinimumGridSize",
    "AffectedComponent",
    "GridResizeValidation",
    "calculate_minimum_grid_size",
    "is_grid_resize_safe",
    "get_affected_component_ids",
    "suggest_grid_compaction",
    "is_component_out_of_bounds",
]
