"""Canvas grid to CSS grid conversion and layout complexity analysis.

Canvas placements are 0-based cells; CSS grid lines are 1-based and
end-exclusive. Conversion is a pure shift by one line and is reversible
for the same grid dimensions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from laylder.core.log import get_logger
from laylder.geometry import (
    bucket_components_by_spanned_row,
    filter_components_with_canvas_layout,
    find_overlapping_pairs,
    get_canvas_layout,
    sort_components_by_canvas,
)
from laylder.schema import CanvasLayout, Component

logger = get_logger("grid")


class Recommendation(str, Enum):
    """Suggested CSS implementation for a breakpoint's page layout."""

    FLEXBOX = "flexbox"
    GRID = "grid"


@dataclass
class GridPosition:
    """A component's rectangle in CSS grid lines.

    Attributes:
        component_id: Component id.
        component_name: Component name.
        row_start: First grid row line (1-based).
        col_start: First grid column line (1-based).
        row_end: Row line after the last spanned row.
        col_end: Column line after the last spanned column.
        canvas_layout: The source canvas placement.
    """

    component_id: str
    component_name: str
    row_start: int | float
    col_start: int | float
    row_end: int | float
    col_end: int | float
    canvas_layout: CanvasLayout

    @property
    def grid_area(self) -> str:
        """CSS `grid-area`: "row-start / col-start / row-end / col-end"."""
        return f"{self.row_start} / {self.col_start} / {self.row_end} / {self.col_end}"

    @property
    def grid_row(self) -> str:
        return f"{self.row_start} / {self.row_end}"

    @property
    def grid_column(self) -> str:
        return f"{self.col_start} / {self.col_end}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "componentId": self.component_id,
            "componentName": self.component_name,
            "rowStart": self.row_start,
            "colStart": self.col_start,
            "rowEnd": self.row_end,
            "colEnd": self.col_end,
            "gridArea": self.grid_area,
            "gridRow": self.grid_row,
            "gridColumn": self.grid_column,
            "canvasLayout": self.canvas_layout.model_dump(mode="json"),
        }


@dataclass
class VisualLayout:
    """CSS grid description of one breakpoint."""

    grid_cols: int
    grid_rows: int
    positions: list[GridPosition] = field(default_factory=list)

    def get_position(self, component_id: str) -> GridPosition | None:
        for position in self.positions:
            if position.component_id == component_id:
                return position
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "gridCols": self.grid_cols,
            "gridRows": self.grid_rows,
            "positions": [p.to_dict() for p in self.positions],
        }


@dataclass
class GridComplexity:
    """Layout complexity metrics for one breakpoint.

    Attributes:
        total_components: Number of placed components.
        max_per_row: Largest number of components spanning a single row.
        has_side_by_side: True when some row holds two or more components.
        has_overlap: True when any two placements intersect.
        recommendation: "grid" for side-by-side or overlapping layouts,
            otherwise "flexbox". Advisory only.
    """

    total_components: int
    max_per_row: int
    has_side_by_side: bool
    has_overlap: bool
    recommendation: Recommendation

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalComponents": self.total_components,
            "maxPerRow": self.max_per_row,
            "hasSideBySide": self.has_side_by_side,
            "hasOverlap": self.has_overlap,
            "recommendation": self.recommendation.value,
        }


def canvas_to_grid_positions(
    components: Iterable[Component],
    breakpoint: str,
    grid_cols: int,
    grid_rows: int,
) -> VisualLayout:
    """Convert canvas placements for a breakpoint to CSS grid positions.

    Args:
        components: Components to convert; unplaced ones are skipped.
        breakpoint: Breakpoint whose placements are used.
        grid_cols: Canvas grid columns of the breakpoint.
        grid_rows: Canvas grid rows of the breakpoint.

    Returns:
        VisualLayout with positions in visual (y, x) order.

    Example:
        >>> layout = canvas_to_grid_positions(components, "desktop", 12, 8)
        >>> layout.positions[0].grid_area  # full-width header
        '1 / 1 / 2 / 13'
    """
    positions = []
    for component in sort_components_by_canvas(components, breakpoint):
        layout = get_canvas_layout(component, breakpoint)
        positions.append(
            GridPosition(
                component_id=component.id,
                component_name=component.name,
                row_start=layout.y + 1,
                col_start=layout.x + 1,
                row_end=layout.y + layout.height + 1,
                col_end=layout.x + layout.width + 1,
                canvas_layout=layout,
            )
        )
    return VisualLayout(grid_cols=grid_cols, grid_rows=grid_rows, positions=positions)


def grid_position_to_canvas(position: GridPosition) -> CanvasLayout:
    """Convert 1-based grid lines back to a 0-based canvas placement."""
    return CanvasLayout(
        x=position.col_start - 1,
        y=position.row_start - 1,
        width=position.col_end - position.col_start,
        height=position.row_end - position.row_start,
    )


def analyze_grid_complexity(
    components: Iterable[Component], breakpoint: str
) -> GridComplexity:
    """Classify how complex a breakpoint's layout is.

    Components are bucketed by every row they span, so a component with
    height 3 counts towards three rows.

    Args:
        components: Components to analyze.
        breakpoint: Breakpoint whose placements are used.

    Returns:
        GridComplexity metrics and a flexbox/grid recommendation.
    """
    placed = filter_components_with_canvas_layout(components, breakpoint)
    buckets = bucket_components_by_spanned_row(placed, breakpoint)

    max_per_row = max((len(members) for members in buckets.values()), default=0)
    has_side_by_side = max_per_row > 1
    has_overlap = bool(find_overlapping_pairs(placed, breakpoint))
    recommendation = (
        Recommendation.GRID if has_side_by_side or has_overlap else Recommendation.FLEXBOX
    )

    logger.debug(
        f"Grid complexity for {breakpoint}: {len(placed)} placed, "
        f"max {max_per_row} per row -> {recommendation.value}"
    )
    return GridComplexity(
        total_components=len(placed),
        max_per_row=max_per_row,
        has_side_by_side=has_side_by_side,
        has_overlap=has_overlap,
        recommendation=recommendation,
    )


__all__ = [
    "Recommendation",
    "GridPosition",
    "VisualLayout",
    "GridComplexity",
    "canvas_to_grid_positions",
    "grid_position_to_canvas",
    "analyze_grid_complexity",
]
