"""Grid module - CSS grid conversion, complexity analysis and resize constraints.

Example:
    >>> from laylder.grid import canvas_to_grid_positions, analyze_grid_complexity
    >>> layout = canvas_to_grid_positions(schema.components, "desktop", 12, 8)
    >>> analyze_grid_complexity(schema.components, "desktop").recommendation
    <Recommendation.GRID: 'grid'>
"""

from .constraints import (
    AffectedComponent,
    GridResizeValidation,
    MinimumGridSize,
    calculate_minimum_grid_size,
    get_affected_component_ids,
    is_component_out_of_bounds,
    is_grid_resize_safe,
    suggest_grid_compaction,
)
from .lib import (
    GridComplexity,
    GridPosition,
    Recommendation,
    VisualLayout,
    analyze_grid_complexity,
    canvas_to_grid_positions,
    grid_position_to_canvas,
)

__all__ = [
    # Conversion
    "GridPosition",
    "VisualLayout",
    "canvas_to_grid_positions",
    "grid_position_to_canvas",
    # Complexity
    "Recommendation",
    "GridComplexity",
    "analyze_grid_complexity",
    # Constraints
    "MinimumGridSize",
    "AffectedComponent",
    "GridResizeValidation",
    "calculate_minimum_grid_size",
    "is_grid_resize_safe",
    "get_affected_component_ids",
    "suggest_grid_compaction",
    "is_component_out_of_bounds",
]
