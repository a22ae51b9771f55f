"""Geometry utilities - placement lookup, visual order and overlap on the canvas grid."""

from .lib import (
    RowGroup,
    bucket_components_by_spanned_row,
    filter_components_with_canvas_layout,
    find_overlapping_pairs,
    get_canvas_layout,
    group_components_by_row,
    has_canvas_layout,
    has_explicit_canvas_layout,
    iter_declared_layouts,
    layouts_overlap,
    ranges_overlap,
    rows_spanned,
    sort_component_ids_by_canvas,
    sort_components_by_canvas,
)

__all__ = [
    "get_canvas_layout",
    "has_explicit_canvas_layout",
    "has_canvas_layout",
    "iter_declared_layouts",
    "filter_components_with_canvas_layout",
    "sort_component_ids_by_canvas",
    "sort_components_by_canvas",
    "rows_spanned",
    "ranges_overlap",
    "layouts_overlap",
    "RowGroup",
    "group_components_by_row",
    "bucket_components_by_spanned_row",
    "find_overlapping_pairs",
]
