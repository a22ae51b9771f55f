"""Canvas geometry utilities.

Per-breakpoint placement lookup, visual ordering, row grouping and
rectangle overlap over the canvas grid. A component's placement for a
breakpoint is its `responsive_canvas_layout` entry when present, otherwise
its default `canvas_layout`.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable

from laylder.schema import CanvasLayout, Component


# =============================================================================
# Placement lookup
# =============================================================================


def get_canvas_layout(component: Component, breakpoint: str) -> CanvasLayout | None:
    """Get the effective canvas placement of a component for a breakpoint.

    Args:
        component: Component to read.
        breakpoint: Breakpoint name.

    Returns:
        The responsive placement for the breakpoint, else the default
        placement, else None.
    """
    if component.responsive_canvas_layout:
        layout = component.responsive_canvas_layout.get(breakpoint)
        if layout is not None:
            return layout
    return component.canvas_layout


def has_explicit_canvas_layout(component: Component, breakpoint: str) -> bool:
    """True when the component declares a placement for this very breakpoint."""
    return bool(
        component.responsive_canvas_layout
        and breakpoint in component.responsive_canvas_layout
    )


def has_canvas_layout(component: Component, breakpoint: str | None = None) -> bool:
    """Check whether a component is placed.

    Args:
        component: Component to check.
        breakpoint: When given, check the effective placement for it;
            otherwise check for any placement at all.
    """
    if breakpoint is not None:
        return get_canvas_layout(component, breakpoint) is not None
    return component.canvas_layout is not None or bool(
        component.responsive_canvas_layout
    )


def iter_declared_layouts(
    component: Component,
) -> Iterable[tuple[str | None, CanvasLayout]]:
    """Yield every placement a component declares.

    The default placement is yielded with a breakpoint of None, followed by
    responsive placements in declaration order.
    """
    if component.canvas_layout is not None:
        yield None, component.canvas_layout
    for name, layout in (component.responsive_canvas_layout or {}).items():
        yield name, layout


def filter_components_with_canvas_layout(
    components: Iterable[Component], breakpoint: str
) -> list[Component]:
    """Keep the components placed on the given breakpoint, in input order."""
    return [c for c in components if get_canvas_layout(c, breakpoint) is not None]


# =============================================================================
# Visual ordering
# =============================================================================


def sort_component_ids_by_canvas(
    component_ids: Iterable[str], components: Iterable[Component], breakpoint: str
) -> list[str]:
    """Sort ids top-to-bottom then left-to-right by their placement.

    The sort is stable. Ids without a placement (or unknown ids) keep their
    relative order and sort after placed ids.

    Example:
        >>> sort_component_ids_by_canvas(["c3", "c1"], schema.components, "desktop")
        ['c1', 'c3']
    """
    by_id = {c.id: c for c in components}

    def sort_key(component_id: str) -> tuple:
        component = by_id.get(component_id)
        layout = get_canvas_layout(component, breakpoint) if component else None
        if layout is None:
            return (1,)
        return (0, layout.y, layout.x)

    return sorted(component_ids, key=sort_key)


def sort_components_by_canvas(
    components: Iterable[Component], breakpoint: str
) -> list[Component]:
    """Placed components for a breakpoint in visual (y, x) order, stable."""
    placed = filter_components_with_canvas_layout(components, breakpoint)
    return sorted(
        placed,
        key=lambda c: (
            get_canvas_layout(c, breakpoint).y,
            get_canvas_layout(c, breakpoint).x,
        ),
    )


# =============================================================================
# Rows and overlap
# =============================================================================


def rows_spanned(layout: CanvasLayout) -> range:
    """Grid rows touched by a placement (zero height touches none)."""
    if layout.height <= 0:
        return range(0)
    return range(math.floor(layout.y), math.ceil(layout.y + layout.height))


def ranges_overlap(a_start: float, a_size: float, b_start: float, b_size: float) -> bool:
    """Half-open interval intersection; touching ends do not overlap."""
    return a_start < b_start + b_size and b_start < a_start + a_size


def layouts_overlap(a: CanvasLayout, b: CanvasLayout) -> bool:
    """True when two placements share a row and their columns intersect."""
    return ranges_overlap(a.y, a.height, b.y, b.height) and ranges_overlap(
        a.x, a.width, b.x, b.width
    )


@dataclass
class RowGroup:
    """Components that start on the same row, left to right.

    Attributes:
        row_range: Rows covered by the tallest member, starting at its row.
        components: Members sorted by x.
    """

    row_range: list[int]
    components: list[Component] = field(default_factory=list)


def group_components_by_row(
    components: Iterable[Component], breakpoint: str
) -> list[RowGroup]:
    """Group placed components by starting row.

    Example:
        >>> [g.row_range for g in group_components_by_row(comps, "desktop")]
        [[0], [1, 2, 3]]
    """
    rows: dict[float, list[Component]] = {}
    for component in components:
        layout = get_canvas_layout(component, breakpoint)
        if layout is None:
            continue
        rows.setdefault(layout.y, []).append(component)

    groups = []
    for row in sorted(rows):
        members = sorted(rows[row], key=lambda c: get_canvas_layout(c, breakpoint).x)
        max_height = max(get_canvas_layout(c, breakpoint).height for c in members)
        start = math.floor(row)
        groups.append(
            RowGroup(
                row_range=list(range(start, start + max(math.ceil(max_height), 0))),
                components=members,
            )
        )
    return groups


def bucket_components_by_spanned_row(
    components: Iterable[Component], breakpoint: str
) -> dict[int, list[Component]]:
    """Map each grid row to every placed component spanning it."""
    buckets: dict[int, list[Component]] = {}
    for component in components:
        layout = get_canvas_layout(component, breakpoint)
        if layout is None:
            continue
        for row in rows_spanned(layout):
            buckets.setdefault(row, []).append(component)
    return dict(sorted(buckets.items()))


def find_overlapping_pairs(
    components: Iterable[Component], breakpoint: str
) -> list[tuple[Component, Component]]:
    """Find each pair of placed components whose rectangles intersect.

    Only components sharing a row bucket are compared. Each pair is
    reported once, ordered as the components appear in the input.
    """
    ordered = list(components)
    position = {id(c): i for i, c in enumerate(ordered)}
    seen: set[tuple[int, int]] = set()
    pairs: list[tuple[Component, Component]] = []

    for members in bucket_components_by_spanned_row(ordered, breakpoint).values():
        for i, first in enumerate(members):
            for second in members[i + 1 :]:
                key = (position[id(first)], position[id(second)])
                if key in seen:
                    continue
                seen.add(key)
                if layouts_overlap(
                    get_canvas_layout(first, breakpoint),
                    get_canvas_layout(second, breakpoint),
                ):
                    pairs.append((first, second))

    pairs.sort(key=lambda pair: (position[id(pair[0])], position[id(pair[1])]))
    return pairs


__all__ = [
    # Placement lookup
    "get_canvas_layout",
    "has_explicit_canvas_layout",
    "has_canvas_layout",
    "iter_declared_layouts",
    "filter_components_with_canvas_layout",
    # Visual ordering
    "sort_component_ids_by_canvas",
    "sort_components_by_canvas",
    # Rows and overlap
    "rows_spanned",
    "ranges_overlap",
    "layouts_overlap",
    "RowGroup",
    "group_components_by_row",
    "bucket_components_by_spanned_row",
    "find_overlapping_pairs",
]
