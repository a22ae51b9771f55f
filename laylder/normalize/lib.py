"""Schema normalization.

Brings a raw layout document into canonical form so that what the user
sees on the canvas (2-D placement) and what is serialized as document
order (`layouts[bp].components`) agree. Normalization is pure (the input
is never mutated), total and idempotent.
"""

from enum import Enum

from laylder.config import get_normalization_mode
from laylder.core.log import get_logger
from laylder.geometry import has_explicit_canvas_layout, sort_component_ids_by_canvas
from laylder.schema import LayoutConfig, LayoutSchema, LayoutStructure

logger = get_logger("normalize")


class NormalizationMode(str, Enum):
    """Breakpoint policy applied during normalization.

    - INDEPENDENT: Breakpoints never borrow from each other (canonical)
    - INHERIT: Mobile-first cascade; a breakpoint with no layout, or with
      an empty one, copies the previous breakpoint, and missing responsive
      placements copy the previous breakpoint's placement
    """

    INDEPENDENT = "independent"
    INHERIT = "inherit"


def normalize_schema(
    schema: LayoutSchema, mode: NormalizationMode | str | None = None
) -> LayoutSchema:
    """Normalize a layout schema.

    Steps:
        1. Sort breakpoints by (min_width, name).
        2. Create a vertical, empty layout for each breakpoint that has
           none. An existing empty layout is left untouched.
        3. Register every component with an explicit responsive placement
           for a breakpoint in that breakpoint's layout.
        4. Stable re-sort of each layout's components by (y, x); ids with
           no placement keep their order after the placed ones.

    Args:
        schema: Schema to normalize (not modified).
        mode: Breakpoint policy; defaults to LAYLDER_NORMALIZATION_MODE.

    Returns:
        A new, normalized LayoutSchema.

    Raises:
        ValueError: If `mode` is not a known normalization mode.

    Example:
        >>> normalized = normalize_schema(schema)
        >>> normalize_schema(normalized) == normalized
        True
    """
    resolved = NormalizationMode(get_normalization_mode(mode))
    normalized = schema.model_copy(deep=True)

    normalized.breakpoints.sort(key=lambda bp: (bp.min_width, bp.name))

    if resolved == NormalizationMode.INHERIT:
        _inherit_layouts(normalized)
        _inherit_canvas_layouts(normalized)

    for breakpoint in normalized.breakpoints:
        if breakpoint.name not in normalized.layouts:
            normalized.layouts[breakpoint.name] = LayoutConfig(
                structure=LayoutStructure.VERTICAL, components=[]
            )
        _sync_layout_components(normalized, breakpoint.name)

    logger.debug(
        f"Normalized schema ({resolved.value}): "
        f"{len(normalized.breakpoints)} breakpoints, "
        f"{len(normalized.components)} components"
    )
    return normalized


def _breakpoint_names(schema: LayoutSchema) -> list[str]:
    """Breakpoint names in order, first occurrence of duplicates only."""
    return list(dict.fromkeys(bp.name for bp in schema.breakpoints))


def _sync_layout_components(schema: LayoutSchema, breakpoint: str) -> None:
    """Union placed ids into a layout and sort it into visual order."""
    layout = schema.layouts[breakpoint]

    ids = list(dict.fromkeys(layout.components))
    for component in schema.components:
        if has_explicit_canvas_layout(component, breakpoint) and component.id not in ids:
            ids.append(component.id)

    layout.components = sort_component_ids_by_canvas(ids, schema.components, breakpoint)


def _inherit_layouts(schema: LayoutSchema) -> None:
    """Copy each breakpoint's layout forward into missing or empty ones."""
    names = _breakpoint_names(schema)
    for previous, current in zip(names, names[1:]):
        source = schema.layouts.get(previous)
        target = schema.layouts.get(current)
        if source is None:
            continue
        if target is None or not target.components:
            schema.layouts[current] = source.model_copy(deep=True)


def _inherit_canvas_layouts(schema: LayoutSchema) -> None:
    """Copy responsive placements forward into breakpoints that lack one.

    Only components that use responsive placements take part; a component
    with a single default placement already applies it everywhere.
    """
    names = _breakpoint_names(schema)
    for component in schema.components:
        placements = component.responsive_canvas_layout
        if not placements:
            continue
        for previous, current in zip(names, names[1:]):
            if current not in placements and previous in placements:
                placements[current] = placements[previous].model_copy()


__all__ = ["NormalizationMode", "normalize_schema"]
