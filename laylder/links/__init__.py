"""Component link graph - cross-breakpoint identity groups.

Provides link groups over a networkx graph, union-find grouping of
listed elements, and link validation (orphans, self loops, duplicates).

Example:
    >>> from laylder.links import calculate_link_groups, validate_component_links
    >>> calculate_link_groups([("c1", "c2"), ("c2", "c3")])
    [['c1', 'c2', 'c3']]
    >>> validate_component_links([("c1", "c1")], {"c1"}).codes()
    ['SELF_LOOP']
"""

from .lib import (
    ComponentLink,
    LinkErrorCode,
    LinkLike,
    LinkValidationError,
    LinkValidationResult,
    are_components_linked,
    calculate_connected_groups,
    calculate_link_groups,
    get_component_group,
    get_connected_group,
    validate_component_links,
)

__all__ = [
    # Models
    "ComponentLink",
    "LinkLike",
    # Link groups
    "calculate_link_groups",
    "get_component_group",
    "are_components_linked",
    # Validation
    "LinkErrorCode",
    "LinkValidationError",
    "LinkValidationResult",
    "validate_component_links",
    # Union-find
    "calculate_connected_groups",
    "get_connected_group",
]
