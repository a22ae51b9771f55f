"""Component link graph.

A link declares that two component placements, usually in different
breakpoints, are the same logical UI element. Links form an undirected
graph; a link group is a maximal connected set of component ids.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterable, Mapping, TypeVar

import networkx as nx
from networkx.utils import UnionFind
from pydantic import BaseModel, Field

from laylder.core.log import get_logger

logger = get_logger("links")

T = TypeVar("T", bound=Hashable)


class ComponentLink(BaseModel):
    """Undirected edge between two component ids."""

    model_config = {"frozen": True}

    source: str = Field(..., description="Component id at one end")
    target: str = Field(..., description="Component id at the other end")

    @classmethod
    def coerce(cls, value: "ComponentLink | Mapping[str, Any] | tuple[str, str]"):
        """Build a link from a model, a `{source, target}` mapping or a pair."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(value)
        source, target = value
        return cls(source=source, target=target)

    def key(self) -> frozenset[str]:
        """Direction-independent identity of the edge."""
        return frozenset((self.source, self.target))


LinkLike = ComponentLink | Mapping[str, Any] | tuple[str, str]


def _coerce_links(links: Iterable[LinkLike]) -> list[ComponentLink]:
    return [ComponentLink.coerce(link) for link in links]


# =============================================================================
# Connected groups
# =============================================================================


def _build_graph(links: Iterable[LinkLike]) -> nx.Graph:
    """Undirected link graph; nodes keep first-seen order."""
    graph = nx.Graph()
    graph.add_edges_from((link.source, link.target) for link in _coerce_links(links))
    return graph


def _first_seen_order(graph: nx.Graph) -> dict[str, int]:
    return {node: i for i, node in enumerate(graph)}


def calculate_link_groups(links: Iterable[LinkLike]) -> list[list[str]]:
    """Calculate connected component groups from links.

    Builds an undirected networkx graph and reads its connected components,
    so cycles and long chains are handled without recursion. O(V + E).

    Args:
        links: Link edges as ComponentLink, mappings or (source, target) pairs.

    Returns:
        Groups in first-seen order, and ids within a group in first-seen
        order. Ids that appear in no link are not reported.

    Example:
        >>> calculate_link_groups([("c1", "c2"), ("c2", "c3"), ("c4", "c5")])
        [['c1', 'c2', 'c3'], ['c4', 'c5']]
    """
    graph = _build_graph(links)
    order = _first_seen_order(graph)
    groups = [
        sorted(component, key=order.__getitem__)
        for component in nx.connected_components(graph)
    ]
    groups.sort(key=lambda group: order[group[0]])

    logger.debug(
        f"Found {len(groups)} link groups over {graph.number_of_nodes()} components"
    )
    return groups


def get_component_group(
    component_id: str, links: Iterable[LinkLike], strict: bool = False
) -> list[str] | None:
    """Get the link group a component belongs to.

    Args:
        component_id: Component to look up.
        links: Link edges.
        strict: When True, a component that appears in no link is reported
            as not found (None) instead of as its own singleton group.

    Returns:
        Ids in the same group (including `component_id`), or None.
    """
    graph = _build_graph(links)
    if not graph.has_node(component_id):
        return None if strict else [component_id]
    group = nx.node_connected_component(graph, component_id)
    return sorted(group, key=_first_seen_order(graph).__getitem__)


def are_components_linked(a: str, b: str, links: Iterable[LinkLike]) -> bool:
    """Check whether two components are linked, directly or transitively.

    An unlinked component is linked to nothing, not even itself.
    """
    group = get_component_group(a, links, strict=True)
    return group is not None and b in group


# =============================================================================
# Link validation
# =============================================================================


class LinkErrorCode(str, Enum):
    """Link validation error codes."""

    ORPHAN_SOURCE = "ORPHAN_SOURCE"
    ORPHAN_TARGET = "ORPHAN_TARGET"
    SELF_LOOP = "SELF_LOOP"
    DUPLICATE_LINK = "DUPLICATE_LINK"


@dataclass
class LinkValidationError:
    """A problem with a single link edge.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable description.
        index: Position of the offending link in the input list.
    """

    code: LinkErrorCode
    message: str
    index: int

    def __str__(self) -> str:
        return f"[{self.code.value}] Link {self.index}: {self.message}"


@dataclass
class LinkValidationResult:
    """Outcome of link validation; valid exactly when there are no errors."""

    errors: list[LinkValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def codes(self) -> list[str]:
        return [error.code.value for error in self.errors]


def validate_component_links(
    links: Iterable[LinkLike], valid_ids: Iterable[str]
) -> LinkValidationResult:
    """Validate link edges against the known component ids.

    Each edge is checked independently: unknown source or target ids, self
    loops, and repeats of an earlier edge, where (a, b) and (b, a) are the
    same edge. Every finding is collected; nothing is raised.

    Args:
        links: Link edges to check.
        valid_ids: Ids of the components that exist.

    Returns:
        LinkValidationResult with errors in input order.
    """
    known = set(valid_ids)
    result = LinkValidationResult()
    seen: set[frozenset[str]] = set()

    for index, link in enumerate(_coerce_links(links)):
        if link.source not in known:
            result.errors.append(
                LinkValidationError(
                    code=LinkErrorCode.ORPHAN_SOURCE,
                    message=f'Source component "{link.source}" does not exist',
                    index=index,
                )
            )
        if link.target not in known:
            result.errors.append(
                LinkValidationError(
                    code=LinkErrorCode.ORPHAN_TARGET,
                    message=f'Target component "{link.target}" does not exist',
                    index=index,
                )
            )
        if link.source == link.target:
            result.errors.append(
                LinkValidationError(
                    code=LinkErrorCode.SELF_LOOP,
                    message=f"Self-loop detected ({link.source} -> {link.source})",
                    index=index,
                )
            )

        key = link.key()
        if key in seen:
            result.errors.append(
                LinkValidationError(
                    code=LinkErrorCode.DUPLICATE_LINK,
                    message=f"Duplicate link ({link.source} <-> {link.target})",
                    index=index,
                )
            )
        seen.add(key)

    logger.debug(f"Validated links: {len(result.errors)} errors")
    return result


# =============================================================================
# Union-find helpers
# =============================================================================


def _edge_pair(edge: Any) -> tuple[Any, Any]:
    if isinstance(edge, ComponentLink):
        return edge.source, edge.target
    if isinstance(edge, Mapping):
        return edge["source"], edge["target"]
    source, target = edge
    return source, target


def _union_all(elements: Iterable[T], edges: Iterable[Any]) -> UnionFind:
    uf = UnionFind(elements)
    for edge in edges:
        uf.union(*_edge_pair(edge))
    return uf


def calculate_connected_groups(
    elements: Iterable[T], edges: Iterable[Any]
) -> dict[T, list[T]]:
    """Group elements by connectivity using union-find.

    Unlike `calculate_link_groups`, every listed element is reported, so
    unlinked elements appear as singleton groups. Elements named only by
    an edge are added as they are seen.

    Returns:
        Mapping of group representative to its members, members in
        first-seen order.
    """
    uf = _union_all(elements, edges)
    groups: dict[T, list[T]] = {}
    for element in list(uf.parents):
        groups.setdefault(uf[element], []).append(element)
    return groups


def get_connected_group(
    element: T, elements: Iterable[T], edges: Iterable[Any]
) -> list[T]:
    """Members of the union-find group containing `element`."""
    uf = _union_all(elements, edges)
    root = uf[element]
    return [member for member in list(uf.parents) if uf[member] == root]


__all__ = [
    "ComponentLink",
    "LinkLike",
    "calculate_link_groups",
    "get_component_group",
    "are_components_linked",
    "LinkErrorCode",
    "LinkValidationError",
    "LinkValidationResult",
    "validate_component_links",
    "calculate_connected_groups",
    "get_connected_group",
]
