"""Result types of the structural analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..types import EdgeKey, edge_key


@dataclass
class Component:
    """
    A vertex-biconnected component (block).

    Attributes:
        index: Position in AnalysisResult.components
        edges: Edges as (u, v) tuples, in the order they left the edge stack
        vertices: Sorted union of the edge endpoints
    """

    index: int
    edges: list[tuple[int, int]]
    vertices: list[int]

    def edge_keys(self) -> set[EdgeKey]:
        return {edge_key(u, v) for u, v in self.edges}

    def __len__(self) -> int:
        return len(self.edges)


@dataclass
class AnalysisResult:
    """
    Articulation points, bridges and blocks of a graph.

    Only ``articulation_points`` and the set of ``bridges`` are canonical.
    Which edges form which component is intrinsic, but the numbering of
    components and the order of the bridge list follow the traversal's
    neighbor order (ascending ids, roots in node insertion order) and change
    when nodes are relabeled.

    Attributes:
        articulation_points: Cut vertices
        bridges: Cut edges as (parent, child) tree edges, in discovery order
        components: Blocks in the order they were finalized
        edge_to_component: Canonical edge key -> component index
    """

    articulation_points: set[int] = field(default_factory=set)
    bridges: list[tuple[int, int]] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    edge_to_component: dict[EdgeKey, int] = field(default_factory=dict)

    def is_articulation_point(self, node_id: int) -> bool:
        return node_id in self.articulation_points

    def bridge_keys(self) -> set[EdgeKey]:
        return {edge_key(u, v) for u, v in self.bridges}

    def is_bridge(self, a: int, b: int) -> bool:
        return edge_key(a, b) in self.bridge_keys()

    def component_of(self, a: int, b: int) -> Optional[int]:
        """Return the index of the block containing edge {a, b}, if any."""
        return self.edge_to_component.get(edge_key(a, b))

    def summary(self) -> dict[str, Any]:
        """Counts for quick reporting."""
        return {
            "articulation_points": len(self.articulation_points),
            "bridges": len(self.bridges),
            "components": len(self.components),
            "largest_component": max((len(c) for c in self.components), default=0),
        }


def build_edge_index(components: list[Component]) -> dict[EdgeKey, int]:
    """Map every component edge to the index of its component."""
    index: dict[EdgeKey, int] = {}
    for comp in components:
        for u, v in comp.edges:
            index[edge_key(u, v)] = comp.index
    return index


__all__ = [
    "Component",
    "AnalysisResult",
    "build_edge_index",
]
