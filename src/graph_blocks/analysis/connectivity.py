"""
Connectivity queries built on the graph snapshot and the block analysis.

- connected_components: Node sets of the connected components (BFS)
- is_connected: Whether the graph has at most one connected component
- is_biconnected: Whether the graph is connected and has no cut vertex
"""

from __future__ import annotations

from collections import deque

from ..graph import Graph
from .tarjan import GraphLike, analyze


def connected_components(graph: GraphLike) -> list[list[int]]:
    """
    Find connected components.

    Isolated nodes form singleton components. Components are listed in
    the order of their first node, nodes within a component in BFS order.

    Args:
        graph: Graph or AdjacencySnapshot

    Returns:
        List of components, each a list of node ids

    Example:
        >>> g = Graph()
        >>> a, b, c = g.add_node(), g.add_node(), g.add_node()
        >>> g.add_edge(a, b)
        True
        >>> connected_components(g)
        [[0, 1], [2]]
    """
    snap = graph.snapshot() if isinstance(graph, Graph) else graph
    adj = snap.adjacency

    visited: set[int] = set()
    components: list[list[int]] = []

    for start in snap.node_order:
        if start in visited:
            continue

        component: list[int] = []
        queue: deque[int] = deque([start])
        visited.add(start)

        while queue:
            node = queue.popleft()
            component.append(node)

            for neighbor in adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        components.append(component)

    return components


def is_connected(graph: GraphLike) -> bool:
    """Check if the graph is connected (the empty graph counts as connected)."""
    return len(connected_components(graph)) <= 1


def is_biconnected(graph: GraphLike) -> bool:
    """
    Check if the graph is biconnected.

    A graph is biconnected when it is connected, has at least two nodes
    and no articulation point. A single edge (K2) counts as biconnected.
    """
    snap = graph.snapshot() if isinstance(graph, Graph) else graph
    if snap.num_nodes < 2 or not is_connected(snap):
        return False
    return not analyze(snap).articulation_points


__all__ = [
    "connected_components",
    "is_connected",
    "is_biconnected",
]
