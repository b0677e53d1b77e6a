"""
Mutable undirected graph model.

The Graph owns three structures that are kept in lock-step by every
mutation:

- nodes: insertion-ordered mapping of id -> Node
- edges: mapping of canonical EdgeKey -> Edge
- adjacency: mapping of id -> set of neighbor ids (always symmetric)

Mutations follow a boolean failure contract: an invalid request (self-loop,
duplicate edge, unknown key, id conflict) returns False and leaves the graph
untouched. Analysis runs over an immutable AdjacencySnapshot so the graph
may be edited freely between analysis calls.

Example:
    graph = Graph()
    a = graph.add_node(10, 20)
    b = graph.add_node(30, 40)
    graph.add_edge(a, b)
    graph.add_edge(a, a)  # False, self-loops are rejected
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterator, Optional

from .types import Edge, EdgeKey, Node, edge_key
from .validation import is_valid_node_id, validate_coordinate


@dataclass(frozen=True)
class AdjacencySnapshot:
    """
    Read-only view of a graph taken for one analysis call.

    Attributes:
        node_order: Node ids in insertion order (DFS roots are tried in this order)
        adjacency: Neighbor ids per node, sorted ascending
        id_space: Upper bound (exclusive) on every node id
    """

    node_order: tuple[int, ...]
    adjacency: dict[int, tuple[int, ...]]
    id_space: int

    @property
    def num_nodes(self) -> int:
        return len(self.node_order)

    @property
    def num_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self.adjacency.values()) // 2


class Graph:
    """
    Undirected simple graph with auto-assigned integer node ids.

    Attributes:
        nodes: Nodes in insertion order
        edges: Edges in insertion order
        next_id: Id the next add_node call will assign
    """

    def __init__(self, *, default_position: tuple[float, float] = (100.0, 100.0)) -> None:
        """
        Initialize an empty graph.

        Args:
            default_position: Coordinates given to nodes added without any
        """
        self._default_position = (
            validate_coordinate(default_position[0], "default x"),
            validate_coordinate(default_position[1], "default y"),
        )
        self._nodes: dict[int, Node] = {}
        self._edges: dict[EdgeKey, Edge] = {}
        self._adj: dict[int, set[int]] = {}
        self._next_id = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges.values())

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def default_position(self) -> tuple[float, float]:
        return self._default_position

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[int]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def node_ids(self) -> list[int]:
        return list(self._nodes)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def get_node(self, node_id: int) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_edge(self, a: int, b: int) -> bool:
        return edge_key(a, b) in self._edges

    def get_edge(self, a: int, b: int) -> Optional[Edge]:
        return self._edges.get(edge_key(a, b))

    def edge_keys(self) -> list[EdgeKey]:
        return list(self._edges)

    def neighbors(self, node_id: int) -> set[int]:
        """Return a copy of the neighbor set of ``node_id`` (empty if unknown)."""
        return set(self._adj.get(node_id, ()))

    def degree(self, node_id: int) -> int:
        return len(self._adj.get(node_id, ()))

    def isolated_nodes(self) -> list[int]:
        """Return ids of nodes without incident edges, in insertion order."""
        return [nid for nid in self._nodes if not self._adj.get(nid)]

    @staticmethod
    def edge_key(a: int, b: int) -> EdgeKey:
        """Canonical ``(min, max)`` key for the unordered pair ``{a, b}``."""
        return edge_key(a, b)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(self, x: Optional[float] = None, y: Optional[float] = None) -> int:
        """
        Add a node and return its id.

        Args:
            x: X coordinate (defaults to the configured default position)
            y: Y coordinate (defaults to the configured default position)

        Returns:
            The newly allocated id
        """
        node_id = self._next_id
        self._next_id += 1
        self._nodes[node_id] = Node(
            id=node_id,
            x=self._default_position[0] if x is None else x,
            y=self._default_position[1] if y is None else y,
        )
        self._adj[node_id] = set()
        return node_id

    def add_edge(self, a: int, b: int, directed: bool = False) -> bool:
        """
        Add an edge between two existing nodes.

        Fails (returns False, no mutation) for self-loops, unknown endpoints
        and pairs that are already connected in either orientation.

        Args:
            a: First endpoint
            b: Second endpoint
            directed: Display-only direction flag

        Returns:
            True if the edge was inserted
        """
        if a == b:
            return False
        if a not in self._nodes or b not in self._nodes:
            return False
        key = edge_key(a, b)
        if key in self._edges:
            return False

        if directed:
            self._edges[key] = Edge(a, b, directed=True)
        else:
            self._edges[key] = Edge(key[0], key[1])
        self._adj[a].add(b)
        self._adj[b].add(a)
        return True

    def delete_edge(self, a: int, b: int) -> bool:
        """Remove the edge between ``a`` and ``b``; False if there is none."""
        return self.delete_edge_by_key(edge_key(a, b))

    def delete_edge_by_key(self, key: EdgeKey) -> bool:
        """Remove the edge stored under ``key``; False if the key is absent."""
        edge = self._edges.pop(key, None)
        if edge is None:
            return False
        if edge.a in self._adj:
            self._adj[edge.a].discard(edge.b)
        if edge.b in self._adj:
            self._adj[edge.b].discard(edge.a)
        return True

    def delete_node(self, node_id: int) -> bool:
        """
        Remove a node together with all incident edges.

        Always succeeds: deleting an absent id still scrubs any stray
        references to it from the adjacency index and the edge collection.
        """
        self._nodes.pop(node_id, None)

        for nbr in self._adj.pop(node_id, set()):
            if nbr in self._adj:
                self._adj[nbr].discard(node_id)
        for nbrs in self._adj.values():
            nbrs.discard(node_id)

        stale = [key for key, e in self._edges.items() if node_id in (e.a, e.b)]
        for key in stale:
            del self._edges[key]
        return True

    def rename_node(self, old_id: int, new_id: int) -> bool:
        """
        Give node ``old_id`` the id ``new_id``.

        Fails without mutation when ``old_id`` is unknown, ``new_id`` is not
        a non-negative integer, or ``new_id`` already denotes another node.
        Neighbor references and edge keys are rewritten, and the allocator
        is advanced past ``new_id``.

        Returns:
            True if the node now carries ``new_id``
        """
        if old_id not in self._nodes or not is_valid_node_id(new_id):
            return False
        if old_id == new_id:
            return True
        if new_id in self._nodes:
            return False

        # Rebuild the node mapping so the renamed node keeps its position
        self._nodes = {
            (new_id if nid == old_id else nid): node for nid, node in self._nodes.items()
        }
        self._nodes[new_id].id = new_id

        neighbors = self._adj.pop(old_id, set())
        self._adj[new_id] = neighbors
        for nbr in neighbors:
            nbr_set = self._adj[nbr]
            nbr_set.discard(old_id)
            nbr_set.add(new_id)

        edges: dict[EdgeKey, Edge] = {}
        for edge in self._edges.values():
            a = new_id if edge.a == old_id else edge.a
            b = new_id if edge.b == old_id else edge.b
            if edge.directed:
                renamed = Edge(a, b, directed=True)
            else:
                u, v = edge_key(a, b)
                renamed = Edge(u, v)
            edges[renamed.key] = renamed
        self._edges = edges

        self._next_id = max(self._next_id, new_id + 1)
        return True

    def clear(self) -> None:
        """Reset to the empty graph and restart id allocation at 0."""
        self._nodes = {}
        self._edges = {}
        self._adj = {}
        self._next_id = 0

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def snapshot(self) -> AdjacencySnapshot:
        """
        Take an independent, read-only adjacency view for analysis.

        Neighbors are sorted ascending; that order is the fixed neighbor
        iteration order of the analysis.
        """
        adjacency = {
            nid: tuple(sorted(n for n in self._adj.get(nid, ()) if n in self._nodes))
            for nid in self._nodes
        }
        id_space = max(self._next_id, max(self._nodes, default=-1) + 1)
        return AdjacencySnapshot(
            node_order=tuple(self._nodes),
            adjacency=adjacency,
            id_space=id_space,
        )

    def copy(self) -> Graph:
        """Return an independent deep copy (ids and allocator included)."""
        return copy.deepcopy(self)


__all__ = [
    "AdjacencySnapshot",
    "Graph",
]
