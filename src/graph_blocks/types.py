"""
Common types for the graph model and the structural analysis.

This module provides the fundamental types shared by all modules:
- EdgeKey: Canonical (min, max) identifier of an unordered node pair
- Node: Graph vertex carrying display coordinates
- Edge: Unordered connection between two nodes with a display-only direction
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

EdgeKey = tuple[int, int]
"""Canonical key of an unordered edge: ``(min(a, b), max(a, b))``."""


def edge_key(a: int, b: int) -> EdgeKey:
    """Return the canonical key for the unordered pair ``{a, b}``."""
    return (a, b) if a <= b else (b, a)


@dataclass
class Node:
    """
    Graph node.

    Attributes:
        id: Unique identifier assigned by the owning Graph
        x: X coordinate (display only, never read by the analysis)
        y: Y coordinate (display only, never read by the analysis)
    """

    id: int
    x: float = 100.0
    y: float = 100.0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y}


@dataclass
class Edge:
    """
    Edge connecting two nodes.

    Undirected edges are stored with ``a < b``. Directed edges keep the
    orientation they were created with, but the flag is display semantics
    only: the key space is shared and the analysis treats every edge as
    undirected.

    Attributes:
        a: First endpoint
        b: Second endpoint
        directed: Whether the edge is drawn as an arrow from a to b
    """

    a: int
    b: int
    directed: bool = False

    @property
    def key(self) -> EdgeKey:
        return edge_key(self.a, self.b)

    def other(self, node_id: int) -> int:
        """Return the endpoint opposite to ``node_id``."""
        return self.b if node_id == self.a else self.a

    def to_dict(self) -> dict[str, Any]:
        return {"a": self.a, "b": self.b, "directed": self.directed}

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        return f"Edge({self.a} {arrow} {self.b})"


__all__ = [
    "EdgeKey",
    "edge_key",
    "Node",
    "Edge",
]
