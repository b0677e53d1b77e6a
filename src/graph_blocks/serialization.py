"""
Graph persistence and result export.

The persistence document is a plain mapping::

    {"nodes": [{"id": 0, "x": 10.0, "y": 20.0}, ...],
     "edges": [{"a": 0, "b": 1, "directed": false}, ...]}

Loading re-creates the nodes through Graph.add_node in document order, so
node ids are remapped to 0..n-1; edge endpoints and directed flags are
preserved through that mapping.

Example:
    text = graph_to_json(graph)
    restored = graph_from_json(text)
"""

from __future__ import annotations

import json
import warnings
from typing import Any, Mapping, Optional, Sequence

from .analysis import AnalysisResult, TraceEvent, event_to_dict
from .graph import Graph
from .validation import InvalidGraphDataError, validate_coordinate, validate_node_id


def graph_to_dict(graph: Graph) -> dict[str, Any]:
    """Serialize a graph to the persistence document format."""
    return {
        "nodes": [node.to_dict() for node in graph.nodes],
        "edges": [edge.to_dict() for edge in graph.edges],
    }


def graph_from_dict(data: Mapping[str, Any], graph: Optional[Graph] = None) -> Graph:
    """
    Build a graph from a persistence document.

    Edges referencing ids not listed under "nodes" are skipped with a
    warning. Duplicate edges and self-loops are skipped silently, exactly
    as Graph.add_edge rejects them.

    Args:
        data: Document with "nodes" and "edges" lists
        graph: Graph to load into (cleared first). A new Graph if None.

    Returns:
        The populated graph

    Raises:
        InvalidGraphDataError: If the document is malformed
    """
    if not isinstance(data, Mapping):
        raise InvalidGraphDataError(f"graph document must be a mapping, got {type(data).__name__}")
    nodes = _get_list(data, "nodes")
    edges = _get_list(data, "edges", required=False)

    # Validate everything before touching the target graph
    parsed_nodes: list[tuple[int, Optional[float], Optional[float]]] = []
    seen: set[int] = set()
    for i, nd in enumerate(nodes):
        if not isinstance(nd, Mapping) or "id" not in nd:
            raise InvalidGraphDataError(f"node {i}: expected a mapping with an 'id'")
        node_id = validate_node_id(nd["id"], f"node {i} id")
        if node_id in seen:
            raise InvalidGraphDataError(f"node {i}: duplicate id {node_id}")
        seen.add(node_id)
        x = validate_coordinate(nd["x"], f"node {i} x") if "x" in nd else None
        y = validate_coordinate(nd["y"], f"node {i} y") if "y" in nd else None
        parsed_nodes.append((node_id, x, y))

    parsed_edges: list[tuple[int, int, bool]] = []
    for i, e in enumerate(edges):
        if not isinstance(e, Mapping) or "a" not in e or "b" not in e:
            raise InvalidGraphDataError(f"edge {i}: expected a mapping with 'a' and 'b'")
        a = validate_node_id(e["a"], f"edge {i} endpoint a")
        b = validate_node_id(e["b"], f"edge {i} endpoint b")
        parsed_edges.append((a, b, bool(e.get("directed", False))))

    if graph is None:
        graph = Graph()
    graph.clear()

    mapping: dict[int, int] = {}
    for node_id, x, y in parsed_nodes:
        mapping[node_id] = graph.add_node(x, y)

    skipped = 0
    for a, b, directed in parsed_edges:
        if a not in mapping or b not in mapping:
            skipped += 1
            continue
        graph.add_edge(mapping[a], mapping[b], directed)

    if skipped:
        warnings.warn(
            f"Skipped {skipped} edge(s) referencing unknown node ids",
            UserWarning,
            stacklevel=2,
        )

    return graph


def graph_to_json(graph: Graph, indent: Optional[int] = None) -> str:
    return json.dumps(graph_to_dict(graph), indent=indent)


def graph_from_json(text: str, graph: Optional[Graph] = None) -> Graph:
    """
    Parse a JSON persistence document.

    Raises:
        InvalidGraphDataError: If the text is not valid JSON or not a graph document
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidGraphDataError(f"invalid JSON: {e}") from e
    return graph_from_dict(data, graph)


def result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    """Convert an analysis result to JSON-ready data for external renderers."""
    return {
        "articulation_points": sorted(result.articulation_points),
        "bridges": [list(b) for b in result.bridges],
        "components": [
            {
                "index": c.index,
                "edges": [list(e) for e in c.edges],
                "vertices": list(c.vertices),
            }
            for c in result.components
        ],
        "edge_to_component": [
            {"a": a, "b": b, "component": idx}
            for (a, b), idx in sorted(result.edge_to_component.items())
        ],
    }


def trace_to_list(trace: Sequence[TraceEvent]) -> list[dict[str, Any]]:
    return [event_to_dict(event) for event in trace]


def _get_list(data: Mapping[str, Any], key: str, required: bool = True) -> list[Any]:
    if key not in data:
        if required:
            raise InvalidGraphDataError(f"graph document is missing '{key}'")
        return []
    value = data[key]
    if not isinstance(value, list):
        raise InvalidGraphDataError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


__all__ = [
    "graph_to_dict",
    "graph_from_dict",
    "graph_to_json",
    "graph_from_json",
    "result_to_dict",
    "trace_to_list",
]
