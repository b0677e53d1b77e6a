"""Tests for graph persistence and result export."""

from __future__ import annotations

import json

import pytest

from graph_blocks import Graph, analyze, analyze_with_trace
from graph_blocks.serialization import (
    graph_from_dict,
    graph_from_json,
    graph_to_dict,
    graph_to_json,
    result_to_dict,
    trace_to_list,
)
from graph_blocks.validation import InvalidGraphDataError


def _sample_graph() -> Graph:
    g = Graph()
    a = g.add_node(10, 20)
    b = g.add_node(30, 40)
    c = g.add_node(50, 60)
    g.add_edge(a, b)
    g.add_edge(c, b, directed=True)
    return g


class TestGraphToDict:
    def test_document_shape(self) -> None:
        assert graph_to_dict(_sample_graph()) == {
            "nodes": [
                {"id": 0, "x": 10, "y": 20},
                {"id": 1, "x": 30, "y": 40},
                {"id": 2, "x": 50, "y": 60},
            ],
            "edges": [
                {"a": 0, "b": 1, "directed": False},
                {"a": 2, "b": 1, "directed": True},
            ],
        }

    def test_json_is_valid(self) -> None:
        data = json.loads(graph_to_json(_sample_graph(), indent=2))
        assert len(data["nodes"]) == 3


class TestRoundTrip:
    """Loading preserves endpoints and directed flags."""

    def test_round_trip(self) -> None:
        g = _sample_graph()
        h = graph_from_json(graph_to_json(g))
        assert graph_to_dict(h) == graph_to_dict(g)
        assert analyze(h) == analyze(g)

    def test_ids_remapped_through_add_node(self) -> None:
        g = _sample_graph()
        g.rename_node(0, 40)
        g.delete_node(1)
        g.add_edge(40, 2, directed=True)
        h = graph_from_dict(graph_to_dict(g))
        assert h.node_ids() == [0, 1]
        assert h.next_id == 2
        edge = h.get_edge(0, 1)
        assert edge is not None
        assert (edge.a, edge.b, edge.directed) == (0, 1, True)
        node = h.get_node(0)
        assert node is not None and (node.x, node.y) == (10, 20)

    def test_load_into_existing_graph_clears_it(self) -> None:
        target = Graph()
        for _ in range(5):
            target.add_node()
        result = graph_from_dict(graph_to_dict(_sample_graph()), target)
        assert result is target
        assert target.num_nodes == 3
        assert target.num_edges == 2

    def test_missing_coordinates_use_default(self) -> None:
        g = graph_from_dict({"nodes": [{"id": 3}], "edges": []})
        node = g.get_node(0)
        assert node is not None
        assert (node.x, node.y) == g.default_position

    def test_edges_key_optional(self) -> None:
        g = graph_from_dict({"nodes": [{"id": 0}, {"id": 1}]})
        assert g.num_nodes == 2
        assert g.num_edges == 0


class TestLoadingEdgeCases:
    def test_unknown_endpoint_warns_and_skips(self) -> None:
        data = {
            "nodes": [{"id": 0}, {"id": 1}],
            "edges": [{"a": 0, "b": 1}, {"a": 1, "b": 9}],
        }
        with pytest.warns(UserWarning, match="Skipped 1 edge"):
            g = graph_from_dict(data)
        assert g.edge_keys() == [(0, 1)]

    def test_duplicates_and_self_loops_skipped(self) -> None:
        data = {
            "nodes": [{"id": 0}, {"id": 1}],
            "edges": [{"a": 0, "b": 1}, {"a": 1, "b": 0}, {"a": 1, "b": 1}],
        }
        g = graph_from_dict(data)
        assert g.num_edges == 1

    @pytest.mark.parametrize(
        "data,message",
        [
            ([], "must be a mapping"),
            ({}, "missing 'nodes'"),
            ({"nodes": {}}, "must be a list"),
            ({"nodes": [{"x": 1}]}, "expected a mapping with an 'id'"),
            ({"nodes": [{"id": -2}]}, "non-negative integer"),
            ({"nodes": [{"id": 0}, {"id": 0}]}, "duplicate id"),
            ({"nodes": [{"id": 0, "x": "left"}]}, "must be a number"),
            ({"nodes": [{"id": 0}], "edges": [{"a": 0}]}, "'a' and 'b'"),
            ({"nodes": [{"id": 0}], "edges": [{"a": 0, "b": "1"}]}, "non-negative integer"),
        ],
    )
    def test_malformed_documents(self, data: object, message: str) -> None:
        with pytest.raises(InvalidGraphDataError, match=message):
            graph_from_dict(data)  # type: ignore[arg-type]

    def test_malformed_document_leaves_target_untouched(self) -> None:
        target = _sample_graph()
        with pytest.raises(InvalidGraphDataError):
            graph_from_dict({"nodes": [{"id": "a"}]}, target)
        assert target.num_nodes == 3

    def test_invalid_json(self) -> None:
        with pytest.raises(InvalidGraphDataError, match="invalid JSON"):
            graph_from_json("{nodes:")


class TestResultExport:
    def test_result_to_dict(self) -> None:
        g = Graph()
        for _ in range(4):
            g.add_node()
        for a, b in [(0, 1), (1, 2), (2, 0), (2, 3)]:
            g.add_edge(a, b)
        data = result_to_dict(analyze(g))
        assert data["articulation_points"] == [2]
        assert data["bridges"] == [[2, 3]]
        assert len(data["components"]) == 2
        assert {"a": 2, "b": 3, "component": 0} in data["edge_to_component"]
        json.dumps(data)

    def test_trace_to_list(self) -> None:
        g = Graph()
        g.add_node()
        g.add_node()
        g.add_edge(0, 1)
        _, trace = analyze_with_trace(g)
        records = trace_to_list(trace)
        assert [r["type"] for r in records] == [
            "node_visited",
            "edge_pushed",
            "node_visited",
            "low_updated",
            "bridge_marked",
            "component_finalized",
        ]
        json.dumps(records)
