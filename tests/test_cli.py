"""Tests for the command-line front end."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from graph_blocks import Graph, analyze
from graph_blocks.cli import format_report, main
from graph_blocks.serialization import graph_to_json


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    g = Graph()
    for _ in range(4):
        g.add_node()
    for a, b in [(0, 1), (1, 2), (2, 0), (2, 3)]:
        g.add_edge(a, b)
    path = tmp_path / "graph.json"
    path.write_text(graph_to_json(g), encoding="utf-8")
    return path


class TestMain:
    def test_text_report(self, graph_file: Path) -> None:
        out = io.StringIO()
        assert main([str(graph_file)], out=out) == 0
        text = out.getvalue()
        assert "Nodes: 4  Edges: 4" in text
        assert "Articulation points: 2" in text
        assert "Bridges: 2-3" in text
        assert "Biconnected components: 2" in text
        assert "Steps:" not in text

    def test_trace_report(self, graph_file: Path) -> None:
        out = io.StringIO()
        assert main([str(graph_file), "--trace"], out=out) == 0
        text = out.getvalue()
        assert "  1. visit 0 (disc=1 low=1)" in text
        assert "mark articulation point 2" in text

    def test_json_output(self, graph_file: Path) -> None:
        out = io.StringIO()
        assert main([str(graph_file), "--json", "--trace"], out=out) == 0
        data = json.loads(out.getvalue())
        assert data["articulation_points"] == [2]
        assert data["trace"][0] == {"type": "node_visited", "node": 0, "disc": 1, "low": 1}

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"edges": []}', encoding="utf-8")
        assert main([str(path)]) == 1
        assert "missing 'nodes'" in capsys.readouterr().err


def test_format_report_empty_graph() -> None:
    g = Graph()
    text = format_report(g, analyze(g))
    assert "Articulation points: none" in text
    assert "Bridges: none" in text
    assert "Biconnected components: 0" in text
