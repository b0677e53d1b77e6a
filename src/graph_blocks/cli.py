"""
Command-line front end.

Loads a graph persistence document, runs the structural analysis and
prints the result.

Usage:
    graph-blocks graph.json
    graph-blocks graph.json --trace
    graph-blocks graph.json --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .analysis import AnalysisResult, Trace, analyze, analyze_with_trace, format_event
from .graph import Graph
from .serialization import graph_from_json, result_to_dict, trace_to_list
from .validation import ValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-blocks",
        description="Find articulation points, bridges and biconnected components",
    )
    parser.add_argument("graph", type=Path, help="Graph JSON file ({nodes: [...], edges: [...]})")
    parser.add_argument("--trace", action="store_true", help="Also list the traversal steps")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def format_report(graph: Graph, result: AnalysisResult, trace: Optional[Trace] = None) -> str:
    """Plain-text report of an analysis result."""
    lines = [f"Nodes: {graph.num_nodes}  Edges: {graph.num_edges}"]

    aps = ", ".join(str(v) for v in sorted(result.articulation_points)) or "none"
    lines.append(f"Articulation points: {aps}")

    bridges = ", ".join(f"{u}-{v}" for u, v in result.bridges) or "none"
    lines.append(f"Bridges: {bridges}")

    lines.append(f"Biconnected components: {len(result.components)}")
    for comp in result.components:
        verts = ", ".join(str(v) for v in comp.vertices)
        lines.append(f"  [{comp.index}] vertices: {verts} ({len(comp.edges)} edges)")

    if trace is not None:
        lines.append(f"Steps: {len(trace)}")
        for i, event in enumerate(trace, start=1):
            lines.append(f"  {i}. {format_event(event)}")

    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    if out is None:
        out = sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        text = args.graph.read_text(encoding="utf-8")
    except OSError as e:
        print(f"error: cannot read {args.graph}: {e}", file=sys.stderr)
        return 1

    try:
        graph = graph_from_json(text)
    except ValidationError as e:
        print(f"error: {args.graph}: {e}", file=sys.stderr)
        return 1

    trace: Optional[Trace] = None
    if args.trace:
        result, trace = analyze_with_trace(graph)
    else:
        result = analyze(graph)

    if args.json:
        payload = result_to_dict(result)
        if trace is not None:
            payload["trace"] = trace_to_list(trace)
        print(json.dumps(payload, indent=2), file=out)
    else:
        print(format_report(graph, result, trace), file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
