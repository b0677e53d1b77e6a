"""Articulation points, bridges and biconnected components in one DFS pass.

Tarjan's algorithm with an explicit edge stack. The traversal is iterative:
each stack frame holds ``[node, next neighbor position, child count]``, so
path-like graphs of any depth run without growing the interpreter stack.

Two observation modes share the same code path. With tracing enabled every
state change is also recorded as a TraceEvent; the result is identical
either way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import Self

from ..graph import AdjacencySnapshot, Graph
from ._types import AnalysisResult, Component, build_edge_index
from .events import (
    ArticulationMarked,
    BridgeMarked,
    ComponentFinalized,
    EdgePushed,
    LowLinkSource,
    LowLinkUpdated,
    NodeVisited,
    Trace,
    TraceEvent,
)

GraphLike = Union[Graph, AdjacencySnapshot]

# Frame slots of the explicit DFS stack
_NODE = 0
_POS = 1
_CHILDREN = 2

_UNSEEN = -1


class StructuralAnalyzer:
    """
    Single-pass structural analysis of an undirected graph.

    The analyzer works on an AdjacencySnapshot taken when it is created, so
    later edits to the Graph do not affect a run. It keeps no state between
    runs: every call to run() starts from scratch.

    Example:
        analyzer = StructuralAnalyzer(graph, record_trace=True).run()
        analyzer.result.articulation_points
        for event in analyzer.trace:
            ...
    """

    def __init__(self, graph: GraphLike, *, record_trace: bool = False) -> None:
        """
        Initialize the analyzer.

        Args:
            graph: Graph to analyze (a snapshot is taken immediately) or a
                snapshot taken earlier
            record_trace: Record the event trace alongside the result
        """
        self._snapshot = graph.snapshot() if isinstance(graph, Graph) else graph
        self._record_trace = record_trace
        self._result: Optional[AnalysisResult] = None
        self._trace: Optional[Trace] = None

    @property
    def snapshot(self) -> AdjacencySnapshot:
        return self._snapshot

    @property
    def record_trace(self) -> bool:
        return self._record_trace

    @property
    def result(self) -> AnalysisResult:
        if self._result is None:
            raise RuntimeError("run() has not been called")
        return self._result

    @property
    def trace(self) -> Trace:
        if self._trace is None:
            raise RuntimeError("no trace recorded; use record_trace=True and call run()")
        return self._trace

    def run(self) -> Self:
        """Run the traversal over the snapshot. Returns self."""
        snap = self._snapshot
        adj = snap.adjacency
        # Per-node arrays are indexed by insertion position, not by id
        slot = {nid: i for i, nid in enumerate(snap.node_order)}
        n = len(slot)

        disc = np.full(n, _UNSEEN, dtype=np.int64)
        low = np.zeros(n, dtype=np.int64)
        parent = np.full(n, _UNSEEN, dtype=np.int64)

        events: Optional[list[TraceEvent]] = [] if self._record_trace else None
        articulation_points: set[int] = set()
        bridges: list[tuple[int, int]] = []
        components: list[Component] = []
        edge_stack: list[tuple[int, int]] = []
        clock = 0

        def visit(node: int) -> None:
            nonlocal clock
            clock += 1
            disc[slot[node]] = low[slot[node]] = clock
            if events is not None:
                events.append(NodeVisited(node, clock, clock))

        def mark_articulation(node: int) -> None:
            if node in articulation_points:
                return
            articulation_points.add(node)
            if events is not None:
                events.append(ArticulationMarked(node))

        def finalize(edges: list[tuple[int, int]]) -> None:
            verts: set[int] = set()
            for e in edges:
                verts.update(e)
            comp = Component(index=len(components), edges=edges, vertices=sorted(verts))
            components.append(comp)
            if events is not None:
                events.append(
                    ComponentFinalized(comp.index, tuple(comp.edges), tuple(comp.vertices))
                )

        def pop_until(u: int, v: int) -> None:
            popped: list[tuple[int, int]] = []
            while edge_stack:
                e = edge_stack.pop()
                popped.append(e)
                if e == (u, v) or e == (v, u):
                    break
            if popped:
                finalize(popped)

        for root in snap.node_order:
            if disc[slot[root]] != _UNSEEN:
                continue

            visit(root)
            stack: list[list[int]] = [[root, 0, 0]]

            while stack:
                frame = stack[-1]
                u = frame[_NODE]
                su = slot[u]
                neighbors = adj[u]

                if frame[_POS] < len(neighbors):
                    v = neighbors[frame[_POS]]
                    frame[_POS] += 1
                    sv = slot.get(v)
                    if sv is None:
                        continue

                    if disc[sv] == _UNSEEN:
                        parent[sv] = su
                        frame[_CHILDREN] += 1
                        edge_stack.append((u, v))
                        if events is not None:
                            events.append(EdgePushed(u, v, back=False))
                        visit(v)
                        stack.append([v, 0, 0])
                    elif sv != parent[su] and disc[sv] < disc[su]:
                        edge_stack.append((u, v))
                        low[su] = min(low[su], disc[sv])
                        if events is not None:
                            events.append(EdgePushed(u, v, back=True))
                            events.append(
                                LowLinkUpdated(u, int(low[su]), v, LowLinkSource.back_edge)
                            )
                    continue

                # All neighbors of u explored: return to the parent frame
                stack.pop()
                if not stack:
                    break
                v, sv = u, su
                top = stack[-1]
                u = top[_NODE]
                su = slot[u]

                low[su] = min(low[su], low[sv])
                if events is not None:
                    events.append(LowLinkUpdated(u, int(low[su]), v, LowLinkSource.child))

                if parent[su] == _UNSEEN:
                    if top[_CHILDREN] > 1:
                        mark_articulation(u)
                elif low[sv] >= disc[su]:
                    mark_articulation(u)

                if low[sv] > disc[su]:
                    bridges.append((u, v))
                    if events is not None:
                        events.append(BridgeMarked(u, v))

                if low[sv] >= disc[su]:
                    pop_until(u, v)

            # Edges never closed by a child return belong to the root's block
            if edge_stack:
                residue = edge_stack[::-1]
                edge_stack.clear()
                finalize(residue)

        self._result = AnalysisResult(
            articulation_points=articulation_points,
            bridges=bridges,
            components=components,
            edge_to_component=build_edge_index(components),
        )
        self._trace = tuple(events) if events is not None else None
        return self


def analyze(graph: GraphLike) -> AnalysisResult:
    """
    Compute articulation points, bridges and biconnected components.

    Args:
        graph: Graph or AdjacencySnapshot to analyze

    Returns:
        AnalysisResult (empty for an empty graph)
    """
    return StructuralAnalyzer(graph).run().result


def analyze_with_trace(graph: GraphLike) -> tuple[AnalysisResult, Trace]:
    """
    Like analyze(), but also return the ordered event trace of the traversal.

    The result is identical to analyze(graph). The trace can be replayed
    with ``graph_blocks.analysis.replay_trace`` to inspect the traversal
    state after any number of events.
    """
    analyzer = StructuralAnalyzer(graph, record_trace=True).run()
    return analyzer.result, analyzer.trace


__all__ = [
    "GraphLike",
    "StructuralAnalyzer",
    "analyze",
    "analyze_with_trace",
]
