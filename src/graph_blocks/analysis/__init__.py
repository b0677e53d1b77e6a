"""Structural analysis: articulation points, bridges and blocks.

Runs Tarjan's single-pass DFS over a graph snapshot. The instrumented
variant additionally returns an ordered trace of traversal events that
can be replayed to any prefix for stepwise inspection.

Public API:
    analyze(graph) -> AnalysisResult
    analyze_with_trace(graph) -> (AnalysisResult, Trace)
    replay_trace(trace, count) -> TraceState
    build_block_cut_tree(result) -> BlockCutTree
"""

from __future__ import annotations

from ._types import AnalysisResult, Component
from .block_cut_tree import Block, BlockCutTree, build_block_cut_tree
from .connectivity import connected_components, is_biconnected, is_connected
from .events import (
    ArticulationMarked,
    BridgeMarked,
    ComponentFinalized,
    EdgePushed,
    EventKind,
    LowLinkSource,
    LowLinkUpdated,
    NodeVisited,
    Trace,
    TraceEvent,
    event_to_dict,
    format_event,
)
from .replay import TraceState, TraceStepper, replay_trace
from .tarjan import StructuralAnalyzer, analyze, analyze_with_trace

__all__ = [
    # Analysis
    "StructuralAnalyzer",
    "analyze",
    "analyze_with_trace",
    "AnalysisResult",
    "Component",
    # Trace events
    "EventKind",
    "LowLinkSource",
    "NodeVisited",
    "EdgePushed",
    "LowLinkUpdated",
    "ArticulationMarked",
    "BridgeMarked",
    "ComponentFinalized",
    "TraceEvent",
    "Trace",
    "format_event",
    "event_to_dict",
    # Replay
    "TraceState",
    "TraceStepper",
    "replay_trace",
    # Block-cut tree
    "Block",
    "BlockCutTree",
    "build_block_cut_tree",
    # Connectivity
    "connected_components",
    "is_connected",
    "is_biconnected",
]
