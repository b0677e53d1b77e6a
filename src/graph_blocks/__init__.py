"""
graph-blocks: Articulation points, bridges and biconnected components.

This package provides an editable undirected graph model and a single-pass
Tarjan analysis of its structure, with an instrumented mode that records a
replayable event trace for stepwise inspection.

Modules:
- graph: Mutable graph model with canonical edge keys and snapshots
- analysis: Cut vertices, bridges, blocks, trace events and replay
- serialization: JSON persistence of graphs and export of results
"""

__version__ = "0.1.0"

# Analysis
from .analysis import (
    AnalysisResult,
    Block,
    BlockCutTree,
    Component,
    StructuralAnalyzer,
    Trace,
    TraceEvent,
    TraceState,
    TraceStepper,
    analyze,
    analyze_with_trace,
    build_block_cut_tree,
    connected_components,
    format_event,
    is_biconnected,
    is_connected,
    replay_trace,
)

# Graph model
from .graph import AdjacencySnapshot, Graph

# Persistence
from .serialization import (
    graph_from_dict,
    graph_from_json,
    graph_to_dict,
    graph_to_json,
    result_to_dict,
    trace_to_list,
)
from .types import Edge, EdgeKey, Node, edge_key

# Validation
from .validation import (
    InvalidGraphDataError,
    InvalidTraceIndexError,
    TraceReplayError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "Edge",
    "EdgeKey",
    "edge_key",
    # Graph model
    "Graph",
    "AdjacencySnapshot",
    # Analysis
    "StructuralAnalyzer",
    "analyze",
    "analyze_with_trace",
    "AnalysisResult",
    "Component",
    "Trace",
    "TraceEvent",
    "format_event",
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
    # Persistence
    "graph_to_dict",
    "graph_from_dict",
    "graph_to_json",
    "graph_from_json",
    "result_to_dict",
    "trace_to_list",
    # Validation
    "ValidationError",
    "InvalidGraphDataError",
    "InvalidTraceIndexError",
    "TraceReplayError",
]
