"""Reconstruct traversal state from a prefix of an event trace.

Replaying the first ``k`` events yields exactly the state the traversal
had right after emitting its ``k``-th event: which nodes are visited and
with which discovery/low-link values, which edges are still pending on
the edge stack, and which blocks, bridges and cut vertices are already
final. A stepper walks the trace forward and backward for stepwise
inspection; pacing is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..types import EdgeKey, edge_key
from ..validation import TraceReplayError, validate_prefix
from ._types import AnalysisResult, Component, build_edge_index
from .events import (
    ArticulationMarked,
    BridgeMarked,
    ComponentFinalized,
    EdgePushed,
    LowLinkUpdated,
    NodeVisited,
    TraceEvent,
)


@dataclass
class TraceState:
    """
    Traversal state after a number of trace events.

    Attributes:
        steps: Number of events applied
        visited: Visited nodes in discovery order
        current: Most recently visited node
        discovery: Discovery time per visited node
        low: Current low-link value per visited node
        pending_edges: Edge stack, bottom first
        articulation_points: Cut vertices marked so far
        bridges: Bridges marked so far
        components: Blocks finalized so far
    """

    steps: int = 0
    visited: list[int] = field(default_factory=list)
    current: Optional[int] = None
    discovery: dict[int, int] = field(default_factory=dict)
    low: dict[int, int] = field(default_factory=dict)
    pending_edges: list[tuple[int, int]] = field(default_factory=list)
    articulation_points: set[int] = field(default_factory=set)
    bridges: list[tuple[int, int]] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)

    @property
    def edge_to_component(self) -> dict[EdgeKey, int]:
        return build_edge_index(self.components)

    def pending_edge_keys(self) -> set[EdgeKey]:
        return {edge_key(u, v) for u, v in self.pending_edges}

    def finalized_edge_keys(self) -> set[EdgeKey]:
        keys: set[EdgeKey] = set()
        for comp in self.components:
            keys |= comp.edge_keys()
        return keys

    def apply(self, event: TraceEvent) -> None:
        """
        Advance the state by one event.

        Raises:
            TraceReplayError: If the event contradicts the state built so far
        """
        if isinstance(event, NodeVisited):
            if event.node in self.discovery:
                raise TraceReplayError(f"node {event.node} visited twice")
            self.visited.append(event.node)
            self.current = event.node
            self.discovery[event.node] = event.disc
            self.low[event.node] = event.low
        elif isinstance(event, EdgePushed):
            self.pending_edges.append((event.u, event.v))
        elif isinstance(event, LowLinkUpdated):
            if event.node not in self.discovery:
                raise TraceReplayError(f"low-link update for unvisited node {event.node}")
            self.low[event.node] = event.low
        elif isinstance(event, ArticulationMarked):
            self.articulation_points.add(event.node)
        elif isinstance(event, BridgeMarked):
            self.bridges.append((event.u, event.v))
        elif isinstance(event, ComponentFinalized):
            self._pop_component(event)
        else:
            raise TypeError(f"Unknown trace event: {event!r}")
        self.steps += 1

    def _pop_component(self, event: ComponentFinalized) -> None:
        if event.index != len(self.components):
            raise TraceReplayError(
                f"component {event.index} finalized, expected index {len(self.components)}"
            )
        count = len(event.edges)
        if count == 0 or count > len(self.pending_edges):
            raise TraceReplayError(
                f"component {event.index} pops {count} edges, "
                f"{len(self.pending_edges)} pending"
            )
        # Events list popped edges top first
        top = self.pending_edges[-count:][::-1]
        if top != list(event.edges):
            raise TraceReplayError(
                f"component {event.index} edges {list(event.edges)} "
                f"do not match the top of the edge stack {top}"
            )
        del self.pending_edges[-count:]
        self.components.append(
            Component(index=event.index, edges=list(event.edges), vertices=list(event.vertices))
        )

    def to_result(self) -> AnalysisResult:
        """Package the finalized parts of the state as an AnalysisResult."""
        return AnalysisResult(
            articulation_points=set(self.articulation_points),
            bridges=list(self.bridges),
            components=[
                Component(index=c.index, edges=list(c.edges), vertices=list(c.vertices))
                for c in self.components
            ],
            edge_to_component=self.edge_to_component,
        )


def replay_trace(trace: Sequence[TraceEvent], count: Optional[int] = None) -> TraceState:
    """
    Replay the first ``count`` events of a trace.

    Args:
        trace: Event trace from analyze_with_trace()
        count: Number of events to apply (default: the whole trace)

    Returns:
        TraceState after ``count`` events

    Raises:
        InvalidTraceIndexError: If count is not in [0, len(trace)]
        TraceReplayError: If the trace is internally inconsistent
    """
    if count is None:
        count = len(trace)
    validate_prefix(count, len(trace))

    state = TraceState()
    for event in trace[:count]:
        state.apply(event)
    return state


class TraceStepper:
    """
    Cursor over a trace for stepwise inspection.

    ``position`` counts applied events: 0 shows the initial state,
    ``len(trace)`` the final one. Stepping forward applies one event;
    stepping back or seeking backward replays from the start.

    Example:
        stepper = TraceStepper(trace)
        while stepper.step_forward():
            show(stepper.state)
    """

    def __init__(self, trace: Sequence[TraceEvent]) -> None:
        self._trace = tuple(trace)
        self._state = TraceState()

    @property
    def trace(self) -> tuple[TraceEvent, ...]:
        return self._trace

    @property
    def position(self) -> int:
        return self._state.steps

    @property
    def state(self) -> TraceState:
        return self._state

    @property
    def at_start(self) -> bool:
        return self.position == 0

    @property
    def at_end(self) -> bool:
        return self.position == len(self._trace)

    @property
    def last_event(self) -> Optional[TraceEvent]:
        """The event applied most recently, if any."""
        return self._trace[self.position - 1] if self.position else None

    def __len__(self) -> int:
        return len(self._trace)

    def step_forward(self) -> bool:
        """Apply the next event. Returns False when already at the end."""
        if self.at_end:
            return False
        self._state.apply(self._trace[self.position])
        return True

    def step_back(self) -> bool:
        """Undo the last event. Returns False when already at the start."""
        if self.at_start:
            return False
        self.seek(self.position - 1)
        return True

    def seek(self, count: int) -> TraceState:
        """Move to the state after ``count`` events and return it."""
        validate_prefix(count, len(self._trace))
        if count < self.position:
            self._state = TraceState()
        while self.position < count:
            self._state.apply(self._trace[self.position])
        return self._state

    def reset(self) -> None:
        self._state = TraceState()


__all__ = [
    "TraceState",
    "TraceStepper",
    "replay_trace",
]
