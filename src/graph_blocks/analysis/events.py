"""Trace events emitted by the instrumented traversal.

The trace is a closed set of immutable event records. Each record carries
exactly the data a stepwise consumer needs to rebuild the traversal state:
visited nodes with their discovery times, the logical edge stack, low-link
relaxations, marked articulation points and bridges, and finalized blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Union


class EventKind(IntEnum):
    """
    Kinds of traversal events.

    - node_visited: A node received its discovery time
    - edge_pushed: A tree or back edge was pushed on the edge stack
    - low_updated: A node's low-link value was relaxed
    - articulation_marked: A node was first recognized as a cut vertex
    - bridge_marked: A tree edge was recognized as a bridge
    - component_finalized: Edges were popped off the stack as one block
    """

    node_visited = 0
    edge_pushed = 1
    low_updated = 2
    articulation_marked = 3
    bridge_marked = 4
    component_finalized = 5


class LowLinkSource(IntEnum):
    """Where a low-link relaxation came from."""

    child = 0
    back_edge = 1


@dataclass(frozen=True)
class NodeVisited:
    node: int
    disc: int
    low: int

    kind: ClassVar[EventKind] = EventKind.node_visited


@dataclass(frozen=True)
class EdgePushed:
    """Edge (u, v) pushed while exploring from u; ``back`` marks non-tree edges."""

    u: int
    v: int
    back: bool = False

    kind: ClassVar[EventKind] = EventKind.edge_pushed


@dataclass(frozen=True)
class LowLinkUpdated:
    """
    low[node] became ``low`` after looking at ``source``.

    ``source`` is the child whose subtree finished (LowLinkSource.child) or
    the ancestor reached through a back edge (LowLinkSource.back_edge).
    The event is emitted on every relaxation attempt, even if the value
    did not decrease.
    """

    node: int
    low: int
    source: int
    via: LowLinkSource

    kind: ClassVar[EventKind] = EventKind.low_updated


@dataclass(frozen=True)
class ArticulationMarked:
    node: int

    kind: ClassVar[EventKind] = EventKind.articulation_marked


@dataclass(frozen=True)
class BridgeMarked:
    u: int
    v: int

    kind: ClassVar[EventKind] = EventKind.bridge_marked


@dataclass(frozen=True)
class ComponentFinalized:
    """
    A biconnected component was popped off the edge stack.

    Attributes:
        index: Sequential component index (matches AnalysisResult.components)
        edges: Popped edges, top of the stack first
        vertices: Sorted vertex set of the component
    """

    index: int
    edges: tuple[tuple[int, int], ...]
    vertices: tuple[int, ...]

    kind: ClassVar[EventKind] = EventKind.component_finalized


TraceEvent = Union[
    NodeVisited,
    EdgePushed,
    LowLinkUpdated,
    ArticulationMarked,
    BridgeMarked,
    ComponentFinalized,
]

Trace = tuple[TraceEvent, ...]


def _pair(u: int, v: int) -> str:
    return f"{u}-{v}"


def format_event(event: TraceEvent) -> str:
    """Render one event as a short human-readable step description."""
    if isinstance(event, NodeVisited):
        return f"visit {event.node} (disc={event.disc} low={event.low})"
    if isinstance(event, EdgePushed):
        suffix = " (back)" if event.back else ""
        return f"push edge {_pair(event.u, event.v)}{suffix}"
    if isinstance(event, LowLinkUpdated):
        origin = "child" if event.via is LowLinkSource.child else "back edge to"
        return f"update low[{event.node}] = {event.low} from {origin} {event.source}"
    if isinstance(event, ArticulationMarked):
        return f"mark articulation point {event.node}"
    if isinstance(event, BridgeMarked):
        return f"mark bridge {_pair(event.u, event.v)}"
    if isinstance(event, ComponentFinalized):
        verts = ", ".join(str(v) for v in event.vertices)
        return f"pop component {event.index}: verts={verts}"
    raise TypeError(f"Unknown trace event: {event!r}")


def event_to_dict(event: TraceEvent) -> dict[str, Any]:
    """Convert an event to a JSON-ready dict tagged with its kind name."""
    record: dict[str, Any]
    if isinstance(event, NodeVisited):
        record = dict(node=event.node, disc=event.disc, low=event.low)
    elif isinstance(event, EdgePushed):
        record = dict(u=event.u, v=event.v, back=event.back)
    elif isinstance(event, LowLinkUpdated):
        record = dict(node=event.node, low=event.low, source=event.source, via=event.via.name)
    elif isinstance(event, ArticulationMarked):
        record = dict(node=event.node)
    elif isinstance(event, BridgeMarked):
        record = dict(u=event.u, v=event.v)
    elif isinstance(event, ComponentFinalized):
        record = dict(
            index=event.index,
            edges=[list(e) for e in event.edges],
            vertices=list(event.vertices),
        )
    else:
        raise TypeError(f"Unknown trace event: {event!r}")
    return {"type": event.kind.name, **record}


__all__ = [
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
]
