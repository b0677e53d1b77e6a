"""
Input validation utilities.

Graph mutations report failure through boolean return values and never
raise. The exceptions defined here are reserved for data that comes from
outside the model: persistence documents, replay requests and CLI input.
"""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Base exception for validation errors."""

    pass


class InvalidGraphDataError(ValidationError):
    """Raised when a serialized graph document is malformed."""

    pass


class InvalidTraceIndexError(ValidationError):
    """Raised when a replay prefix lies outside the trace."""

    pass


class TraceReplayError(ValidationError):
    """Raised when a trace contradicts itself during replay."""

    pass


def is_valid_node_id(value: Any) -> bool:
    """Check that ``value`` can be used as a node id (non-negative int)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_node_id(value: Any, what: str = "node id") -> int:
    """
    Validate a node id taken from external data.

    Args:
        value: Candidate id
        what: Description used in the error message

    Returns:
        The id as an int

    Raises:
        InvalidGraphDataError: If value is not a non-negative integer
    """
    if not is_valid_node_id(value):
        raise InvalidGraphDataError(f"{what} must be a non-negative integer, got {value!r}")
    return int(value)


def validate_coordinate(value: Any, what: str) -> float:
    """
    Validate a display coordinate.

    Raises:
        InvalidGraphDataError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidGraphDataError(f"{what} must be a number, got {value!r}")
    return float(value)


def validate_prefix(count: int, length: int) -> int:
    """
    Validate a replay prefix length.

    Args:
        count: Number of events to apply
        length: Total number of events in the trace

    Returns:
        Validated count

    Raises:
        InvalidTraceIndexError: If count is not in [0, length]
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidTraceIndexError(f"prefix must be an integer, got {count!r}")
    if count < 0 or count > length:
        raise InvalidTraceIndexError(f"prefix {count} out of bounds [0, {length}]")
    return count


__all__ = [
    "ValidationError",
    "InvalidGraphDataError",
    "InvalidTraceIndexError",
    "TraceReplayError",
    "is_valid_node_id",
    "validate_node_id",
    "validate_coordinate",
    "validate_prefix",
]
