"""Tests for input validation module."""

import pytest

from graph_blocks.validation import (
    InvalidGraphDataError,
    InvalidTraceIndexError,
    TraceReplayError,
    ValidationError,
    is_valid_node_id,
    validate_coordinate,
    validate_node_id,
    validate_prefix,
)


class TestNodeIdValidation:
    """Tests for node id validation."""

    def test_valid_ids(self):
        """Non-negative ints are accepted."""
        assert validate_node_id(0) == 0
        assert validate_node_id(17) == 17

    @pytest.mark.parametrize("value", [-1, 1.0, "2", None, True])
    def test_invalid_ids_raise(self, value):
        """Anything but a non-negative int raises InvalidGraphDataError."""
        with pytest.raises(InvalidGraphDataError, match="non-negative integer"):
            validate_node_id(value)
        assert not is_valid_node_id(value)

    def test_message_names_field(self):
        with pytest.raises(InvalidGraphDataError, match="edge 3 endpoint a"):
            validate_node_id(-5, "edge 3 endpoint a")


class TestCoordinateValidation:
    def test_numbers_accepted(self):
        assert validate_coordinate(3, "x") == 3.0
        assert validate_coordinate(2.5, "y") == 2.5

    @pytest.mark.parametrize("value", ["1", None, False, [1]])
    def test_non_numbers_raise(self, value):
        with pytest.raises(InvalidGraphDataError, match="x must be a number"):
            validate_coordinate(value, "x")


class TestPrefixValidation:
    def test_bounds_inclusive(self):
        assert validate_prefix(0, 5) == 0
        assert validate_prefix(5, 5) == 5

    def test_out_of_bounds_raises(self):
        with pytest.raises(InvalidTraceIndexError, match=r"out of bounds \[0, 5\]"):
            validate_prefix(6, 5)
        with pytest.raises(InvalidTraceIndexError):
            validate_prefix(-1, 5)

    def test_non_integer_raises(self):
        with pytest.raises(InvalidTraceIndexError, match="must be an integer"):
            validate_prefix(1.5, 5)


class TestExceptionHierarchy:
    """All validation errors share a ValueError base."""

    @pytest.mark.parametrize(
        "exc", [InvalidGraphDataError, InvalidTraceIndexError, TraceReplayError]
    )
    def test_subclasses(self, exc):
        assert issubclass(exc, ValidationError)
        assert issubclass(exc, ValueError)
