"""Unit tests for gridpath_planner validators and messages.

Tests pure validation functions that require no Streamlit or browser interaction.
These validators return Optional[ToastMessage] - None if valid, a message if invalid.
"""

from unittest.mock import patch

import pytest

from gridpath_planner.model.grid import GridSpec
from gridpath_planner.model.message import (
    BoardContextMessage,
    ComputeDoneMessage,
    InvalidDimensionMessage,
    InvalidWeightMessage,
    MessageLevel,
    NoRouteMessage,
    NotEligibleMessage,
    OutOfBoundsMessage,
    PendingRiskyMessage,
)
from gridpath_planner.ui.validators import (
    parse_optional_dimension,
    validate_can_compute,
    validate_dimension,
    validate_in_bounds,
    validate_risk_weight,
)


class TestValidateInBounds:
    """Tests for validate_in_bounds."""

    def test_cell_on_board_is_valid(self, grid_3x2: GridSpec) -> None:
        assert validate_in_bounds(x=2, y=1, grid=grid_3x2) is None

    @pytest.mark.parametrize("x,y", [(3, 0), (0, 2), (-1, 1)])
    def test_cell_off_board_returns_message(self, grid_3x2: GridSpec, x: int, y: int) -> None:
        result = validate_in_bounds(x=x, y=y, grid=grid_3x2)
        assert isinstance(result, OutOfBoundsMessage)
        assert (result.x, result.y, result.max_x, result.max_y) == (x, y, 3, 2)


class TestValidateRiskWeight:
    """Tests for validate_risk_weight."""

    @pytest.mark.parametrize("raw", ["1", "5", "99", " 42 "])
    def test_whole_numbers_in_range_are_valid(self, raw: str) -> None:
        assert validate_risk_weight(raw) is None

    @pytest.mark.parametrize("raw", ["", "0", "100", "-5", "2.5", "five", "٥"])
    def test_invalid_input_returns_message(self, raw: str) -> None:
        result = validate_risk_weight(raw)
        assert isinstance(result, InvalidWeightMessage)
        assert result.raw_value == raw
        assert (result.min_weight, result.max_weight) == (1, 99)


class TestValidateDimension:
    """Tests for validate_dimension and parse_optional_dimension."""

    @pytest.mark.parametrize("raw", ["", "   ", "1", "10", "99"])
    def test_valid_or_empty(self, raw: str) -> None:
        assert validate_dimension(axis="height", raw=raw) is None

    @pytest.mark.parametrize("raw", ["0", "100", "-3", "4.0", "x"])
    def test_invalid_returns_message(self, raw: str) -> None:
        result = validate_dimension(axis="width", raw=raw)
        assert isinstance(result, InvalidDimensionMessage)
        assert result.axis == "width"
        assert "Width" in result.message

    @pytest.mark.parametrize("raw,expected", [("", None), (" ", None), ("7", 7), (" 12 ", 12)])
    def test_parse_optional_dimension(self, raw: str, expected: int | None) -> None:
        assert parse_optional_dimension(raw) == expected


class TestValidateCanCompute:
    """Tests for validate_can_compute."""

    @pytest.mark.parametrize("count", [0, 1])
    def test_too_few_waypoints(self, count: int) -> None:
        result = validate_can_compute(waypoint_count=count)
        assert isinstance(result, NotEligibleMessage)
        assert result.waypoint_count == count

    @pytest.mark.parametrize("count", [2, 7])
    def test_enough_waypoints(self, count: int) -> None:
        assert validate_can_compute(waypoint_count=count) is None


class TestMessages:
    """Message text and display routing."""

    def test_toast_display_calls_st_toast(self) -> None:
        msg = NoRouteMessage(unreachable_pairs=1, total_pairs=3)
        with patch("streamlit.toast") as toast:
            msg.display()
        toast.assert_called_once()
        text = toast.call_args.args[0]
        assert text.startswith(msg.icon)
        assert "1 of 3" in text

    def test_inline_display_uses_level(self) -> None:
        msg = PendingRiskyMessage(x=1, y=2)
        assert msg.level is MessageLevel.WARNING
        with patch("streamlit.warning") as warning:
            msg.display()
        warning.assert_called_once_with(msg.message)

    def test_board_context_message_lists_counts(self) -> None:
        msg = BoardContextMessage(
            mode_label="Assign obstacles",
            max_x=10,
            max_y=8,
            num_waypoints=2,
            num_blocked=5,
            num_risky=1,
            num_paths=1,
        )
        assert msg.level is MessageLevel.INFO
        assert "10x8" in msg.message
        assert "Assign obstacles" in msg.message
        assert "5 blocked" in msg.message

    def test_compute_done_message(self) -> None:
        msg = ComputeDoneMessage(num_paths=2, num_cells=9)
        assert "2 route(s)" in msg.message
        assert "9 cell(s)" in msg.message
