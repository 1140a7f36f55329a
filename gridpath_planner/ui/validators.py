"""Validators - Input validation for the grid path planner.

Centralizes all validation of user input. Validators return Optional[ToastMessage]:
- None if valid
- A ToastMessage object if invalid (caller displays it)

Design Principles:
- No exceptions for expected validation failures
- Messages know their own icon
- Caller controls when/how to display the message
"""

from gridpath_planner.constants import GridConfig
from gridpath_planner.core.errors import InvalidWeightError
from gridpath_planner.model.cell import parse_risk_weight
from gridpath_planner.model.grid import GridSpec
from gridpath_planner.model.message import (
    InvalidDimensionMessage,
    InvalidWeightMessage,
    NotEligibleMessage,
    OutOfBoundsMessage,
    ToastMessage,
)


def validate_in_bounds(x: int, y: int, grid: GridSpec) -> ToastMessage | None:
    """Validate that a tapped cell lies on the board.

    Returns:
        None if valid, OutOfBoundsMessage otherwise.
    """
    if not grid.contains(x, y):
        return OutOfBoundsMessage(x=x, y=y, max_x=grid.max_x, max_y=grid.max_y)
    return None


def validate_risk_weight(raw: str) -> ToastMessage | None:
    """Validate the risk dialog input.

    Returns:
        None if raw is a whole number within GridConfig risk limits,
        InvalidWeightMessage otherwise.
    """
    invalid = InvalidWeightMessage(
        raw_value=raw,
        min_weight=GridConfig.MIN_RISK_WEIGHT,
        max_weight=GridConfig.MAX_RISK_WEIGHT,
    )
    try:
        weight = parse_risk_weight(raw)
    except InvalidWeightError:
        return invalid
    if weight > GridConfig.MAX_RISK_WEIGHT:
        return invalid
    return None


def parse_optional_dimension(raw: str) -> int | None:
    """Dialog text to a dimension, None when left empty.

    Call validate_dimension first; invalid text raises ValueError.
    """
    text = raw.strip()
    return int(text) if text else None


def validate_dimension(axis: str, raw: str) -> ToastMessage | None:
    """Validate one optional board dimension from the reset dialog.

    Empty input is valid (keeps the current dimension).

    Returns:
        None if valid, InvalidDimensionMessage otherwise.
    """
    text = raw.strip()
    if not text:
        return None
    if text.isascii() and text.isdigit() and GridConfig.MIN_DIMENSION <= int(text) <= GridConfig.MAX_DIMENSION:
        return None
    return InvalidDimensionMessage(
        axis=axis,
        raw_value=raw,
        min_dimension=GridConfig.MIN_DIMENSION,
        max_dimension=GridConfig.MAX_DIMENSION,
    )


def validate_can_compute(waypoint_count: int) -> ToastMessage | None:
    """Validate that enough waypoints exist to compute routes.

    Returns:
        None if valid, NotEligibleMessage otherwise.
    """
    if waypoint_count < GridConfig.MIN_WAYPOINTS_TO_COMPUTE:
        return NotEligibleMessage(waypoint_count=waypoint_count)
    return None
