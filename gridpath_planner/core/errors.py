"""Errors raised at the planning session boundary.

All of them are recoverable: a rejected intent leaves the session exactly as
it was before the intent. Unreachable waypoint pairs are NOT errors; they are
reported as "no path" entries in the PathResultSet.
"""


class GridSessionError(Exception):
    """Base class for rejected session intents."""


class OutOfBoundsError(GridSessionError):
    """Coordinate outside [0, max_x) x [0, max_y)."""

    def __init__(self, x: int, y: int, max_x: int, max_y: int) -> None:
        self.x = x
        self.y = y
        self.max_x = max_x
        self.max_y = max_y
        super().__init__(f"Cell ({x}, {y}) is outside the {max_x}x{max_y} grid")


class InvalidWeightError(GridSessionError):
    """Risk weight that is not a positive integer."""

    def __init__(self, weight: object) -> None:
        self.weight = weight
        super().__init__(f"Risk weight must be a positive integer, got {weight!r}")


class NotEligibleError(GridSessionError):
    """Compute requested with fewer than two waypoints."""

    def __init__(self, waypoint_count: int) -> None:
        self.waypoint_count = waypoint_count
        super().__init__(f"Need at least 2 waypoints to compute routes, have {waypoint_count}")


class NoPendingRiskyCellError(GridSessionError):
    """Risk weight submitted while no risky placement is waiting for one."""

    def __init__(self) -> None:
        super().__init__("No risky cell is waiting for a weight")
