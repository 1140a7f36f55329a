"""Data model classes for the grid path planner.

- GridSpec / GridCoord: Board dimensions and the canonical cell key
- CellClassification: Tagged union Empty | Waypoint | Obstacle | Inaccessible | Risky(weight)
- CellRegistry: What the user has painted, keyed by cell key
- ComputedPath / PathResultSet: Output of one compute cycle
"""

from gridpath_planner.model.cell import (
    EMPTY,
    INACCESSIBLE,
    OBSTACLE,
    WAYPOINT,
    CellClassification,
    CellKind,
    Empty,
    Inaccessible,
    Obstacle,
    Risky,
    Waypoint,
)
from gridpath_planner.model.cell_registry import CellRegistry
from gridpath_planner.model.grid import GridCoord, GridSpec
from gridpath_planner.model.path_result import EMPTY_RESULT, ComputedPath, PathResultSet

__all__ = [
    "GridSpec",
    "GridCoord",
    "CellKind",
    "CellClassification",
    "Empty",
    "Waypoint",
    "Obstacle",
    "Inaccessible",
    "Risky",
    "EMPTY",
    "WAYPOINT",
    "OBSTACLE",
    "INACCESSIBLE",
    "CellRegistry",
    "ComputedPath",
    "PathResultSet",
    "EMPTY_RESULT",
]
