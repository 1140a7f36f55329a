"""Core classes for grid search.

- errors: Rejected-intent exceptions (OutOfBoundsError, InvalidWeightError, ...)
- GridPathEngine: Weighted shortest paths on a grid board (SciPy Dijkstra)
- PathfindingEngineAdapter: Keeps the engine board in sync with the Cell Registry
"""

from gridpath_planner.core.errors import (
    GridSessionError,
    InvalidWeightError,
    NoPendingRiskyCellError,
    NotEligibleError,
    OutOfBoundsError,
)
from gridpath_planner.core.grid_engine import BoardRole, GridPathEngine

# PathfindingEngineAdapter has circular import with model.cell
# Import directly: from gridpath_planner.core.engine_adapter import PathfindingEngineAdapter

__all__ = [
    # Errors
    "GridSessionError",
    "OutOfBoundsError",
    "InvalidWeightError",
    "NotEligibleError",
    "NoPendingRiskyCellError",
    # Engine
    "BoardRole",
    "GridPathEngine",
]
