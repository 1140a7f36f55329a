"""Pathfinding Engine Adapter - Narrow contract around the grid search engine.

The planning session never touches the engine directly. The adapter:
- sizes a fresh engine board (initialize)
- registers cell roles, each registration superseding the previous role
- triggers one computation and converts its points to canonical cell keys

Key derivation is delegated to the same GridSpec the Cell Registry uses, so
registry entries and path keys always refer to the same cells.

Failure handling:
- Invalid coordinates raise OutOfBoundsError (caller error, never ignored)
- Non-positive weights raise InvalidWeightError
- Unreachable waypoint pairs become "no path" entries, not errors
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from gridpath_planner.constants import GridConfig
from gridpath_planner.core.errors import InvalidWeightError
from gridpath_planner.core.grid_engine import BoardRole, BoardSnapshot, GridPathEngine
from gridpath_planner.model.cell import CellKind, is_valid_weight
from gridpath_planner.model.grid import GridSpec
from gridpath_planner.model.path_result import EMPTY_RESULT, ComputedPath, PathResultSet

logger = logging.getLogger(__name__)

# Builds an engine board: (max_x, max_y, risk_floor) -> engine
EngineFactory = Callable[[int, int, int], GridPathEngine]

_ROLE_TO_KIND = {
    BoardRole.FREE: CellKind.EMPTY,
    BoardRole.WAYPOINT: CellKind.WAYPOINT,
    BoardRole.OBSTACLE: CellKind.OBSTACLE,
    BoardRole.INACCESSIBLE: CellKind.INACCESSIBLE,
    BoardRole.RISKY: CellKind.RISKY,
}


@dataclass(frozen=True)
class AdapterSnapshot:
    """Engine board plus last result, restored when an edit is rolled back."""

    board: BoardSnapshot
    result: PathResultSet


class PathfindingEngineAdapter:
    """Keeps one engine board in sync with the Cell Registry.

    Example:
        adapter = PathfindingEngineAdapter()
        adapter.initialize(max_x=3, max_y=3)
        adapter.register_waypoint(0, 0)
        adapter.register_waypoint(2, 2)
        adapter.compute()
        adapter.paths()  # PathResultSet with one path of keys 0 ... 8
    """

    def __init__(self, engine_factory: EngineFactory = GridPathEngine) -> None:
        self._engine_factory = engine_factory
        self._engine: Optional[GridPathEngine] = None
        self._grid: Optional[GridSpec] = None
        self._result: PathResultSet = EMPTY_RESULT

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self, max_x: int, max_y: int, risk_floor: int = GridConfig.RISK_FLOOR) -> None:
        """Create a fresh engine board, discarding any previous one."""
        self._grid = GridSpec(max_x=max_x, max_y=max_y)
        self._engine = self._engine_factory(max_x, max_y, risk_floor)
        self._result = EMPTY_RESULT
        logger.info(f"[ENGINE] Initialized {max_x}x{max_y} board (risk floor {risk_floor})")

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def grid(self) -> GridSpec:
        if self._grid is None:
            raise RuntimeError("PathfindingEngineAdapter used before initialize()")
        return self._grid

    @property
    def engine(self) -> GridPathEngine:
        if self._engine is None:
            raise RuntimeError("PathfindingEngineAdapter used before initialize()")
        return self._engine

    def key_of(self, x: int, y: int) -> int:
        """Canonical key of (x, y), shared with the Cell Registry."""
        return self.grid.key_of(x, y)

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register_waypoint(self, x: int, y: int) -> None:
        self.grid.require(x, y)
        self.engine.add_point(x, y)

    def register_obstacle(self, x: int, y: int) -> None:
        self.grid.require(x, y)
        self.engine.set_obstacle(x, y)

    def register_inaccessible(self, x: int, y: int) -> None:
        self.grid.require(x, y)
        self.engine.set_inaccessible(x, y)

    def register_risky(self, x: int, y: int, weight: int) -> None:
        """Mark (x, y) traversable at cost weight, passed through unmodified."""
        self.grid.require(x, y)
        if not is_valid_weight(weight):
            raise InvalidWeightError(weight=weight)
        self.engine.set_risky_point(x, y, weight)

    # =========================================================================
    # COMPUTATION
    # =========================================================================

    @property
    def waypoint_count(self) -> int:
        return len(self.engine.points)

    def compute(self) -> None:
        """Run the search once over the current board.

        With fewer than two waypoints the result is empty and the engine is
        not invoked.
        """
        points = self.engine.points
        if len(points) < GridConfig.MIN_WAYPOINTS_TO_COMPUTE:
            logger.info(f"[ENGINE] compute skipped: {len(points)} waypoint(s)")
            self._result = EMPTY_RESULT
            return

        self.engine.calculate()
        raw_paths = self.engine.get_paths()
        raw_costs = self.engine.get_costs()

        computed = []
        for (start, end), raw_path, cost in zip(zip(points[:-1], points[1:]), raw_paths, raw_costs):
            keys = None if raw_path is None else tuple(self.key_of(x, y) for x, y in raw_path)
            computed.append(
                ComputedPath(
                    start_key=self.key_of(*start),
                    end_key=self.key_of(*end),
                    keys=keys,
                    cost=cost,
                )
            )
        self._result = PathResultSet(paths=tuple(computed))
        logger.info(
            f"[ENGINE] {len(computed)} path(s), {len(self._result.no_path_pairs())} unreachable pair(s)"
        )

    def paths(self) -> PathResultSet:
        """Result of the most recent compute()."""
        return self._result

    # =========================================================================
    # BOARD INSPECTION
    # =========================================================================

    def role_of(self, x: int, y: int) -> CellKind:
        """Role the engine board holds for (x, y)."""
        self.grid.require(x, y)
        return _ROLE_TO_KIND[self.engine.role_at(x, y)]

    def weight_of(self, x: int, y: int) -> Optional[int]:
        """Risk weight stored on the engine board, None unless the cell is risky."""
        if self.role_of(x, y) is not CellKind.RISKY:
            return None
        return int(self.engine.cost_at(x, y))

    def snapshot(self) -> AdapterSnapshot:
        return AdapterSnapshot(board=self.engine.snapshot(), result=self._result)

    def restore(self, snapshot: AdapterSnapshot) -> None:
        self.engine.restore(snapshot.board)
        self._result = snapshot.result

    def __repr__(self) -> str:
        if self._grid is None:
            return "PathfindingEngineAdapter(uninitialized)"
        return f"PathfindingEngineAdapter({self._grid!r}, waypoints={self.waypoint_count})"
