"""Planning Session - Owner of the board, the edit mode and the engine.

The session receives user intents (set mode, tap cell, set risk weight,
compute, reset), applies them in order and republishes a read-only
Projection for rendering.

Orchestration invariant
-----------------------
The Cell Registry and the engine board are only ever mutated together,
inside the same intent. Every mutating intent snapshots both first and
restores both if any step fails, so a rejected intent leaves no trace.

Path results
------------
- Empty at session start
- Replaced by each compute() on an eligible session (>= 2 waypoints)
- Cleared on reset() and on the next successful cell mutation

Tap dispatch
------------
    IDLE                -> no-op
    PLACE_WAYPOINT      -> Waypoint + engine waypoint
    PLACE_OBSTACLE      -> Obstacle + engine obstacle
    PLACE_INACCESSIBLE  -> Inaccessible + engine inaccessible
    PLACE_RISKY         -> remember the cell, wait for set_risk_weight()
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Optional

from gridpath_planner.constants import GridConfig
from gridpath_planner.core.engine_adapter import PathfindingEngineAdapter
from gridpath_planner.core.errors import InvalidWeightError, NoPendingRiskyCellError, NotEligibleError
from gridpath_planner.model.cell import (
    INACCESSIBLE,
    OBSTACLE,
    WAYPOINT,
    CellClassification,
    CellKind,
    Risky,
    parse_risk_weight,
)
from gridpath_planner.model.cell_registry import CellRegistry
from gridpath_planner.model.grid import GridCoord, GridSpec
from gridpath_planner.model.path_result import EMPTY_RESULT, PathResultSet
from gridpath_planner.session.edit_mode import EditMode, EditModeStateMachine
from gridpath_planner.session.projection import Projection

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[], PathfindingEngineAdapter]


class TapOutcome(Enum):
    """What a tap did."""

    IGNORED = "ignored"  # IDLE mode
    APPLIED = "applied"  # Cell painted
    AWAITING_WEIGHT = "awaiting_weight"  # PLACE_RISKY, weight prompt needed


class PlanningSession:
    """Single-user, in-memory grid editing and path planning session.

    Example:
        session = PlanningSession.create(max_x=3, max_y=3)
        session.set_mode(EditMode.PLACE_WAYPOINT)
        session.tap_cell(0, 0)
        session.tap_cell(2, 2)
        session.compute()
        session.projection().cell(1, 1).on_path
    """

    def __init__(
        self,
        grid: GridSpec,
        state_machine: EditModeStateMachine,
        adapter_factory: AdapterFactory = PathfindingEngineAdapter,
    ) -> None:
        self._sm = state_machine
        self._adapter_factory = adapter_factory
        self._grid = grid
        self._registry = CellRegistry(grid=grid)
        self._engine = self._new_engine(grid)
        self._result: PathResultSet = EMPTY_RESULT

        self._tap_handlers: dict[EditMode, Callable[[GridCoord], TapOutcome]] = {
            EditMode.IDLE: self._tap_idle,
            EditMode.PLACE_WAYPOINT: lambda coord: self._tap_paint(coord, WAYPOINT),
            EditMode.PLACE_OBSTACLE: lambda coord: self._tap_paint(coord, OBSTACLE),
            EditMode.PLACE_INACCESSIBLE: lambda coord: self._tap_paint(coord, INACCESSIBLE),
            EditMode.PLACE_RISKY: self._tap_risky,
        }
        assert set(self._tap_handlers) == set(EditMode), "Every edit mode needs a tap handler"

    @classmethod
    def create(
        cls,
        max_x: int = GridConfig.DEFAULT_MAX_X,
        max_y: int = GridConfig.DEFAULT_MAX_Y,
        adapter_factory: AdapterFactory = PathfindingEngineAdapter,
        add_ui_listener: bool = False,
    ) -> "PlanningSession":
        """Factory creating a session with a fresh state machine.

        Args:
            max_x, max_y: Board dimensions
            adapter_factory: Builds the engine adapter (tests inject spies here)
            add_ui_listener: Attach StreamlitUIListener to the state machine
        """
        sm, _ = EditModeStateMachine.create(add_ui_listener=add_ui_listener)
        return cls(grid=GridSpec(max_x=max_x, max_y=max_y), state_machine=sm, adapter_factory=adapter_factory)

    # =========================================================================
    # READ ACCESS
    # =========================================================================

    @property
    def grid(self) -> GridSpec:
        return self._grid

    @property
    def mode(self) -> EditMode:
        return self._sm.mode

    @property
    def state_machine(self) -> EditModeStateMachine:
        return self._sm

    @property
    def registry(self) -> CellRegistry:
        return self._registry

    @property
    def engine(self) -> PathfindingEngineAdapter:
        return self._engine

    @property
    def result(self) -> PathResultSet:
        return self._result

    @property
    def pending_risky(self) -> Optional[GridCoord]:
        return self._sm.context.pending_risky

    @property
    def waypoint_count(self) -> int:
        return self._registry.count(CellKind.WAYPOINT)

    @property
    def eligible_to_compute(self) -> bool:
        return self._sm.context.eligible_to_compute

    def projection(self) -> Projection:
        """Read model for the renderer."""
        return Projection.build(grid=self._grid, registry=self._registry, result=self._result)

    # =========================================================================
    # INTENTS
    # =========================================================================

    def set_mode(self, mode: EditMode) -> None:
        """Switch edit mode. Never touches cell data."""
        logger.info(f"[MODE] {self.mode.value} -> {mode.value}")
        self._sm.set_mode(mode)

    def tap_cell(self, x: int, y: int) -> TapOutcome:
        """Apply a tap according to the active mode.

        Raises:
            OutOfBoundsError: If (x, y) is off the board (nothing changes).
        """
        coord = self._grid.require(x, y)
        mode = self.mode
        logger.info(f"[TAP] {coord} in {mode.value}")
        return self._tap_handlers[mode](coord)

    def set_risk_weight(self, weight: object, coord: Optional[GridCoord] = None) -> None:
        """Complete a risky placement with its weight.

        Args:
            weight: Positive integer, or a string of digits from the dialog
            coord: Cell to paint; defaults to the pending risky cell

        Raises:
            NoPendingRiskyCellError: No coord given and nothing pending.
            OutOfBoundsError: coord is off the board.
            InvalidWeightError: weight is not a positive integer. The pending
                placement is dropped and the cell keeps its classification.
        """
        target = coord if coord is not None else self.pending_risky
        if target is None:
            raise NoPendingRiskyCellError()
        target = self._grid.require(target.x, target.y)

        try:
            parsed = parse_risk_weight(weight)
        except InvalidWeightError:
            logger.warning(f"[RISKY] Rejected weight {weight!r} for {target}")
            self._sm.context.pending_risky = None
            raise

        self._apply_cell(target, Risky(weight=parsed))
        self._sm.context.pending_risky = None

    def discard_pending_risky(self) -> None:
        """Drop a risky placement whose weight prompt was cancelled."""
        if self.pending_risky is not None:
            logger.info(f"[RISKY] Placement at {self.pending_risky} cancelled")
        self._sm.context.pending_risky = None

    def compute(self, strict: bool = False) -> bool:
        """Compute routes between the waypoints.

        Args:
            strict: Raise instead of returning False when not eligible

        Returns:
            False (no-op, result untouched) if fewer than two waypoints exist,
            True once the result has been replaced. The edit mode returns to IDLE.

        Raises:
            NotEligibleError: Only with strict=True, if fewer than two waypoints exist.
        """
        if not self.eligible_to_compute:
            logger.warning(f"[COMPUTE] Not eligible: {self.waypoint_count} waypoint(s)")
            if strict:
                raise NotEligibleError(waypoint_count=self.waypoint_count)
            return False

        self._engine.compute()
        self._result = self._engine.paths()
        logger.info(
            f"[COMPUTE] {len(self._result)} path(s), {len(self._result.member_keys)} cell(s) on routes, "
            f"{len(self._result.no_path_pairs())} unreachable pair(s)"
        )
        self._sm.set_mode(EditMode.IDLE)
        return True

    def reset(self, max_x: Optional[int] = None, max_y: Optional[int] = None) -> None:
        """Start over on a fresh board.

        Omitted dimensions keep their current value. The only operation that
        changes grid dimensions.

        Raises:
            ValueError: If a dimension is invalid (nothing changes).
        """
        grid = GridSpec(
            max_x=self._grid.max_x if max_x is None else max_x,
            max_y=self._grid.max_y if max_y is None else max_y,
        )
        engine = self._new_engine(grid)

        self._sm.set_mode(EditMode.IDLE)
        self._sm.context.clear()
        self._grid = grid
        self._registry = CellRegistry(grid=grid)
        self._engine = engine
        self._result = EMPTY_RESULT
        logger.info(f"[RESET] Fresh {grid.max_x}x{grid.max_y} board")

    # =========================================================================
    # TAP HANDLERS
    # =========================================================================

    def _tap_idle(self, coord: GridCoord) -> TapOutcome:
        return TapOutcome.IGNORED

    def _tap_paint(self, coord: GridCoord, classification: CellClassification) -> TapOutcome:
        self._apply_cell(coord, classification)
        return TapOutcome.APPLIED

    def _tap_risky(self, coord: GridCoord) -> TapOutcome:
        self._sm.context.pending_risky = coord
        return TapOutcome.AWAITING_WEIGHT

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _new_engine(self, grid: GridSpec) -> PathfindingEngineAdapter:
        engine = self._adapter_factory()
        engine.initialize(max_x=grid.max_x, max_y=grid.max_y, risk_floor=GridConfig.RISK_FLOOR)
        return engine

    def _apply_cell(self, coord: GridCoord, classification: CellClassification) -> None:
        """Paint coord in registry and engine together, or in neither."""
        registry_snapshot = self._registry.snapshot()
        engine_snapshot = self._engine.snapshot()
        try:
            self._registry.set(coord, classification)
            self._register(coord, classification)
        except Exception:
            logger.warning(f"[TAP] Rolling back {classification.kind.name} at {coord}")
            self._registry.restore(registry_snapshot)
            self._engine.restore(engine_snapshot)
            raise

        self._sm.context.eligible_to_compute = self.waypoint_count >= GridConfig.MIN_WAYPOINTS_TO_COMPUTE
        if not self._result.is_empty:
            logger.info("[COMPUTE] Board changed, clearing stale routes")
            self._result = EMPTY_RESULT

    def _register(self, coord: GridCoord, classification: CellClassification) -> None:
        """Mirror a registry classification onto the engine board."""
        if classification.kind is CellKind.WAYPOINT:
            self._engine.register_waypoint(coord.x, coord.y)
        elif classification.kind is CellKind.OBSTACLE:
            self._engine.register_obstacle(coord.x, coord.y)
        elif classification.kind is CellKind.INACCESSIBLE:
            self._engine.register_inaccessible(coord.x, coord.y)
        elif isinstance(classification, Risky):
            self._engine.register_risky(coord.x, coord.y, classification.weight)
        else:
            raise ValueError(f"Cannot register {classification.kind.name} on the engine board")

    def __repr__(self) -> str:
        return (
            f"PlanningSession({self._grid!r}, mode={self.mode.value}, "
            f"painted={len(self._registry)}, paths={len(self._result)})"
        )
