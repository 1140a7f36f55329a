"""Shared pytest fixtures for gridpath_planner tests.

Provides small boards with explicit layouts. All fixtures use explicit values
with documented rationale.

COORDINATE SYSTEM:
    x selects the row, y the column, key = x * max_y + y.
    On a 3x3 board the keys read:

        0 1 2
        3 4 5
        6 7 8
"""

from collections.abc import Callable

import pytest

from gridpath_planner.core.engine_adapter import PathfindingEngineAdapter
from gridpath_planner.core.grid_engine import GridPathEngine
from gridpath_planner.model.cell_registry import CellRegistry
from gridpath_planner.model.grid import GridCoord, GridSpec
from gridpath_planner.session.coordinator import PlanningSession
from gridpath_planner.session.edit_mode import EditMode, EditModeStateMachine

# =============================================================================
# GRID FIXTURES
# =============================================================================


@pytest.fixture
def grid_3x3() -> GridSpec:
    """Square 3x3 board, keys 0..8."""
    return GridSpec(max_x=3, max_y=3)


@pytest.fixture
def grid_3x2() -> GridSpec:
    """3 rows x 2 columns, keys 0..5. Non-square to catch swapped axes."""
    return GridSpec(max_x=3, max_y=2)


@pytest.fixture
def registry_3x3(grid_3x3: GridSpec) -> CellRegistry:
    """Empty registry on a 3x3 board."""
    return CellRegistry(grid=grid_3x3)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================


@pytest.fixture
def engine_3x3() -> GridPathEngine:
    """Empty 3x3 engine board, every cell costs 1."""
    return GridPathEngine(max_x=3, max_y=3, risk_floor=1)


@pytest.fixture
def adapter_3x3() -> PathfindingEngineAdapter:
    """Initialized adapter on a 3x3 board."""
    adapter = PathfindingEngineAdapter()
    adapter.initialize(max_x=3, max_y=3)
    return adapter


# =============================================================================
# SESSION FIXTURES
# =============================================================================


@pytest.fixture
def state_machine() -> EditModeStateMachine:
    """Edit-mode machine without UI listener, starting in IDLE."""
    sm, _ = EditModeStateMachine.create(add_ui_listener=False)
    return sm


@pytest.fixture
def session_3x3() -> PlanningSession:
    """Fresh 3x3 session in IDLE mode."""
    return PlanningSession.create(max_x=3, max_y=3)


@pytest.fixture
def session_two_corners(session_3x3: PlanningSession) -> PlanningSession:
    """3x3 session with waypoints at (0,0) and (2,2), in PLACE_WAYPOINT mode.

    Eligible to compute; no routes computed yet.
    """
    session_3x3.set_mode(EditMode.PLACE_WAYPOINT)
    session_3x3.tap_cell(0, 0)
    session_3x3.tap_cell(2, 2)
    return session_3x3


Painter = Callable[..., None]
RiskyPlacer = Callable[[PlanningSession, int, int, object], None]


@pytest.fixture
def paint() -> Painter:
    """paint(session, mode, *cells): switch to mode and tap each (x, y) in order."""

    def _paint(session: PlanningSession, mode: EditMode, *cells: tuple[int, int]) -> None:
        session.set_mode(mode)
        for x, y in cells:
            session.tap_cell(x, y)

    return _paint


@pytest.fixture
def place_risky() -> RiskyPlacer:
    """place_risky(session, x, y, weight): risky placement through tap + weight prompt."""

    def _place(session: PlanningSession, x: int, y: int, weight: object) -> None:
        session.set_mode(EditMode.PLACE_RISKY)
        session.tap_cell(x, y)
        assert session.pending_risky == GridCoord(x, y)
        session.set_risk_weight(weight)

    return _place
