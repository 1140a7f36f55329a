"""Shared pytest fixtures for gridpath_planner workflow tests.

Minimal fixtures: workflow tests build their boards through session intents,
the same way a user would.

COORDINATE SYSTEM:
    x selects the row, y the column, key = x * max_y + y.
"""

from collections.abc import Callable

import pytest

from gridpath_planner.session.coordinator import PlanningSession
from gridpath_planner.session.edit_mode import EditMode, EditModeStateMachine

# Factory type: (max_x, max_y) -> session
SessionFactory = Callable[[int, int], PlanningSession]


@pytest.fixture
def make_session() -> SessionFactory:
    """Build a fresh session of the requested size, without UI listener."""

    def _make(max_x: int, max_y: int) -> PlanningSession:
        return PlanningSession.create(max_x=max_x, max_y=max_y)

    return _make


@pytest.fixture
def sm() -> EditModeStateMachine:
    """Edit-mode machine in IDLE, no UI listener."""
    machine, _ = EditModeStateMachine.create(add_ui_listener=False)
    return machine


@pytest.fixture
def tap_all() -> Callable[..., None]:
    """tap_all(session, mode, *cells): switch to mode and tap each (x, y)."""

    def _tap_all(session: PlanningSession, mode: EditMode, *cells: tuple[int, int]) -> None:
        session.set_mode(mode)
        for x, y in cells:
            session.tap_cell(x, y)

    return _tap_all
