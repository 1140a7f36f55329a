"""UI Actions - One function per user intent.

Each action:
1. Validates raw UI input (validators.py), showing a toast on failure
2. Applies exactly one intent to the PlanningSession
3. Reloads the board (infra.reload_board -> st.rerun)

The session lives in st.session_state.session. Streamlit runs one script
pass at a time, which serializes intents for the session.
"""

import logging

import streamlit as st

from gridpath_planner.model.message import ComputeDoneMessage, NoRouteMessage
from gridpath_planner.session.coordinator import PlanningSession, TapOutcome
from gridpath_planner.session.edit_mode import EditMode
from gridpath_planner.ui.infra import reload_board
from gridpath_planner.ui.validators import (
    parse_optional_dimension,
    validate_can_compute,
    validate_dimension,
    validate_in_bounds,
    validate_risk_weight,
)

logger = logging.getLogger(__name__)


def get_session() -> PlanningSession:
    """PlanningSession stored in Streamlit session state."""
    session: PlanningSession | None = st.session_state.get("session")
    if session is None:
        raise RuntimeError("PlanningSession missing from session state; call init_session_state() first")
    return session


# =============================================================================
# MODE
# =============================================================================


def select_mode(mode: EditMode) -> None:
    """Mode button pressed."""
    get_session().set_mode(mode)
    reload_board()


# =============================================================================
# BOARD
# =============================================================================


def on_cell_tap(x: int, y: int) -> None:
    """Cell button pressed.

    In PLACE_RISKY mode the tap only records the cell; the weight dialog
    opens on the next render because session.pending_risky is set.
    """
    session = get_session()
    msg = validate_in_bounds(x=x, y=y, grid=session.grid)
    if msg is not None:
        msg.display()
        return

    outcome = session.tap_cell(x, y)
    if outcome is TapOutcome.IGNORED:
        logger.info(f"[TAP] ({x}, {y}) ignored in {session.mode.value}")
        return
    reload_board()


def submit_risk_weight(raw: str) -> None:
    """Risk dialog accepted."""
    session = get_session()
    msg = validate_risk_weight(raw)
    if msg is not None:
        session.discard_pending_risky()
        msg.display()
        reload_board()
        return

    session.set_risk_weight(raw)
    reload_board()


def cancel_risk_weight() -> None:
    """Risk dialog dismissed."""
    get_session().discard_pending_risky()
    reload_board()


# =============================================================================
# COMPUTE / RESET
# =============================================================================


def run_compute() -> None:
    """Compute button pressed."""
    session = get_session()
    msg = validate_can_compute(waypoint_count=session.waypoint_count)
    if msg is not None:
        msg.display()
        return

    with st.spinner("Computing routes..."):
        session.compute()

    result = session.result
    unreachable = result.no_path_pairs()
    if unreachable:
        NoRouteMessage(unreachable_pairs=len(unreachable), total_pairs=len(result)).display()
    else:
        ComputeDoneMessage(num_paths=len(result), num_cells=len(result.member_keys)).display()
    reload_board()


def reset_board(raw_height: str, raw_width: str) -> None:
    """Reset dialog accepted. Empty fields keep the current size."""
    for axis, raw in (("height", raw_height), ("width", raw_width)):
        msg = validate_dimension(axis=axis, raw=raw)
        if msg is not None:
            msg.display()
            return

    get_session().reset(
        max_x=parse_optional_dimension(raw_height),
        max_y=parse_optional_dimension(raw_width),
    )
    reload_board()
