"""Grid Path Planner - Interactive least-cost route planning on a grid board.

Mark waypoints, obstacles, inaccessible and risky (weighted) cells, then
compute the cheapest routes connecting the waypoints in placement order.

Run: streamlit run gridpath_planner/app.py
"""

import logging
import traceback

import streamlit as st

from gridpath_planner.constants import AppConfig
from gridpath_planner.session.coordinator import PlanningSession
from gridpath_planner.ui import (
    BoardRenderer,
    SidebarRenderer,
    on_cell_tap,
    reset_dialog,
    risk_weight_dialog,
    run_compute,
    select_mode,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with a fresh planning session."""
    if "session" not in st.session_state:
        st.session_state.session = PlanningSession.create(add_ui_listener=True)

    if "board_version" not in st.session_state:
        st.session_state.board_version = 0


def reset_ui_state() -> None:
    """Reset UI state while preserving the board.

    Called when an error occurs to recover gracefully. Resets:
    - Edit mode to IDLE and any pending risky placement
    - Board version (to clear any stale cell button state)

    Preserves:
    - Cell classifications and computed routes
    """
    logger.info("Resetting UI state due to error recovery")

    session: PlanningSession = st.session_state.session
    session.discard_pending_risky()
    session.state_machine.try_transition("select_idle")

    st.session_state.board_version = st.session_state.get("board_version", 0) + 1

    logger.info("UI state reset complete - board preserved")


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(AppConfig.TITLE)

    try:
        _run_app_ui()
    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")

        reset_ui_state()

        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


def _run_app_ui() -> None:
    """Run the main application UI. Separated for error handling wrapper."""
    session: PlanningSession = st.session_state.session
    board_version = st.session_state.get("board_version", 0)
    logger.info(f"[MAIN] Render cycle starting: {session!r}, board_version={board_version}")

    # Sidebar
    actions = SidebarRenderer(session=session).render()

    if actions["mode"] is not None:
        select_mode(actions["mode"])
    if actions["compute"]:
        run_compute()
    if actions["reset"]:
        reset_dialog(max_x=session.grid.max_x, max_y=session.grid.max_y)

    # Board
    renderer = BoardRenderer(projection=session.projection(), version=board_version)
    tapped = renderer.render()
    BoardRenderer.render_legend()

    if tapped is not None:
        on_cell_tap(tapped.x, tapped.y)

    pending = session.pending_risky
    if pending is not None:
        risk_weight_dialog(x=pending.x, y=pending.y)


if __name__ == "__main__":
    main()
