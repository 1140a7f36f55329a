"""Board reload plumbing shared by the UI actions.

Actions never call st.rerun directly; they go through reload_board so tests
can patch a single function (gridpath_planner.ui.infra.trigger_rerun) and the
board version is bumped on every reload.

Session access stays in actions.py.
"""

import logging

import streamlit as st

logger = logging.getLogger(__name__)


def trigger_rerun() -> None:
    """Rerun the whole script. Raises Streamlit's rerun control exception."""
    st.rerun()


def bump_board_version() -> None:
    """Increment board_version so the next render builds fresh cell buttons.

    Cell button keys include the version, so a stale click from the previous
    board can never be replayed against a new one.
    """
    version = st.session_state.get("board_version", 0) + 1
    st.session_state.board_version = version
    logger.info(f"[BOARD] board_version -> {version}")


def reload_board() -> None:
    """Bump the board version and rerun."""
    bump_board_version()
    trigger_rerun()
