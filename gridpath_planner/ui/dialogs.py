"""Modal dialogs: risk weight prompt and board reset.

Both dialogs hand their raw text to ui.actions, which validates it and
reruns the app (closing the dialog).
"""

import streamlit as st

from gridpath_planner.constants import GridConfig, UIConfig
from gridpath_planner.ui.actions import cancel_risk_weight, reset_board, submit_risk_weight


@st.dialog(UIConfig.RISK_DIALOG_TITLE)
def risk_weight_dialog(x: int, y: int) -> None:
    """Ask for the weight of the pending risky cell."""
    st.write(f"Cell **({x}, {y})**")
    raw = st.text_input(
        UIConfig.RISK_DIALOG_HELP,
        key=f"risk_weight_{x}_{y}",
        max_chars=len(str(GridConfig.MAX_RISK_WEIGHT)),
        placeholder=f"{GridConfig.MIN_RISK_WEIGHT}-{GridConfig.MAX_RISK_WEIGHT}",
    )

    col_ok, col_cancel = st.columns(2)
    with col_ok:
        if st.button("✔️ Accept", type="primary", width="stretch"):
            submit_risk_weight(raw)
    with col_cancel:
        if st.button("✖️ Cancel", width="stretch"):
            cancel_risk_weight()


@st.dialog(UIConfig.RESET_DIALOG_TITLE)
def reset_dialog(max_x: int, max_y: int) -> None:
    """Ask for new board dimensions before resetting."""
    st.caption(UIConfig.RESET_DIALOG_HELP)
    max_chars = len(str(GridConfig.MAX_DIMENSION))
    raw_height = st.text_input("Height", key="reset_height", max_chars=max_chars, placeholder=str(max_x))
    raw_width = st.text_input("Width", key="reset_width", max_chars=max_chars, placeholder=str(max_y))

    col_ok, col_cancel = st.columns(2)
    with col_ok:
        if st.button("🔁 Reset", type="primary", width="stretch"):
            reset_board(raw_height=raw_height, raw_width=raw_width)
    with col_cancel:
        if st.button("✖️ Cancel", width="stretch"):
            st.rerun()
