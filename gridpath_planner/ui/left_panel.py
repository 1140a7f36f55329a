"""Sidebar UI renderer for the grid path planner.

Renders the left sidebar with:
- Board context (mode, size, cell counts)
- Pending risky cell notice
- Edit mode buttons, one per EditMode
- Compute and reset buttons

Buttons only report what was pressed; app.py turns the flags into actions.
"""

import logging
from typing import Any, Literal

import streamlit as st

from gridpath_planner.constants import StyleConfig
from gridpath_planner.model.cell import CellKind
from gridpath_planner.model.message import BoardContextMessage, PendingRiskyMessage
from gridpath_planner.session.coordinator import PlanningSession
from gridpath_planner.session.edit_mode import EditMode

logger = logging.getLogger(__name__)


class SidebarRenderer:
    """Renders the sidebar and returns action flags."""

    def __init__(self, session: PlanningSession) -> None:
        self.session = session

    def render(self) -> dict[str, Any]:
        """Render the complete sidebar.

        Returns:
            Dict with keys: mode (EditMode or None), compute, reset
        """
        with st.sidebar:
            actions: dict[str, Any] = {"mode": None, "compute": False, "reset": False}

            self._render_context()
            st.divider()
            actions["mode"] = self._render_mode_selector()
            st.divider()
            actions.update(self._render_compute_reset_buttons())
            return actions

    def _render_context(self) -> None:
        registry = self.session.registry
        grid = self.session.grid
        BoardContextMessage(
            mode_label=self.session.mode.label,
            max_x=grid.max_x,
            max_y=grid.max_y,
            num_waypoints=registry.count(CellKind.WAYPOINT),
            num_blocked=registry.count(CellKind.OBSTACLE) + registry.count(CellKind.INACCESSIBLE),
            num_risky=registry.count(CellKind.RISKY),
            num_paths=len(self.session.result),
        ).display()

        pending = self.session.pending_risky
        if pending is not None:
            PendingRiskyMessage(x=pending.x, y=pending.y).display()

    def _render_mode_selector(self) -> EditMode | None:
        """One button per edit mode; the active mode is highlighted."""
        st.markdown("### Edit mode")
        current = self.session.mode
        selected: EditMode | None = None

        for mode in EditMode:
            is_active = mode is current
            button_type: Literal["primary", "secondary"] = "primary" if is_active else "secondary"
            label = f"{mode.icon} **{mode.label}**" if is_active else f"{mode.icon} {mode.label}"
            if st.button(label, key=f"mode_{mode.value}", type=button_type, width="stretch"):
                selected = mode

        if selected is not None and selected is not current:
            logger.info(f"[SIDEBAR] Mode button {selected.value}")
            return selected
        return None

    def _render_compute_reset_buttons(self) -> dict[str, bool]:
        eligible = self.session.eligible_to_compute
        compute = st.button(
            f"{StyleConfig.COMPUTE_ICON} {StyleConfig.COMPUTE_LABEL}",
            key="compute",
            type="primary",
            width="stretch",
            disabled=not eligible,
            help="Connect the waypoints in placement order" if eligible else "Place at least 2 waypoints first",
        )
        reset = st.button(
            f"{StyleConfig.RESET_ICON} {StyleConfig.RESET_LABEL}",
            key="reset",
            width="stretch",
            help="Clear the board and optionally change its size",
        )
        return {"compute": compute, "reset": reset}
