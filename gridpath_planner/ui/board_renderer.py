"""Board renderer - Draws the session Projection as a grid of buttons.

Reads only the Projection; taps are returned to the caller, which turns
them into session intents through ui.actions.

Icons and colors come from StyleConfig keyed by RenderKind:
    Empty -> neutral, Waypoint -> marker, Obstacle -> blocker,
    Inaccessible -> distinct blocker, Risky -> weight label, path -> route marker
"""

import logging

import streamlit as st

from gridpath_planner.constants import StyleConfig, UIConfig
from gridpath_planner.model.grid import GridCoord
from gridpath_planner.session.projection import CellView, Projection, RenderKind

logger = logging.getLogger(__name__)

_LEGEND = [
    (RenderKind.MARKER, "Waypoint"),
    (RenderKind.BLOCKER, "Obstacle"),
    (RenderKind.DISTINCT_BLOCKER, "Inaccessible"),
    (RenderKind.WEIGHT_LABEL, "Risky (weight)"),
    (RenderKind.ROUTE_MARKER, "Route"),
]


class BoardRenderer:
    """Renders the board and reports which cell was tapped."""

    def __init__(self, projection: Projection, version: int) -> None:
        self.projection = projection
        self.version = version

    @staticmethod
    def cell_label(cell: CellView) -> str:
        """Button text: weight for risky cells, icon otherwise."""
        if cell.render_kind is RenderKind.WEIGHT_LABEL:
            return f"**{cell.label}**"
        return cell.icon

    @staticmethod
    def cell_help(cell: CellView) -> str:
        text = f"({cell.coord.x}, {cell.coord.y}) {cell.classification.kind.value}"
        if cell.on_path:
            text += " · on route"
        return text

    def render(self) -> GridCoord | None:
        """Draw every cell; return the tapped coordinate, if any."""
        tapped: GridCoord | None = None
        grid = self.projection.grid
        compact = grid.max_y > UIConfig.COMPACT_BOARD_COLUMNS

        for row in self.projection.rows():
            columns = st.columns(grid.max_y, gap="small" if compact else "medium")
            for column, cell in zip(columns, row):
                with column:
                    clicked = st.button(
                        self.cell_label(cell),
                        key=f"cell_{self.version}_{cell.key}",
                        help=None if compact else self.cell_help(cell),
                        width="stretch",
                    )
                if clicked:
                    tapped = cell.coord

        if tapped is not None:
            logger.info(f"[BOARD] Tapped {tapped}")
        return tapped

    @staticmethod
    def render_legend() -> None:
        """Icon legend with the board palette."""
        items = []
        for kind, name in _LEGEND:
            icon = StyleConfig.ICONS[kind.value] or "12"
            color = StyleConfig.COLORS[kind.value]
            items.append(f"<span style='color:{color}'>{icon} {name}</span>")
        st.markdown(" · ".join(items), unsafe_allow_html=True)
