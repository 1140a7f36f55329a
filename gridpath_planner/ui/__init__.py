"""User interface components for the grid path planner.

File Structure (layout-based naming):
- left_panel.py: Sidebar with board context, mode buttons, compute/reset
- board_renderer.py: Board grid of cell buttons drawn from the Projection
- dialogs.py: Risk weight and reset dialogs

Core Components:
- actions.py: One function per user intent (tap, mode, weight, compute, reset)
- validators.py: Input validation with Optional[ToastMessage] returns
- infra.py: Mockable rerun and board version helpers
"""

from gridpath_planner.ui.actions import (
    cancel_risk_weight,
    get_session,
    on_cell_tap,
    reset_board,
    run_compute,
    select_mode,
    submit_risk_weight,
)
from gridpath_planner.ui.board_renderer import BoardRenderer
from gridpath_planner.ui.dialogs import reset_dialog, risk_weight_dialog
from gridpath_planner.ui.infra import bump_board_version, reload_board
from gridpath_planner.ui.left_panel import SidebarRenderer

__all__ = [
    "BoardRenderer",
    "SidebarRenderer",
    "reset_dialog",
    "risk_weight_dialog",
    "bump_board_version",
    "reload_board",
    "cancel_risk_weight",
    "get_session",
    "on_cell_tap",
    "reset_board",
    "run_compute",
    "select_mode",
    "submit_risk_weight",
]
