"""Planning session: edit-mode state machine, coordinator and read model.

- edit_mode.py: EditModeStateMachine (5 modes) + EditContext
- coordinator.py: PlanningSession, applies intents atomically
- projection.py: Projection, per-cell view for rendering
"""

from gridpath_planner.session.coordinator import PlanningSession, TapOutcome
from gridpath_planner.session.edit_mode import (
    EditContext,
    EditMode,
    EditModeStateMachine,
    StreamlitUIListener,
)
from gridpath_planner.session.projection import CellView, Projection, RenderKind

__all__ = [
    "PlanningSession",
    "TapOutcome",
    "EditMode",
    "EditContext",
    "EditModeStateMachine",
    "StreamlitUIListener",
    "Projection",
    "CellView",
    "RenderKind",
]
