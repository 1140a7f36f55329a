"""Edit-mode state machine for the grid path planner.

Uses python-statemachine with the model pattern: EditContext holds the
current state value plus the small amount of data that belongs to a mode.

States (5, no terminal state):
    IDLE: Taps do nothing (initial state)
    PLACE_WAYPOINT: Taps paint waypoints
    PLACE_OBSTACLE: Taps paint obstacles
    PLACE_INACCESSIBLE: Taps paint inaccessible cells
    PLACE_RISKY: Taps ask for a risk weight, then paint a risky cell

Transitions:
    Any state -> any state via select_* events (self-loops included).
    Switching modes never touches cell data.

There is no "computing" state. A compute request is a one-shot action
layered on top of the current mode; the session sends select_idle after it.

Mode is orthogonal to the board: it decides what a tap does, not what any
cell is. The tap dispatch table lives in PlanningSession.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from gridpath_planner.constants import StyleConfig
from gridpath_planner.model.grid import GridCoord

logger = logging.getLogger(__name__)


class EditMode(Enum):
    """Active editing operation. Values match the state ids."""

    IDLE = "idle"
    PLACE_WAYPOINT = "place_waypoint"
    PLACE_OBSTACLE = "place_obstacle"
    PLACE_INACCESSIBLE = "place_inaccessible"
    PLACE_RISKY = "place_risky"

    @property
    def event(self) -> str:
        """State machine event that activates this mode."""
        return _MODE_EVENTS[self]

    @property
    def label(self) -> str:
        return StyleConfig.MODE_LABELS[self.value]

    @property
    def icon(self) -> str:
        return StyleConfig.MODE_ICONS[self.value]


_MODE_EVENTS = {
    EditMode.IDLE: "select_idle",
    EditMode.PLACE_WAYPOINT: "select_waypoint",
    EditMode.PLACE_OBSTACLE: "select_obstacle",
    EditMode.PLACE_INACCESSIBLE: "select_inaccessible",
    EditMode.PLACE_RISKY: "select_risky",
}

# Modes that paint a cell as soon as it is tapped
PAINTING_MODES = (EditMode.PLACE_WAYPOINT, EditMode.PLACE_OBSTACLE, EditMode.PLACE_INACCESSIBLE)


@dataclass
class EditContext:
    """Shared context/model for the edit-mode state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.

    Attributes:
        pending_risky: Cell tapped in PLACE_RISKY mode, waiting for its weight
        eligible_to_compute: True once a second waypoint has been placed
    """

    state: str | None = None
    pending_risky: GridCoord | None = None
    eligible_to_compute: bool = False

    def clear(self) -> None:
        """Reset mode data (state value is owned by the machine)."""
        self.pending_risky = None
        self.eligible_to_compute = False

    def __repr__(self) -> str:
        return (
            f"EditContext(state={self.state}, pending_risky={self.pending_risky}, "
            f"eligible={self.eligible_to_compute})"
        )


class StreamlitUIListener:
    """Listener that handles Streamlit UI side effects after mode changes.

    Bumps the board version so the next render builds fresh cell buttons.
    Reruns are triggered explicitly by ui.actions after the whole intent has
    been applied.

    Usage:
        sm = EditModeStateMachine(context=context)
        sm.add_listener(StreamlitUIListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        from gridpath_planner.ui.infra import bump_board_version

        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")
        bump_board_version()


class EditModeStateMachine(StateMachine):
    """State machine for the active edit mode.

    States:
        idle, place_waypoint, place_obstacle, place_inaccessible, place_risky
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    idle = State("Idle", initial=True)
    place_waypoint = State("PlaceWaypoint")
    place_obstacle = State("PlaceObstacle")
    place_inaccessible = State("PlaceInaccessible")
    place_risky = State("PlaceRisky")

    # ==========================================================================
    # Transitions: every mode is reachable from every mode
    # ==========================================================================

    select_idle = idle.from_(idle, place_waypoint, place_obstacle, place_inaccessible, place_risky)
    select_waypoint = place_waypoint.from_(idle, place_waypoint, place_obstacle, place_inaccessible, place_risky)
    select_obstacle = place_obstacle.from_(idle, place_waypoint, place_obstacle, place_inaccessible, place_risky)
    select_inaccessible = place_inaccessible.from_(
        idle, place_waypoint, place_obstacle, place_inaccessible, place_risky
    )
    select_risky = place_risky.from_(idle, place_waypoint, place_obstacle, place_inaccessible, place_risky)

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_placing_risky(self) -> bool:
        return self.place_risky.is_active

    @property
    def mode(self) -> EditMode:
        """Active mode as an EditMode."""
        return EditMode(self.current_state.id)

    # ==========================================================================
    # Hooks
    # ==========================================================================

    def on_exit_place_risky(self) -> None:
        """Leaving risky mode discards a placement still waiting for its weight."""
        if self.context.pending_risky is not None:
            logger.info(f"[MODE] Discarding pending risky cell {self.context.pending_risky}")
        self.context.pending_risky = None

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.debug(f"[MODE] {source.id} --({event})--> {target.id}")

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: EditContext | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or EditContext()
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> EditContext:
        """Alias for model."""
        return self.model

    def set_mode(self, mode: EditMode) -> None:
        """Activate mode. Always legal."""
        self.send(mode.event)

    def get_state_name(self) -> str:
        """Get current state name for display."""
        return self.current_state.name

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure."""
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    def __repr__(self) -> str:
        return f"EditModeStateMachine(state={self.get_state_name()}, model={self.context!r})"

    @staticmethod
    def create(add_ui_listener: bool = False) -> tuple["EditModeStateMachine", EditContext]:
        """Factory method to create state machine with context and optional UI listener.

        Args:
            add_ui_listener: If True, adds StreamlitUIListener.
                             Leave False for tests and non-Streamlit usage.

        Returns:
            Tuple of (EditModeStateMachine, EditContext)
        """
        context = EditContext()
        sm = EditModeStateMachine(context=context)
        if add_ui_listener:
            sm.add_listener(StreamlitUIListener())
            logger.info("Created EditModeStateMachine with StreamlitUIListener")
        else:
            logger.info("Created EditModeStateMachine without UI listener")
        return sm, context
