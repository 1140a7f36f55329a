"""Message - User-facing messages for the grid path planner UI.

Architecture:
- SIDEBAR: ONE blue info message showing current mode and board stats
- TOASTS: transient popups for rejected intents and compute feedback

Design Principles:
- Maximum ONE inline message per panel location at any time
- Messages know their own display level and icon
- Rejected intents are reported with a toast, never by partial board changes
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - user mistakes


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for user-facing messages displayed inline (sidebar).

    These messages are rendered as st.info/st.warning/st.error blocks that persist
    in the UI until replaced.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: rejected taps, invalid dialog input, compute feedback
    Bad for: context messages, status displays
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES - Transient popup notifications for errors/feedback
# =============================================================================


@dataclass(frozen=True)
class OutOfBoundsMessage(ToastMessage):
    """Tap outside the board."""

    x: int
    y: int
    max_x: int
    max_y: int

    @property
    def icon(self) -> str:
        return "📍"

    @property
    def message(self) -> str:
        return f"Outside Board — Cell ({self.x}, {self.y}) is not on the {self.max_x}x{self.max_y} board."


@dataclass(frozen=True)
class InvalidWeightMessage(ToastMessage):
    """Risk value that is not a positive integer."""

    raw_value: str
    min_weight: int
    max_weight: int

    @property
    def icon(self) -> str:
        return "⚠️"

    @property
    def message(self) -> str:
        return (
            f"Invalid Risk Value — '{self.raw_value}' is not a whole number "
            f"between {self.min_weight} and {self.max_weight}. Cell left unchanged."
        )


@dataclass(frozen=True)
class InvalidDimensionMessage(ToastMessage):
    """Reset dialog dimension that is not a valid board size."""

    axis: str  # "height" or "width"
    raw_value: str
    min_dimension: int
    max_dimension: int

    @property
    def icon(self) -> str:
        return "📐"

    @property
    def message(self) -> str:
        return (
            f"Invalid {self.axis.capitalize()} — '{self.raw_value}' must be a whole number "
            f"between {self.min_dimension} and {self.max_dimension}."
        )


@dataclass(frozen=True)
class NotEligibleMessage(ToastMessage):
    """Compute requested before two waypoints exist."""

    waypoint_count: int

    @property
    def icon(self) -> str:
        return "✋"

    @property
    def message(self) -> str:
        return f"Not Enough Waypoints — Place at least 2 waypoints (currently {self.waypoint_count})."


@dataclass(frozen=True)
class NoRouteMessage(ToastMessage):
    """Some waypoint pairs are cut apart by blocked cells."""

    unreachable_pairs: int
    total_pairs: int

    @property
    def icon(self) -> str:
        return "🚧"

    @property
    def message(self) -> str:
        return f"No Route — {self.unreachable_pairs} of {self.total_pairs} waypoint pair(s) cannot be connected."


@dataclass(frozen=True)
class ComputeDoneMessage(ToastMessage):
    """Routes were computed."""

    num_paths: int
    num_cells: int

    @property
    def icon(self) -> str:
        return "✈️"

    @property
    def message(self) -> str:
        return f"Routes Ready — {self.num_paths} route(s) covering {self.num_cells} cell(s)."


# =============================================================================
# INLINE MESSAGES - Sidebar context
# =============================================================================


@dataclass(frozen=True)
class BoardContextMessage(Message):
    """SIDEBAR: Current mode and board stats."""

    mode_label: str
    max_x: int
    max_y: int
    num_waypoints: int
    num_blocked: int
    num_risky: int
    num_paths: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return (
            f"🗺️ **{self.max_x}x{self.max_y} board** — {self.mode_label}\n\n"
            f"- 📍 {self.num_waypoints} waypoint(s)\n"
            f"- ❌ {self.num_blocked} blocked cell(s)\n"
            f"- ⚠️ {self.num_risky} risky cell(s)\n"
            f"- ✈️ {self.num_paths} route(s)"
        )


@dataclass(frozen=True)
class PendingRiskyMessage(Message):
    """SIDEBAR: A risky cell is waiting for its weight."""

    x: int
    y: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return f"⚠️ Enter a risk value for cell ({self.x}, {self.y})"
