"""Configuration constants for Grid Path Planner.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    GridConfig: Board dimensions and risk weight limits
    PlannerConfig: Grid search engine parameters
    StyleConfig: Icons, colors and labels for cells and modes
    UIConfig: Streamlit layout and dialog texts
"""

from pathlib import Path

# Package root directory (where gridpath_planner/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of gridpath_planner/)
PROJECT_ROOT = PACKAGE_DIR.parent


class AppConfig:
    """UI application settings."""

    TITLE = "Grid Path Planner"
    ICON = "🗺️"
    LAYOUT = "wide"


class GridConfig:
    """Board dimensions and risk weight limits."""

    # Board size at program start
    DEFAULT_MAX_X = 10
    DEFAULT_MAX_Y = 10

    # Dimension inputs accept two digits
    MIN_DIMENSION = 1
    MAX_DIMENSION = 99

    # Traversal cost of an unweighted cell
    RISK_FLOOR = 1

    # Risk weight inputs accept two digits
    MIN_RISK_WEIGHT = 1
    MAX_RISK_WEIGHT = 99

    # Fewer waypoints than this and there is nothing to connect
    MIN_WAYPOINTS_TO_COMPUTE = 2


assert GridConfig.MIN_DIMENSION >= 1, "Grid dimensions must be positive"
assert GridConfig.MIN_DIMENSION <= GridConfig.DEFAULT_MAX_X <= GridConfig.MAX_DIMENSION
assert GridConfig.MIN_DIMENSION <= GridConfig.DEFAULT_MAX_Y <= GridConfig.MAX_DIMENSION
assert GridConfig.RISK_FLOOR >= 1, "Risk floor is the minimum traversal cost"
assert GridConfig.MIN_RISK_WEIGHT >= 1, "Risk weights must be positive"


class PlannerConfig:
    """Grid search engine parameters.

    The engine runs SciPy's C-optimized Dijkstra over a sparse graph whose
    node ids are the canonical cell keys.
    """

    # 4-connected grid neighbor directions (dx, dy)
    NEIGHBORS_4 = [(-1, 0), (0, -1), (0, 1), (1, 0)]

    # Predecessor sentinel returned by scipy.sparse.csgraph for unreachable nodes
    NO_PREDECESSOR = -9999

    # Dijkstra: all edge weights are positive
    METHOD = "D"


class StyleConfig:
    """Visual icons and colors.

    Keys of ICONS/COLORS are RenderKind values (see session.projection).
    Colors follow the mobile board palette.
    """

    ICONS = {
        "neutral": "⚪",
        "marker": "📍",
        "blocker": "❌",
        "distinct_blocker": "🧱",
        "weight_label": "",  # Risky cells show their weight instead of an icon
        "route_marker": "✈️",
    }

    COLORS = {
        "neutral": "#b8b8b8",
        "marker": "#4cb44c",
        "blocker": "#9c1f2c",
        "distinct_blocker": "#ba8025",
        "weight_label": "#b8b625",
        "route_marker": "#37a3b1",
    }
    assert set(ICONS.keys()) == set(COLORS.keys())

    # Sidebar labels per EditMode value
    MODE_LABELS = {
        "idle": "Stop editing",
        "place_waypoint": "Assign waypoints",
        "place_obstacle": "Assign obstacles",
        "place_inaccessible": "Assign inaccessible cells",
        "place_risky": "Assign risky cells",
    }

    MODE_ICONS = {
        "idle": "⏹️",
        "place_waypoint": ICONS["marker"],
        "place_obstacle": ICONS["blocker"],
        "place_inaccessible": ICONS["distinct_blocker"],
        "place_risky": "⚠️",
    }
    assert set(MODE_LABELS.keys()) == set(MODE_ICONS.keys())

    COMPUTE_LABEL = "Compute routes"
    COMPUTE_ICON = ICONS["route_marker"]
    RESET_LABEL = "Reset board"
    RESET_ICON = "🔁"


class UIConfig:
    """Streamlit layout and dialog texts."""

    RESET_DIALOG_TITLE = "Configure board"
    RESET_DIALOG_HELP = "Enter height and width, or leave empty to keep the current size"
    RISK_DIALOG_TITLE = "Risk value"
    RISK_DIALOG_HELP = "Enter the risk value for this cell"

    # Above this many columns the board is drawn with compact labels
    COMPACT_BOARD_COLUMNS = 20
