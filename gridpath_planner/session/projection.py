"""Projection - Read-only view of the session for rendering.

For every cell: its classification and whether it lies on a computed path.

Rendering precedence:
    - A classified cell is drawn as its classification, path or not
      (a waypoint on a route is still a waypoint)
    - Path membership only overrides Empty
    - A Risky cell on a route keeps its weight label but takes the route color
"""

from dataclasses import dataclass
from enum import Enum

from gridpath_planner.constants import StyleConfig
from gridpath_planner.model.cell import CellClassification, CellKind, Risky
from gridpath_planner.model.cell_registry import CellRegistry
from gridpath_planner.model.grid import GridCoord, GridSpec
from gridpath_planner.model.path_result import PathResultSet


class RenderKind(Enum):
    """What the renderer should draw for a cell. Values key StyleConfig."""

    NEUTRAL = "neutral"
    MARKER = "marker"
    BLOCKER = "blocker"
    DISTINCT_BLOCKER = "distinct_blocker"
    WEIGHT_LABEL = "weight_label"
    ROUTE_MARKER = "route_marker"


_KIND_TO_RENDER = {
    CellKind.WAYPOINT: RenderKind.MARKER,
    CellKind.OBSTACLE: RenderKind.BLOCKER,
    CellKind.INACCESSIBLE: RenderKind.DISTINCT_BLOCKER,
    CellKind.RISKY: RenderKind.WEIGHT_LABEL,
}


@dataclass(frozen=True)
class CellView:
    """One cell of the projection."""

    coord: GridCoord
    key: int
    classification: CellClassification
    on_path: bool

    @property
    def render_kind(self) -> RenderKind:
        if self.classification.is_empty:
            return RenderKind.ROUTE_MARKER if self.on_path else RenderKind.NEUTRAL
        return _KIND_TO_RENDER[self.classification.kind]

    @property
    def icon(self) -> str:
        return StyleConfig.ICONS[self.render_kind.value]

    @property
    def label(self) -> str:
        """Weight text for risky cells, empty otherwise."""
        if isinstance(self.classification, Risky):
            return str(self.classification.weight)
        return ""

    @property
    def color(self) -> str:
        if self.render_kind is RenderKind.WEIGHT_LABEL and self.on_path:
            return StyleConfig.COLORS[RenderKind.ROUTE_MARKER.value]
        return StyleConfig.COLORS[self.render_kind.value]


@dataclass(frozen=True)
class Projection:
    """Per-cell view of the board, ordered by cell key."""

    grid: GridSpec
    cells: tuple[CellView, ...]
    result: PathResultSet

    @classmethod
    def build(cls, grid: GridSpec, registry: CellRegistry, result: PathResultSet) -> "Projection":
        cells = []
        for coord in grid.coords():
            key = grid.key_of(coord.x, coord.y)
            cells.append(
                CellView(
                    coord=coord,
                    key=key,
                    classification=registry.classify_key(key),
                    on_path=result.contains(key),
                )
            )
        return cls(grid=grid, cells=tuple(cells), result=result)

    def cell(self, x: int, y: int) -> CellView:
        return self.cells[self.grid.key_of(x, y)]

    def rows(self) -> list[list[CellView]]:
        """Cells grouped by x, matching the board layout."""
        return [list(self.cells[x * self.grid.max_y : (x + 1) * self.grid.max_y]) for x in range(self.grid.max_x)]

    def count(self, render_kind: RenderKind) -> int:
        return sum(1 for c in self.cells if c.render_kind is render_kind)
