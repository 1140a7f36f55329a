"""Grid Path Engine - Weighted shortest paths between waypoints on a grid board.

This is the search engine the planning session treats as an opaque
collaborator. It owns an internal board (cell roles and traversal costs) and
connects the registered waypoints in registration order: waypoint i to
waypoint i+1.

Uses SciPy's optimized sparse graph Dijkstra. Graph node ids are the board's
cell keys (x * max_y + y), so a path is read back directly as cell keys.

Cost Model:
    cost(step into cell) = risk_floor   for free cells and waypoints
                         = weight       for risky cells
    Obstacle and inaccessible cells have no incoming or outgoing edges.

Movement is 4-connected (PlannerConfig.NEIGHBORS_4).
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import shortest_path

from gridpath_planner.constants import PlannerConfig

logger = logging.getLogger(__name__)

# (x, y) board point
Point = tuple[int, int]


class BoardRole(IntEnum):
    """Role of a cell on the engine board."""

    FREE = 0
    WAYPOINT = 1
    OBSTACLE = 2
    INACCESSIBLE = 3
    RISKY = 4


BLOCKING_ROLES = (BoardRole.OBSTACLE, BoardRole.INACCESSIBLE)


@dataclass(frozen=True)
class BoardSnapshot:
    """Copy of the engine board, used to roll back a failed edit."""

    roles: np.ndarray
    costs: np.ndarray
    points: tuple[Point, ...]


class GridPathEngine:
    """Least-cost path search over a weighted grid board.

    Example:
        engine = GridPathEngine(max_x=3, max_y=3, risk_floor=1)
        engine.add_point(0, 0)
        engine.add_point(2, 2)
        engine.set_obstacle(1, 1)
        engine.calculate()
        engine.get_paths()  # one 5-cell route around the obstacle
    """

    def __init__(self, max_x: int, max_y: int, risk_floor: int) -> None:
        """Create an empty board where every cell costs risk_floor."""
        if max_x < 1 or max_y < 1:
            raise ValueError(f"Board must be at least 1x1, got {max_x}x{max_y}")
        if risk_floor < 1:
            raise ValueError(f"risk_floor must be positive, got {risk_floor}")
        self.max_x = max_x
        self.max_y = max_y
        self.risk_floor = risk_floor
        self._roles = np.full((max_x, max_y), BoardRole.FREE, dtype=np.int8)
        self._costs = np.full((max_x, max_y), float(risk_floor), dtype=np.float64)
        self._points: list[Point] = []
        self._paths: list[Optional[list[Point]]] = []
        self._path_costs: list[Optional[float]] = []

    # =========================================================================
    # BOARD EDITING
    # =========================================================================

    def get_key_from_point(self, x: int, y: int) -> int:
        """Graph node id of (x, y)."""
        return x * self.max_y + y

    def add_point(self, x: int, y: int) -> None:
        """Register (x, y) as a waypoint. Re-adding an existing waypoint is a no-op."""
        self._check(x, y)
        if self._roles[x, y] == BoardRole.WAYPOINT:
            return
        self.clear_point(x, y)
        self._roles[x, y] = BoardRole.WAYPOINT
        self._points.append((x, y))

    def set_obstacle(self, x: int, y: int) -> None:
        self._set_blocking(x, y, BoardRole.OBSTACLE)

    def set_inaccessible(self, x: int, y: int) -> None:
        self._set_blocking(x, y, BoardRole.INACCESSIBLE)

    def set_risky_point(self, x: int, y: int, value: int) -> None:
        """Make (x, y) traversable at cost value."""
        self._check(x, y)
        if value < 1:
            raise ValueError(f"Risk value must be positive, got {value}")
        self.clear_point(x, y)
        self._roles[x, y] = BoardRole.RISKY
        self._costs[x, y] = float(value)

    def clear_point(self, x: int, y: int) -> None:
        """Return (x, y) to a free cell, dropping any previous role."""
        self._check(x, y)
        if self._roles[x, y] == BoardRole.WAYPOINT:
            self._points.remove((x, y))
        self._roles[x, y] = BoardRole.FREE
        self._costs[x, y] = float(self.risk_floor)

    def role_at(self, x: int, y: int) -> BoardRole:
        self._check(x, y)
        return BoardRole(int(self._roles[x, y]))

    def cost_at(self, x: int, y: int) -> float:
        self._check(x, y)
        return float(self._costs[x, y])

    @property
    def points(self) -> list[Point]:
        """Waypoints in registration order."""
        return list(self._points)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(roles=self._roles.copy(), costs=self._costs.copy(), points=tuple(self._points))

    def restore(self, snapshot: BoardSnapshot) -> None:
        self._roles = snapshot.roles.copy()
        self._costs = snapshot.costs.copy()
        self._points = list(snapshot.points)

    # =========================================================================
    # SEARCH
    # =========================================================================

    def calculate(self) -> None:
        """Compute one path per consecutive waypoint pair.

        Fewer than two waypoints leaves the path list empty.
        """
        self._paths = []
        self._path_costs = []
        if len(self._points) < 2:
            logger.debug(f"[ENGINE] {len(self._points)} waypoint(s), nothing to connect")
            return

        csgraph = self._build_graph()
        sources = [self.get_key_from_point(x, y) for x, y in self._points[:-1]]

        dist, pred = shortest_path(
            csgraph=csgraph,
            method=PlannerConfig.METHOD,
            directed=True,
            indices=sources,
            return_predecessors=True,
        )

        for i, (start, end) in enumerate(zip(self._points[:-1], self._points[1:])):
            end_id = self.get_key_from_point(*end)
            if np.isinf(dist[i, end_id]):
                logger.info(f"[ENGINE] No route from {start} to {end}")
                self._paths.append(None)
                self._path_costs.append(None)
                continue
            self._paths.append(self._reconstruct(pred_row=pred[i], start_id=sources[i], end_id=end_id))
            self._path_costs.append(float(dist[i, end_id]))

        logger.debug(f"[ENGINE] Computed {len(self._paths)} path(s) over {len(self._points)} waypoints")

    def get_paths(self) -> list[Optional[list[Point]]]:
        """Paths of the last calculate() call. None marks an unreachable pair."""
        return [None if path is None else list(path) for path in self._paths]

    def get_costs(self) -> list[Optional[float]]:
        """Total cost of each path of the last calculate() call."""
        return list(self._path_costs)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.max_x and 0 <= y < self.max_y):
            raise IndexError(f"Point ({x}, {y}) outside {self.max_x}x{self.max_y} board")

    def _set_blocking(self, x: int, y: int, role: BoardRole) -> None:
        self._check(x, y)
        self.clear_point(x, y)
        self._roles[x, y] = role

    def _is_blocked(self, x: int, y: int) -> bool:
        return self._roles[x, y] in BLOCKING_ROLES

    def _build_graph(self) -> csr_matrix:
        """Sparse directed graph: edge weight is the cost of the cell stepped into."""
        n_nodes = self.max_x * self.max_y

        row_list: list[int] = []
        col_list: list[int] = []
        data_list: list[float] = []

        for x in range(self.max_x):
            for y in range(self.max_y):
                if self._is_blocked(x, y):
                    continue
                from_id = self.get_key_from_point(x, y)

                for dx, dy in PlannerConfig.NEIGHBORS_4:
                    nx, ny = x + dx, y + dy
                    if not (0 <= nx < self.max_x and 0 <= ny < self.max_y):
                        continue
                    if self._is_blocked(nx, ny):
                        continue
                    row_list.append(from_id)
                    col_list.append(self.get_key_from_point(nx, ny))
                    data_list.append(float(self._costs[nx, ny]))

        return csr_matrix(
            (data_list, (row_list, col_list)),
            shape=(n_nodes, n_nodes),
            dtype=np.float64,
        )

    def _reconstruct(self, pred_row: np.ndarray, start_id: int, end_id: int) -> list[Point]:
        """Walk predecessors back from end_id to start_id."""
        path_ids: list[int] = []
        current = end_id
        while True:
            path_ids.append(current)
            if current == start_id:
                break
            current = int(pred_row[current])
            if current == PlannerConfig.NO_PREDECESSOR:
                raise RuntimeError(f"Broken predecessor chain from node {end_id} to {start_id}")

        path_ids.reverse()
        return [divmod(pid, self.max_y) for pid in path_ids]

    def __repr__(self) -> str:
        return f"GridPathEngine({self.max_x}x{self.max_y}, waypoints={len(self._points)})"
