"""CellRegistry - Canonical record of what the user has painted.

Maps the canonical cell key (GridSpec.key_of) to a CellClassification.
Empty cells are simply absent. Assigning a classification to a painted cell
overwrites it (last-write-wins, no undo stack).
"""

import logging
from collections.abc import Iterator

from gridpath_planner.model.cell import EMPTY, CellClassification, CellKind
from gridpath_planner.model.grid import GridCoord, GridSpec

logger = logging.getLogger(__name__)

# Immutable copy of the registry contents, used for rollback
RegistrySnapshot = tuple[tuple[int, CellClassification], ...]


class CellRegistry:
    """Mapping from grid coordinate to cell classification.

    Out-of-bounds coordinates are a precondition violation: key derivation
    raises OutOfBoundsError before anything is stored.
    """

    def __init__(self, grid: GridSpec) -> None:
        self.grid = grid
        # dict preserves insertion order; waypoint_keys() relies on it
        self._cells: dict[int, CellClassification] = {}

    def classify(self, coord: GridCoord) -> CellClassification:
        """Classification at coord, EMPTY if never painted."""
        return self._cells.get(self.grid.key_of(coord.x, coord.y), EMPTY)

    def classify_key(self, key: int) -> CellClassification:
        return self._cells.get(key, EMPTY)

    def set(self, coord: GridCoord, classification: CellClassification) -> None:
        """Overwrite the classification at coord unconditionally.

        Setting EMPTY removes the entry. Re-painting a cell with a different
        classification moves it to the end of the insertion order; repeating
        the same classification keeps its position.
        """
        key = self.grid.key_of(coord.x, coord.y)
        previous = self._cells.get(key, EMPTY)
        if previous == classification:
            return
        self._cells.pop(key, None)
        if not classification.is_empty:
            self._cells[key] = classification
        logger.debug(f"[REGISTRY] {coord}: {previous.kind.name} -> {classification.kind.name}")

    def clear(self) -> None:
        self._cells.clear()

    def items(self) -> Iterator[tuple[int, CellClassification]]:
        """Iterate (key, classification) pairs of painted cells."""
        return iter(list(self._cells.items()))

    def count(self, kind: CellKind) -> int:
        """Number of painted cells of the given kind."""
        return sum(1 for c in self._cells.values() if c.kind is kind)

    def waypoint_keys(self) -> list[int]:
        """Keys of waypoint cells in placement order."""
        return [key for key, c in self._cells.items() if c.kind is CellKind.WAYPOINT]

    def snapshot(self) -> RegistrySnapshot:
        return tuple(self._cells.items())

    def restore(self, snapshot: RegistrySnapshot) -> None:
        self._cells = dict(snapshot)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, GridCoord) or not self.grid.contains(coord.x, coord.y):
            return False
        return self.grid.key_of(coord.x, coord.y) in self._cells

    def __repr__(self) -> str:
        return f"CellRegistry({self.grid!r}, painted={len(self._cells)})"
