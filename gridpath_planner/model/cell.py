"""Cell classifications - what the user has painted on a cell.

A tagged union: every cell is exactly one of Empty, Waypoint, Obstacle,
Inaccessible or Risky(weight). Only Risky carries data, so classification and
weight can never disagree.

Obstacle and Inaccessible are kept apart for display; both block traversal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from gridpath_planner.constants import GridConfig
from gridpath_planner.core.errors import InvalidWeightError


class CellKind(Enum):
    """Tag of a cell classification."""

    EMPTY = "empty"
    WAYPOINT = "waypoint"
    OBSTACLE = "obstacle"
    INACCESSIBLE = "inaccessible"
    RISKY = "risky"


@dataclass(frozen=True)
class CellClassification(ABC):
    """Abstract base class for cell classifications.

    Use isinstance() or .kind to check the classification type.
    """

    @property
    @abstractmethod
    def kind(self) -> CellKind:
        """Tag of this classification."""

    @property
    def blocks_traversal(self) -> bool:
        """True if the search engine must never route through this cell."""
        return False

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY


@dataclass(frozen=True)
class Empty(CellClassification):
    """Unpainted cell (absent from the registry)."""

    @property
    def kind(self) -> CellKind:
        return CellKind.EMPTY


@dataclass(frozen=True)
class Waypoint(CellClassification):
    """A point the computed routes must connect."""

    @property
    def kind(self) -> CellKind:
        return CellKind.WAYPOINT


@dataclass(frozen=True)
class Obstacle(CellClassification):
    @property
    def kind(self) -> CellKind:
        return CellKind.OBSTACLE

    @property
    def blocks_traversal(self) -> bool:
        return True


@dataclass(frozen=True)
class Inaccessible(CellClassification):
    @property
    def kind(self) -> CellKind:
        return CellKind.INACCESSIBLE

    @property
    def blocks_traversal(self) -> bool:
        return True


@dataclass(frozen=True)
class Risky(CellClassification):
    """Traversable cell with an elevated traversal cost.

    Attributes:
        weight: Integer traversal cost, at least GridConfig.MIN_RISK_WEIGHT
    """

    weight: int

    def __post_init__(self) -> None:
        if not is_valid_weight(self.weight):
            raise InvalidWeightError(weight=self.weight)

    @property
    def kind(self) -> CellKind:
        return CellKind.RISKY

    def __str__(self) -> str:
        return str(self.weight)


def is_valid_weight(weight: object) -> bool:
    """Check that weight is a positive integer (bools rejected)."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        return False
    return weight >= GridConfig.MIN_RISK_WEIGHT


def parse_risk_weight(raw: object) -> int:
    """Turn dialog or API input into a risk weight.

    Accepts positive ints and strings of digits (surrounding whitespace ignored).

    Raises:
        InvalidWeightError: For anything else, including bools, floats and zero.
    """
    if isinstance(raw, str):
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidWeightError(weight=raw)
        value: object = int(text)
    else:
        value = raw
    if not is_valid_weight(value):
        raise InvalidWeightError(weight=raw)
    return value  # type: ignore[return-value]


# Data-less classifications are interchangeable, share one instance each
EMPTY = Empty()
WAYPOINT = Waypoint()
OBSTACLE = Obstacle()
INACCESSIBLE = Inaccessible()
