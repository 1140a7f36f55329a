"""GridSpec - Board dimensions and the canonical cell key.

The key function defined here is the single source of truth for mapping a
coordinate to an identifier. The Cell Registry, the engine adapter and the
search engine's graph node ids all use it, so results can be cross-referenced
without any translation.

Board layout: x selects the row, y the column.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from gridpath_planner.constants import GridConfig
from gridpath_planner.core.errors import OutOfBoundsError


@dataclass(frozen=True, order=True)
class GridCoord:
    """A cell coordinate (x, y) on the board."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))

    def __repr__(self) -> str:
        return f"GridCoord({self.x}, {self.y})"


@dataclass(frozen=True)
class GridSpec:
    """Board dimensions.

    Attributes:
        max_x: Number of rows (x in [0, max_x))
        max_y: Number of columns (y in [0, max_y))

    Example:
        grid = GridSpec(max_x=3, max_y=3)
        grid.key_of(x=1, y=2)  # 5
    """

    max_x: int
    max_y: int

    def __post_init__(self) -> None:
        for name, value in (("max_x", self.max_x), ("max_y", self.max_y)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if not GridConfig.MIN_DIMENSION <= value <= GridConfig.MAX_DIMENSION:
                raise ValueError(
                    f"{name} must be between {GridConfig.MIN_DIMENSION} and {GridConfig.MAX_DIMENSION}, got {value}"
                )

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.max_x * self.max_y

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) lies on the board."""
        return 0 <= x < self.max_x and 0 <= y < self.max_y

    def require(self, x: int, y: int) -> GridCoord:
        """Return the coordinate, raising OutOfBoundsError if it is off the board."""
        if not self.contains(x, y):
            raise OutOfBoundsError(x=x, y=y, max_x=self.max_x, max_y=self.max_y)
        return GridCoord(x=x, y=y)

    def key_of(self, x: int, y: int) -> int:
        """Canonical key for (x, y): row-major index with x as the row.

        Injective over all valid coordinates of this grid size.

        Raises:
            OutOfBoundsError: If (x, y) is off the board.
        """
        self.require(x, y)
        return x * self.max_y + y

    def coord_of(self, key: int) -> GridCoord:
        """Inverse of key_of."""
        if not 0 <= key < self.size:
            raise ValueError(f"Key {key} is not valid for a {self.max_x}x{self.max_y} grid")
        x, y = divmod(key, self.max_y)
        return GridCoord(x=x, y=y)

    def coords(self) -> Iterator[GridCoord]:
        """Iterate all coordinates row by row."""
        for x in range(self.max_x):
            for y in range(self.max_y):
                yield GridCoord(x=x, y=y)

    def __repr__(self) -> str:
        return f"GridSpec({self.max_x}x{self.max_y})"
