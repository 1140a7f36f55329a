"""PathResultSet - Output of one compute cycle.

A computation connects consecutive waypoints (in placement order). Each pair
yields one ComputedPath: either the ordered cell keys of the route, or an
explicit "no path" marker when obstacles cut the pair apart.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import cached_property


@dataclass(frozen=True)
class ComputedPath:
    """Route between two waypoints.

    Attributes:
        start_key: Key of the waypoint the route starts from
        end_key: Key of the waypoint the route ends at
        keys: Ordered cell keys from start to end (inclusive), None if unreachable
        cost: Total traversal cost reported by the engine, None if unreachable
    """

    start_key: int
    end_key: int
    keys: tuple[int, ...] | None
    cost: float | None = None

    @property
    def is_no_path(self) -> bool:
        return self.keys is None

    def __len__(self) -> int:
        return 0 if self.keys is None else len(self.keys)

    def __repr__(self) -> str:
        if self.keys is None:
            return f"ComputedPath({self.start_key} -> {self.end_key}: no path)"
        return f"ComputedPath({self.start_key} -> {self.end_key}: {len(self.keys)} cells, cost={self.cost})"


@dataclass(frozen=True)
class PathResultSet:
    """Ordered sequence of computed paths."""

    paths: tuple[ComputedPath, ...] = field(default_factory=tuple)

    @cached_property
    def member_keys(self) -> frozenset[int]:
        """Keys of every cell lying on any path."""
        return frozenset(key for path in self.paths if path.keys is not None for key in path.keys)

    @property
    def is_empty(self) -> bool:
        return not self.paths

    def contains(self, key: int) -> bool:
        """Check if the cell participates in any path."""
        return key in self.member_keys

    def no_path_pairs(self) -> list[tuple[int, int]]:
        """(start_key, end_key) of every unreachable waypoint pair."""
        return [(p.start_key, p.end_key) for p in self.paths if p.is_no_path]

    def as_key_lists(self) -> list[list[int] | None]:
        """Plain list form: one key list per path, None for "no path"."""
        return [None if p.keys is None else list(p.keys) for p in self.paths]

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[ComputedPath]:
        return iter(self.paths)


EMPTY_RESULT = PathResultSet()
