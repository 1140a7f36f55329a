"""Unit tests for gridpath_planner model classes.

Tests: GridSpec, GridCoord, CellClassification, CellRegistry, PathResultSet
Focus: Canonical key, tagged cell union, last-write-wins, result queries
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gridpath_planner.constants import GridConfig
from gridpath_planner.core.errors import InvalidWeightError, OutOfBoundsError
from gridpath_planner.model.cell import (
    EMPTY,
    INACCESSIBLE,
    OBSTACLE,
    WAYPOINT,
    CellKind,
    Risky,
    is_valid_weight,
    parse_risk_weight,
)
from gridpath_planner.model.cell_registry import CellRegistry
from gridpath_planner.model.grid import GridCoord, GridSpec
from gridpath_planner.model.path_result import EMPTY_RESULT, ComputedPath, PathResultSet

dimension = st.integers(min_value=GridConfig.MIN_DIMENSION, max_value=GridConfig.MAX_DIMENSION)


# =============================================================================
# GRID
# =============================================================================


class TestGridSpec:
    """GridSpec dimensions and the canonical key."""

    @pytest.mark.parametrize("max_x,max_y", [(0, 3), (3, 0), (-1, 5), (100, 1), (1, 100)])
    def test_invalid_dimensions_rejected(self, max_x: int, max_y: int) -> None:
        with pytest.raises(ValueError):
            GridSpec(max_x=max_x, max_y=max_y)

    @pytest.mark.parametrize("bad", [True, 2.0, "3", None])
    def test_non_integer_dimensions_rejected(self, bad: object) -> None:
        with pytest.raises(ValueError):
            GridSpec(max_x=bad, max_y=3)  # type: ignore[arg-type]

    def test_key_is_row_major_with_x_as_row(self, grid_3x2: GridSpec) -> None:
        """3 rows x 2 columns: (x, y) -> x * 2 + y."""
        assert grid_3x2.key_of(0, 0) == 0
        assert grid_3x2.key_of(0, 1) == 1
        assert grid_3x2.key_of(1, 0) == 2
        assert grid_3x2.key_of(2, 1) == 5

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (3, 2)])
    def test_key_of_out_of_bounds_raises(self, grid_3x2: GridSpec, x: int, y: int) -> None:
        with pytest.raises(OutOfBoundsError) as exc_info:
            grid_3x2.key_of(x, y)
        assert (exc_info.value.x, exc_info.value.y) == (x, y)
        assert (exc_info.value.max_x, exc_info.value.max_y) == (3, 2)

    def test_require_returns_coord(self, grid_3x3: GridSpec) -> None:
        assert grid_3x3.require(2, 1) == GridCoord(2, 1)

    def test_coord_of_inverts_key_of(self, grid_3x2: GridSpec) -> None:
        for coord in grid_3x2.coords():
            assert grid_3x2.coord_of(grid_3x2.key_of(coord.x, coord.y)) == coord

    @pytest.mark.parametrize("key", [-1, 6])
    def test_coord_of_invalid_key_raises(self, grid_3x2: GridSpec, key: int) -> None:
        with pytest.raises(ValueError):
            grid_3x2.coord_of(key)

    def test_coords_cover_board_in_key_order(self, grid_3x2: GridSpec) -> None:
        keys = [grid_3x2.key_of(c.x, c.y) for c in grid_3x2.coords()]
        assert keys == list(range(grid_3x2.size))

    @given(max_x=dimension, max_y=dimension, data=st.data())
    def test_key_injective(self, max_x: int, max_y: int, data: st.DataObject) -> None:
        """Distinct coordinates on the same board never share a key."""
        grid = GridSpec(max_x=max_x, max_y=max_y)
        x1 = data.draw(st.integers(0, max_x - 1))
        y1 = data.draw(st.integers(0, max_y - 1))
        x2 = data.draw(st.integers(0, max_x - 1))
        y2 = data.draw(st.integers(0, max_y - 1))
        if (x1, y1) != (x2, y2):
            assert grid.key_of(x1, y1) != grid.key_of(x2, y2)
        else:
            assert grid.key_of(x1, y1) == grid.key_of(x2, y2)

    @settings(max_examples=30)
    @given(max_x=dimension, max_y=dimension)
    def test_keys_fill_range_exactly(self, max_x: int, max_y: int) -> None:
        grid = GridSpec(max_x=max_x, max_y=max_y)
        keys = {grid.key_of(c.x, c.y) for c in grid.coords()}
        assert keys == set(range(max_x * max_y))

    def test_coord_unpacks(self) -> None:
        x, y = GridCoord(4, 7)
        assert (x, y) == (4, 7)


# =============================================================================
# CELL CLASSIFICATION
# =============================================================================


class TestCellClassification:
    """Tagged union of cell kinds."""

    @pytest.mark.parametrize(
        "classification,kind,blocks",
        [
            (EMPTY, CellKind.EMPTY, False),
            (WAYPOINT, CellKind.WAYPOINT, False),
            (OBSTACLE, CellKind.OBSTACLE, True),
            (INACCESSIBLE, CellKind.INACCESSIBLE, True),
            (Risky(weight=3), CellKind.RISKY, False),
        ],
    )
    def test_kind_and_blocking(self, classification: object, kind: CellKind, blocks: bool) -> None:
        assert classification.kind is kind  # type: ignore[attr-defined]
        assert classification.blocks_traversal is blocks  # type: ignore[attr-defined]

    def test_obstacle_and_inaccessible_are_distinct(self) -> None:
        assert OBSTACLE != INACCESSIBLE

    def test_risky_equality_includes_weight(self) -> None:
        assert Risky(weight=5) == Risky(weight=5)
        assert Risky(weight=5) != Risky(weight=6)

    def test_risky_str_is_weight(self) -> None:
        assert str(Risky(weight=42)) == "42"

    @pytest.mark.parametrize("weight", [0, -3, True, 2.5, "5", None])
    def test_risky_rejects_invalid_weight(self, weight: object) -> None:
        with pytest.raises(InvalidWeightError):
            Risky(weight=weight)  # type: ignore[arg-type]

    @pytest.mark.parametrize("weight,valid", [(1, True), (99, True), (1000, True), (0, False), (False, False)])
    def test_is_valid_weight(self, weight: object, valid: bool) -> None:
        assert is_valid_weight(weight) is valid


class TestParseRiskWeight:
    """Dialog text and API values to a risk weight."""

    @pytest.mark.parametrize("raw,expected", [("5", 5), (" 12 ", 12), ("007", 7), (3, 3)])
    def test_accepts_positive_integers(self, raw: object, expected: int) -> None:
        assert parse_risk_weight(raw) == expected

    @pytest.mark.parametrize("raw", ["", "0", "-1", "5.0", "abc", "٣", 0, 2.0, True, None])
    def test_rejects_everything_else(self, raw: object) -> None:
        with pytest.raises(InvalidWeightError) as exc_info:
            parse_risk_weight(raw)
        assert exc_info.value.weight == raw


# =============================================================================
# CELL REGISTRY
# =============================================================================


class TestCellRegistry:
    """Canonical record of painted cells."""

    def test_unseen_cell_is_empty(self, registry_3x3: CellRegistry) -> None:
        assert registry_3x3.classify(GridCoord(1, 1)) is EMPTY
        assert len(registry_3x3) == 0

    def test_last_write_wins(self, registry_3x3: CellRegistry) -> None:
        coord = GridCoord(1, 2)
        registry_3x3.set(coord, OBSTACLE)
        registry_3x3.set(coord, Risky(weight=4))
        registry_3x3.set(coord, WAYPOINT)
        assert registry_3x3.classify(coord) is WAYPOINT
        assert len(registry_3x3) == 1

    def test_setting_empty_removes_entry(self, registry_3x3: CellRegistry) -> None:
        coord = GridCoord(0, 0)
        registry_3x3.set(coord, OBSTACLE)
        registry_3x3.set(coord, EMPTY)
        assert coord not in registry_3x3
        assert len(registry_3x3) == 0

    def test_out_of_bounds_set_raises_and_stores_nothing(self, registry_3x3: CellRegistry) -> None:
        with pytest.raises(OutOfBoundsError):
            registry_3x3.set(GridCoord(3, 0), OBSTACLE)
        assert len(registry_3x3) == 0

    def test_count_by_kind(self, registry_3x3: CellRegistry) -> None:
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        registry_3x3.set(GridCoord(0, 1), OBSTACLE)
        registry_3x3.set(GridCoord(0, 2), INACCESSIBLE)
        registry_3x3.set(GridCoord(1, 0), Risky(weight=2))
        registry_3x3.set(GridCoord(1, 1), WAYPOINT)
        assert registry_3x3.count(CellKind.WAYPOINT) == 2
        assert registry_3x3.count(CellKind.OBSTACLE) == 1
        assert registry_3x3.count(CellKind.INACCESSIBLE) == 1
        assert registry_3x3.count(CellKind.RISKY) == 1

    def test_waypoint_keys_in_placement_order(self, registry_3x3: CellRegistry) -> None:
        registry_3x3.set(GridCoord(2, 2), WAYPOINT)
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        registry_3x3.set(GridCoord(1, 1), WAYPOINT)
        assert registry_3x3.waypoint_keys() == [8, 0, 4]

    def test_repainting_same_waypoint_keeps_order(self, registry_3x3: CellRegistry) -> None:
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        registry_3x3.set(GridCoord(2, 2), WAYPOINT)
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        assert registry_3x3.waypoint_keys() == [0, 8]

    def test_repainted_waypoint_moves_to_end(self, registry_3x3: CellRegistry) -> None:
        """A cell that stopped being a waypoint re-enters at the end."""
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        registry_3x3.set(GridCoord(2, 2), WAYPOINT)
        registry_3x3.set(GridCoord(0, 0), OBSTACLE)
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        assert registry_3x3.waypoint_keys() == [8, 0]

    def test_snapshot_restore(self, registry_3x3: CellRegistry) -> None:
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        snapshot = registry_3x3.snapshot()
        registry_3x3.set(GridCoord(0, 0), OBSTACLE)
        registry_3x3.set(GridCoord(1, 1), Risky(weight=9))
        registry_3x3.restore(snapshot)
        assert list(registry_3x3.items()) == [(0, WAYPOINT)]

    def test_clear(self, registry_3x3: CellRegistry) -> None:
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        registry_3x3.set(GridCoord(1, 0), OBSTACLE)
        registry_3x3.clear()
        assert len(registry_3x3) == 0

    def test_contains_ignores_foreign_values(self, registry_3x3: CellRegistry) -> None:
        registry_3x3.set(GridCoord(0, 0), WAYPOINT)
        assert GridCoord(0, 0) in registry_3x3
        assert (0, 0) not in registry_3x3
        assert GridCoord(9, 9) not in registry_3x3


# =============================================================================
# PATH RESULT SET
# =============================================================================


class TestPathResultSet:
    """Output of one compute cycle."""

    def test_empty_result(self) -> None:
        assert EMPTY_RESULT.is_empty
        assert len(EMPTY_RESULT) == 0
        assert EMPTY_RESULT.member_keys == frozenset()
        assert EMPTY_RESULT.no_path_pairs() == []

    def test_member_keys_union_of_paths(self) -> None:
        result = PathResultSet(
            paths=(
                ComputedPath(start_key=0, end_key=2, keys=(0, 1, 2), cost=2.0),
                ComputedPath(start_key=2, end_key=8, keys=(2, 5, 8), cost=2.0),
            )
        )
        assert result.member_keys == frozenset({0, 1, 2, 5, 8})
        assert result.contains(5)
        assert not result.contains(4)

    def test_no_path_entries(self) -> None:
        result = PathResultSet(
            paths=(
                ComputedPath(start_key=0, end_key=8, keys=None),
                ComputedPath(start_key=8, end_key=6, keys=(8, 7, 6), cost=2.0),
            )
        )
        assert result.no_path_pairs() == [(0, 8)]
        assert result.as_key_lists() == [None, [8, 7, 6]]
        assert result.member_keys == frozenset({6, 7, 8})

    def test_computed_path_len(self) -> None:
        assert len(ComputedPath(start_key=0, end_key=2, keys=(0, 1, 2))) == 3
        assert len(ComputedPath(start_key=0, end_key=2, keys=None)) == 0
        assert ComputedPath(start_key=0, end_key=2, keys=None).is_no_path

    def test_equal_results_compare_equal(self) -> None:
        a = PathResultSet(paths=(ComputedPath(start_key=0, end_key=1, keys=(0, 1), cost=1.0),))
        b = PathResultSet(paths=(ComputedPath(start_key=0, end_key=1, keys=(0, 1), cost=1.0),))
        assert a == b
