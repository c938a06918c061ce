"""
Unit tests for flood reveal.
"""
import pytest

from conftest import grid_with_mines
from minegrid import (
    InvalidCoordinateError,
    check_win,
    create_empty_grid,
    reveal_from,
)
from minegrid.flood import reveal_region


def revealed_set(grid):
    return {pos for pos, cell in grid.iter_cells() if cell.revealed}


# ============================================================================
# Concrete Scenarios
# ============================================================================

class TestFloodScenarios:
    """Small hand-built grids."""

    def test_single_cell_grid(self) -> None:
        """1x1 with no mines: reveal wins immediately."""
        grid = create_empty_grid(1, 1)
        reveal_from(grid, 0, 0)
        cell = grid.cell(0, 0)
        assert cell.revealed is True
        assert cell.adjacent_mines == 0
        assert check_win(grid) is True

    def test_corner_mine_grid_reveals_all_safe_cells(
        self, corner_mine_grid
    ) -> None:
        """Flood from (0,0) opens all eight safe cells and not the mine."""
        reveal_from(corner_mine_grid, 0, 0)
        expected = set(corner_mine_grid.positions()) - {(2, 2)}
        assert revealed_set(corner_mine_grid) == expected
        assert corner_mine_grid.cell(2, 2).revealed is False
        assert check_win(corner_mine_grid) is True

    def test_empty_grid_opens_everything(self, empty_grid) -> None:
        reveal_from(empty_grid, 4, 0)
        assert empty_grid.revealed_count == 25

    def test_stops_at_numbered_border(self, walled_grid) -> None:
        """Numbered column 1 is revealed, the wall and beyond are not."""
        reveal_from(walled_grid, 0, 0)
        expected = {(row, col) for row in range(5) for col in (0, 1)}
        assert revealed_set(walled_grid) == expected

    def test_numbered_seed_reveals_only_itself(self, walled_grid) -> None:
        reveal_from(walled_grid, 2, 1)
        assert revealed_set(walled_grid) == {(2, 1)}

    def test_mined_seed_is_revealed_without_expansion(self, walled_grid) -> None:
        reveal_from(walled_grid, 2, 2)
        assert revealed_set(walled_grid) == {(2, 2)}


# ============================================================================
# Properties
# ============================================================================

class TestFloodProperties:
    """General guarantees of the traversal."""

    def test_never_reveals_mine_from_zero_seed(self) -> None:
        mines = [(0, 4), (1, 1), (3, 3), (4, 0), (2, 5)]
        grid = grid_with_mines(6, 6, mines)
        for pos, cell in grid.iter_cells():
            if not cell.has_mine and cell.adjacent_mines == 0:
                trial = grid.copy()
                reveal_from(trial, *pos)
                assert not any(trial.cell(*mine).revealed for mine in mines)

    def test_idempotent(self, walled_grid) -> None:
        reveal_from(walled_grid, 0, 0)
        first = walled_grid.copy()
        reveal_from(walled_grid, 0, 0)
        assert walled_grid == first

    def test_flood_passes_through_flags(self, empty_grid) -> None:
        """Flags do not stop propagation; revealed cells lose the flag."""
        empty_grid.cell(2, 2).toggle_flag()
        empty_grid.cell(4, 4).toggle_flag()
        reveal_from(empty_grid, 0, 0)
        assert empty_grid.revealed_count == 25
        assert empty_grid.flag_count == 0
        assert not empty_grid.cell(2, 2).flagged

    def test_already_revealed_cells_are_not_reopened(self, walled_grid) -> None:
        walled_grid.cell(0, 0).reveal()
        assert reveal_region(walled_grid, 0, 0) == []

    def test_large_open_grid_does_not_recurse(self) -> None:
        grid = create_empty_grid(200, 200)
        revealed = reveal_region(grid, 100, 100)
        assert len(revealed) == 40000
        assert len(set(revealed)) == 40000

    def test_returns_same_grid(self, empty_grid) -> None:
        assert reveal_from(empty_grid, 0, 0) is empty_grid

    def test_seed_off_grid_raises(self, empty_grid) -> None:
        with pytest.raises(InvalidCoordinateError):
            reveal_from(empty_grid, -1, 0)
        assert empty_grid.revealed_count == 0
