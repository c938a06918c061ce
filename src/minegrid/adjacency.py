"""
Adjacency counter: per-cell counts of mined Moore neighbors.
"""
from .grid import Grid


def count_adjacent_mines(grid: Grid) -> Grid:
    """
    Calculate adjacent mine counts for all cells.

    Non-mined cells get the number of mined neighbors (0-8). Mined cells
    are set to 0; their count is never read. Running this twice on the
    same mine layout gives the same result.

    Returns:
        The same grid, updated in place.
    """
    for (row, col), cell in grid.iter_cells():
        if cell.has_mine:
            cell.adjacent_mines = 0
            continue
        cell.adjacent_mines = _count_around(grid, row, col)
    return grid


def _count_around(grid: Grid, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        if grid.cell(neighbor_row, neighbor_col).has_mine:
            count += 1
    return count
