"""
Flood reveal: uncover a connected zero region and its numbered border.
"""
from typing import List, Set

from .grid import Grid, Position


_DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def reveal_from(grid: Grid, row: int, col: int) -> Grid:
    """
    Reveal (row, col) and expand through zero-count cells.

    Uses an explicit stack, so large open regions never hit the
    recursion limit. Neighbors are pushed unchecked and bounds are
    tested when popped. Expansion stops at any numbered cell (it is
    revealed, its neighbors are not) and never passes a mine.

    Flags are not consulted here: a flagged cell inside the region is
    revealed like any other. Refusing a click on a flagged cell is the
    caller's job.

    Args:
        grid: Grid to update in place.
        row: Seed row.
        col: Seed column.

    Returns:
        The same grid.

    Raises:
        InvalidCoordinateError: If the seed is off the grid.
    """
    reveal_region(grid, row, col)
    return grid


def reveal_region(grid: Grid, row: int, col: int) -> List[Position]:
    """Flood from (row, col) and return the newly revealed positions."""
    grid.require_in_bounds(row, col)
    stack: List[Position] = [(row, col)]
    visited: Set[Position] = set()
    revealed: List[Position] = []

    while stack:
        r, c = stack.pop()
        if not grid.in_bounds(r, c) or (r, c) in visited:
            continue
        cell = grid.cell(r, c)
        if cell.revealed:
            continue

        cell.reveal()
        visited.add((r, c))
        revealed.append((r, c))

        if not cell.has_mine and cell.adjacent_mines == 0:
            for dr, dc in _DIRECTIONS:
                stack.append((r + dr, c + dc))

    return revealed
