"""
Interaction layer: chording, mine exposure and win detection.
"""
from dataclasses import dataclass, field
from typing import List

from .flood import reveal_region
from .grid import Grid, Position


@dataclass
class ChordResult:
    """
    Outcome of a chord action.

    Attributes:
        performed: Whether the flag count matched and neighbors were opened.
        revealed: Positions uncovered by the chord, nested floods included.
        mine_hit: Whether a mine was among the uncovered neighbors.
    """

    performed: bool = False
    revealed: List[Position] = field(default_factory=list)
    mine_hit: bool = False


def check_win(grid: Grid) -> bool:
    """Check if all non-mine cells are revealed."""
    for _, cell in grid.iter_cells():
        if not cell.has_mine and not cell.revealed:
            return False
    return True


def reveal_all_mines(grid: Grid) -> List[Position]:
    """Uncover every mine on the grid and return the newly revealed ones."""
    exposed = []
    for position, cell in grid.iter_cells():
        if cell.has_mine and cell.reveal():
            exposed.append(position)
    return exposed


def count_adjacent_flags(grid: Grid, row: int, col: int) -> int:
    """Count flagged, still hidden cells adjacent to position."""
    count = 0
    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        neighbor = grid.cell(neighbor_row, neighbor_col)
        if neighbor.flagged and not neighbor.revealed:
            count += 1
    return count


def can_chord(grid: Grid, row: int, col: int) -> bool:
    """Check whether (row, col) is a revealed number with matching flags."""
    cell = grid.cell(row, col)
    if not cell.revealed or cell.has_mine or cell.adjacent_mines <= 0:
        return False
    return count_adjacent_flags(grid, row, col) == cell.adjacent_mines


def chord(grid: Grid, row: int, col: int) -> ChordResult:
    """
    Open every unflagged hidden neighbor of a satisfied numbered cell.

    Mined neighbors are revealed on their own, zero neighbors start a
    nested flood and numbered neighbors are revealed on their own. If a
    mine came up, every mine on the grid is exposed.

    Args:
        grid: Grid to update in place.
        row: Row of the numbered cell.
        col: Column of the numbered cell.

    Returns:
        ChordResult describing what changed. performed is False when the
        cell is not a revealed number or its flag count does not match.

    Raises:
        InvalidCoordinateError: If the position is off the grid.
    """
    result = ChordResult()
    if not can_chord(grid, row, col):
        return result
    result.performed = True

    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        neighbor = grid.cell(neighbor_row, neighbor_col)
        # an earlier nested flood may have opened this one already
        if neighbor.revealed or neighbor.flagged:
            continue
        if neighbor.has_mine:
            neighbor.reveal()
            result.revealed.append((neighbor_row, neighbor_col))
            result.mine_hit = True
        elif neighbor.adjacent_mines == 0:
            result.revealed.extend(
                reveal_region(grid, neighbor_row, neighbor_col)
            )
        else:
            neighbor.reveal()
            result.revealed.append((neighbor_row, neighbor_col))

    if result.mine_hit:
        reveal_all_mines(grid)
    return result
