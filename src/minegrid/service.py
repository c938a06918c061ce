"""
Service boundary for the grid engine.

These are the two operations a remote caller drives: start a game from
a first click, and reveal a cell on a grid snapshot the caller sends
back. Grids handed in are never mutated; reveal works on a copy.
"""
import logging
import time
from typing import Any, Optional, Union

from .adjacency import count_adjacent_mines
from .errors import InvalidDimensionsError
from .flood import reveal_from
from .grid import Grid, create_empty_grid
from .placement import RandomSource, SafeZone, place_mines


logger = logging.getLogger(__name__)

GridInput = Union[Grid, Any]


def start_game(
    rows: int,
    cols: int,
    mine_count: int,
    first_row: int,
    first_col: int,
    rng: Optional[RandomSource] = None,
    safe_zone: SafeZone = SafeZone.NEIGHBORHOOD,
) -> Grid:
    """
    Build a fresh grid seeded around a first click.

    Places mines outside the safe zone, computes adjacency counts and
    floods from the click.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Number of mines to place.
        first_row: Row of the first click.
        first_col: Column of the first click.
        rng: Random source for placement.
        safe_zone: Safe zone policy around the first click.

    Returns:
        The new grid with the opening already revealed.

    Raises:
        InvalidDimensionsError: If rows or cols is not positive.
        InvalidCoordinateError: If the first click is off the grid.
        MineCountError: If the mines do not fit outside the safe zone.
    """
    if rows < 1 or cols < 1:
        raise InvalidDimensionsError(
            f"Grid dimensions must be positive, got {rows}x{cols}"
        )
    started = time.perf_counter()

    grid = create_empty_grid(rows, cols)
    place_mines(grid, mine_count, first_row, first_col, rng, safe_zone)
    count_adjacent_mines(grid)
    reveal_from(grid, first_row, first_col)

    logger.debug(
        "Grid generation took %.2fms", (time.perf_counter() - started) * 1000
    )
    return grid


def reveal(grid: GridInput, row: int, col: int) -> Grid:
    """
    Reveal a cell on a caller-supplied grid snapshot.

    Args:
        grid: A Grid, or a wire snapshot (list of rows of cell dicts).
        row: Row to reveal.
        col: Column to reveal.

    Returns:
        A new grid. If the target was already revealed or flagged it is
        an unchanged copy; otherwise the flood from the target has been
        applied.

    Raises:
        MalformedGridError: If a wire snapshot is structurally invalid.
        InvalidCoordinateError: If (row, col) is off the grid.
    """
    snapshot = grid.copy() if isinstance(grid, Grid) else Grid.from_wire(grid)
    cell = snapshot.cell(row, col)
    if cell.revealed or cell.flagged:
        return snapshot
    return reveal_from(snapshot, row, col)
