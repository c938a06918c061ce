"""
Mine placement for the grid engine.

Mines are distributed uniformly at random over the cells outside the
safe zone around the first click. The random source is injected so
placement can be reproduced in tests.
"""
import logging
import random
from enum import Enum
from typing import List, Optional, Protocol, Set

import numpy as np

from .errors import MineCountError
from .grid import Grid, Position


logger = logging.getLogger(__name__)


# ============================================================================
# Random Sources
# ============================================================================

class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [0, stop)."""

    def randrange(self, stop: int) -> int:
        ...


class NumpyRandomSource:
    """
    Adapt a numpy Generator to the RandomSource interface.

    Args:
        seed: Seed or existing numpy Generator.
    """

    def __init__(self, seed=None) -> None:
        if isinstance(seed, np.random.Generator):
            self._generator = seed
        else:
            self._generator = np.random.default_rng(seed)

    def randrange(self, stop: int) -> int:
        return int(self._generator.integers(stop))


# ============================================================================
# Safe Zone Policy
# ============================================================================

class SafeZone(Enum):
    """Which cells around the first click are kept mine-free."""

    CELL = "cell"
    NEIGHBORHOOD = "neighborhood"

    def largest_size(self, rows: int, cols: int) -> int:
        """Size of the biggest safe zone any click can produce on a grid."""
        if self is SafeZone.CELL:
            return 1
        return min(rows, 3) * min(cols, 3)


def safe_zone_positions(
    grid: Grid, safe_row: int, safe_col: int, safe_zone: SafeZone
) -> Set[Position]:
    """Cells kept mine-free for a first click at (safe_row, safe_col)."""
    grid.require_in_bounds(safe_row, safe_col)
    zone = {(safe_row, safe_col)}
    if safe_zone is SafeZone.NEIGHBORHOOD:
        zone.update(grid.neighbors(safe_row, safe_col))
    return zone


def eligible_positions(
    grid: Grid, safe_row: int, safe_col: int, safe_zone: SafeZone
) -> List[Position]:
    """All positions a mine may occupy, in row-major order."""
    excluded = safe_zone_positions(grid, safe_row, safe_col, safe_zone)
    return [pos for pos in grid.positions() if pos not in excluded]


# ============================================================================
# Placement
# ============================================================================

def place_mines(
    grid: Grid,
    mine_count: int,
    safe_row: int,
    safe_col: int,
    rng: Optional[RandomSource] = None,
    safe_zone: SafeZone = SafeZone.NEIGHBORHOOD,
) -> List[Position]:
    """
    Mark exactly mine_count cells as mined, avoiding the safe zone.

    Shuffles the eligible positions (Fisher-Yates over the injected
    random source) and mines the first mine_count of them.

    Args:
        grid: Grid to mutate in place. Expected to be mine-free.
        mine_count: Number of mines to place.
        safe_row: Row of the first click.
        safe_col: Column of the first click.
        rng: Random source; a fresh random.Random() when omitted.
        safe_zone: Safe zone policy around the first click.

    Returns:
        Positions that received a mine.

    Raises:
        InvalidCoordinateError: If the first click is off the grid.
        MineCountError: If mine_count is negative or exceeds the
            number of eligible cells.
    """
    if mine_count < 0:
        raise MineCountError("Number of mines cannot be negative")

    positions = eligible_positions(grid, safe_row, safe_col, safe_zone)
    if mine_count > len(positions):
        raise MineCountError(
            f"Cannot place {mine_count} mines. Only {len(positions)} cells "
            f"available after excluding the {safe_zone.value} safe zone."
        )

    rng = rng if rng is not None else random.Random()
    for i in range(len(positions) - 1, 0, -1):
        j = rng.randrange(i + 1)
        positions[i], positions[j] = positions[j], positions[i]

    selected = positions[:mine_count]
    for row, col in selected:
        grid.cell(row, col).has_mine = True

    logger.debug(
        "Placed %d mines on %dx%d grid (safe zone %s at (%d, %d))",
        mine_count, grid.rows, grid.cols, safe_zone.value, safe_row, safe_col,
    )
    return selected
