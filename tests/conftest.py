"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minegrid import (
    Cell,
    GameSession,
    Grid,
    GridConfig,
    SafeZone,
    count_adjacent_mines,
    create_empty_grid,
)


# ============================================================================
# Helpers
# ============================================================================

def grid_with_mines(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> Grid:
    """Build a grid with mines at fixed positions and counts computed."""
    grid = create_empty_grid(rows, cols)
    for row, col in mines:
        grid.cell(row, col).has_mine = True
    return count_adjacent_mines(grid)


class FixedClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible placement."""
    return random.Random(1234)


@pytest.fixture
def empty_grid() -> Grid:
    """A 5x5 grid with no mines."""
    return create_empty_grid(5, 5)


@pytest.fixture
def corner_mine_grid() -> Grid:
    """A 3x3 grid with a single mine in the bottom-right corner."""
    return grid_with_mines(3, 3, [(2, 2)])


@pytest.fixture
def walled_grid() -> Grid:
    """
    A 5x5 grid with a full column of mines at col 2.

    Flooding from the left side must stop at col 1.
    """
    return grid_with_mines(5, 5, [(row, 2) for row in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def beginner_session(rng: random.Random, clock: FixedClock) -> GameSession:
    """A 9x9, 10 mine session with seeded placement and a manual clock."""
    return GameSession(GridConfig(9, 9, 10), rng=rng, clock=clock)


@pytest.fixture
def no_mine_session(clock: FixedClock) -> GameSession:
    """A session that is won by its first click."""
    return GameSession(
        GridConfig(4, 4, 0, safe_zone=SafeZone.CELL), clock=clock
    )
