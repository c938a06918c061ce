"""
Cell module for the grid engine.

Represents individual cells on the grid with their content (mine/count)
and visibility (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the grid.

    Attributes:
        has_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8). Only
            meaningful when has_mine is False.
        revealed: Whether the cell has been uncovered.
        flagged: Whether the player marked the cell as a suspected mine.
    """

    has_mine: bool = False
    adjacent_mines: int = 0
    revealed: bool = False
    flagged: bool = False

    def reveal(self) -> bool:
        """
        Uncover this cell, dropping any flag on it.

        Returns:
            True if the cell was hidden before, False if already revealed.
        """
        if self.revealed:
            return False
        self.revealed = True
        self.flagged = False
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.revealed:
            return False
        self.flagged = not self.flagged
        return True

    @property
    def state(self) -> CellState:
        """Visual state derived from the revealed/flagged fields."""
        if self.revealed:
            return CellState.REVEALED
        if self.flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    def copy(self) -> "Cell":
        return Cell(
            has_mine=self.has_mine,
            adjacent_mines=self.adjacent_mines,
            revealed=self.revealed,
            flagged=self.flagged,
        )

    def to_observation(self) -> int:
        """
        Convert cell to an integer code for array views.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        state = self.state
        if state == CellState.HIDDEN:
            return HIDDEN_CODE
        if state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.has_mine:
            return MINE_CODE
        return self.adjacent_mines

    def to_wire(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys the clients exchange."""
        return {
            "hasMine": self.has_mine,
            "adjacentMines": self.adjacent_mines,
            "revealed": self.revealed,
            "flagged": self.flagged,
        }
