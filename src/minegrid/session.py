"""
Game session for the grid engine.

Holds one player's grid together with the game state machine, the
timer and the flag counter. Mines are placed lazily on the first reveal
so the first click is always safe.
"""
import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

import numpy as np

from .adjacency import count_adjacent_mines
from .config import GridConfig
from .flood import reveal_from
from .grid import Grid, create_empty_grid
from .interaction import chord, check_win, reveal_all_mines
from .placement import RandomSource, SafeZone, place_mines


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a session."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = (GameState.WON, GameState.LOST)


def format_elapsed(seconds: float, precision: int = 1) -> str:
    """Format seconds as m:ss with the given decimal precision."""
    minutes = int(seconds // 60)
    secs = seconds - minutes * 60
    width = 2 + precision + (1 if precision > 0 else 0)
    return f"{minutes}:{secs:0{width}.{precision}f}"


# ============================================================================
# Session Class
# ============================================================================

@dataclass
class GameSession:
    """
    A single game from first click to win or loss.

    The session owns its grid exclusively and mutates it in place.
    Callers that share a session between threads must serialize access.
    """

    config: GridConfig = field(default_factory=GridConfig)
    rng: RandomSource = field(default_factory=random.Random, repr=False)
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _grid: Grid = field(init=False, repr=False)
    _game_state: GameState = GameState.NOT_STARTED
    _started_at: Optional[float] = None
    _stopped_at: Optional[float] = None

    def __post_init__(self) -> None:
        """Create the empty grid after dataclass creation."""
        self._grid = create_empty_grid(self.config.rows, self.config.cols)

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "GameSession":
        """
        Resume a session from an existing grid, e.g. one built by start_game.

        The grid is copied. A grid with no mines and nothing revealed is
        treated as not started; anything else is in progress from now,
        or already finished if a mine is showing or every safe cell is.

        Raises:
            MineCountError: If the grid has no safe cell left.
        """
        config = GridConfig(
            grid.rows, grid.cols, grid.mine_count, safe_zone=SafeZone.CELL
        )
        session = cls(config, rng=rng if rng is not None else random.Random(), clock=clock)
        session._grid = grid.copy()
        if grid.mine_count == 0 and grid.revealed_count == 0:
            return session

        session._game_state = GameState.IN_PROGRESS
        session._started_at = clock()
        if any(cell.has_mine and cell.revealed for _, cell in grid.iter_cells()):
            session._lose()
        else:
            session._check_win_condition()
        return session

    # ========================================================================
    # Game Actions
    # ========================================================================

    def press(self, row: int, col: int) -> bool:
        """
        Handle a plain press: chord on a revealed number, reveal otherwise.

        Returns:
            True if the grid changed.
        """
        cell = self._grid.cell(row, col)
        if cell.revealed and cell.adjacent_mines > 0:
            return self.chord(row, col)
        return self.reveal(row, col)

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell.

        The first reveal places mines around this cell and starts the
        timer. A mine loses the game; a zero cell floods.

        Returns:
            True if the reveal happened, False if the cell is flagged,
            already revealed, or the game is over.

        Raises:
            InvalidCoordinateError: If the position is off the grid.
        """
        cell = self._grid.cell(row, col)
        if self.is_over or cell.revealed or cell.flagged:
            return False

        if self._game_state == GameState.NOT_STARTED:
            self._handle_first_click(row, col)
            reveal_from(self._grid, row, col)
        elif cell.has_mine:
            cell.reveal()
            self._lose()
            return True
        else:
            reveal_from(self._grid, row, col)

        self._check_win_condition()
        return True

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Flags may be placed before the first reveal.

        Returns:
            True if flag was toggled, False otherwise.
        """
        cell = self._grid.cell(row, col)
        if self.is_over:
            return False
        return cell.toggle_flag()

    def chord(self, row: int, col: int) -> bool:
        """
        Chord action: reveal all unflagged neighbors if flag count matches.

        Returns:
            True if chord was performed, False otherwise.
        """
        self._grid.require_in_bounds(row, col)
        if self._game_state != GameState.IN_PROGRESS:
            return False

        result = chord(self._grid, row, col)
        if not result.performed:
            return False
        if result.mine_hit:
            self._lose()
        else:
            self._check_win_condition()
        return True

    def reset(self) -> None:
        """Reset to a fresh, unseeded grid."""
        self._grid = create_empty_grid(self.config.rows, self.config.cols)
        self._game_state = GameState.NOT_STARTED
        self._started_at = None
        self._stopped_at = None

    # ========================================================================
    # Transitions
    # ========================================================================

    def _handle_first_click(self, row: int, col: int) -> None:
        """Place mines and counts, start the clock."""
        place_mines(
            self._grid,
            self.config.num_mines,
            row,
            col,
            rng=self.rng,
            safe_zone=self.config.safe_zone,
        )
        count_adjacent_mines(self._grid)
        self._game_state = GameState.IN_PROGRESS
        self._started_at = self.clock()
        logger.info(
            "Game started on %dx%d grid with %d mines",
            self.config.rows, self.config.cols, self.config.num_mines,
        )

    def _lose(self) -> None:
        reveal_all_mines(self._grid)
        self._finish(GameState.LOST)

    def _check_win_condition(self) -> None:
        if check_win(self._grid):
            self._finish(GameState.WON)

    def _finish(self, state: GameState) -> None:
        self._game_state = state
        self._stopped_at = self.clock()
        logger.info("Game %s after %.1fs", state.name.lower(), self.elapsed)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game accepts moves."""
        return not self.is_over

    @property
    def is_over(self) -> bool:
        return self._game_state in TERMINAL_STATES

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def mines_placed(self) -> bool:
        return self._game_state != GameState.NOT_STARTED

    @property
    def flag_count(self) -> int:
        return self._grid.flag_count

    @property
    def flags_remaining(self) -> int:
        """Mines minus flags; negative when the player over-flags."""
        return self.config.num_mines - self.flag_count

    @property
    def timer_active(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    @property
    def elapsed(self) -> float:
        """Seconds since the first reveal, frozen once the game ends."""
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self.clock()
        return end - self._started_at

    def format_elapsed(self, precision: int = 1) -> str:
        return format_elapsed(self.elapsed, precision)

    def get_observation(self) -> np.ndarray:
        """Grid state as an int8 array (see Grid.to_observation)."""
        return self._grid.to_observation()
