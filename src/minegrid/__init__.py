"""
Minesweeper grid engine.

Provides mine placement, adjacency counting, flood reveal, chording,
win detection and a session state machine around them.
"""
from .cell import Cell, CellState
from .grid import Grid, create_empty_grid
from .errors import (
    GridError,
    InvalidCoordinateError,
    InvalidDimensionsError,
    MalformedGridError,
    MineCountError,
)
from .placement import NumpyRandomSource, RandomSource, SafeZone, place_mines
from .config import GridConfig, BEGINNER, INTERMEDIATE, EXPERT, COMPACT, PRESETS, get_preset
from .adjacency import count_adjacent_mines
from .flood import reveal_from
from .interaction import ChordResult, check_win, chord, reveal_all_mines
from .session import GameSession, GameState
from .service import reveal, start_game

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CellState",
    "Grid",
    "create_empty_grid",
    "GridError",
    "InvalidCoordinateError",
    "InvalidDimensionsError",
    "MalformedGridError",
    "MineCountError",
    "NumpyRandomSource",
    "RandomSource",
    "SafeZone",
    "place_mines",
    "GridConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "COMPACT",
    "PRESETS",
    "get_preset",
    "count_adjacent_mines",
    "reveal_from",
    "ChordResult",
    "check_win",
    "chord",
    "reveal_all_mines",
    "GameSession",
    "GameState",
    "reveal",
    "start_game",
]
