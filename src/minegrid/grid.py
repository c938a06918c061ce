"""
Grid module for the grid engine.

Implements the fixed-size rectangular grid of cells, neighbor lookup,
and the snapshot formats used to hand a grid to and from callers
(wire dictionaries, JSON text, numpy observation arrays).
"""
import json
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .errors import InvalidCoordinateError, MalformedGridError


Position = Tuple[int, int]

# (key, accepted type) pairs every wire cell must carry
_WIRE_FIELDS = (
    ("hasMine", bool),
    ("adjacentMines", int),
    ("revealed", bool),
    ("flagged", bool),
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Row-major grid of cells addressed by (row, col).

    Dimensions are fixed at creation. The grid owns its cells; copies
    never share Cell objects with the original.
    """

    def __init__(self, cells: List[List[Cell]]) -> None:
        self._cells = cells
        self.rows = len(cells)
        self.cols = len(cells[0]) if cells else 0

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self.rows}, cols={self.cols}, "
            f"mines={self.mine_count}, revealed={self.revealed_count})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    # ========================================================================
    # Cell Access (Low-level)
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def require_in_bounds(self, row: int, col: int) -> None:
        """Raise InvalidCoordinateError unless (row, col) is on the grid."""
        if not self.in_bounds(row, col):
            raise InvalidCoordinateError(row, col, self.rows, self.cols)

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at a position that must be on the grid."""
        self.require_in_bounds(row, col)
        return self._cells[row][col]

    def __getitem__(self, position: Position) -> Cell:
        row, col = position
        return self.cell(row, col)

    def positions(self) -> Iterator[Position]:
        """Iterate every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def iter_cells(self) -> Iterator[Tuple[Position, Cell]]:
        for row, col in self.positions():
            yield (row, col), self._cells[row][col]

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the Moore neighborhood of a cell, clipped at the edges.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Counts
    # ========================================================================

    @property
    def mine_count(self) -> int:
        return sum(1 for _, cell in self.iter_cells() if cell.has_mine)

    @property
    def flag_count(self) -> int:
        return sum(
            1 for _, cell in self.iter_cells()
            if cell.flagged and not cell.revealed
        )

    @property
    def revealed_count(self) -> int:
        return sum(1 for _, cell in self.iter_cells() if cell.revealed)

    # ========================================================================
    # Snapshots
    # ========================================================================

    def copy(self) -> "Grid":
        """Deep copy: the new grid shares no cells with this one."""
        return Grid([[cell.copy() for cell in row] for row in self._cells])

    def to_wire(self) -> List[List[dict]]:
        """Convert to nested lists of camelCase cell dictionaries."""
        return [[cell.to_wire() for cell in row] for row in self._cells]

    def to_json(self) -> str:
        return json.dumps({"grid": self.to_wire()})

    @classmethod
    def from_wire(cls, data: Any) -> "Grid":
        """
        Build a grid from a caller-supplied snapshot.

        The structure is validated completely before any cell is built,
        so a ragged or partial snapshot never reaches the engine. Mined
        cells are stored with a count of 0 whatever the snapshot says, and
        a revealed cell never keeps a flag.

        Args:
            data: Sequence of rows, each a sequence of cell mappings with
                hasMine, adjacentMines, revealed and flagged keys.

        Returns:
            A new Grid owning fresh cells.

        Raises:
            MalformedGridError: If the snapshot is not a well-formed grid.
        """
        _validate_wire(data)
        cells = [
            [
                Cell(
                    has_mine=raw["hasMine"],
                    adjacent_mines=0 if raw["hasMine"] else raw["adjacentMines"],
                    revealed=raw["revealed"],
                    flagged=raw["flagged"] and not raw["revealed"],
                )
                for raw in row
            ]
            for row in data
        ]
        return cls(cells)

    @classmethod
    def from_json(cls, text: str) -> "Grid":
        """Parse JSON text holding either a bare grid or {"grid": ...}."""
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedGridError(f"Invalid JSON: {exc}") from exc
        if isinstance(payload, Mapping):
            if "grid" not in payload:
                raise MalformedGridError("JSON object has no 'grid' key")
            payload = payload["grid"]
        return cls.from_wire(payload)

    def to_observation(self) -> np.ndarray:
        """
        Get grid state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for (row, col), cell in self.iter_cells():
            obs[row, col] = cell.to_observation()
        return obs

    def mine_mask(self) -> np.ndarray:
        """Boolean array marking mined cells."""
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        for (row, col), cell in self.iter_cells():
            mask[row, col] = cell.has_mine
        return mask

    def render(self, show_mines: bool = False) -> str:
        """
        Render the grid as text, one line per row.

        Hidden cells are '.', flags 'F', revealed mines '*', zeros blank.
        With show_mines, hidden mines are drawn as '*' too.
        """
        obs = self.to_observation()
        if show_mines:
            obs = np.where(self.mine_mask(), MINE_CODE, obs)
        lines = []
        for row in range(self.rows):
            row_str = ""
            for col in range(self.cols):
                val = obs[row, col]
                if val == HIDDEN_CODE:
                    row_str += "."
                elif val == FLAGGED_CODE:
                    row_str += "F"
                elif val == MINE_CODE:
                    row_str += "*"
                elif val == 0:
                    row_str += " "
                else:
                    row_str += str(val)
                row_str += " "
            lines.append(row_str.rstrip())
        return "\n".join(lines)


def create_empty_grid(rows: int, cols: int) -> Grid:
    """
    Create a rows x cols grid of hidden, mine-free cells.

    Non-positive dimensions give a degenerate grid with no cells.
    """
    return Grid([[Cell() for _ in range(max(cols, 0))] for _ in range(max(rows, 0))])


# ============================================================================
# Snapshot Validation
# ============================================================================

def _validate_wire(data: Any) -> None:
    """Raise MalformedGridError unless data is a rectangular cell grid."""
    if not _is_sequence(data) or len(data) == 0:
        raise MalformedGridError("Grid must be a non-empty list of rows")

    width: Optional[int] = None
    for row_index, row in enumerate(data):
        if not _is_sequence(row) or len(row) == 0:
            raise MalformedGridError(
                f"Row {row_index} must be a non-empty list of cells"
            )
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise MalformedGridError(
                f"Row {row_index} has {len(row)} cells, expected {width}"
            )
        for col_index, raw in enumerate(row):
            _validate_wire_cell(raw, row_index, col_index)


def _validate_wire_cell(raw: Any, row: int, col: int) -> None:
    if not isinstance(raw, Mapping):
        raise MalformedGridError(f"Cell ({row}, {col}) is not an object")
    for key, expected in _WIRE_FIELDS:
        if key not in raw:
            raise MalformedGridError(f"Cell ({row}, {col}) is missing '{key}'")
        value = raw[key]
        # bool is a subclass of int; a count must not be True/False
        if expected is int and isinstance(value, bool):
            raise MalformedGridError(
                f"Cell ({row}, {col}) field '{key}' must be an integer"
            )
        if not isinstance(value, expected):
            raise MalformedGridError(
                f"Cell ({row}, {col}) field '{key}' must be {expected.__name__}"
            )
    # -1 is the mined-cell sentinel some clients send
    lowest = -1 if raw["hasMine"] else 0
    if not lowest <= raw["adjacentMines"] <= 8:
        raise MalformedGridError(
            f"Cell ({row}, {col}) adjacentMines out of range: "
            f"{raw['adjacentMines']}"
        )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
