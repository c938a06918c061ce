"""
Grid configuration and fixed difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict

from .errors import InvalidDimensionsError, MineCountError
from .placement import SafeZone


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for a game grid.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
        safe_zone: Cells kept mine-free around the first click.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10
    safe_zone: SafeZone = SafeZone.NEIGHBORHOOD

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidDimensionsError("Grid dimensions must be positive")
        if self.num_mines < 0:
            raise MineCountError("Number of mines cannot be negative")
        if self.num_mines > self.max_mines:
            raise MineCountError(f"Too many mines (max {self.max_mines})")

    @property
    def max_mines(self) -> int:
        """Most mines that still leave room for any first click."""
        return self.rows * self.cols - self.safe_zone.largest_size(
            self.rows, self.cols
        )

    @property
    def safe_cells(self) -> int:
        return self.rows * self.cols - self.num_mines


# Preset difficulty levels
BEGINNER = GridConfig(9, 9, 10)
INTERMEDIATE = GridConfig(16, 16, 40)
EXPERT = GridConfig(16, 30, 99)
COMPACT = GridConfig(10, 8, 10)

PRESETS: Dict[str, GridConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
    "compact": COMPACT,
}


def get_preset(name: str) -> GridConfig:
    """Look up a preset by case-insensitive name."""
    try:
        return PRESETS[name.lower()]
    except KeyError:
        valid = ", ".join(sorted(PRESETS))
        raise KeyError(f"Unknown preset '{name}' (choose from {valid})") from None
