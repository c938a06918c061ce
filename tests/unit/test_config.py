"""
Unit tests for GridConfig validation and presets.
"""
import pytest

from minegrid import (
    BEGINNER,
    EXPERT,
    GridConfig,
    InvalidDimensionsError,
    MineCountError,
    SafeZone,
    get_preset,
)


class TestGridConfig:
    """Test configuration validation."""

    def test_valid_config_creation(self) -> None:
        config = GridConfig(9, 9, 10)
        assert (config.rows, config.cols, config.num_mines) == (9, 9, 10)
        assert config.safe_zone is SafeZone.NEIGHBORHOOD
        assert config.safe_cells == 71

    def test_zero_rows_raises_error(self) -> None:
        with pytest.raises(InvalidDimensionsError, match="dimensions must be positive"):
            GridConfig(0, 9, 10)

    def test_zero_cols_raises_error(self) -> None:
        with pytest.raises(ValueError, match="dimensions must be positive"):
            GridConfig(9, 0, 10)

    def test_negative_mines_raises_error(self) -> None:
        with pytest.raises(MineCountError, match="cannot be negative"):
            GridConfig(9, 9, -1)

    def test_neighborhood_limit(self) -> None:
        """Max leaves a full 3x3 zone free."""
        assert GridConfig(9, 9, 72).max_mines == 72
        with pytest.raises(MineCountError, match=r"Too many mines \(max 72\)"):
            GridConfig(9, 9, 73)

    def test_cell_policy_limit(self) -> None:
        config = GridConfig(3, 3, 8, safe_zone=SafeZone.CELL)
        assert config.max_mines == 8
        with pytest.raises(MineCountError):
            GridConfig(3, 3, 9, safe_zone=SafeZone.CELL)

    def test_narrow_grid_limit(self) -> None:
        """A single row has at most a 1x3 safe zone."""
        assert GridConfig(1, 10, 7).max_mines == 7


class TestPresets:
    """Test preset lookup."""

    def test_lookup_is_case_insensitive(self) -> None:
        assert get_preset("Beginner") is BEGINNER
        assert get_preset("EXPERT") is EXPERT

    def test_expert_shape(self) -> None:
        assert (EXPERT.rows, EXPERT.cols, EXPERT.num_mines) == (16, 30, 99)

    def test_compact_matches_mobile_board(self) -> None:
        config = get_preset("compact")
        assert (config.rows, config.cols, config.num_mines) == (10, 8, 10)

    def test_unknown_preset_raises(self) -> None:
        with pytest.raises(KeyError, match="choose from"):
            get_preset("nightmare")
