"""Unit tests for the grid data model."""

import pytest
import numpy as np
from sudoku_core.core.board import Grid


class TestGrid:
    """Tests for Grid class."""

    def test_create_empty_grid(self):
        """Test creating an empty 9x9 grid."""
        grid = Grid()
        assert grid.size == 9
        assert grid.box_size == 3
        assert grid.count_empty() == 81
        assert grid.count_filled() == 0
        assert grid.is_empty_grid()
        assert not grid.is_complete()

    def test_set_and_get(self):
        """Test setting and getting values."""
        grid = Grid()
        grid.set(0, 0, 5)
        assert grid.get(0, 0) == 5
        assert not grid.is_empty(0, 0)

        grid.clear(0, 0)
        assert grid.is_empty(0, 0)

    def test_set_rejects_out_of_range(self):
        grid = Grid()
        with pytest.raises(ValueError):
            grid.set(0, 0, 10)
        with pytest.raises(ValueError):
            grid.set(0, 0, -1)

    def test_construction_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Grid(np.zeros((4, 4), dtype=np.int32))

    def test_construction_rejects_bad_values(self):
        data = [[0] * 9 for _ in range(9)]
        data[3][3] = 11
        with pytest.raises(ValueError):
            Grid.from_2d_list(data)

    def test_construction_rejects_fractional_values(self):
        """Non-integer digits are rejected, not truncated."""
        arr = np.full((9, 9), 0.0)
        arr[0, 0] = 3.7
        with pytest.raises(ValueError):
            Grid(arr)

        data = [[0] * 9 for _ in range(9)]
        data[2][6] = 5.5
        with pytest.raises(ValueError):
            Grid.from_2d_list(data)

    def test_construction_accepts_whole_floats(self):
        arr = np.full((9, 9), 0.0)
        arr[0, 0] = 4.0
        grid = Grid(arr)
        assert grid.get(0, 0) == 4
        assert grid.grid.dtype == np.int32

    def test_set_rejects_fractional_value(self):
        grid = Grid()
        with pytest.raises(ValueError):
            grid.set(0, 0, 2.5)
        assert grid.is_empty(0, 0)

    def test_get_box(self):
        """Box lookup uses the 3x3 region containing the cell."""
        grid = Grid()
        grid.set(4, 4, 7)
        assert Grid.box_origin(5, 3) == (3, 3)
        assert 7 in grid.get_box(5, 3)
        assert 7 not in grid.get_box(0, 0)

    def test_filled_cells(self):
        grid = Grid()
        grid.set(8, 8, 1)
        grid.set(0, 2, 3)
        assert grid.filled_cells() == [(0, 2), (8, 8)]

    def test_from_string(self):
        """Test creating grid from string."""
        puzzle_str = "0" * 80 + "9"
        grid = Grid.from_string(puzzle_str)
        assert grid.get(8, 8) == 9

    def test_from_string_accepts_dots(self):
        grid = Grid.from_string("." * 80 + "4")
        assert grid.count_filled() == 1

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            Grid.from_string("123")
        with pytest.raises(ValueError):
            Grid.from_string("x" * 81)

    def test_from_string_rejects_non_ascii_digits(self):
        # Arabic-Indic three
        with pytest.raises(ValueError):
            Grid.from_string("٣" + "0" * 80)

    def test_to_string(self):
        """Test converting grid to string."""
        grid = Grid()
        grid.set(0, 0, 5)
        s = grid.to_string()
        assert len(s) == 81
        assert s[0] == '5'
        assert Grid.from_string(s) == grid

    def test_copy(self):
        """Test grid copy."""
        grid = Grid()
        grid.set(4, 4, 7)
        copy = grid.copy()

        assert copy.get(4, 4) == 7

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert grid.get(4, 4) == 7

    def test_str(self):
        grid = Grid()
        grid.set(0, 0, 5)
        lines = str(grid).splitlines()
        assert len(lines) == 13
        assert lines[1].startswith("| 5 .")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
