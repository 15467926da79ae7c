"""Fixed-size 9x9 grid representation."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional

SIZE = 9
BOX_SIZE = 3
CELL_COUNT = SIZE * SIZE
EMPTY = 0


class Grid:
    """
    A 9x9 Sudoku grid backed by a numpy array.

    Cells hold 0 (empty) or a digit 1-9. Any other value is rejected when
    the grid is built or when a cell is set.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a grid.

        Args:
            grid: Optional initial 9x9 array. If None, creates an empty grid.
        """
        if grid is None:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)
            return

        grid = np.asarray(grid)
        if grid.shape != (SIZE, SIZE):
            raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
        if not np.issubdtype(grid.dtype, np.integer) and not np.array_equal(grid, np.round(grid)):
            raise ValueError("Grid values must be whole numbers")
        if np.any((grid < EMPTY) | (grid > SIZE)):
            raise ValueError(f"Grid values must be 0-{SIZE}")
        self.grid = grid.copy().astype(np.int32)

    def copy(self) -> Grid:
        """Create a deep copy of the grid."""
        return Grid(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if int(value) != value:
            raise ValueError(f"Value must be a whole number, got {value}")
        if value < EMPTY or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        return bool(self.grid[row, col] == EMPTY)

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    @staticmethod
    def box_origin(row: int, col: int) -> Tuple[int, int]:
        """Top-left cell of the 3x3 box containing (row, col)."""
        return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = self.box_origin(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def filled_cells(self) -> List[Tuple[int, int]]:
        """
        Positions of all filled cells in row-major order.

        Called on a freshly generated puzzle this is the set of clues.
        """
        rows, cols = np.nonzero(self.grid)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_empty_grid(self) -> bool:
        """Check if no cell is filled."""
        return self.count_filled() == 0

    def to_string(self) -> str:
        """Convert grid to an 81-character string, 0 for empty cells."""
        return ''.join(str(int(v)) for v in self.grid.flatten())

    def to_list(self) -> List[List[int]]:
        return self.grid.tolist()

    @classmethod
    def from_string(cls, s: str) -> Grid:
        """
        Create a grid from a string representation.

        Args:
            s: String of length 81. '0' or '.' for empty, '1'-'9' for digits.
        """
        s = s.strip()
        if len(s) != CELL_COUNT:
            raise ValueError(f"String length must be {CELL_COUNT}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(EMPTY)
            elif c in '123456789':
                values.append(int(c))
            else:
                raise ValueError(f"Invalid cell character: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> Grid:
        """Create a grid from a 2D list."""
        return cls(np.asarray(data))

    def __str__(self) -> str:
        """Pretty-print the grid."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Grid(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
