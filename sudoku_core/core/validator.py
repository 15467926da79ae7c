"""Constraint checking for Sudoku grids."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Any, Tuple, TYPE_CHECKING

from .board import SIZE, BOX_SIZE, EMPTY

if TYPE_CHECKING:
    from .board import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation pass.

    `empty` distinguishes the all-empty grid (invalid, nothing to report)
    from a grid whose filled cells conflict.
    """
    valid: bool
    conflicts: Tuple[Tuple[int, int], ...] = ()
    empty: bool = False

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "valid": self.valid,
            "empty": self.empty,
            "conflicts": [list(cell) for cell in self.conflicts],
        }


def is_safe(grid: Grid, row: int, col: int, digit: int) -> bool:
    """
    Check if placing digit at (row, col) breaks no constraint.

    Args:
        grid: The grid to check against. Not modified.
        row: Row index.
        col: Column index.
        digit: Digit to check (1-9).

    Returns:
        True if digit is absent from the row, the column and the 3x3 box.
    """
    if digit in grid.get_row(row):
        return False

    if digit in grid.get_col(col):
        return False

    if digit in grid.get_box(row, col):
        return False

    return True


def _has_conflict(grid: Grid, row: int, col: int, digit: int) -> bool:
    """Check a filled cell against its row, column and box peers."""
    for i in range(SIZE):
        if i != col and grid.get(row, i) == digit:
            return True

    for i in range(SIZE):
        if i != row and grid.get(i, col) == digit:
            return True

    # Box peers sharing the row or column were already scanned above.
    box_row, box_col = grid.box_origin(row, col)
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if r != row and c != col and grid.get(r, c) == digit:
                return True

    return False


def validate(grid: Grid) -> ValidationResult:
    """
    Check a possibly partial grid for constraint violations.

    An all-empty grid is reported as invalid with no conflicts. Otherwise
    every filled cell that repeats a digit in its row, column or box is
    listed once, in row-major order. Values outside 1-9 are conflicts.

    Args:
        grid: The grid to validate. Not modified.

    Returns:
        A ValidationResult.
    """
    if grid.is_empty_grid():
        return ValidationResult(valid=False, empty=True)

    conflicts = []
    for row in range(SIZE):
        for col in range(SIZE):
            digit = grid.get(row, col)
            if digit == EMPTY:
                continue
            if not 1 <= digit <= SIZE or _has_conflict(grid, row, col, digit):
                conflicts.append((row, col))

    logger.debug("Validated grid: %d conflicting cells", len(conflicts))
    return ValidationResult(valid=not conflicts, conflicts=tuple(conflicts))


def is_solved(grid: Grid) -> bool:
    """Check if the grid is completely and correctly filled."""
    return grid.is_complete() and validate(grid).valid
