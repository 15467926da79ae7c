"""Sudoku puzzle generator with fixed clue counts per difficulty."""

from __future__ import annotations
import logging
import random
from enum import Enum
from typing import List, Tuple, Optional, Union

from tqdm import tqdm

from ..core.board import Grid, SIZE, CELL_COUNT
from ..core.validator import is_safe

logger = logging.getLogger(__name__)


class InvalidDifficultyError(ValueError):
    """Raised when a difficulty tag is not one of the known levels."""


class InvariantViolationError(AssertionError):
    """Raised when backtracking fails to fill a grid. Indicates a bug."""


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def clues(self) -> int:
        """Number of cells left filled in the puzzle."""
        table = {
            Difficulty.EASY: 60,
            Difficulty.MEDIUM: 30,
            Difficulty.HARD: 15,
        }
        return table[self]

    @property
    def cells_to_remove(self) -> int:
        return CELL_COUNT - self.clues

    @classmethod
    def parse(cls, value: Union[Difficulty, str]) -> Difficulty:
        """
        Resolve a difficulty from an enum member or its name/value.

        Raises:
            InvalidDifficultyError: If value names no known difficulty.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value:
                    return member
        raise InvalidDifficultyError(f"Unexpected difficulty: {value!r}")


class SudokuGenerator:
    """
    Generator for Sudoku puzzles.

    Algorithm:
    1. Fill a grid cell by cell in row-major order using randomized
       backtracking
    2. Remove random filled cells until the difficulty's clue count is left

    The puzzle is not checked for a unique solution.

    All randomness comes from one random.Random owned by the generator, so
    a seeded generator is reproducible. Do not share a generator between
    threads.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source to draw from.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def shuffled_digits(self) -> List[int]:
        """Digits 1-9 in random order (Fisher-Yates)."""
        digits = list(range(1, SIZE + 1))
        for i in range(len(digits) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            digits[i], digits[j] = digits[j], digits[i]
        return digits

    def generate_complete_grid(self) -> Grid:
        """
        Generate a complete valid grid using backtracking.

        Raises:
            InvariantViolationError: If the search fails, which never
                happens unless the search itself is broken.
        """
        grid = Grid()
        if not self._fill_grid(grid, 0):
            raise InvariantViolationError("Backtracking failed to fill the grid")
        logger.debug("Generated complete grid %s", grid.to_string())
        return grid

    def _fill_grid(self, grid: Grid, cell_index: int) -> bool:
        """Fill cells from cell_index onwards. Returns False to backtrack."""
        if cell_index == CELL_COUNT:
            return True

        row, col = divmod(cell_index, SIZE)
        if not grid.is_empty(row, col):
            return self._fill_grid(grid, cell_index + 1)

        for digit in self.shuffled_digits():
            if is_safe(grid, row, col, digit):
                grid.set(row, col, digit)
                if self._fill_grid(grid, cell_index + 1):
                    return True
                grid.clear(row, col)

        return False

    def generate_puzzle(self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> Grid:
        """
        Generate a puzzle with the clue count of the given difficulty.

        Args:
            difficulty: Difficulty member, or its value ("easy", ...).

        Returns:
            A Grid with exactly 81 - difficulty.clues empty cells.

        Raises:
            InvalidDifficultyError: If difficulty is not recognized.
        """
        puzzle, _ = self.generate_with_solution(difficulty)
        return puzzle

    def generate_with_solution(
        self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM
    ) -> Tuple[Grid, Grid]:
        """
        Generate a puzzle along with the grid it was carved from.

        Returns:
            Tuple of (puzzle, solution) Grids.
        """
        difficulty = Difficulty.parse(difficulty)
        solution = self.generate_complete_grid()
        puzzle = solution.copy()
        self._remove_cells(puzzle, difficulty.cells_to_remove)
        logger.debug("Carved %s puzzle with %d clues", difficulty.value, puzzle.count_filled())
        return puzzle, solution

    def _remove_cells(self, grid: Grid, cells_to_remove: int) -> None:
        """Clear random filled cells in place until cells_to_remove are gone."""
        while cells_to_remove > 0:
            row, col = divmod(self.rng.randrange(CELL_COUNT), SIZE)
            if not grid.is_empty(row, col):
                grid.clear(row, col)
                cells_to_remove -= 1

    def generate_batch(
        self,
        count: int,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
        show_progress: bool = False,
    ) -> List[Grid]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.
            show_progress: Show a tqdm progress bar.
        """
        difficulty = Difficulty.parse(difficulty)
        return [
            self.generate_puzzle(difficulty)
            for _ in tqdm(range(count), desc=f"Generating {difficulty.value}",
                          disable=not show_progress)
        ]
