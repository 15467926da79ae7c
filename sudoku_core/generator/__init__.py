"""Generator module for creating complete grids and puzzles."""

from typing import Optional, Union

from ..core.board import Grid
from .generator import (
    SudokuGenerator,
    Difficulty,
    InvalidDifficultyError,
    InvariantViolationError,
)


def generate_complete_grid(seed: Optional[int] = None) -> Grid:
    """Generate a complete valid grid with a fresh random source."""
    return SudokuGenerator(seed=seed).generate_complete_grid()


def generate_puzzle(difficulty: Union[Difficulty, str], seed: Optional[int] = None) -> Grid:
    """Generate a puzzle with a fresh random source."""
    return SudokuGenerator(seed=seed).generate_puzzle(difficulty)


__all__ = [
    "SudokuGenerator",
    "Difficulty",
    "InvalidDifficultyError",
    "InvariantViolationError",
    "generate_complete_grid",
    "generate_puzzle",
]
