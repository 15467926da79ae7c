"""Sudoku grid generation and validation."""

from .core import Grid, ValidationResult, is_safe, validate, is_solved
from .generator import (
    SudokuGenerator,
    Difficulty,
    InvalidDifficultyError,
    InvariantViolationError,
    generate_complete_grid,
    generate_puzzle,
)

__version__ = "1.0.0"

__all__ = [
    "Grid",
    "ValidationResult",
    "is_safe",
    "validate",
    "is_solved",
    "SudokuGenerator",
    "Difficulty",
    "InvalidDifficultyError",
    "InvariantViolationError",
    "generate_complete_grid",
    "generate_puzzle",
]
