"""Core module for grid representation and validation."""

from .board import Grid
from .validator import ValidationResult, is_safe, validate, is_solved

__all__ = ["Grid", "ValidationResult", "is_safe", "validate", "is_solved"]
