"""Command-line interface for generating and checking Sudoku grids."""

import argparse
import json
import logging
import sys

from .generator import SudokuGenerator, Difficulty
from .core.board import Grid
from .core.validator import validate


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator & Validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  python -m sudoku_core.cli generate --count 5 --difficulty medium

  # Check a grid for conflicts
  python -m sudoku_core.cli validate --puzzle "5300700006001950..."
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty] + ["all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Validate command
    val_parser = subparsers.add_parser("validate", help="Check a grid for conflicts")
    val_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Grid string (81 chars, 0 or . for empty cells)"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "generate":
        return cmd_generate(args)
    elif args.command == "validate":
        return cmd_validate(args)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)

    if args.difficulty == "all":
        difficulties = list(Difficulty)
    else:
        difficulties = [Difficulty(args.difficulty)]

    all_puzzles = []

    for difficulty in difficulties:
        print(f"\nGenerating {args.count} {difficulty.value} puzzles...")
        puzzles = generator.generate_batch(args.count, difficulty, show_progress=args.count > 1)

        for i, puzzle in enumerate(puzzles, 1):
            all_puzzles.append({
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "clues": puzzle.count_filled()
            })

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            print(puzzle)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")
    return 0


def cmd_validate(args):
    """Handle the validate command."""
    try:
        grid = Grid.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        return 1

    print("Input grid:")
    print(grid)
    print()

    result = validate(grid)
    if result.valid:
        print("✓ No conflicts")
        return 0

    if result.empty:
        print("✗ Grid is empty, nothing to check")
    else:
        cells = ", ".join(f"({r}, {c})" for r, c in result.conflicts)
        print(f"✗ {len(result.conflicts)} conflicting cells: {cells}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
