"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional

from ..core.grid import Grid, DEFAULT_WIDTH, DEFAULT_HEIGHT
from ..core.patterns import PatternLibrary

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        width: int,
        height: int,
        generations: int,
        pattern: Optional[str] = None,
        pattern_row: Optional[int] = None,
        pattern_col: Optional[int] = None,
        show_all: bool = False,
    ) -> Grid:
        """Run a Game of Life simulation and print the final grid.

        Args:
            width: Grid width
            height: Grid height
            generations: Number of generations to advance
            pattern: Optional pattern name to load instead of the default seed
            pattern_row: Row for the pattern's top-left corner (centered if None)
            pattern_col: Column for the pattern's top-left corner (centered if None)
            show_all: Print every generation, not just the last one

        Returns:
            The grid after the final generation

        Raises:
            ValueError: If the pattern is unknown
        """
        grid = Grid(width, height)

        if pattern:
            found = self.pattern_library.get_pattern(pattern)
            if found is None:
                raise ValueError(f"Pattern '{pattern}' not found")

            pattern_height, pattern_width = found.get_size()
            if pattern_row is None:
                pattern_row = max(0, (height - pattern_height) // 2)
            if pattern_col is None:
                pattern_col = max(0, (width - pattern_width) // 2)

            logger.info("Loading pattern '%s' at (%d, %d)", pattern, pattern_row, pattern_col)
            grid.clear()
            found.apply_to_grid(grid, pattern_row, pattern_col)

        if show_all:
            print("Generation 0:")
            print(grid.render(), end="")

        for generation in range(1, generations + 1):
            grid.tick()
            if show_all:
                print(f"Generation {generation}:")
                print(grid.render(), end="")

        if not show_all:
            print(f"Generation {generations}:")
            print(grid.render(), end="")

        print(f"Population: {grid.population}")
        return grid

    def list_patterns(self) -> None:
        """Print available patterns grouped by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                size = pattern.get_size()
                print(f"  {name}: {size[1]}x{size[0]}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Advance Conway's Game of Life on a toroidal grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Advance the default 64x64 seed one generation
  lifegrid-cli

  # Run a glider for 8 generations on a 10x10 grid, printing every step
  lifegrid-cli -W 10 -H 10 --pattern Glider -n 8 --show-all

  # List available patterns
  lifegrid-cli --list-patterns
        """,
    )

    parser.add_argument(
        "-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Grid width (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Grid height (default: {DEFAULT_HEIGHT})"
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=1,
        help="Number of generations to advance (default: 1)",
    )

    parser.add_argument("-p", "--pattern", type=str, help="Load a named pattern onto an empty grid")

    parser.add_argument("--pattern-row", type=int, help="Row of the pattern's top-left corner (default: centered)")

    parser.add_argument("--pattern-col", type=int, help="Column of the pattern's top-left corner (default: centered)")

    parser.add_argument("-a", "--show-all", action="store_true", help="Print every generation")

    parser.add_argument("-l", "--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.pattern_row is not None and args.pattern_row < 0:
        errors.append("Pattern row must be non-negative")

    if args.pattern_col is not None and args.pattern_col < 0:
        errors.append("Pattern column must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        cli.run_simulation(
            width=args.width,
            height=args.height,
            generations=args.generations,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            show_all=args.show_all,
        )
    except ValueError as e:
        print(f"Error: {e}")
        if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
            print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
