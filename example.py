#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Grid, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Start from an empty 12x12 grid
    grid = Grid(12, 12)
    grid.clear()

    # Load a pattern
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        glider.apply_to_grid(grid, row=1, col=1)

        print("Initial state:")
        print(grid, end="")
        print(f"Population: {grid.population}")
        print()

        # Run simulation for 8 generations
        for generation in range(1, 9):
            grid.tick()
            print(f"Generation {generation}:")
            print(grid, end="")
            print(f"Population: {grid.population}")
            print()


if __name__ == "__main__":
    main()
