"""Cell states and the Game of Life transition rule."""

from enum import IntEnum
import numpy as np


class Cell(IntEnum):
    """State of a single cell.

    Values are chosen so that summing cells yields the live count.
    """

    DEAD = 0
    ALIVE = 1

    @property
    def count(self) -> int:
        """Contribution of this cell to a neighbor count."""
        return int(self.value)


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply Conway's rules to one cell.

    Args:
        cell: Current state of the cell
        live_neighbors: Number of living cells in its Moore neighborhood

    Returns:
        State of the cell in the next generation

    Raises:
        ValueError: If live_neighbors is outside 0-8
    """
    if not 0 <= live_neighbors <= 8:
        raise ValueError(f"Neighbor count must be between 0 and 8, got {live_neighbors}")

    if cell == Cell.ALIVE:
        # Underpopulation and overpopulation
        if live_neighbors < 2 or live_neighbors > 3:
            return Cell.DEAD
        return Cell.ALIVE

    # Reproduction
    if live_neighbors == 3:
        return Cell.ALIVE

    return Cell(cell)


_rules = np.array(
    [[next_state(state, count) for count in range(9)] for state in Cell],
    dtype=np.uint8,
)
_rules.flags.writeable = False

# RULE_TABLE[state, live_neighbors] -> next state
RULE_TABLE = _rules.view()
