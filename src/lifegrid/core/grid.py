"""Toroidal grid for Conway's Game of Life."""

from typing import Iterable, Tuple
import logging
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell, RULE_TABLE

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64

DEAD_GLYPH = "◻"
ALIVE_GLYPH = "◼"


class Grid:
    """A fixed-size Game of Life universe whose edges wrap around.

    Cells live in a dense, row-major numpy buffer of length
    ``width * height``; the cell at ``(row, col)`` sits at index
    ``row * width + col``. Each call to :meth:`tick` computes the next
    generation into a fresh buffer and then replaces the current one, so no
    cell ever sees a partially updated generation.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        """Initialize a grid with the default seed pattern.

        Cell ``i`` starts alive when ``i % 2 == 0`` or ``i % 7 == 0``.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        _check_dimension("width", width)
        _check_dimension("height", height)
        self._width = width
        self._height = height

        indices = np.arange(width * height)
        seed = (indices % 2 == 0) | (indices % 7 == 0)
        self._cells = _frozen(np.where(seed, Cell.ALIVE, Cell.DEAD).astype(np.uint8))

        # Single-threaded torch; the grid is small and updated synchronously
        torch.set_num_threads(1)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current cell buffer.

        The grid owns a non-writable buffer, so the view cannot be made
        writable again.

        The view must not be held across :meth:`tick`, :meth:`set_width`
        or :meth:`set_height`, which replace the underlying buffer.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def set_width(self, width: int) -> None:
        """Resize the grid horizontally, killing every cell.

        Raises:
            ValueError: If width is not positive
        """
        _check_dimension("width", width)
        self._width = width
        self._reset()

    def set_height(self, height: int) -> None:
        """Resize the grid vertically, killing every cell.

        Raises:
            ValueError: If height is not positive
        """
        _check_dimension("height", height)
        self._height = height
        self._reset()

    def _reset(self) -> None:
        self._cells = _frozen(np.full(self._width * self._height, Cell.DEAD, dtype=np.uint8))
        logger.debug("Reallocated %dx%d grid", self._width, self._height)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.flags.writeable = True
        self._cells.fill(Cell.DEAD)
        self._cells.flags.writeable = False

    def _get_index(self, row: int, col: int) -> int:
        return row * self._width + col

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self._height}x{self._width} grid")

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            The cell's current state

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return Cell(int(self._cells[self._get_index(row, col)]))

    def set_cells_alive(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Bring the given cells to life, leaving all others untouched.

        Every coordinate is checked before any cell is written.

        Args:
            cells: (row, col) pairs to set alive

        Raises:
            IndexError: If any coordinate is out of bounds
        """
        indices = []
        for row, col in cells:
            self._check_bounds(row, col)
            indices.append(self._get_index(row, col))

        self._cells.flags.writeable = True
        self._cells[np.asarray(indices, dtype=np.intp)] = Cell.ALIVE
        self._cells.flags.writeable = False

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Count living neighbors of a cell, wrapping at the edges.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (col + delta_col) % self._width
                count += Cell(int(self._cells[self._get_index(neighbor_row, neighbor_col)])).count

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a circularly padded convolution.

        Returns:
            (height, width) array with the live neighbor count of each cell
        """
        board = torch.from_numpy(self._cells.reshape(self._height, self._width).astype(np.float32))
        padded = F.pad(board.unsqueeze(0).unsqueeze(0), (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)
        return neighbors[0, 0].numpy().astype(np.int64)

    def tick(self) -> None:
        """Advance the grid by one generation."""
        neighbor_counts = self.count_all_neighbors().reshape(-1)
        next_cells = RULE_TABLE[self._cells, neighbor_counts]

        self._cells = _frozen(next_cells)
        logger.debug("Advanced %dx%d grid", self._width, self._height)

    def render(self) -> str:
        """Draw the grid, one line per row, each line ending in a newline."""
        lines = []
        for row in self._cells.reshape(self._height, self._width):
            lines.append("".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row) + "\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return (
            self._width == other._width
            and self._height == other._height
            and np.array_equal(self._cells, other._cells)
        )

    def __str__(self) -> str:
        return self.render()


def _frozen(cells: np.ndarray) -> np.ndarray:
    cells.flags.writeable = False
    return cells


def _check_dimension(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"Grid {name} must be positive, got {value}")
