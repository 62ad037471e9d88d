"""Conway's Game of Life on a fixed-size toroidal grid."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.grid import Grid
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "Pattern", "PatternLibrary"]
