"""Core cellular automata logic."""

from .cell import Cell, RULE_TABLE, next_state
from .grid import Grid
from .patterns import Pattern, PatternLibrary

__all__ = ["Cell", "RULE_TABLE", "next_state", "Grid", "Pattern", "PatternLibrary"]
