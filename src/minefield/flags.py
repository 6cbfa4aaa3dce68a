"""
Flag handling for the Minesweeper engine.
"""
from enum import Enum, auto

from .grid import Grid


class FlagOutcome(Enum):
    """Result of a flag toggle attempt."""

    NO_OP = auto()
    FLAGGED = auto()
    UNFLAGGED = auto()


def toggle_flag(grid: Grid, row: int, col: int) -> FlagOutcome:
    """
    Toggle the flag on an unrevealed cell.

    Out-of-bounds and revealed cells are left untouched. The grid's
    ``flagged_count`` follows the toggle; nothing caps it at the mine
    total, so the remaining-mine figure derived from it can go negative.
    """
    if not grid.in_bounds(row, col):
        return FlagOutcome.NO_OP
    if not grid.flip_flag(row, col):
        return FlagOutcome.NO_OP
    if grid[row, col].is_flagged:
        return FlagOutcome.FLAGGED
    return FlagOutcome.UNFLAGGED
