"""
Reveal engine for the Minesweeper engine.

Opens a cell and flood-fills across connected zero-count regions using
an explicit worklist, so large boards never hit the recursion limit.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple

from .grid import Grid, Position


# ============================================================================
# Outcome Types
# ============================================================================

class RevealKind(Enum):
    """Tag of a reveal attempt's result."""

    NO_OP = auto()
    OPENED = auto()
    MINE = auto()


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal attempt.

    Attributes:
        kind: What happened.
        cells: Positions revealed by this call, origin first. Empty for
            a no-op; only the origin for a mine.
    """

    kind: RevealKind
    cells: Tuple[Position, ...] = ()

    @property
    def is_noop(self) -> bool:
        return self.kind == RevealKind.NO_OP

    @property
    def is_mine(self) -> bool:
        return self.kind == RevealKind.MINE


NO_OP = RevealOutcome(RevealKind.NO_OP)


# ============================================================================
# Reveal Operations
# ============================================================================

def reveal(grid: Grid, row: int, col: int) -> RevealOutcome:
    """
    Reveal a cell, cascading across zero-count neighbours.

    Out-of-bounds, revealed and flagged targets are no-ops. Each cell is
    opened at most once, so the fill does at most ``grid.size`` reveals.

    Args:
        grid: Grid with mines already placed.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        NO_OP, MINE (origin only) or OPENED with every cell opened.
    """
    cell = grid.get_cell(row, col)
    if cell is None or not cell.is_hidden:
        return NO_OP

    grid.open_cell(row, col)
    if cell.is_mine:
        return RevealOutcome(RevealKind.MINE, ((row, col),))

    opened: List[Position] = [(row, col)]
    stack: List[Position] = [(row, col)] if cell.adjacent_mines == 0 else []

    while stack:
        current_row, current_col = stack.pop()
        for neighbor_row, neighbor_col in grid.neighbors(current_row, current_col):
            neighbor = grid[neighbor_row, neighbor_col]
            # flagged and already-open neighbours are skipped
            if not grid.open_cell(neighbor_row, neighbor_col):
                continue
            opened.append((neighbor_row, neighbor_col))
            if neighbor.adjacent_mines == 0 and not neighbor.is_mine:
                stack.append((neighbor_row, neighbor_col))

    return RevealOutcome(RevealKind.OPENED, tuple(opened))


def reveal_mines(grid: Grid) -> List[Position]:
    """
    Reveal every hidden, unflagged mine for the game-over display.

    Flagged cells are left alone, whether or not they hold a mine.

    Returns:
        Positions of the mines revealed by this call.
    """
    revealed = []
    for row, col in grid.positions():
        cell = grid[row, col]
        if cell.is_mine and cell.is_hidden:
            grid.open_cell(row, col)
            revealed.append((row, col))
    return revealed
