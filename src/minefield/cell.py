"""
Cell value object for the Minesweeper engine.

A single ``state`` field covers hidden, revealed and flagged, so a cell
can never be both flagged and revealed.
"""
from enum import Enum, auto
from dataclasses import dataclass


class CellState(Enum):
    """Visible state of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation encoding shared with the session and the RL adapter
HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


@dataclass
class Cell:
    """
    One grid position.

    Attributes:
        is_mine: Set during board generation, never changed afterwards.
        adjacent_mines: Mines among the neighbours (0-8), cached at
            generation time. Unused for mine cells.
        state: Hidden, revealed or flagged.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """Open a hidden cell; False if revealed or flagged already."""
        if self.state is not CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """Flip between hidden and flagged; False once revealed."""
        if self.state is CellState.REVEALED:
            return False
        self.state = (
            CellState.HIDDEN if self.state is CellState.FLAGGED
            else CellState.FLAGGED
        )
        return True

    @property
    def is_hidden(self) -> bool:
        """Unrevealed and unflagged."""
        return self.state is CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state is CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode what a player can see of this cell.

        Returns:
            HIDDEN_VALUE (-1), FLAGGED_VALUE (-2), MINE_VALUE (9) for an
            exploded mine, or the adjacent count 0-8.
        """
        if self.state is CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.state is CellState.FLAGGED:
            return FLAGGED_VALUE
        return MINE_VALUE if self.is_mine else self.adjacent_mines
