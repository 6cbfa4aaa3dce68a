"""
Grid module for the Minesweeper engine.

Holds the rectangular matrix of cells together with the revealed and
flagged counters, which are kept in step with the cells by routing every
state change through the grid.
"""
from typing import Iterator, List, Optional, Tuple

from .cell import Cell


Position = Tuple[int, int]


class Grid:
    """
    Fixed-size matrix of cells indexed by (row, col).

    Attributes:
        width: Number of columns.
        height: Number of rows.
        revealed_count: Number of cells currently revealed.
        flagged_count: Number of cells currently flagged.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.revealed_count = 0
        self.flagged_count = 0
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(width)]
            for _ in range(height)
        ]

    def __repr__(self) -> str:
        return (
            f"Grid(width={self.width}, height={self.height}, "
            f"revealed={self.revealed_count}, flagged={self.flagged_count})"
        )

    # ========================================================================
    # Lookup
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row][col]

    def __getitem__(self, position: Position) -> Cell:
        row, col = position
        if not self.in_bounds(row, col):
            raise IndexError(f"Position {position} is outside the grid")
        return self._cells[row][col]

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the in-bounds neighbours of a position.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of up to 8 (row, col) tuples; fewer on edges and corners.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def mine_count(self) -> int:
        """Number of mines currently placed on the grid."""
        return sum(1 for cell in self.cells() if cell.is_mine)

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    # ========================================================================
    # Counted Mutations
    # ========================================================================

    def open_cell(self, row: int, col: int) -> bool:
        """
        Reveal one cell and count it.

        Returns:
            True if the cell changed from hidden to revealed.
        """
        if not self._cells[row][col].reveal():
            return False
        self.revealed_count += 1
        return True

    def flip_flag(self, row: int, col: int) -> bool:
        """
        Toggle the flag on one cell and update the flag counter.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        cell = self._cells[row][col]
        if not cell.toggle_flag():
            return False
        self.flagged_count += 1 if cell.is_flagged else -1
        return True
