"""
Board generation for the Minesweeper engine.

Mines are placed lazily, once the first cell to open is known, so the
3x3 block around that cell can be kept mine-free.
"""
import random
from typing import Set

from .grid import Grid, Position


# ============================================================================
# Adjacency
# ============================================================================

def count_adjacent_mines(grid: Grid, row: int, col: int) -> int:
    """Count mines among the in-bounds neighbours of a position."""
    count = 0
    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        if grid[neighbor_row, neighbor_col].is_mine:
            count += 1
    return count


def compute_adjacency(grid: Grid) -> None:
    """Cache the adjacent mine count on every non-mine cell."""
    for row, col in grid.positions():
        cell = grid[row, col]
        if not cell.is_mine:
            cell.adjacent_mines = count_adjacent_mines(grid, row, col)


# ============================================================================
# Mine Placement
# ============================================================================

def safe_zone(grid: Grid, row: int, col: int) -> Set[Position]:
    """Positions that must stay mine-free: the cell and its neighbours."""
    zone = set(grid.neighbors(row, col))
    zone.add((row, col))
    return zone


def generate(
    grid: Grid,
    total_mines: int,
    safe_row: int,
    safe_col: int,
    rng: random.Random,
) -> None:
    """
    Place mines by rejection sampling, then compute adjacency counts.

    Draws a row and then a column uniformly from the whole grid and keeps
    the draw only if it is not already a mine and lies outside the safe
    zone. There is no retry cap; callers must keep ``total_mines`` below
    ``width * height - 9`` (see ``BoardConfig.validate``).

    Args:
        grid: Freshly reset grid with no mines.
        total_mines: Exact number of mines to place.
        safe_row: Row of the first opened cell.
        safe_col: Column of the first opened cell.
        rng: Object providing ``randrange(stop)``, e.g. ``random.Random``.
    """
    excluded = safe_zone(grid, safe_row, safe_col)
    mines_to_place = total_mines

    while mines_to_place > 0:
        row = rng.randrange(grid.height)
        col = rng.randrange(grid.width)
        cell = grid[row, col]
        if not cell.is_mine and (row, col) not in excluded:
            cell.is_mine = True
            mines_to_place -= 1

    compute_adjacency(grid)
