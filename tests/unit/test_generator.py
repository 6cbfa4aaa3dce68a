"""
Unit tests for mine placement and adjacency counting.
"""
import random

import pytest
from minefield import Grid, count_adjacent_mines, generate, safe_zone


def independent_count(grid: Grid, row: int, col: int) -> int:
    """Recount neighbouring mines without using Grid.neighbors."""
    total = 0
    for r in range(row - 1, row + 2):
        for c in range(col - 1, col + 2):
            if (r, c) == (row, col):
                continue
            if 0 <= r < grid.height and 0 <= c < grid.width and grid[r, c].is_mine:
                total += 1
    return total


# ============================================================================
# Safe Zone Tests
# ============================================================================

class TestSafeZone:
    """Test the mine-free block around the first move."""

    def test_interior_zone_is_three_by_three(self) -> None:
        """Interior safe zone covers 9 cells."""
        zone = safe_zone(Grid(8, 8), 4, 4)
        assert zone == {(r, c) for r in range(3, 6) for c in range(3, 6)}

    def test_corner_zone_is_clipped(self) -> None:
        """Corner safe zone only covers in-bounds cells."""
        zone = safe_zone(Grid(8, 8), 0, 0)
        assert zone == {(0, 0), (0, 1), (1, 0), (1, 1)}

    @pytest.mark.parametrize("seed", range(25))
    def test_no_mines_in_safe_zone(self, seed: int) -> None:
        """8x8 with 10 mines opened at (4, 4) keeps (3..5, 3..5) clear."""
        grid = Grid(8, 8)
        generate(grid, 10, 4, 4, random.Random(seed))
        for row in range(3, 6):
            for col in range(3, 6):
                assert grid[row, col].is_mine is False

    @pytest.mark.parametrize("safe", [(0, 0), (0, 7), (7, 0), (7, 7), (3, 0)])
    def test_no_mines_in_edge_safe_zone(self, safe) -> None:
        """Clipped safe zones on edges and corners stay clear."""
        grid = Grid(8, 8)
        generate(grid, 40, safe[0], safe[1], random.Random(7))
        for row, col in safe_zone(grid, *safe):
            assert grid[row, col].is_mine is False


# ============================================================================
# Placement Tests
# ============================================================================

class TestGenerate:
    """Test rejection-sampled mine placement."""

    @pytest.mark.parametrize(
        "width, height, mines",
        [(8, 8, 10), (9, 9, 10), (16, 16, 40), (30, 16, 99), (5, 5, 15)],
    )
    def test_places_exact_mine_count(
        self, width: int, height: int, mines: int
    ) -> None:
        """Exactly the requested number of mines is placed."""
        grid = Grid(width, height)
        generate(grid, mines, height // 2, width // 2, random.Random(1))
        assert grid.mine_count == mines

    def test_zero_mines_places_nothing(self) -> None:
        """A mine-free board needs no draws."""
        grid = Grid(5, 5)
        generate(grid, 0, 2, 2, random.Random(3))
        assert grid.mine_count == 0
        assert all(cell.adjacent_mines == 0 for cell in grid.cells())

    def test_rejects_safe_zone_and_duplicate_draws(self, scripted_rng) -> None:
        """Draws in the safe zone or on an existing mine are retried."""
        rng = scripted_rng((1, 1), (0, 4), (0, 4), (2, 2), (4, 4))
        grid = Grid(5, 5)
        generate(grid, 2, 1, 1, rng)

        assert rng.calls == 10
        assert grid[0, 4].is_mine is True
        assert grid[4, 4].is_mine is True
        assert grid[1, 1].is_mine is False
        assert grid[2, 2].is_mine is False
        assert grid.mine_count == 2

    def test_draws_row_before_column(self, scripted_rng) -> None:
        """Each draw takes the row first, then the column."""
        grid = Grid(6, 3)
        generate(grid, 1, 0, 0, scripted_rng((2, 5)))
        assert grid[2, 5].is_mine is True


# ============================================================================
# Adjacency Tests
# ============================================================================

class TestAdjacency:
    """Test neighbour mine counting."""

    def test_count_handles_corners(self, make_grid) -> None:
        """Corner cell counts only its 3 neighbours."""
        grid = make_grid(3, 3, [(0, 1), (1, 0), (1, 1), (2, 2)])
        assert count_adjacent_mines(grid, 0, 0) == 3

    def test_center_surrounded(self, make_grid) -> None:
        """Center of a ring of mines counts 8."""
        ring = [(r, c) for r in range(3) for c in range(3) if (r, c) != (1, 1)]
        grid = make_grid(3, 3, ring)
        assert grid[1, 1].adjacent_mines == 8

    @pytest.mark.parametrize("seed", range(10))
    def test_cached_counts_match_recount(self, seed: int) -> None:
        """Every non-mine cell's cached count matches an independent recount."""
        grid = Grid(12, 10)
        generate(grid, 30, 5, 5, random.Random(seed))
        for row, col in grid.positions():
            cell = grid[row, col]
            if not cell.is_mine:
                assert cell.adjacent_mines == independent_count(grid, row, col)
