"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List

# Add src and the project root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import BoardConfig, GameSession, Grid, Position, compute_adjacency


# ============================================================================
# Deterministic Randomness
# ============================================================================

class ScriptedRandom:
    """Stand-in for random.Random whose randrange replays fixed draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = iter(draws)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        value = next(self._draws)
        assert 0 <= value < stop, f"scripted draw {value} outside [0, {stop})"
        return value


def mines_at(*positions: Position) -> ScriptedRandom:
    """Script draws that place mines at the given positions, in order."""
    draws: List[int] = []
    for row, col in positions:
        draws.extend((row, col))
    return ScriptedRandom(draws)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for scripted RNGs that place mines exactly where asked."""
    return mines_at


# ============================================================================
# Grid Fixtures
# ============================================================================

def grid_with_mines(width: int, height: int, mines: Iterable[Position]) -> Grid:
    """Build a grid with hand-placed mines and cached adjacency counts."""
    grid = Grid(width, height)
    for row, col in mines:
        grid[row, col].is_mine = True
    compute_adjacency(grid)
    return grid


@pytest.fixture
def make_grid() -> Callable[..., Grid]:
    """Factory for grids with hand-placed mines."""
    return grid_with_mines


@pytest.fixture
def walled_grid() -> Grid:
    """
    6x6 grid with a full column of mines at col 4.

    Columns 0-2 are zero-count, column 3 and column 5 are numbered.
    """
    return grid_with_mines(6, 6, [(row, 4) for row in range(6)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_session() -> GameSession:
    """A 9x9, 10 mine session that has entered play."""
    session = GameSession()
    session.reset()
    return session


@pytest.fixture
def title_session() -> GameSession:
    """A freshly constructed session still on the title screen."""
    return GameSession(BoardConfig(8, 8, 10))


class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def five_by_five_one_mine() -> BoardConfig:
    return BoardConfig(5, 5, 1)
