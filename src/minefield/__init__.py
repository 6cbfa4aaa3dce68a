"""
Minesweeper engine.

Provides the board model, deferred mine placement, flood-fill reveal,
flagging, win/loss rules and the game session state machine.
"""
from .cell import Cell, CellState
from .grid import Grid, Position
from .config import (
    BoardConfig,
    GameConfig,
    UISettings,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    config_from_dict,
    load_config,
)
from .generator import generate, count_adjacent_mines, compute_adjacency, safe_zone
from .reveal import RevealKind, RevealOutcome, reveal, reveal_mines
from .flags import FlagOutcome, toggle_flag
from .rules import has_won, max_mines
from .session import GameSession, GameState, Snapshot, CellView
from .render import cell_symbol, render_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Grid",
    "Position",
    "BoardConfig",
    "GameConfig",
    "UISettings",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "config_from_dict",
    "load_config",
    "generate",
    "count_adjacent_mines",
    "compute_adjacency",
    "safe_zone",
    "RevealKind",
    "RevealOutcome",
    "reveal",
    "reveal_mines",
    "FlagOutcome",
    "toggle_flag",
    "has_won",
    "max_mines",
    "GameSession",
    "GameState",
    "Snapshot",
    "CellView",
    "MinesweeperEnv",
    "cell_symbol",
    "render_board",
]
