"""
Game session for the Minesweeper engine.

The session owns one grid, the counters derived from it and the
title/instructions/playing/game-over state machine. It is the only
object that mutates game state; front ends call its operations and read
its snapshot.
"""
import random
import time
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

import numpy as np

from .config import BoardConfig
from .flags import FlagOutcome, toggle_flag
from .generator import generate
from .grid import Grid, Position
from .reveal import NO_OP, RevealOutcome, reveal, reveal_mines
from .rules import has_won


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a session."""

    TITLE = auto()
    INSTRUCTIONS = auto()
    PLAYING = auto()
    GAME_OVER_WIN = auto()
    GAME_OVER_LOSE = auto()


TERMINAL_STATES = (GameState.GAME_OVER_WIN, GameState.GAME_OVER_LOSE)


# ============================================================================
# Read-only Views
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What a player may know about one cell.

    ``is_mine`` is None until the cell is revealed, and ``adjacent_mines``
    is None unless the cell is revealed and not a mine.
    """

    is_revealed: bool
    is_flagged: bool
    is_mine: Optional[bool] = None
    adjacent_mines: Optional[int] = None


@dataclass(frozen=True)
class Snapshot:
    """Immutable picture of a session for rendering."""

    width: int
    height: int
    cells: Tuple[Tuple[CellView, ...], ...]
    remaining_mines: int
    state: GameState
    elapsed_seconds: int

    def cell(self, row: int, col: int) -> CellView:
        return self.cells[row][col]


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper with its state machine.

    A new session starts on the title screen. ``reset`` enters PLAYING with
    an empty board; mines are placed by the first successful ``reveal``,
    away from the opened cell and its neighbours.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the session.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Source of randomness for mine placement.
            clock: Returns the current time in seconds, used by the timer.

        Raises:
            ValueError: If the configuration is invalid.
        """
        # copying re-runs validation and detaches the caller's instance
        self.config = replace(config) if config is not None else BoardConfig()
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self._state = GameState.TITLE
        self._init_board()

    def _init_board(self) -> None:
        """Create an empty grid and clear the timer."""
        self._grid = Grid(self.config.width, self.config.height)
        self._board_generated = False
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None

    # ========================================================================
    # State Machine
    # ========================================================================

    def reset(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: New board configuration; keeps the current one if None.
            rng: New source of randomness; keeps the current one if None.

        Raises:
            ValueError: If ``config`` is invalid. The session is unchanged.
        """
        if config is not None:
            self.config = replace(config)
        if rng is not None:
            self._rng = rng
        self._init_board()
        self._state = GameState.PLAYING

    def advance(self) -> GameState:
        """
        Apply the "continue" input outside of play.

        Title moves to instructions; instructions and game-over screens
        start a new game. Has no effect while playing.

        Returns:
            The state after the transition.
        """
        if self._state == GameState.TITLE:
            self._state = GameState.INSTRUCTIONS
        elif self._state == GameState.INSTRUCTIONS or self._state in TERMINAL_STATES:
            self.reset()
        return self._state

    def return_to_title(self) -> GameState:
        """Leave a game-over screen for the title screen."""
        if self._state in TERMINAL_STATES:
            self._state = GameState.TITLE
        return self._state

    def _finish(self, state: GameState) -> None:
        self._state = state
        self._end_time = self._clock()

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Open a cell.

        The first successful call generates the board around the target.
        Hitting a mine loses the game and reveals every unflagged mine;
        opening the last safe cell wins it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The reveal outcome; NO_OP when not playing or the target is
            out of bounds, revealed or flagged.
        """
        if self._state != GameState.PLAYING:
            return NO_OP
        cell = self._grid.get_cell(row, col)
        if cell is None or not cell.is_hidden:
            return NO_OP

        self._open_board(row, col)
        outcome = reveal(self._grid, row, col)

        if outcome.is_mine:
            self._finish(GameState.GAME_OVER_LOSE)
            reveal_mines(self._grid)
        else:
            self._check_win_condition()
        return outcome

    def _open_board(self, row: int, col: int) -> None:
        """Place mines around the first opened cell and start the timer."""
        if self._board_generated:
            return
        generate(self._grid, self.config.num_mines, row, col, self._rng)
        self._board_generated = True
        self._start_time = self._clock()

    def toggle_flag(self, row: int, col: int) -> FlagOutcome:
        """
        Toggle the flag on a hidden cell.

        Ignored until the board has been generated by the first reveal.
        """
        if self._state != GameState.PLAYING or not self._board_generated:
            return FlagOutcome.NO_OP
        outcome = toggle_flag(self._grid, row, col)
        if outcome != FlagOutcome.NO_OP:
            self._check_win_condition()
        return outcome

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if has_won(
            self._grid.revealed_count,
            self.config.width,
            self.config.height,
            self.config.num_mines,
        ):
            self._finish(GameState.GAME_OVER_WIN)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current session state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._state == GameState.GAME_OVER_WIN

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.GAME_OVER_LOSE

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def total_mines(self) -> int:
        return self.config.num_mines

    @property
    def revealed_count(self) -> int:
        return self._grid.revealed_count

    @property
    def flagged_count(self) -> int:
        return self._grid.flagged_count

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.config.num_mines - self._grid.flagged_count

    @property
    def first_move_consumed(self) -> bool:
        """Whether the board has been generated by a first reveal."""
        return self._board_generated

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the first move, frozen once the game ends."""
        if self._start_time is None:
            return 0
        end = self._end_time if self._end_time is not None else self._clock()
        return int(end - self._start_time)

    def snapshot(self) -> Snapshot:
        """Get a read-only view that never exposes hidden mines."""
        rows = []
        for row in range(self.config.height):
            views = []
            for col in range(self.config.width):
                cell = self._grid[row, col]
                if not cell.is_revealed:
                    views.append(CellView(False, cell.is_flagged))
                elif cell.is_mine:
                    views.append(CellView(True, False, is_mine=True))
                else:
                    views.append(CellView(
                        True, False,
                        is_mine=False,
                        adjacent_mines=cell.adjacent_mines,
                    ))
            rows.append(tuple(views))

        return Snapshot(
            width=self.config.width,
            height=self.config.height,
            cells=tuple(rows),
            remaining_mines=self.remaining_mines,
            state=self._state,
            elapsed_seconds=self.elapsed_seconds,
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row, col in self._grid.positions():
            obs[row, col] = self._grid[row, col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of hidden, unflagged (row, col) positions.
        """
        return [
            (row, col)
            for row, col in self._grid.positions()
            if self._grid[row, col].is_hidden
        ]
