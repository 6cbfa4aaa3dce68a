"""
Gymnasium adapter over a GameSession.

Each action reveals one cell. Rewards come straight from the reveal
outcome: the share of safe cells opened by the move, a fixed penalty for
a mine, and a small one for a move that changed nothing.
"""
import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE
from .config import BoardConfig
from .render import render_board
from .reveal import RevealKind, RevealOutcome
from .session import GameSession, GameState

MINE_PENALTY = -1.0
NO_OP_PENALTY = -0.05


class MinesweeperEnv(gym.Env):
    """Reveal-only environment; observations are ``session.get_observation()``."""

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.session = GameSession(config)
        self.render_mode = render_mode
        board = self.session.config

        self.observation_space = spaces.Box(
            low=FLAGGED_VALUE,
            high=MINE_VALUE,
            shape=(board.height, board.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(board.width * board.height)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # mines are drawn from a generator derived from gymnasium's np_random
        self.session.reset(rng=random.Random(int(self.np_random.integers(2**31))))
        return self.session.get_observation(), self._info(None)

    def step(self, action: int):
        row, col = divmod(int(action), self.session.width)
        outcome = self.session.reveal(row, col)
        terminated = self.session.state != GameState.PLAYING
        return (
            self.session.get_observation(),
            self.score(outcome),
            terminated,
            False,
            self._info(outcome),
        )

    def score(self, outcome: RevealOutcome) -> float:
        """Reward for one reveal outcome."""
        if outcome.kind == RevealKind.MINE:
            return MINE_PENALTY
        if outcome.kind == RevealKind.NO_OP:
            return NO_OP_PENALTY
        return len(outcome.cells) / self.session.config.safe_cells

    def _info(self, outcome: Optional[RevealOutcome]) -> Dict[str, Any]:
        return {
            "outcome": outcome.kind.name if outcome is not None else None,
            "opened": len(outcome.cells) if outcome is not None else 0,
            "revealed": self.session.revealed_count,
            "state": self.session.state.name,
        }

    def action_mask(self) -> np.ndarray:
        """True for every cell a reveal could still open."""
        return self.session.get_observation().ravel() == HIDDEN_VALUE

    def render(self) -> Optional[str]:
        if self.render_mode == "ansi":
            return render_board(self.session.snapshot())
        return None
