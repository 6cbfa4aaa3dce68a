"""
Configuration for the Minesweeper engine.

Board dimensions and mine count are validated when the config is built,
so an invalid board is rejected before any session state changes. Game
configs can also be loaded from JSON files with the layout

    {
        "gameSettings": {"boardWidth": 9, "boardHeight": 9, "numMines": 10},
        "uiSettings": {"titleScreenText": "...", ...}
    }
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .rules import max_mines


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Ensure configuration values are valid.

        Raises:
            ValueError: If a dimension is not positive, the mine count is
                negative, or the mines would not fit outside a 3x3 safe zone.
        """
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        limit = max_mines(self.width, self.height)
        if self.num_mines > limit:
            raise ValueError(f"Too many mines (max {limit})")

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.width * self.height - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# UI Text Settings
# ============================================================================

@dataclass
class UISettings:
    """Text shown by a front end around the board."""

    title_text: str = "MINESWEEPER"
    title_hint: str = "Press enter to start"
    instructions: List[str] = field(default_factory=lambda: [
        "Open every cell that does not hide a mine.",
        "Numbers count the mines around a cell.",
        "Flag cells you believe hold a mine.",
        "Your first move is always safe.",
    ])
    win_message: str = "You cleared the field!"
    lose_message: str = "Boom! You hit a mine."
    mine_counter_prefix: str = "Mines: "
    timer_prefix: str = "Time: "


@dataclass
class GameConfig:
    """Board and UI settings loaded together."""

    board: BoardConfig = field(default_factory=BoardConfig)
    ui: UISettings = field(default_factory=UISettings)


_UI_KEYS = {
    "titleScreenText": "title_text",
    "titleScreenInstructions": "title_hint",
    "instructionsText": "instructions",
    "winMessage": "win_message",
    "loseMessage": "lose_message",
    "mineCounterPrefix": "mine_counter_prefix",
    "timerPrefix": "timer_prefix",
}


def config_from_dict(data: Mapping[str, Any]) -> GameConfig:
    """
    Build a game config from its JSON mapping.

    Raises:
        ValueError: If ``gameSettings`` is missing or not a valid board.
    """
    if not isinstance(data, Mapping):
        raise ValueError("Config must be a JSON object")
    settings = data.get("gameSettings")
    if not isinstance(settings, Mapping):
        raise ValueError("Config is missing 'gameSettings'")
    try:
        board = BoardConfig(
            width=int(settings["boardWidth"]),
            height=int(settings["boardHeight"]),
            num_mines=int(settings["numMines"]),
        )
    except KeyError as exc:
        raise ValueError(f"gameSettings is missing {exc.args[0]!r}") from exc
    except TypeError as exc:
        raise ValueError(f"Invalid gameSettings: {exc}") from exc

    ui_settings = data.get("uiSettings") or {}
    if not isinstance(ui_settings, Mapping):
        raise ValueError("'uiSettings' must be a JSON object")
    ui_data: Dict[str, Any] = {}
    for json_key, attr in _UI_KEYS.items():
        if json_key in ui_settings:
            ui_data[attr] = ui_settings[json_key]
    if isinstance(ui_data.get("instructions"), str):
        ui_data["instructions"] = [ui_data["instructions"]]

    return GameConfig(board=board, ui=UISettings(**ui_data))


def load_config(path: Union[str, Path]) -> GameConfig:
    """Load a game config from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return config_from_dict(data)
