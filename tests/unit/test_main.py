"""
Unit tests for the command line entry point.
"""
import argparse

import pytest
from minefield import BEGINNER, BoardConfig, GameSession, GameState, UISettings

from main import build_config, parse_move, play_console


def cli_args(**overrides) -> argparse.Namespace:
    values = {
        "config": None,
        "preset": "beginner",
        "width": None,
        "height": None,
        "mines": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestBuildConfig:
    """Test resolving board settings from arguments."""

    def test_preset_only(self) -> None:
        """Without overrides the preset is used as is."""
        assert build_config(cli_args()).board == BEGINNER

    def test_partial_override_keeps_preset_values(self) -> None:
        """Unset dimensions fall back to the preset."""
        config = build_config(cli_args(preset="intermediate", mines=20))
        assert config.board == BoardConfig(16, 16, 20)

    @pytest.mark.parametrize("field", ["width", "height"])
    def test_zero_dimension_is_rejected(self, field: str) -> None:
        """An explicit 0 is reported, not replaced by the preset."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            build_config(cli_args(**{field: 0}))

    def test_zero_mines_is_kept(self) -> None:
        """An explicit 0 mines overrides the preset."""
        assert build_config(cli_args(mines=0)).board.num_mines == 0

    def test_config_file_wins(self, tmp_path) -> None:
        """--config loads the JSON file."""
        path = tmp_path / "data.json"
        path.write_text(
            '{"gameSettings": {"boardWidth": 5, "boardHeight": 5, "numMines": 2}}',
            encoding="utf-8",
        )
        assert build_config(cli_args(config=str(path), width=0)).board == BoardConfig(5, 5, 2)


class TestParseMove:
    """Test console command parsing."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("r 1 2", ("r", 1, 2)),
            ("f 0 7", ("f", 0, 7)),
            ("r 1", None),
            ("x 1 2", None),
            ("r a b", None),
        ],
    )
    def test_parse(self, line: str, expected) -> None:
        """Only 'r' and 'f' with two integers are moves."""
        assert parse_move(line) == expected


class TestPlayConsole:
    """Test driving a session from typed input."""

    def test_screens_then_first_move(self, scripted_rng, capsys) -> None:
        """Enter twice starts a game; a reveal then opens the board."""
        session = GameSession(BoardConfig(12, 1, 1), rng=scripted_rng((0, 5)))
        lines = iter(["", "", "r 0 0", "f 0 5", "q"])

        play_console(session, UISettings(), read=lambda prompt: next(lines))

        assert session.state == GameState.PLAYING
        assert session.revealed_count == 5
        assert session.remaining_mines == 0
        assert "MINESWEEPER" in capsys.readouterr().out

    def test_end_of_input_stops(self) -> None:
        """EOF on input ends the loop."""
        session = GameSession(BoardConfig(9, 9, 10))

        def closed(prompt: str) -> str:
            raise EOFError

        play_console(session, UISettings(), read=closed)
        assert session.state == GameState.TITLE
