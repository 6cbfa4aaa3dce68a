#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--preset NAME | --width W --height H --mines N] [--config FILE] [--seed S]
    python main.py simulate [--games N] [--preset NAME] [--seed S]
"""
import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Optional, Tuple

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (
    PRESETS,
    BoardConfig,
    FlagOutcome,
    GameConfig,
    GameSession,
    GameState,
    MinesweeperEnv,
    UISettings,
    load_config,
    render_board,
)


HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), q (quit)"


def build_config(args: argparse.Namespace) -> GameConfig:
    """Resolve the game config from command line arguments."""
    if args.config:
        return load_config(args.config)
    overrides = (args.width, args.height, args.mines)
    if any(value is not None for value in overrides):
        preset = PRESETS[args.preset]
        board = BoardConfig(
            width=args.width if args.width is not None else preset.width,
            height=args.height if args.height is not None else preset.height,
            num_mines=args.mines if args.mines is not None else preset.num_mines,
        )
        return GameConfig(board=board)
    return GameConfig(board=PRESETS[args.preset])


def parse_move(line: str) -> Optional[Tuple[str, int, int]]:
    """Parse 'r ROW COL' or 'f ROW COL'; None if malformed."""
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("r", "f"):
        return None
    try:
        return parts[0], int(parts[1]), int(parts[2])
    except ValueError:
        return None


def print_board(session: GameSession, ui: UISettings) -> None:
    snapshot = session.snapshot()
    print(
        f"{ui.mine_counter_prefix}{snapshot.remaining_mines}    "
        f"{ui.timer_prefix}{snapshot.elapsed_seconds}"
    )
    print(render_board(snapshot))


def play_console(
    session: GameSession,
    ui: UISettings,
    read: Callable[[str], str] = input,
) -> None:
    """Drive a session from typed commands until the player quits."""
    while True:
        state = session.state

        if state == GameState.TITLE:
            print(f"\n=== {ui.title_text} ===")
            print(ui.title_hint)
        elif state == GameState.INSTRUCTIONS:
            print()
            for line in ui.instructions:
                print(f"  {line}")
            print(HELP_TEXT)
        elif state == GameState.PLAYING:
            print()
            print_board(session, ui)
        else:
            print()
            print_board(session, ui)
            print(ui.win_message if session.is_won else ui.lose_message)
            print("Press enter to play again, t for title, q to quit.")

        try:
            line = read("> ").strip().lower()
        except EOFError:
            return
        if line == "q":
            return

        if state != GameState.PLAYING:
            if line == "t":
                session.return_to_title()
            else:
                session.advance()
            continue

        move = parse_move(line)
        if move is None:
            print(HELP_TEXT)
            continue
        action, row, col = move
        if action == "r":
            outcome = session.reveal(row, col)
            if outcome.is_noop:
                print(f"Cannot open ({row}, {col}).")
        elif session.toggle_flag(row, col) == FlagOutcome.NO_OP:
            print(f"Cannot flag ({row}, {col}).")


def play(args: argparse.Namespace) -> None:
    """Play a game in the terminal."""
    config = build_config(args)
    session = GameSession(config.board, rng=random.Random(args.seed))
    play_console(session, config.ui)


def simulate(args: argparse.Namespace) -> None:
    """Play random games and print win statistics."""
    config = PRESETS[args.preset]
    env = MinesweeperEnv(config=config)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_revealed = 0

    print(f"Simulating {args.games} random games on {config.width}x{config.height} "
          f"with {config.num_mines} mines...")

    for game in range(args.games):
        seed = args.seed + game if args.seed is not None else None
        env.reset(seed=seed)
        done = False
        info = {}

        while not done:
            valid = np.flatnonzero(env.action_mask())
            action = int(rng.choice(valid))
            _, _, done, _, info = env.step(action)

        if info["state"] == GameState.GAME_OVER_WIN.name:
            wins += 1
        total_revealed += info["revealed"]

    print("Results:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="beginner",
        help="Difficulty preset",
    )
    play_parser.add_argument("--width", type=int, default=None, help="Board width")
    play_parser.add_argument("--height", type=int, default=None, help="Board height")
    play_parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    play_parser.add_argument("--config", type=str, default=None, help="JSON config file")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    sim_parser = subparsers.add_parser("simulate", help="Play random games")
    sim_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="beginner",
        help="Difficulty preset",
    )
    sim_parser.add_argument("--games", type=int, default=100, help="Number of games")
    sim_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
