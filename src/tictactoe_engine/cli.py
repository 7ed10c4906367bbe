# Area: Console
"""
tictactoe_engine.cli — Command-line interface
=============================================

Provides the CLI entry point for playing in a terminal.

Usage:
    tictactoe                              # Two humans, 3x3 board
    tictactoe --vs-computer                # Human vs the automatic mover
    tictactoe --size 4 --history-file results.txt
    tictactoe --history                    # Print finished games and exit
    python -m tictactoe_engine --config game.json

Settings come from (lowest to highest priority):
    1. GameConfig defaults
    2. JSON config file (--config)
    3. Environment variables / .env (TICTACTOE_*)
    4. Command-line flags
"""

import argparse
import sys
from typing import List, Optional

from ._shared.logging_config import setup_logging
from .config import GameConfig, PlayerConfig, build_engine, load_config
from .console import ConsoleRunner, format_history
from .errors import PersistenceError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tictactoe
  tictactoe --vs-computer
  tictactoe --size 4
  tictactoe --history
  TICTACTOE_HISTORY_FILE=results.txt tictactoe
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--size",
        type=int,
        help="Board side length (default: 3)",
    )

    parser.add_argument(
        "--history-file",
        type=str,
        help="Result log location (default: game_data.txt)",
    )

    parser.add_argument(
        "--vs-computer",
        action="store_true",
        help="Replace the second player with the automatic mover",
    )

    parser.add_argument(
        "--history",
        action="store_true",
        help="Print the game history and exit",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON logs to this file",
    )

    return parser.parse_args(argv)


def apply_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    """Apply command-line flags on top of the loaded config."""
    updates = {}
    if args.size is not None:
        updates["board_size"] = args.size
    if args.history_file:
        updates["history_file"] = args.history_file
    if args.log_level:
        updates["log_level"] = args.log_level
    if args.log_file:
        updates["log_file"] = args.log_file
    if args.vs_computer:
        players = list(config.players[:1]) or [PlayerConfig(name="Player X", symbol="X")]
        players.append(PlayerConfig(name="Computer", symbol="O", kind="computer"))
        updates["players"] = players

    # Re-validate so flags go through the same checks as files
    merged = config.model_dump()
    merged.update(updates)
    return GameConfig.model_validate(merged)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_file, config.log_level)
    engine = build_engine(config)

    if args.history:
        try:
            print(format_history(engine.load_game_history()))
        except PersistenceError as e:
            print(f"Error loading game history: {e}", file=sys.stderr)
            return 1
        return 0

    return ConsoleRunner(engine).run()
