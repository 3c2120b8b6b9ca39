"""
Main CLI for relay Kalah.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from ..core import BoardConfig, MoveError, apply_move, legal_moves, new_game
from ..service import GameService
from ..storage import GameNotFound, GameStorage, PostgreSQLGameStorage, SQLiteGameStorage
from ..utils.rich_display import BoardDisplay, setup_rich_logging

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_MOVE_REJECTED = 2
EXIT_NOT_FOUND = 3


def setup_logging(level: str = "INFO", rich: bool = False) -> None:
    """Configure logging."""
    if rich:
        setup_rich_logging(level)
        return
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def open_storage(args) -> GameStorage:
    """Build the storage backend selected on the command line."""
    if args.backend == "postgresql":
        return PostgreSQLGameStorage(
            host=args.pg_host,
            port=args.pg_port,
            database=args.pg_database,
            user=args.pg_user,
            password=os.environ.get("KALAH_PG_PASSWORD", ""),
        )

    if args.db_path != ":memory:":
        Path(args.db_path).parent.mkdir(parents=True, exist_ok=True)
    return SQLiteGameStorage(args.db_path)


def board_config(args) -> BoardConfig:
    return BoardConfig(pits_per_side=args.num_pits, stones_per_pit=args.num_seeds)


def new_command(args, display: BoardDisplay) -> int:
    """Create a new game."""
    with open_storage(args) as storage:
        service = GameService(storage, board_config(args))
        status = service.create()

    display.show_header("Relay Kalah", status.game_id)
    display.log_success(f"Created game {status.game_id}")
    display.show_board(status.board, status.legal_moves)
    return EXIT_OK


def status_command(args, display: BoardDisplay) -> int:
    """Show a stored game."""
    with open_storage(args) as storage:
        status = GameService(storage).get_status(args.game_id)

    display.show_header("Relay Kalah", status.game_id)
    display.show_board(status.board, status.legal_moves)
    return EXIT_OK


def play_command(args, display: BoardDisplay) -> int:
    """Play one move in a stored game."""
    with open_storage(args) as storage:
        report = GameService(storage).play(args.game_id, args.pit)

    display.show_header("Relay Kalah", args.game_id)
    display.show_outcome(args.pit, report.outcome, report.laps)
    display.show_board(report.status.board, report.status.legal_moves)
    return EXIT_OK


def simulate_command(args, display: BoardDisplay) -> int:
    """Apply a list of moves to a fresh board without storage."""
    logger = logging.getLogger(__name__)
    board = new_game(board_config(args))

    display.show_header(f"Relay Kalah simulation ({args.num_pits} pits, {args.num_seeds} stones)")
    played = 0
    for pit_id in args.moves:
        result = apply_move(board, board.turn, pit_id)
        board = result.board
        played += 1
        display.show_outcome(pit_id, result.outcome, result.laps)
        if board.is_finished:
            break

    logger.debug(f"Simulation played {played} of {len(args.moves)} moves")
    display.show_board(board, legal_moves(board, board.turn))
    return EXIT_OK


def parse_moves(value: str) -> List[int]:
    """Parse a comma-separated move list such as "1,8,3"."""
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid move list: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="relay-kalah", description="Relay Kalah move engine")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument("--rich-logging", action="store_true", help="Render log records with rich")

    storage_parent = argparse.ArgumentParser(add_help=False)
    storage_parent.add_argument(
        "--backend", choices=["sqlite", "postgresql"], default="sqlite", help="Storage backend"
    )
    storage_parent.add_argument(
        "--db-path",
        default="data/databases/kalah_games.db",
        help="Path to SQLite database file",
    )
    storage_parent.add_argument("--pg-host", default="localhost")
    storage_parent.add_argument("--pg-port", type=int, default=5432)
    storage_parent.add_argument("--pg-database", default="kalah")
    storage_parent.add_argument(
        "--pg-user", default="postgres", help="PostgreSQL user (password from KALAH_PG_PASSWORD)"
    )

    board_parent = argparse.ArgumentParser(add_help=False)
    board_parent.add_argument("--num-pits", type=int, default=6, help="Number of pits per player")
    board_parent.add_argument("--num-seeds", type=int, default=6, help="Initial stones per pit")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    new_parser = subparsers.add_parser(
        "new", parents=[storage_parent, board_parent], help="Create a new game"
    )
    new_parser.set_defaults(func=new_command)

    status_parser = subparsers.add_parser("status", parents=[storage_parent], help="Show a game")
    status_parser.add_argument("--game-id", type=int, required=True)
    status_parser.set_defaults(func=status_command)

    play_parser = subparsers.add_parser("play", parents=[storage_parent], help="Play a move")
    play_parser.add_argument("--game-id", type=int, required=True)
    play_parser.add_argument("--pit", type=int, required=True, help="Pit to start the move from (1-based)")
    play_parser.set_defaults(func=play_command)

    simulate_parser = subparsers.add_parser(
        "simulate", parents=[board_parent], help="Apply moves to a fresh in-memory board"
    )
    simulate_parser.add_argument(
        "--moves", type=parse_moves, required=True, help="Comma-separated pits, e.g. 1,8,3"
    )
    simulate_parser.set_defaults(func=simulate_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    setup_logging(args.log_level, rich=args.rich_logging)
    display = BoardDisplay()

    try:
        return args.func(args, display)
    except MoveError as e:
        display.log_error(str(e))
        return EXIT_MOVE_REJECTED
    except GameNotFound as e:
        display.log_error(str(e))
        return EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
