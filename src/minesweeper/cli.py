"""
Command-line driver for text Minesweeper.

Reads ``<command> <row> <col>`` lines from the player and applies them
to a Board until the game ends.
"""
import argparse
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .board import Board, BoardConfig
from .errors import GameAlreadyEnded, InvalidCell, InvalidConfiguration
from .rng import seeded_rng

logger = logging.getLogger(__name__)

FLAG_COMMAND = "f"
REVEAL_COMMAND = "r"
PROMPT = "Enter your next action: "


class InvalidCommand(ValueError):
    """Player input could not be turned into a move."""


@dataclass(frozen=True)
class Command:
    """A parsed player move."""

    action: str
    row: int
    col: int


def parse_command(line: str, rows: int, columns: int) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Raw text such as ``"r 3 4"``.
        rows: Number of board rows, for the range check.
        columns: Number of board columns, for the range check.

    Returns:
        The parsed Command.

    Raises:
        InvalidCommand: On a wrong token count, non-integer or
            out-of-range coordinates, or an unknown command word.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise InvalidCommand(f"Expected 3 tokens, got {len(tokens)}")

    action = tokens[0].lower()
    if action not in (FLAG_COMMAND, REVEAL_COMMAND):
        raise InvalidCommand(f"Unknown command {tokens[0]!r}")

    try:
        row = int(tokens[1])
        col = int(tokens[2])
    except ValueError:
        raise InvalidCommand("Row and column must be integers") from None

    if not (0 <= row < rows and 0 <= col < columns):
        raise InvalidCommand(f"({row}, {col}) is off the board")
    return Command(action, row, col)


def help_text(rows: int, columns: int) -> str:
    """Usage summary shown at start-up and after bad input."""
    return (
        "command:\n"
        f"\t'{FLAG_COMMAND}'\tflag/unflag specified cell\n"
        f"\t'{REVEAL_COMMAND}'\treveal specified cell "
        "(empty neighbours are not opened automatically)\n"
        f"row: [0, {rows})\n"
        f"col: [0, {columns})\n"
        "format: <command> <row> <col>\n"
    )


def apply_command(board: Board, command: Command) -> None:
    """Dispatch a parsed command to the board."""
    if command.action == FLAG_COMMAND:
        board.toggle_flag(command.row, command.col)
    else:
        board.reveal_cell(command.row, command.col)


def play(
    board: Board,
    input_fn: Optional[Callable[[str], str]] = None,
    print_fn: Callable[..., None] = print,
) -> int:
    """
    Run the interactive loop until the game ends or input runs out.

    Args:
        board: Board to play on.
        input_fn: Reads one line given a prompt (default: builtin input).
        print_fn: Writes output (default: builtin print).

    Returns:
        0 if the game was won, 1 otherwise.
    """
    input_fn = input_fn or input
    usage = help_text(board.rows, board.columns)
    print_fn(usage)

    while not board.has_ended():
        print_fn(board.render())
        try:
            line = input_fn(PROMPT)
        except EOFError:
            print_fn("\nGame aborted.")
            return 1

        try:
            apply_command(board, parse_command(line, board.rows, board.columns))
        except (InvalidCommand, InvalidCell) as e:
            logger.debug("Rejected %r: %s", line, e)
            print_fn(usage)
        except GameAlreadyEnded as e:
            print_fn(str(e))
            break

    print_fn(board.render())
    if board.has_won():
        print_fn("YOU WIN!")
        return 0
    print_fn("YOU LOST...")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--rows", type=int, default=9, help="Number of rows (min 9)"
    )
    parser.add_argument(
        "--columns", type=int, default=9, help="Number of columns (min 9)"
    )
    parser.add_argument(
        "--mines",
        type=int,
        default=None,
        help="Number of mines (default: 30%% of cells)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible board"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, build a board and play it."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.mines is None:
            config = BoardConfig.with_default_mines(args.rows, args.columns)
        else:
            config = BoardConfig(args.rows, args.columns, args.mines)
    except InvalidConfiguration as e:
        parser.error(str(e))

    rng = seeded_rng(args.seed) if args.seed is not None else None
    return play(Board(config, rng=rng))
