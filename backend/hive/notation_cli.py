"""CLI for resolving move notation against a set of placed pieces.

Usage::

    python -m hive.notation_cli .
    python -m hive.notation_cli --place wA1=0,0 --place bG2=1,1 -- -wA1 bG2/

    # Reject tokens with offsets on both sides of the anchor
    HIVE_STRICT_NOTATION=true python -m hive.notation_cli --place wQ=0,0 -- -wQ/
"""

from __future__ import annotations

import argparse
import logging
import sys

from hive.config import Settings
from hive.config import settings as default_settings
from hive.engine.board import Board
from hive.engine.errors import GameError
from hive.engine.notation import resolve_notation
from hive.engine.piece import Piece
from hive.engine.position import Position

logger = logging.getLogger(__name__)


def _parse_placement(value: str) -> tuple[str, tuple[int, int]]:
    """Parse ``CODE=X,Y`` into (code, (x, y))."""
    try:
        code, coords = value.split("=", 1)
        x, y = coords.split(",")
        return code, (int(x), int(y))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid placement {value!r}, expected CODE=X,Y"
        ) from None


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    parser = argparse.ArgumentParser(description="Resolve Hive move notation")
    parser.add_argument(
        "--place",
        action="append",
        default=[],
        type=_parse_placement,
        metavar="CODE=X,Y",
        help="Put a piece on the board before resolving (repeatable)",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=settings.strict_notation,
        help="Reject tokens with stray characters or offsets on both sides of the anchor",
    )
    parser.add_argument("tokens", nargs="+", help="Notation tokens to resolve")
    args = parser.parse_args(argv)

    try:
        board = Board()
        for code, (x, y) in args.place:
            board.place(Piece.parse(code), Position(x=x, y=y))
        for token in args.tokens:
            position = resolve_notation(token, board, strict=args.strict)
            print(f"{token} -> {position}")
    except GameError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Resolved {len(args.tokens)} tokens against {len(board)} placed pieces")
    return 0


if __name__ == "__main__":
    sys.exit(main())
