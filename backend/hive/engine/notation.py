"""Move notation: resolve a token such as ``wA1``, ``-bG2`` or ``wQ\\`` to a cell.

A token names an already placed piece (the anchor) and, optionally, the side
of it where the target cell lies. A symbol before the piece code points to
the west half of the anchor, a symbol after it to the east half::

     \\wA1   NW        wA1/   NE
     -wA1   W         wA1-   E
     /wA1   SW        wA1\\   SE

A lone ``.`` is the first move of a game and always resolves to the origin.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from hive.engine.direction import Direction
from hive.engine.errors import InvalidDirectionError, ParsingError
from hive.engine.piece import BUG_LETTERS, COLOR_LETTERS, Piece
from hive.engine.position import ORIGIN, Position
from hive.engine.protocol import PlacementLookup

logger = logging.getLogger(__name__)

ORIGIN_TOKEN = "."
DIRECTION_SYMBOLS = frozenset("\\-/")
DIGITS = frozenset("0123456789")

PREFIX_DIRECTIONS: dict[str, Direction] = {
    "\\": Direction.NW,
    "-": Direction.W,
    "/": Direction.SW,
}

SUFFIX_DIRECTIONS: dict[str, Direction] = {
    "/": Direction.NE,
    "-": Direction.E,
    "\\": Direction.SE,
}


class NotationToken(NamedTuple):
    prefix: str | None
    piece_code: str
    suffix: str | None


def _match_code(text: str, i: int) -> int | None:
    """Return the end index of a piece code starting at ``i``, if one does."""
    if i + 1 >= len(text) or text[i] not in COLOR_LETTERS or text[i + 1] not in BUG_LETTERS:
        return None
    end = i + 2
    if end < len(text) and text[end] in DIGITS:
        end += 1
    return end


def _scan(text: str) -> tuple[int, int, NotationToken] | None:
    """Find the leftmost ``prefix? color bug digit? suffix?`` in ``text``.

    Returns (start, end, token) for the first match, or None.
    """
    for i in range(len(text)):
        prefix = None
        code_start = i
        if text[i] in DIRECTION_SYMBOLS and _match_code(text, i + 1) is not None:
            prefix = text[i]
            code_start = i + 1
        code_end = _match_code(text, code_start)
        if code_end is None:
            continue
        suffix = None
        end = code_end
        if end < len(text) and text[end] in DIRECTION_SYMBOLS:
            suffix = text[end]
            end += 1
        return i, end, NotationToken(prefix=prefix, piece_code=text[code_start:code_end], suffix=suffix)
    return None


def tokenize(text: str, strict: bool = False) -> NotationToken | None:
    """Split a notation token into prefix symbol, piece code and suffix symbol.

    Returns None for the origin token. The leftmost run of
    ``prefix? color bug digit? suffix?`` is used and anything around it is
    ignored, so stored tokens with stray characters still resolve. With
    ``strict`` set the whole text must be that run.

    Raises ParsingError(typ="position") when no such run is found.
    """
    if text.startswith(ORIGIN_TOKEN):
        return None

    found = _scan(text)
    if found is None:
        raise ParsingError(found=text, typ="position")

    start, end, token = found
    if strict and (start != 0 or end != len(text)):
        raise ParsingError(found=text, typ="position")
    return token


def prefix_direction(symbol: str) -> Direction:
    try:
        return PREFIX_DIRECTIONS[symbol]
    except KeyError:
        raise InvalidDirectionError(direction=symbol) from None


def suffix_direction(symbol: str) -> Direction:
    try:
        return SUFFIX_DIRECTIONS[symbol]
    except KeyError:
        raise InvalidDirectionError(direction=symbol) from None


def resolve_notation(
    text: str,
    placements: PlacementLookup,
    strict: bool = False,
) -> Position:
    """Resolve a notation token to an absolute position.

    Both a prefix and a suffix step are applied when present, prefix first.
    With ``strict`` set, a token carrying both is rejected instead, as is any
    text around the piece code and its symbols.

    A malformed token and a token whose anchor piece is not on the board
    raise the same ParsingError(typ="position"); a bad piece code raises the
    ParsingError(typ="piece") from ``Piece.parse``.
    """
    token = tokenize(text, strict=strict)
    if token is None:
        return ORIGIN

    if strict and token.prefix is not None and token.suffix is not None:
        logger.debug(f"Rejected {text!r}: offsets on both sides of the anchor")
        raise ParsingError(found=text, typ="position")

    piece = Piece.parse(token.piece_code)
    position = placements.position(piece)
    if position is None:
        logger.debug(f"Cannot resolve {text!r}: {piece} is not on the board")
        raise ParsingError(found=text, typ="position")

    if token.prefix is not None:
        position = position.to(prefix_direction(token.prefix))
    if token.suffix is not None:
        position = position.to(suffix_direction(token.suffix))
    return position
