"""Piece references: which piece, independent of where it stands.

A piece is written as its color letter, bug letter and, for bugs that come
in several copies, a copy number: ``wA1``, ``bS2``, ``wQ``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from hive.engine.errors import ParsingError


class Color(str, Enum):
    WHITE = "w"
    BLACK = "b"


class Bug(str, Enum):
    ANT = "A"
    BEETLE = "B"
    GRASSHOPPER = "G"
    LADYBUG = "L"
    MOSQUITO = "M"
    PILLBUG = "P"
    QUEEN = "Q"
    SPIDER = "S"


# Copies of each bug per color
BUG_COPIES: dict[Bug, int] = {
    Bug.ANT: 3,
    Bug.BEETLE: 2,
    Bug.GRASSHOPPER: 3,
    Bug.LADYBUG: 1,
    Bug.MOSQUITO: 1,
    Bug.PILLBUG: 1,
    Bug.QUEEN: 1,
    Bug.SPIDER: 2,
}

COLOR_LETTERS = frozenset(c.value for c in Color)
BUG_LETTERS = frozenset(b.value for b in Bug)


class Piece(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: Color
    bug: Bug
    order: int | None = None

    def __str__(self) -> str:
        suffix = "" if self.order is None else str(self.order)
        return f"{self.color.value}{self.bug.value}{suffix}"

    @classmethod
    def parse(cls, code: str) -> Piece:
        """Parse a piece code such as ``wA1`` or ``bQ``.

        Raises ParsingError(typ="piece") when the code is malformed or names a
        copy that does not exist.
        """
        if len(code) not in (2, 3) or code[0] not in COLOR_LETTERS or code[1] not in BUG_LETTERS:
            raise ParsingError(found=code, typ="piece")

        bug = Bug(code[1])
        copies = BUG_COPIES[bug]
        order: int | None = None
        if len(code) == 3:
            if code[2] not in "0123456789":
                raise ParsingError(found=code, typ="piece")
            order = int(code[2])

        if copies == 1 and order is not None:
            raise ParsingError(found=code, typ="piece")
        if copies > 1 and (order is None or not 1 <= order <= copies):
            raise ParsingError(found=code, typ="piece")

        return cls(color=Color(code[0]), bug=bug, order=order)


def all_pieces(color: Color) -> list[Piece]:
    """Return every piece one player owns, in bug-letter order."""
    pieces: list[Piece] = []
    for bug in Bug:
        copies = BUG_COPIES[bug]
        if copies == 1:
            pieces.append(Piece(color=color, bug=bug))
        else:
            pieces.extend(Piece(color=color, bug=bug, order=i) for i in range(1, copies + 1))
    return pieces
