"""In-memory placement registry.

Tracks where each placed piece stands. Several pieces may share a cell when
they are stacked; the list for a cell is ordered bottom to top.
"""

from __future__ import annotations

import logging

from hive.engine.errors import GameError
from hive.engine.piece import Color, Piece, all_pieces
from hive.engine.position import Position

logger = logging.getLogger(__name__)


class Board:
    """Placement registry satisfying ``PlacementLookup``."""

    def __init__(self) -> None:
        self._positions: dict[Piece, Position] = {}
        self._stacks: dict[Position, list[Piece]] = {}

    @classmethod
    def from_placements(cls, placements: dict[str, tuple[int, int]]) -> Board:
        """Build a board from piece codes mapped to (x, y), placed in order."""
        board = cls()
        for code, (x, y) in placements.items():
            board.place(Piece.parse(code), Position(x=x, y=y))
        return board

    def position(self, piece: Piece) -> Position | None:
        return self._positions.get(piece)

    def place(self, piece: Piece, position: Position) -> None:
        if piece in self._positions:
            raise GameError(f"Piece {piece} is already placed at {self._positions[piece]}")
        self._positions[piece] = position
        self._stacks.setdefault(position, []).append(piece)
        logger.debug(f"Placed {piece} at {position}")

    def move(self, piece: Piece, position: Position) -> None:
        current = self._positions.get(piece)
        if current is None:
            raise GameError(f"Piece {piece} is not on the board")
        stack = self._stacks[current]
        stack.remove(piece)
        if not stack:
            del self._stacks[current]
        self._positions[piece] = position
        self._stacks.setdefault(position, []).append(piece)
        logger.debug(f"Moved {piece} from {current} to {position}")

    def pieces_at(self, position: Position) -> list[Piece]:
        """Return the pieces on a cell, bottom to top."""
        return list(self._stacks.get(position, []))

    def is_occupied(self, position: Position) -> bool:
        return position in self._stacks

    def is_gated(self, from_: Position, to: Position) -> bool:
        """Return True if sliding from ``from_`` to the adjacent ``to`` is blocked.

        A slide is blocked when both cells flanking the shared edge are
        occupied (freedom to move).
        """
        first, second = from_.common_adjacent_positions(to)
        return self.is_occupied(first) and self.is_occupied(second)

    def reserve(self, color: Color) -> list[Piece]:
        """Return the pieces of ``color`` that have not been placed yet."""
        return [p for p in all_pieces(color) if p not in self._positions]

    def __len__(self) -> int:
        return len(self._positions)
