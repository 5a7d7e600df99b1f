from __future__ import annotations

from typing import Protocol, runtime_checkable

from hive.engine.piece import Piece
from hive.engine.position import Position


@runtime_checkable
class PlacementLookup(Protocol):
    """Where placed pieces currently stand.

    This is the only thing notation resolution needs from game state.
    """

    def position(self, piece: Piece) -> Position | None:
        """Return the piece's current position, or None if it is not placed."""
        ...
