from __future__ import annotations

import pytest

from hive.engine.board import Board
from hive.engine.position import Position


@pytest.fixture
def sample_positions() -> list[Position]:
    """Cells on even and odd rows, including negative coordinates."""
    return [
        Position(x=x, y=y)
        for x in (-3, -1, 0, 2)
        for y in (-2, -1, 0, 1, 4, 7)
    ]


@pytest.fixture
def board() -> Board:
    """A small opening: white ant at the origin, black grasshopper below it."""
    return Board.from_placements({
        "wA1": (0, 0),
        "bG2": (1, 1),
        "wQ": (-1, 0),
    })
