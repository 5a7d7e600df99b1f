"""Hex neighbor directions and the offset tables behind them.

The board uses the "odd-r horizontal" layout: odd rows are shifted half a
cell to the right, so the (dx, dy) step to a neighbor depends on the parity
of the row the step starts from.
"""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    # Declaration order is the ring order, clockwise from north-west.
    NW = "NW"
    NE = "NE"
    E = "E"
    SE = "SE"
    SW = "SW"
    W = "W"

    @classmethod
    def all(cls) -> list[Direction]:
        """Return the six directions in ring order."""
        return list(cls)

    def adjacent_directions(self) -> tuple[Direction, Direction]:
        """Return the ring predecessor and successor of this direction."""
        ring = Direction.all()
        i = ring.index(self)
        return ring[i - 1], ring[(i + 1) % len(ring)]

    def offset(self, y: int) -> tuple[int, int]:
        """Return the (dx, dy) step for this direction from a cell in row y."""
        table = EVEN_ROW_OFFSETS if y % 2 == 0 else ODD_ROW_OFFSETS
        return table[self]

    def __str__(self) -> str:
        return self.value


EVEN_ROW_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NW: (-1, -1),
    Direction.NE: (0, -1),
    Direction.E: (1, 0),
    Direction.SE: (0, 1),
    Direction.SW: (-1, 1),
    Direction.W: (-1, 0),
}

ODD_ROW_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NW: (0, -1),
    Direction.NE: (1, -1),
    Direction.E: (1, 0),
    Direction.SE: (1, 1),
    Direction.SW: (0, 1),
    Direction.W: (-1, 0),
}

# Reverse lookups: (dx, dy) -> Direction, one per row parity
EVEN_ROW_DIRECTIONS: dict[tuple[int, int], Direction] = {
    delta: d for d, delta in EVEN_ROW_OFFSETS.items()
}
ODD_ROW_DIRECTIONS: dict[tuple[int, int], Direction] = {
    delta: d for d, delta in ODD_ROW_OFFSETS.items()
}


def direction_for_delta(y: int, dx: int, dy: int) -> Direction | None:
    """Return the direction whose step from row y is (dx, dy), if any."""
    table = EVEN_ROW_DIRECTIONS if y % 2 == 0 else ODD_ROW_DIRECTIONS
    return table.get((dx, dy))
