"""Board coordinates and hex-neighbor arithmetic."""

from __future__ import annotations

from functools import total_ordering

from pydantic import BaseModel, ConfigDict

from hive.engine.direction import Direction, direction_for_delta


@total_ordering
class Position(BaseModel):
    """A cell of the odd-r offset hex grid.

    Positions are immutable; stepping to a neighbor always returns a new one.
    Ordering is lexicographic on (x, y).
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def __str__(self) -> str:
        return f"x:{self.x}, y:{self.y}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def to(self, direction: Direction) -> Position:
        """Return the neighbor of this cell in the given direction."""
        dx, dy = direction.offset(self.y)
        return Position(x=self.x + dx, y=self.y + dy)

    def direction(self, to: Position) -> Direction:
        """Return the direction leading from this cell to the neighbor ``to``.

        ``to`` must be one of the six neighbors of this cell. Anything else is
        a bug in the calling engine code rather than bad user input, so it
        raises ``AssertionError`` instead of a ``GameError``.
        """
        dx, dy = to.x - self.x, to.y - self.y
        found = direction_for_delta(self.y, dx, dy)
        if found is None:
            parity = "even" if self.y % 2 == 0 else "odd"
            raise AssertionError(
                f"({parity}) Direction of movement unknown, from: {self} to: {to} ({dx},{dy})"
            )
        return found

    def common_adjacent_positions(self, to: Position) -> tuple[Position, Position]:
        """Return the two cells that neighbor both this cell and ``to``.

        These flank the edge between the two cells: a piece can only slide
        across the edge when at least one of them is empty.
        """
        first, second = self.direction(to).adjacent_directions()
        return self.to(first), self.to(second)

    def neighbors(self) -> list[Position]:
        """Return the six neighbors in ring order, starting at NW."""
        return [self.to(d) for d in Direction.all()]

    def is_adjacent(self, other: Position) -> bool:
        return direction_for_delta(self.y, other.x - self.x, other.y - self.y) is not None


ORIGIN = Position(x=0, y=0)
"""Where the first piece of a game is placed."""
