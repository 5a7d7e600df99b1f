from __future__ import annotations


class GameError(Exception):
    """Base class for recoverable engine errors."""
    pass


class ParsingError(GameError):
    """Text could not be turned into the requested kind of value."""

    def __init__(self, found: str, typ: str):
        self.found = found
        self.typ = typ
        super().__init__(f"Parsing error: found {found!r}, expected a {typ}")


class InvalidDirectionError(GameError):
    """A notation symbol does not name a direction."""

    def __init__(self, direction: str):
        self.direction = direction
        super().__init__(f"Invalid direction: {direction!r}")
