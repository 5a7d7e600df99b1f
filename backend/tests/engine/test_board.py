"""Tests for the placement registry."""

from __future__ import annotations

import pytest

from hive.engine.board import Board
from hive.engine.errors import GameError
from hive.engine.piece import Color, Piece
from hive.engine.position import ORIGIN, Position
from hive.engine.protocol import PlacementLookup


class TestPlacement:
    def test_empty_board(self) -> None:
        board = Board()
        assert len(board) == 0
        assert board.position(Piece.parse("wQ")) is None
        assert not board.is_occupied(ORIGIN)

    def test_is_placement_lookup(self) -> None:
        assert isinstance(Board(), PlacementLookup)

    def test_place_and_lookup(self, board) -> None:
        assert board.position(Piece.parse("wA1")) == ORIGIN
        assert board.position(Piece.parse("bG2")) == Position(x=1, y=1)
        assert board.position(Piece.parse("bQ")) is None
        assert len(board) == 3

    def test_place_twice_rejected(self, board) -> None:
        with pytest.raises(GameError, match="already placed"):
            board.place(Piece.parse("wA1"), Position(x=5, y=5))
        assert board.position(Piece.parse("wA1")) == ORIGIN

    def test_from_placements_rejects_bad_code(self) -> None:
        with pytest.raises(GameError):
            Board.from_placements({"wA9": (0, 0)})


class TestMove:
    def test_move_updates_position(self, board) -> None:
        ant = Piece.parse("wA1")
        board.move(ant, Position(x=3, y=3))
        assert board.position(ant) == Position(x=3, y=3)
        assert not board.is_occupied(ORIGIN)
        assert board.pieces_at(Position(x=3, y=3)) == [ant]

    def test_move_unplaced_rejected(self, board) -> None:
        with pytest.raises(GameError, match="not on the board"):
            board.move(Piece.parse("bB1"), ORIGIN)

    def test_stacking(self, board) -> None:
        beetle = Piece.parse("bB1")
        board.place(beetle, Position(x=0, y=1))
        board.move(beetle, ORIGIN)
        assert board.pieces_at(ORIGIN) == [Piece.parse("wA1"), beetle]
        board.move(beetle, Position(x=1, y=0))
        assert board.pieces_at(ORIGIN) == [Piece.parse("wA1")]

    def test_pieces_at_returns_copy(self, board) -> None:
        board.pieces_at(ORIGIN).clear()
        assert board.is_occupied(ORIGIN)


class TestGate:
    def test_open_when_one_side_free(self) -> None:
        # Gates of (0,0) -> (1,0) are (0,-1) and (0,1)
        board = Board.from_placements({"wA1": (0, 0), "bA1": (0, -1)})
        assert not board.is_gated(ORIGIN, Position(x=1, y=0))

    def test_blocked_when_both_sides_taken(self) -> None:
        board = Board.from_placements({"wA1": (0, 0), "bA1": (0, -1), "bA2": (0, 1)})
        assert board.is_gated(ORIGIN, Position(x=1, y=0))
        assert board.is_gated(Position(x=1, y=0), ORIGIN)

    def test_requires_adjacent_cells(self, board) -> None:
        with pytest.raises(AssertionError):
            board.is_gated(ORIGIN, Position(x=4, y=4))


class TestReserve:
    def test_reserve_excludes_placed(self, board) -> None:
        white = board.reserve(Color.WHITE)
        assert Piece.parse("wA1") not in white
        assert Piece.parse("wQ") not in white
        assert Piece.parse("wA2") in white
        assert len(white) == 12
        assert len(board.reserve(Color.BLACK)) == 13
