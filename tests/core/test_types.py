"""Tests for square helpers, enums and the Piece value object."""

from __future__ import annotations

import pytest

from wechess.core.enums import PROMOTION_PIECES, Color, PieceType
from wechess.core.move import MoveRequest, PendingPromotion
from wechess.core.piece import Piece, piece_symbol
from wechess.core.types import (
    SQUARE_NAMES,
    is_square_name,
    parse_square,
    square_name,
)


class TestSquares:
    def test_parse_and_name(self) -> None:
        assert parse_square("a1") == 0
        assert parse_square("e4") == 28
        assert square_name(63) == "h8"

    def test_parse_invalid_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square("i1")

    def test_is_square_name(self) -> None:
        assert is_square_name("h8")
        assert not is_square_name("E4")
        assert not is_square_name(None)
        assert len(SQUARE_NAMES) == 64


class TestEnums:
    def test_color_helpers(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.display == "Black"
        assert str(Color.WHITE) == "white"

    def test_piece_letters(self) -> None:
        assert PieceType.KNIGHT.letter == "n"
        assert str(PieceType.QUEEN) == "queen"

    def test_promotion_choice_order(self) -> None:
        assert PROMOTION_PIECES == (
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        )


class TestPiece:
    def test_fen_char(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.QUEEN).symbol == "♕"
        assert piece_symbol(Color.BLACK, PieceType.KNIGHT) == "♞"


class TestMoveRequest:
    def test_str(self) -> None:
        assert str(MoveRequest("e7", "e8", PieceType.ROOK)) == "e7e8r"
        assert str(MoveRequest("e2", "e4")) == "e2e4"

    def test_pending_with_piece(self) -> None:
        pending = PendingPromotion("e7", "e8")
        assert pending.with_piece(PieceType.QUEEN) == MoveRequest(
            "e7", "e8", PieceType.QUEEN
        )
