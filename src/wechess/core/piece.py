"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from wechess.core.enums import Color, PieceType

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_chess(cls, piece: chess.Piece) -> Piece:
        return cls(Color.from_chess(piece.color), PieceType(piece.piece_type))

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]


def piece_symbol(color: Color, piece_type: PieceType) -> str:
    """Unicode symbol for a colour/type pair without building a Piece."""
    return _UNICODE[(color, piece_type)]
