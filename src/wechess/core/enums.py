"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

import chess


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def display(self) -> str:
        """Capitalised name used in status text, e.g. ``"White"``."""
        return self.name.capitalize()

    @classmethod
    def from_chess(cls, color: chess.Color) -> Color:
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    def to_chess(self) -> chess.Color:
        return chess.WHITE if self == Color.WHITE else chess.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types; values match python-chess piece type constants."""

    PAWN = chess.PAWN
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    ROOK = chess.ROOK
    QUEEN = chess.QUEEN
    KING = chess.KING

    @property
    def letter(self) -> str:
        """Lower-case FEN letter, e.g. ``"n"`` for a knight."""
        return chess.piece_symbol(self.value)

    def __str__(self) -> str:
        return self.name.lower()


# Promotion choices in the order the dialog offers them
PROMOTION_PIECES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
