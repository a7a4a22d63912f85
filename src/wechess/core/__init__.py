"""Core domain layer — value objects and the position store.

Chess rules themselves come from python-chess.

Quick start::

    from wechess.core import MoveRequest, PositionStore

    store = PositionStore()
    failure = store.apply_move(MoveRequest("e2", "e4"))
    assert failure is None
"""

from wechess.core.enums import PROMOTION_PIECES, Color, PieceType
from wechess.core.errors import FailureKind, MoveFailure
from wechess.core.move import MoveRequest, PendingPromotion
from wechess.core.piece import Piece, piece_symbol
from wechess.core.position import STARTING_FEN, PositionStore
from wechess.core.types import (
    SQUARE_NAMES,
    Square,
    is_square_name,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    "PROMOTION_PIECES",
    # Types / helpers
    "SQUARE_NAMES",
    "Square",
    "is_square_name",
    "parse_square",
    "square_name",
    # Domain objects
    "FailureKind",
    "MoveFailure",
    "MoveRequest",
    "PendingPromotion",
    "Piece",
    "PositionStore",
    "piece_symbol",
    "STARTING_FEN",
]
