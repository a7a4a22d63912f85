"""Position store — the single authoritative board position.

All chess rules are delegated to python-chess; this class only translates
between square names / domain value objects and ``chess.Board``.
"""

from __future__ import annotations

from collections.abc import Iterator

import chess

from wechess.core.enums import PROMOTION_PIECES, Color, PieceType
from wechess.core.errors import FailureKind, MoveFailure
from wechess.core.move import MoveRequest
from wechess.core.piece import Piece
from wechess.core.types import Square, is_square_name, parse_square, square_name

STARTING_FEN = chess.STARTING_FEN

_PIECE_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
}


class PositionStore:
    """Holds the current position and answers rule queries about it.

    Positions are only ever replaced wholesale, by :meth:`reset` or by an
    accepted :meth:`apply_move`.  A rejected move leaves the position
    untouched.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen or STARTING_FEN)

    # ── Position lifecycle ───────────────────────────────────────────────

    def current(self) -> str:
        """FEN of the current position."""
        return self._board.fen()

    def reset(self) -> str:
        """Restore the standard initial position."""
        self._board.reset()
        return self.current()

    def apply_move(self, request: MoveRequest) -> MoveFailure | None:
        """Play *request* if legal.

        Returns ``None`` when the move was applied, otherwise the failure
        classification (and the position is unchanged).
        """
        move = self._engine_move(request)
        if move is None or move not in self._board.legal_moves:
            return self.classify(request)
        self._board.push(move)
        return None

    # ── Queries ──────────────────────────────────────────────────────────

    def turn_to_move(self) -> Color:
        return Color.from_chess(self._board.turn)

    def piece_at(self, square: Square) -> Piece | None:
        """Piece on *square*; ``None`` for empty squares and invalid names."""
        if not is_square_name(square):
            return None
        piece = self._board.piece_at(parse_square(square))
        return Piece.from_chess(piece) if piece is not None else None

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares scanned rank 1→8, file a→h."""
        for sq in chess.SQUARES:
            piece = self._board.piece_at(sq)
            if piece is not None:
                yield square_name(sq), Piece.from_chess(piece)

    def legal_destinations(self, square: Square) -> set[Square]:
        if not is_square_name(square):
            return set()
        from_sq = parse_square(square)
        return {
            square_name(m.to_square)
            for m in self._board.legal_moves
            if m.from_square == from_sq
        }

    def king_square(self, color: Color) -> Square | None:
        sq = self._board.king(color.to_chess())
        return square_name(sq) if sq is not None else None

    def is_in_check(self) -> bool:
        return self._board.is_check()

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_draw(self) -> bool:
        """Stalemate, insufficient material, fifty-move rule or threefold repetition."""
        board = self._board
        return (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.is_fifty_moves()
            or board.is_repetition(3)
        )

    def is_game_over(self) -> bool:
        return self.is_checkmate() or self.is_draw() or self._board.is_game_over()

    def is_promotion(self, from_sq: Square, to_sq: Square) -> bool:
        """A pawn stepping from its seventh rank onto the last rank."""
        if not (is_square_name(from_sq) and is_square_name(to_sq)):
            return False
        piece = self._board.piece_at(parse_square(from_sq))
        if piece is None or piece.piece_type != chess.PAWN:
            return False
        from_rank = chess.square_rank(parse_square(from_sq))
        to_rank = chess.square_rank(parse_square(to_sq))
        if piece.color == chess.WHITE:
            return from_rank == 6 and to_rank == 7
        return from_rank == 1 and to_rank == 0

    # ── Failure classification ───────────────────────────────────────────

    def classify(self, request: MoveRequest) -> MoveFailure:
        """Explain why *request* cannot be played in the current position."""
        src, dst = request.from_sq, request.to_sq
        if not (is_square_name(src) and is_square_name(dst)):
            return MoveFailure(
                FailureKind.MALFORMED_REQUEST,
                f"Invalid move format: {str(src).upper()} to {str(dst).upper()}",
            )
        if request.promotion is not None and request.promotion not in PROMOTION_PIECES:
            return MoveFailure(
                FailureKind.MALFORMED_REQUEST,
                f"Cannot promote to {request.promotion}",
            )

        piece = self.piece_at(src)
        if piece is None:
            return MoveFailure(FailureKind.NO_PIECE_AT_SOURCE, f"No piece on {src.upper()}")

        turn = self.turn_to_move()
        if piece.color != turn:
            return MoveFailure(FailureKind.WRONG_TURN, f"It's {turn.display}'s turn")

        target = self.piece_at(dst)
        if target is not None and target.color == piece.color:
            return MoveFailure(
                FailureKind.OWN_PIECE_AT_DESTINATION,
                f"Cannot capture your own piece on {dst.upper()}",
            )

        if dst not in self.legal_destinations(src):
            name = _PIECE_NAMES[piece.piece_type].capitalize()
            return MoveFailure(
                FailureKind.ILLEGAL_DESTINATION, f"{name} cannot move to {dst.upper()}"
            )

        return MoveFailure(
            FailureKind.ILLEGAL_DESTINATION,
            f"Invalid move: {src.upper()} to {dst.upper()}",
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _engine_move(self, request: MoveRequest) -> chess.Move | None:
        """Translate *request* into a python-chess move, or ``None`` if malformed."""
        if not (is_square_name(request.from_sq) and is_square_name(request.to_sq)):
            return None
        if request.promotion is not None and request.promotion not in PROMOTION_PIECES:
            return None
        promotion: int | None = None
        if self.is_promotion(request.from_sq, request.to_sq):
            promotion = int(request.promotion or PieceType.QUEEN)
        return chess.Move(
            parse_square(request.from_sq),
            parse_square(request.to_sq),
            promotion=promotion,
        )
