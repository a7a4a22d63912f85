"""Move request value objects."""

from __future__ import annotations

from dataclasses import dataclass

from wechess.core.enums import PieceType
from wechess.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """A move as asked for by the user, not yet validated.

    ``promotion`` is only meaningful for a pawn reaching the last rank;
    it is ignored for every other move.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        s = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            s += self.promotion.letter
        return s


@dataclass(frozen=True, slots=True)
class PendingPromotion:
    """A pawn move parked until the promotion piece is chosen."""

    from_sq: Square
    to_sq: Square

    def with_piece(self, piece_type: PieceType) -> MoveRequest:
        return MoveRequest(self.from_sq, self.to_sq, piece_type)
