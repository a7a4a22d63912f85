"""Move resolver — turns move requests into applied moves.

Two states: idle, or awaiting the promotion piece for one parked pawn move.
A pawn reaching the last rank without a promotion piece is not played
straight away; it is parked until :meth:`MoveResolver.resolve_promotion`
or :meth:`MoveResolver.cancel_promotion` is called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, auto

from wechess.core.enums import PieceType
from wechess.core.errors import FailureKind, MoveFailure
from wechess.core.move import MoveRequest, PendingPromotion
from wechess.core.position import PositionStore

_LOGGER = logging.getLogger(__name__)


class ResolverState(IntEnum):
    IDLE = auto()
    AWAITING_PROMOTION = auto()


class MoveStatus(IntEnum):
    APPLIED = auto()
    PENDING = auto()  # parked, waiting for a promotion piece
    REJECTED = auto()


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of one move attempt.

    ``fen`` is the position after the attempt; for anything but
    ``APPLIED`` it equals the position before it.
    """

    status: MoveStatus
    fen: str
    failure: MoveFailure | None = None

    @property
    def applied(self) -> bool:
        return self.status == MoveStatus.APPLIED

    @property
    def pending(self) -> bool:
        return self.status == MoveStatus.PENDING

    @classmethod
    def rejected(cls, fen: str, failure: MoveFailure | None) -> MoveResult:
        return cls(MoveStatus.REJECTED, fen, failure)


class MoveResolver:
    """Validates and applies move requests against a :class:`PositionStore`."""

    __slots__ = ("_store", "_pending")

    def __init__(self, store: PositionStore) -> None:
        self._store = store
        self._pending: PendingPromotion | None = None

    @property
    def state(self) -> ResolverState:
        if self._pending is None:
            return ResolverState.IDLE
        return ResolverState.AWAITING_PROMOTION

    @property
    def pending(self) -> PendingPromotion | None:
        return self._pending

    def submit(self, request: MoveRequest) -> MoveResult:
        if self._pending is not None:
            return MoveResult.rejected(
                self._store.current(),
                MoveFailure(
                    FailureKind.PROMOTION_PENDING, "Choose a promotion piece first"
                ),
            )

        if request.promotion is None and self._store.is_promotion(
            request.from_sq, request.to_sq
        ):
            self._pending = PendingPromotion(request.from_sq, request.to_sq)
            _LOGGER.debug("Promotion pending for %s", request)
            return MoveResult(MoveStatus.PENDING, self._store.current())

        return self._apply(request)

    def resolve_promotion(self, piece_type: PieceType) -> MoveResult | None:
        """Play the parked move with *piece_type*.

        Returns ``None`` when nothing is parked.  The parked move is
        discarded whatever the outcome.
        """
        pending = self._pending
        if pending is None:
            return None
        self._pending = None
        return self._apply(pending.with_piece(piece_type))

    def cancel_promotion(self) -> bool:
        """Drop the parked move.  Returns whether there was one."""
        had_pending = self._pending is not None
        self._pending = None
        return had_pending

    def reset(self) -> None:
        self._pending = None

    def _apply(self, request: MoveRequest) -> MoveResult:
        failure = self._store.apply_move(request)
        fen = self._store.current()
        if failure is not None:
            _LOGGER.debug("Rejected %s: %s", request, failure.message)
            return MoveResult.rejected(fen, failure)
        return MoveResult(MoveStatus.APPLIED, fen)
