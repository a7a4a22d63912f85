"""Move failure classification.

Failures are plain data: they are returned to the caller and rendered as a
single status-line message, never raised past the handler that produced
them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class FailureKind(IntEnum):
    """Why a move request was not applied."""

    NO_PIECE_AT_SOURCE = auto()
    WRONG_TURN = auto()
    OWN_PIECE_AT_DESTINATION = auto()
    ILLEGAL_DESTINATION = auto()
    MALFORMED_REQUEST = auto()
    PROMOTION_PENDING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class MoveFailure:
    """A classified rejection with its user-facing message."""

    kind: FailureKind
    message: str

    def __str__(self) -> str:
        return self.message
