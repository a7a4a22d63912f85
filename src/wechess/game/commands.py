"""Commands accepted by :meth:`GameSession.dispatch`.

Every external stimulus, user gesture or clock tick, is one of these
immutable values, so a game can be replayed from a plain list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from wechess.core.enums import PieceType
from wechess.core.types import Square


@dataclass(frozen=True, slots=True)
class Drop:
    """A dragged piece was released; ``target`` is ``None`` off the board."""

    source: Square
    target: Square | None


@dataclass(frozen=True, slots=True)
class Click:
    square: Square


@dataclass(frozen=True, slots=True)
class DragBegin:
    square: Square


@dataclass(frozen=True, slots=True)
class ResolvePromotion:
    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class CancelPromotion:
    pass


@dataclass(frozen=True, slots=True)
class Reset:
    pass


@dataclass(frozen=True, slots=True)
class Tick:
    """One second of wall time has elapsed."""


@dataclass(frozen=True, slots=True)
class SetClockBudget:
    minutes: int


Command: TypeAlias = (
    Drop
    | Click
    | DragBegin
    | ResolvePromotion
    | CancelPromotion
    | Reset
    | Tick
    | SetClockBudget
)
