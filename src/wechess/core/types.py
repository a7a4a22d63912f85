"""Square type alias and coordinate helpers.

Squares cross the core boundary as algebraic names (``"e4"``).  Internally
they are converted to python-chess square indices (a1=0 … h8=63).
"""

from __future__ import annotations

from typing import TypeAlias

import chess

Square: TypeAlias = str  # "a1" … "h8"

SQUARE_NAMES: tuple[Square, ...] = tuple(chess.SQUARE_NAMES)


def is_square_name(name: object) -> bool:
    """Whether *name* is a valid algebraic square name."""
    return isinstance(name, str) and name in chess.SQUARE_NAMES


def parse_square(name: Square) -> chess.Square:
    """Parse square name, e.g. 'e4' → 28."""
    if not is_square_name(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return chess.parse_square(name)


def square_name(sq: chess.Square) -> Square:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chess.square_name(sq)

