"""View derivation — captured pieces, status text and square highlights.

Everything here is recomputed from scratch from the current position
(and the current selection) whenever either changes.  A full 64-square
rescan is cheap and leaves nothing to drift out of sync.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from wechess.core.enums import Color, PieceType
from wechess.core.position import PositionStore
from wechess.core.types import Square

# Material value of each piece type, king excluded
PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


def _starting_counts() -> Counter[tuple[Color, PieceType]]:
    # Insertion order follows the a1→h8 scan of the initial position.
    counts: Counter[tuple[Color, PieceType]] = Counter()
    for _sq, piece in PositionStore().pieces():
        counts[(piece.color, piece.piece_type)] += 1
    return counts


_STARTING_COUNTS = _starting_counts()


@dataclass(frozen=True, slots=True)
class CapturedPieces:
    """Pieces taken so far, keyed by the *capturing* side.

    ``white`` lists black pieces captured by White and vice versa.
    """

    white: tuple[PieceType, ...] = ()
    black: tuple[PieceType, ...] = ()

    def __len__(self) -> int:
        return len(self.white) + len(self.black)


@dataclass(frozen=True, slots=True)
class GameStatus:
    status_text: str
    turn_color: Color
    in_check: bool
    is_game_over: bool
    winner: Color | None = field(default=None)


class HighlightTag(str, Enum):
    SELECTED = "selected"
    LEGAL_DESTINATION = "legal-destination"


HighlightMap = Mapping[Square, HighlightTag]


def derive_captured_pieces(store: PositionStore) -> CapturedPieces:
    """Diff the board against the starting material of 16 pieces per side."""
    on_board: Counter[tuple[Color, PieceType]] = Counter(
        (piece.color, piece.piece_type) for _sq, piece in store.pieces()
    )

    # Pieces beyond the starting count came from promotions; each one
    # accounts for a pawn that left the board without being captured.
    promoted: Counter[Color] = Counter()
    for (color, piece_type), start in _STARTING_COUNTS.items():
        if piece_type != PieceType.PAWN:
            promoted[color] += max(0, on_board[(color, piece_type)] - start)

    captured: dict[Color, list[PieceType]] = {Color.WHITE: [], Color.BLACK: []}
    for (color, piece_type), start in _STARTING_COUNTS.items():
        missing = start - on_board[(color, piece_type)]
        if piece_type == PieceType.PAWN:
            missing -= promoted[color]
        # A missing white piece was taken by Black, and vice versa.
        captured[color.opposite].extend([piece_type] * max(0, missing))

    return CapturedPieces(
        white=tuple(captured[Color.WHITE]),
        black=tuple(captured[Color.BLACK]),
    )


def derive_status(store: PositionStore, flagged: Color | None = None) -> GameStatus:
    """Status line for the current position.

    *flagged* is the side whose clock ran out, if any; that ends the game
    unless checkmate or a draw already did.
    """
    turn = store.turn_to_move()
    in_check = store.is_in_check()
    winner: Color | None = None

    if store.is_checkmate():
        winner = turn.opposite
        text = f"Checkmate! {winner.display} wins"
    elif store.is_draw():
        text = "Draw"
    elif store.is_game_over():
        text = "Game over"
    elif flagged is not None:
        winner = flagged.opposite
        text = f"{winner.display} wins on time"
    elif in_check:
        text = f"{turn.display} is in check"
    else:
        text = f"{turn.display} to move"

    is_game_over = store.is_game_over() or flagged is not None
    return GameStatus(
        status_text=text,
        turn_color=turn,
        in_check=in_check,
        is_game_over=is_game_over,
        winner=winner,
    )


def derive_highlights(
    store: PositionStore, selected: Square | None
) -> dict[Square, HighlightTag]:
    if selected is None:
        return {}
    highlights = {
        sq: HighlightTag.LEGAL_DESTINATION for sq in store.legal_destinations(selected)
    }
    highlights[selected] = HighlightTag.SELECTED
    return highlights


def captured_points(pieces: Iterable[PieceType]) -> int:
    """Total material value of a captured-pieces list."""
    return sum(PIECE_VALUES[p] for p in pieces)


def format_clock(seconds: int) -> str:
    """Format remaining seconds as ``M:SS``."""
    s = max(0, int(seconds))
    return f"{s // 60}:{s % 60:02d}"
