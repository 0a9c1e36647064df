"""Text notation for moves.

A move is written as origin and destination square names for each ``Go``
action, followed by ``=<letter>`` for a promotion: ``e6e4``, ``d6c5``,
``b1b0=Q``. Ranks are the raw row indices of the board (see
:func:`choss.core.types.square_name`). ``Take`` actions are implied by the
destination and produce no text.
"""

from __future__ import annotations

from collections.abc import Iterable

from choss.core.enums import PieceType
from choss.core.move import Go, Move, Promotion
from choss.core.types import Pos, square_name

_PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def piece_letter(piece_type: PieceType) -> str:
    return _PIECE_LETTERS[piece_type]


def move_to_text(origin: Pos, move: Move) -> str:
    """Serialise *move* of the piece standing on *origin*."""
    parts: list[str] = []
    for action in move:
        if isinstance(action, Go):
            parts.append(square_name(origin) + square_name(action.to))
        elif isinstance(action, Promotion):
            parts.append(f"={piece_letter(action.piece_type)}")
    return "".join(parts)


def movetext(texts: Iterable[str]) -> str:
    """Join a move log into a single space-separated line."""
    return " ".join(texts)
