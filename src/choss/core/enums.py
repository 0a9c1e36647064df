"""Core enumerations for the Choss domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Choss piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class PawnMobility(IntEnum):
    """Leap eligibility of a pawn.

    Transitions only move forward: a pawn never gets its leap back.
    ``JUST_LEAPED`` lasts for one opponent ply and enables en passant.
    """

    CAN_LEAP = 0
    JUST_LEAPED = 1
    CANNOT_LEAP = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
