"""Compound move representation.

A move is an ordered, non-empty tuple of actions. A plain step is
``(Go(dest),)``; en passant is ``(Go(diagonal), Take(passed))``; a promotion
appends ``Promotion(kind)`` after the ``Go`` that reaches the last rank.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from choss.core.enums import PieceType
from choss.core.types import Pos, square_name


@dataclass(frozen=True, slots=True)
class Go:
    """Relocate the moving piece to *to* (capturing whatever stands there)."""

    to: Pos

    def __str__(self) -> str:
        return f"go {square_name(self.to)}"


@dataclass(frozen=True, slots=True)
class Take:
    """Clear *at* without moving the mover."""

    at: Pos

    def __str__(self) -> str:
        return f"take {square_name(self.at)}"


@dataclass(frozen=True, slots=True)
class Promotion:
    """Replace the mover, on its current square, by a *piece_type*."""

    piece_type: PieceType

    def __str__(self) -> str:
        return f"promote {self.piece_type.name.lower()}"


Action: TypeAlias = Go | Take | Promotion
Move: TypeAlias = tuple[Action, ...]


def destination(origin: Pos, move: Move) -> Pos:
    """Square the mover ends on after all ``Go`` actions of *move*."""
    last = origin
    for action in move:
        if isinstance(action, Go):
            last = action.to
    return last


@dataclass(frozen=True, slots=True)
class Candidate:
    """A move together with the square of the piece performing it."""

    origin: Pos
    move: Move

    @property
    def target(self) -> Pos:
        return destination(self.origin, self.move)
