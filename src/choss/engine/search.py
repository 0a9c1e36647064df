"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from choss.core.board import Board
    from choss.core.enums import Color
    from choss.core.move import Move
    from choss.core.types import Pos


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single ranking request."""

    max_depth: int = 2

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {self.max_depth}")


@dataclass(slots=True, frozen=True)
class ScoredCandidate:
    """A root move with the score the engine gave it.

    Scores are in pawns from the mover's point of view; ``inf`` marks a move
    that leaves the opponent checkmated.
    """

    score: float
    origin: Pos
    move: Move


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def rank(
        self,
        board: Board,
        color: Color,
        limits: SearchLimits,
    ) -> list[ScoredCandidate]: ...
