"""Pure-Python Choss search (negamax + alpha-beta + quiescence)."""

from __future__ import annotations

import logging
import math
import random

from choss.core.board import Board
from choss.core.enums import Color, PieceType
from choss.core.move import Candidate, Go, Move, Promotion, Take
from choss.core.notation import move_to_text
from choss.core.types import OFF_BOARD, Pos
from choss.engine.search import IEngine, ScoredCandidate, SearchLimits

_LOGGER = logging.getLogger(__name__)

# Plies below the nominal horizon after which quiescence stops exploring
# captures and settles for the static evaluation.
MAX_QUIESCENCE_DEPTH = -6

# Share of a capturing piece's value assumed lost to retaliation.
_RETALIATION_RATE = 0.9

# The mobility bonus never outweighs a pawn.
_MOBILITY_CAP = 1.0
_MOBILITY_DIVISOR = 100.0

PIECE_VALUES: dict[PieceType, float] = {
    PieceType.PAWN: 1.0,
    PieceType.KNIGHT: 3.0,
    PieceType.BISHOP: 3.5,
    PieceType.ROOK: 5.0,
    PieceType.QUEEN: 9.0,
    PieceType.KING: 1000.0,
}


def piece_value(piece_type: PieceType) -> float:
    return PIECE_VALUES[piece_type]


def material_score(board: Board) -> float:
    """Signed material balance: positive favours White."""
    score = 0.0
    for piece in board.squares:
        if piece is None:
            continue
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == Color.WHITE else -value
    return score


def move_value(board: Board, origin: Pos, move: Move) -> float:
    """Cheap material estimate of *move*, used to order the search.

    A move that wins material is assumed to lose the moving piece 90% of the
    time, so a pawn grabbing a knight ranks above a queen doing the same.
    """
    mover = board.get(origin)
    if mover is OFF_BOARD or mover is None:
        raise ValueError(f"No piece to evaluate on {origin!r}")

    value = 0.0
    for action in move:
        match action:
            case Go(to=square) | Take(at=square):
                target = board.get(square)
                if target is not OFF_BOARD and target is not None:
                    target_value = PIECE_VALUES[target.piece_type]
                    value += -target_value if target.color == mover.color else target_value
            case Promotion(piece_type=piece_type):
                value += PIECE_VALUES[piece_type]
    if value > 0:
        value -= PIECE_VALUES[mover.piece_type] * _RETALIATION_RATE
    return value


def _relative_score(board: Board, color: Color) -> float:
    score = material_score(board)
    return score if color == Color.WHITE else -score


def _order_moves(board: Board, candidates: list[Candidate]) -> list[Candidate]:
    return sorted(
        candidates,
        key=lambda c: move_value(board, c.origin, c.move),
        reverse=True,
    )


class NegamaxEngine(IEngine):
    """Material searcher with a mobility-adjusted root ranking.

    Below the root, moves are pseudo-legal: a line that leaves a king en prise
    is refuted by the king's capture value rather than by legality filtering.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Positions visited by the last search."""
        return self._nodes

    def rank(
        self,
        board: Board,
        color: Color,
        limits: SearchLimits,
    ) -> list[ScoredCandidate]:
        """Every legal move of *color*, best first."""
        return self.negamax(board, color, limits.max_depth)

    def negamax(self, board: Board, color: Color, depth: int) -> list[ScoredCandidate]:
        if depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {depth}")

        self._nodes = 0
        opponent = color.opposite
        scored: list[ScoredCandidate] = []

        for candidate in _order_moves(board, board.moves(color, safe=True)):
            after = board.play(color, candidate.origin, candidate.move)
            score = -self.search_from(after, depth - 1, -math.inf, math.inf, opponent)

            own_count = len(after.moves(color, safe=True))
            opponent_count = len(after.moves(opponent, safe=True))
            if opponent_count == 0:
                # Checkmate wins outright, stalemate is worth nothing.
                score = math.inf if after.is_checked(opponent) else 0.0
            else:
                score += min(
                    own_count / _MOBILITY_DIVISOR - opponent_count / _MOBILITY_DIVISOR,
                    _MOBILITY_CAP,
                )
            scored.append(ScoredCandidate(score, candidate.origin, candidate.move))

        scored.sort(key=lambda c: c.score, reverse=True)

        if scored:
            best = scored[0]
            _LOGGER.debug(
                "%s depth %d: %d moves, %d nodes, best %s (%.2f)",
                color,
                depth,
                len(scored),
                self._nodes,
                move_to_text(best.origin, best.move),
                best.score,
            )
        else:
            _LOGGER.debug("%s depth %d: no legal move", color, depth)
        return scored

    def search_from(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        color: Color,
    ) -> float:
        """Score of *board* for *color* to move, from *color*'s point of view."""
        self._nodes += 1

        if depth <= MAX_QUIESCENCE_DEPTH:
            return _relative_score(board, color)

        quiescent = depth <= 0
        if quiescent:
            candidates = board.takes(color, safe=False)
        else:
            candidates = board.moves(color, safe=False)

        opponent = color.opposite
        best_score = -math.inf
        for candidate in _order_moves(board, candidates):
            after = board.play(color, candidate.origin, candidate.move)
            score = -self.search_from(after, depth - 1, -beta, -alpha, opponent)
            best_score = max(best_score, score)
            alpha = max(alpha, best_score)
            if alpha >= beta:
                return alpha

        if quiescent:
            # Captures are optional: standing pat keeps the current material.
            return max(best_score, _relative_score(board, color))
        return best_score


class RandomEngine(IEngine):
    """Plays any legal move: all candidates scored 0, in random order."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def rank(
        self,
        board: Board,
        color: Color,
        limits: SearchLimits,
    ) -> list[ScoredCandidate]:
        del limits
        candidates = [
            ScoredCandidate(0.0, c.origin, c.move)
            for c in board.moves(color, safe=True)
        ]
        self._rng.shuffle(candidates)
        return candidates


def negamax(board: Board, color: Color, depth: int) -> list[ScoredCandidate]:
    """Rank every legal move of *color* on *board*, best first.

    Empty if and only if *color* has no legal move.
    """
    return NegamaxEngine().negamax(board, color, depth)


def random_move(
    board: Board,
    color: Color,
    rng: random.Random | None = None,
) -> list[ScoredCandidate]:
    """Legal moves of *color* in shuffled order, all scored 0."""
    return RandomEngine(rng).rank(board, color, SearchLimits())
