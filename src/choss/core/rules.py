"""High-level rules: checkmate, stalemate and game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from choss.core.enums import Color, GameResult

if TYPE_CHECKING:
    from choss.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Choss has no repetition or move-count draws: a game ends only when the
    side to move has no legal move.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return board.is_checked(color)

    @staticmethod
    def has_legal_moves(board: Board, color: Color) -> bool:
        return bool(board.moves(color, safe=True))

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not board.is_checked(color):
            return False
        return not Rules.has_legal_moves(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if board.is_checked(color):
            return False
        return not Rules.has_legal_moves(board, color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the result with *side_to_move* about to play."""
        if Rules.has_legal_moves(board, side_to_move):
            return GameResult.IN_PROGRESS
        if board.is_checked(side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
