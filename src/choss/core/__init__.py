"""Core domain layer — pure Choss rules with zero external dependencies.

Quick start::

    from choss.core import Color, standard_board, move_to_text

    board = standard_board()
    for candidate in board.moves(Color.WHITE, safe=True):
        print(move_to_text(candidate.origin, candidate.move))
"""

from choss.core.board import Board, Square
from choss.core.enums import Color, GameResult, PawnMobility, PieceType
from choss.core.layouts import (
    from_back_rank,
    halved_board,
    invert_colors,
    standard_board,
)
from choss.core.move import Action, Candidate, Go, Move, Promotion, Take, destination
from choss.core.move_generator import generate_moves, generate_takes
from choss.core.notation import move_to_text, movetext, piece_letter
from choss.core.piece import Piece
from choss.core.rules import Rules
from choss.core.types import (
    DIAGS,
    LINES,
    LOS,
    OFF_BOARD,
    Pos,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PawnMobility",
    "PieceType",
    # Types / helpers
    "DIAGS",
    "LINES",
    "LOS",
    "OFF_BOARD",
    "Pos",
    "Square",
    "parse_square",
    "square_name",
    # Moves
    "Action",
    "Candidate",
    "Go",
    "Move",
    "Promotion",
    "Take",
    "destination",
    # Domain objects
    "Board",
    "Piece",
    "Rules",
    "generate_moves",
    "generate_takes",
    # Layouts
    "from_back_rank",
    "halved_board",
    "invert_colors",
    "standard_board",
    # Notation
    "move_to_text",
    "movetext",
    "piece_letter",
]
