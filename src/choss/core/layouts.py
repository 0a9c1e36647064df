"""Initial board layouts."""

from __future__ import annotations

from collections.abc import Sequence

from choss.core.board import Board
from choss.core.enums import Color, PieceType
from choss.core.piece import Piece
from choss.core.types import DOWN, UP, Pos

STANDARD_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

HALVED_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.QUEEN,
)


def from_back_rank(back_rank: Sequence[PieceType], height: int = 8) -> Board:
    """Board as wide as *back_rank*, with both armies set up on it.

    Black holds the top two rows and its pawns march down; White holds the
    bottom two rows, in the same file order, and its pawns march up. Every
    pawn starts able to leap.
    """
    if not back_rank:
        raise ValueError("Back rank must contain at least one piece")
    if height < 4:
        raise ValueError(f"Board height must be at least 4, got {height}")

    width = len(back_rank)
    board = Board(width, height)
    for x, piece_type in enumerate(back_rank):
        board.set(Pos(x, 0), Piece(Color.BLACK, piece_type))
        board.set(Pos(x, 1), Piece.pawn(Color.BLACK, DOWN))
        board.set(Pos(x, height - 2), Piece.pawn(Color.WHITE, UP))
        board.set(Pos(x, height - 1), Piece(Color.WHITE, piece_type))
    return board


def standard_board() -> Board:
    """Classic 8x8 setup."""
    return from_back_rank(STANDARD_BACK_RANK)


def halved_board() -> Board:
    """Narrow 5x8 setup: rook, knight, bishop, king, queen."""
    return from_back_rank(HALVED_BACK_RANK)


def invert_colors(board: Board) -> Board:
    """Copy of *board* with every piece handed to the other side.

    Positions and pawn orientations are kept, so the two armies swap which
    edge they start from.
    """
    return Board(
        board.width,
        board.height,
        (
            None if piece is None else piece.with_color(piece.color.opposite)
            for piece in board.squares
        ),
    )
