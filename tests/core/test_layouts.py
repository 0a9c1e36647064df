"""Tests for starting layouts and color inversion."""

import pytest

from choss.core.enums import Color, PawnMobility, PieceType
from choss.core.layouts import (
    HALVED_BACK_RANK,
    STANDARD_BACK_RANK,
    from_back_rank,
    halved_board,
    invert_colors,
    standard_board,
)
from choss.core.piece import Piece
from choss.core.types import DOWN, UP, Pos


class TestStandardBoard:
    def test_back_ranks_share_file_order(self) -> None:
        board = standard_board()
        for x, piece_type in enumerate(STANDARD_BACK_RANK):
            assert board.get(Pos(x, 0)) == Piece(Color.BLACK, piece_type)
            assert board.get(Pos(x, 7)) == Piece(Color.WHITE, piece_type)

    def test_pawn_rows(self) -> None:
        board = standard_board()
        for x in range(8):
            black = board.get(Pos(x, 1))
            white = board.get(Pos(x, 6))
            assert black == Piece.pawn(Color.BLACK, DOWN)
            assert white == Piece.pawn(Color.WHITE, UP)
            assert white.mobility == PawnMobility.CAN_LEAP

    def test_middle_is_empty(self) -> None:
        board = standard_board()
        assert all(board.get(Pos(x, y)) is None for x in range(8) for y in range(2, 6))


class TestHalvedBoard:
    def test_dimensions(self) -> None:
        board = halved_board()
        assert (board.width, board.height) == (5, 8)

    def test_back_rank(self) -> None:
        board = halved_board()
        assert HALVED_BACK_RANK == (
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.KING,
            PieceType.QUEEN,
        )
        assert board.king_pos(Color.BLACK) == Pos(3, 0)
        assert board.king_pos(Color.WHITE) == Pos(3, 7)


class TestFromBackRank:
    def test_custom_height(self) -> None:
        board = from_back_rank((PieceType.KING, PieceType.ROOK), height=4)
        assert (board.width, board.height) == (2, 4)
        assert board.get(Pos(1, 3)) == Piece(Color.WHITE, PieceType.ROOK)

    def test_empty_back_rank(self) -> None:
        with pytest.raises(ValueError, match="at least one piece"):
            from_back_rank(())

    def test_too_short(self) -> None:
        with pytest.raises(ValueError, match="at least 4"):
            from_back_rank(STANDARD_BACK_RANK, height=3)


class TestInvertColors:
    def test_swaps_colors_keeps_orientation(self) -> None:
        inverted = invert_colors(halved_board())
        assert inverted.get(Pos(0, 0)) == Piece(Color.WHITE, PieceType.ROOK)
        assert inverted.get(Pos(2, 1)) == Piece.pawn(Color.WHITE, DOWN)
        assert inverted.get(Pos(2, 6)) == Piece.pawn(Color.BLACK, UP)
        assert inverted.king_pos(Color.BLACK) == Pos(3, 7)

    def test_involution(self) -> None:
        board = standard_board()
        assert invert_colors(invert_colors(board)) == board

    def test_does_not_mutate(self) -> None:
        board = halved_board()
        invert_colors(board)
        assert board == halved_board()

    def test_same_move_count(self) -> None:
        board = halved_board()
        inverted = invert_colors(board)
        assert len(board.moves(Color.WHITE)) == len(inverted.moves(Color.BLACK))
