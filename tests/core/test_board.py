"""Tests for Board: geometry, element access, king safety and play."""

import pytest

from choss.core.board import Board
from choss.core.enums import Color, PawnMobility, PieceType
from choss.core.layouts import standard_board
from choss.core.move import Go
from choss.core.piece import Piece
from choss.core.types import OFF_BOARD, UP, Pos


def _board(width: int, height: int, pieces: dict[Pos, Piece]) -> Board:
    board = Board(width, height)
    for pos, piece in pieces.items():
        board.set(pos, piece)
    return board


W = Color.WHITE
B = Color.BLACK


class TestGeometry:
    def test_dimensions(self) -> None:
        board = standard_board()
        assert board.width == 8
        assert board.height == 8
        assert len(board.squares) == 64

    def test_index_pos_roundtrip(self) -> None:
        board = Board(5, 8)
        for i in range(40):
            assert board.index(board.pos(i)) == i

    def test_index_layout(self) -> None:
        board = Board(5, 8)
        assert board.index(Pos(0, 0)) == 0
        assert board.index(Pos(4, 0)) == 4
        assert board.index(Pos(0, 1)) == 5
        assert board.pos(12) == Pos(2, 2)

    def test_in_bound(self) -> None:
        board = Board(5, 8)
        assert board.in_bound(Pos(0, 0))
        assert board.in_bound(Pos(4, 7))
        assert not board.in_bound(Pos(5, 0))
        assert not board.in_bound(Pos(0, 8))
        assert not board.in_bound(Pos(-1, 3))

    def test_wrong_square_count(self) -> None:
        with pytest.raises(ValueError, match="Expected 4 squares"):
            Board(2, 2, [None] * 5)


class TestElementAccess:
    def test_get_off_board(self) -> None:
        board = standard_board()
        assert board.get(Pos(-1, 0)) is OFF_BOARD
        assert board.get(Pos(8, 0)) is OFF_BOARD

    def test_get_empty(self) -> None:
        assert standard_board().get(Pos(3, 4)) is None

    def test_set_and_get(self) -> None:
        board = Board(3, 3)
        rook = Piece(W, PieceType.ROOK)
        board.set(Pos(1, 2), rook)
        assert board.get(Pos(1, 2)) == rook
        assert board.squares[7] == rook

    def test_pieces_in_index_order(self) -> None:
        board = standard_board()
        white = list(board.pieces(W))
        assert len(white) == 16
        assert white[0] == (Pos(0, 6), Piece.pawn(W, UP))
        assert white[-1] == (Pos(7, 7), Piece(W, PieceType.ROOK))

    def test_king_pos(self) -> None:
        board = standard_board()
        assert board.king_pos(B) == Pos(4, 0)
        assert board.king_pos(W) == Pos(4, 7)

    def test_missing_king(self) -> None:
        board = _board(3, 3, {Pos(0, 0): Piece(B, PieceType.KING)})
        with pytest.raises(ValueError, match="No WHITE king"):
            board.is_checked(W)


class TestKingSafety:
    def test_rook_gives_check(self) -> None:
        board = _board(
            5,
            5,
            {
                Pos(0, 4): Piece(W, PieceType.KING),
                Pos(0, 0): Piece(B, PieceType.ROOK),
                Pos(4, 0): Piece(B, PieceType.KING),
            },
        )
        assert board.is_checked(W)
        assert not board.is_checked(B)

    def test_blocked_rook_gives_no_check(self) -> None:
        board = _board(
            5,
            5,
            {
                Pos(0, 4): Piece(W, PieceType.KING),
                Pos(0, 2): Piece(W, PieceType.ROOK),
                Pos(0, 0): Piece(B, PieceType.ROOK),
                Pos(4, 0): Piece(B, PieceType.KING),
            },
        )
        assert not board.is_checked(W)

    def test_pinned_rook_stays_on_file(self) -> None:
        board = _board(
            5,
            5,
            {
                Pos(0, 4): Piece(W, PieceType.KING),
                Pos(0, 2): Piece(W, PieceType.ROOK),
                Pos(0, 0): Piece(B, PieceType.ROOK),
                Pos(4, 0): Piece(B, PieceType.KING),
            },
        )
        targets = {
            c.target for c in board.moves(W, safe=True) if c.origin == Pos(0, 2)
        }
        assert targets == {Pos(0, 3), Pos(0, 1), Pos(0, 0)}

        unsafe = [c for c in board.moves(W, safe=False) if c.origin == Pos(0, 2)]
        assert len(unsafe) == 7

    def test_starting_position_has_twenty_moves(self) -> None:
        board = standard_board()
        assert len(board.moves(W)) == 20
        assert len(board.moves(B)) == 20
        assert board.takes(W) == []


class TestPlay:
    def test_returns_new_board(self) -> None:
        board = standard_board()
        snapshot = board.copy()
        after = board.play(W, Pos(4, 6), (Go(Pos(4, 4)),))
        assert after is not board
        assert board == snapshot
        assert after.get(Pos(4, 6)) is None
        assert after.get(Pos(4, 4)) is not None

    def test_leap_then_expire(self) -> None:
        board = standard_board()
        board = board.play(W, Pos(4, 6), (Go(Pos(4, 4)),))
        pawn = board.get(Pos(4, 4))
        assert pawn.mobility == PawnMobility.JUST_LEAPED

        # The opponent's ply leaves the flag alone.
        board = board.play(B, Pos(0, 1), (Go(Pos(0, 2)),))
        assert board.get(Pos(4, 4)).mobility == PawnMobility.JUST_LEAPED

        # The owner's next ply clears it.
        board = board.play(W, Pos(0, 6), (Go(Pos(0, 5)),))
        assert board.get(Pos(4, 4)).mobility == PawnMobility.CANNOT_LEAP

    def test_single_step_loses_leap(self) -> None:
        board = standard_board().play(W, Pos(4, 6), (Go(Pos(4, 5)),))
        assert board.get(Pos(4, 5)).mobility == PawnMobility.CANNOT_LEAP

    def test_capture_replaces_piece(self) -> None:
        board = _board(
            3,
            3,
            {
                Pos(0, 0): Piece(W, PieceType.ROOK),
                Pos(0, 2): Piece(B, PieceType.KNIGHT),
            },
        )
        after = board.play(W, Pos(0, 0), (Go(Pos(0, 2)),))
        assert after.get(Pos(0, 2)) == Piece(W, PieceType.ROOK)
        assert list(after.pieces(B)) == []

    def test_empty_origin(self) -> None:
        with pytest.raises(ValueError, match="No WHITE piece"):
            standard_board().play(W, Pos(3, 4), (Go(Pos(3, 3)),))

    def test_wrong_color(self) -> None:
        with pytest.raises(ValueError, match="No BLACK piece"):
            standard_board().play(B, Pos(4, 6), (Go(Pos(4, 5)),))

    def test_off_board_origin(self) -> None:
        with pytest.raises(ValueError):
            standard_board().play(W, Pos(9, 9), (Go(Pos(4, 5)),))


class TestCopyAndDisplay:
    def test_copy_is_independent(self) -> None:
        board = standard_board()
        clone = board.copy()
        clone.set(Pos(0, 0), None)
        assert board.get(Pos(0, 0)) is not None
        assert board != clone

    def test_equality(self) -> None:
        assert standard_board() == standard_board()
        assert Board(3, 3) != Board(3, 4)

    def test_str(self) -> None:
        text = str(standard_board())
        lines = text.splitlines()
        assert len(lines) == 8
        assert lines[0].split() == list("♜♞♝♛♚♝♞♜")
        assert lines[3] == " ".join("·" * 8)
        assert "♔" in lines[7]
