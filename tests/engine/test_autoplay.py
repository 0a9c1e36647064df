"""Tests for engine self-play."""

import random

import pytest

from choss.core.board import Board
from choss.core.enums import Color, PieceType
from choss.core.layouts import halved_board, invert_colors
from choss.core.piece import Piece
from choss.core.types import Pos
from choss.engine.autoplay import auto_play
from choss.engine.python_search import RandomEngine


class TestAutoPlay:
    def test_color_inversion_gives_same_game(self) -> None:
        plain = auto_play(halved_board(), Color.WHITE, 1, max_turns=4)
        inverted = auto_play(invert_colors(halved_board()), Color.BLACK, 1, max_turns=4)
        assert plain == inverted
        assert len(plain.split()) == 4

    @pytest.mark.slow
    def test_color_inversion_over_whole_game(self) -> None:
        plain = auto_play(halved_board(), Color.WHITE, 1)
        inverted = auto_play(invert_colors(halved_board()), Color.BLACK, 1)
        assert plain == inverted
        assert plain

    def test_stops_at_max_turns(self) -> None:
        log = auto_play(
            halved_board(),
            Color.WHITE,
            1,
            max_turns=6,
            engine=RandomEngine(random.Random(11)),
        )
        assert 0 < len(log.split()) <= 6

    def test_no_move_gives_empty_log(self) -> None:
        board = Board(5, 8)
        board.set(Pos(0, 0), Piece(Color.BLACK, PieceType.KING))
        board.set(Pos(2, 2), Piece(Color.WHITE, PieceType.KING))
        board.set(Pos(1, 1), Piece(Color.WHITE, PieceType.QUEEN))
        assert auto_play(board, Color.BLACK, 1) == ""

    def test_mate_ends_game(self) -> None:
        board = Board(5, 8)
        board.set(Pos(0, 0), Piece(Color.BLACK, PieceType.KING))
        board.set(Pos(2, 2), Piece(Color.WHITE, PieceType.KING))
        board.set(Pos(1, 4), Piece(Color.WHITE, PieceType.QUEEN))
        log = auto_play(board, Color.WHITE, 1, max_turns=10)
        assert len(log.split()) == 1
