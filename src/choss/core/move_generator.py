"""Pseudo-legal move generation, one generator pair per piece kind.

``generate_moves`` yields every destination a piece can reach (capturing or
not); ``generate_takes`` yields capturing moves only and is what check
detection and quiescence search run on. Neither looks at the mover's own king
safety: see :meth:`Board.filter_safe_moves` for that.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from choss.core.enums import Color, PawnMobility, PieceType
from choss.core.move import Go, Move, Promotion, Take, destination
from choss.core.types import DIAGS, LINES, LOS, OFF_BOARD, Pos

if TYPE_CHECKING:
    from choss.core.board import Board
    from choss.core.piece import Piece


KNIGHT_OFFSETS: tuple[Pos, ...] = (
    Pos(-2, -1),
    Pos(-1, -2),
    Pos(-2, 1),
    Pos(1, -2),
    Pos(2, -1),
    Pos(-1, 2),
    Pos(2, 1),
    Pos(1, 2),
)

PROMOTION_TYPES: tuple[PieceType, ...] = (PieceType.QUEEN, PieceType.KNIGHT)


# -- Public API -------------------------------------------------------------


def generate_moves(board: Board, pos: Pos, piece: Piece) -> list[Move]:
    """All pseudo-legal moves of *piece* standing on *pos*."""
    match piece.piece_type:
        case PieceType.PAWN:
            return _pawn_moves(board, pos, piece)
        case PieceType.KNIGHT:
            return _step_moves(board, pos, piece.color, KNIGHT_OFFSETS)
        case PieceType.BISHOP:
            return _slide_moves(board, pos, piece.color, DIAGS)
        case PieceType.ROOK:
            return _slide_moves(board, pos, piece.color, LINES)
        case PieceType.QUEEN:
            return _slide_moves(board, pos, piece.color, LOS)
        case PieceType.KING:
            # No castling: pieces are placed by the players before the game.
            return _step_moves(board, pos, piece.color, LOS)


def generate_takes(board: Board, pos: Pos, piece: Piece) -> list[Move]:
    """Pseudo-legal capturing moves of *piece* standing on *pos*."""
    match piece.piece_type:
        case PieceType.PAWN:
            return _pawn_takes(board, pos, piece)
        case PieceType.KNIGHT:
            return _step_takes(board, pos, piece.color, KNIGHT_OFFSETS)
        case PieceType.BISHOP:
            return _slide_takes(board, pos, piece.color, DIAGS)
        case PieceType.ROOK:
            return _slide_takes(board, pos, piece.color, LINES)
        case PieceType.QUEEN:
            return _slide_takes(board, pos, piece.color, LOS)
        case PieceType.KING:
            return _step_takes(board, pos, piece.color, LOS)


# -- Pawns ------------------------------------------------------------------


def _with_promotions(
    board: Board, pos: Pos, orientation: Pos, moves: list[Move]
) -> list[Move]:
    """Split every move ending on the last rank into Queen / Knight variants."""
    result: list[Move] = []
    for move in moves:
        last = destination(pos, move)
        if board.get(last + orientation) is OFF_BOARD:
            for piece_type in PROMOTION_TYPES:
                result.append(move + (Promotion(piece_type),))
        else:
            result.append(move)
    return result


def _pawn_takes(board: Board, pos: Pos, piece: Piece) -> list[Move]:
    orientation = piece.orientation
    assert orientation is not None
    moves: list[Move] = []

    for diag_dir in orientation.neighbors():
        diag_pos = pos + diag_dir
        target = board.get(diag_pos)
        if target is OFF_BOARD:
            continue
        if target is not None:
            if target.color != piece.color:
                moves.append((Go(diag_pos),))
            continue

        # Empty diagonal: en passant on a pawn that leaped past it.
        passed_pos = diag_pos - orientation
        passed = board.get(passed_pos)
        if (
            passed is not OFF_BOARD
            and passed is not None
            and passed.color != piece.color
            and passed.is_pawn
            and passed.mobility == PawnMobility.JUST_LEAPED
        ):
            moves.append((Go(diag_pos), Take(passed_pos)))

    return _with_promotions(board, pos, orientation, moves)


def _pawn_moves(board: Board, pos: Pos, piece: Piece) -> list[Move]:
    orientation = piece.orientation
    assert orientation is not None
    moves: list[Move] = []

    forward_pos = pos + orientation
    if board.get(forward_pos) is None:
        moves.append((Go(forward_pos),))
        if piece.mobility == PawnMobility.CAN_LEAP:
            leap_pos = pos + orientation * 2
            if board.get(leap_pos) is None:
                moves.append((Go(leap_pos),))

    moves = _with_promotions(board, pos, orientation, moves)
    moves.extend(_pawn_takes(board, pos, piece))
    return moves


# -- Knights and kings ------------------------------------------------------


def _step_moves(
    board: Board, pos: Pos, color: Color, offsets: tuple[Pos, ...]
) -> list[Move]:
    moves: list[Move] = []
    for offset in offsets:
        to_pos = pos + offset
        target = board.get(to_pos)
        if target is OFF_BOARD:
            continue
        if target is None or target.color != color:
            moves.append((Go(to_pos),))
    return moves


def _step_takes(
    board: Board, pos: Pos, color: Color, offsets: tuple[Pos, ...]
) -> list[Move]:
    moves: list[Move] = []
    for offset in offsets:
        to_pos = pos + offset
        target = board.get(to_pos)
        if target is OFF_BOARD or target is None:
            continue
        if target.color != color:
            moves.append((Go(to_pos),))
    return moves


# -- Sliding pieces ---------------------------------------------------------


def _slide_moves(
    board: Board, pos: Pos, color: Color, directions: tuple[Pos, ...]
) -> list[Move]:
    moves: list[Move] = []
    for direction in directions:
        to_pos = pos + direction
        while True:
            target = board.get(to_pos)
            if target is OFF_BOARD:
                break
            if target is None:
                moves.append((Go(to_pos),))
                to_pos = to_pos + direction
                continue
            if target.color != color:
                moves.append((Go(to_pos),))
            break
    return moves


def _slide_takes(
    board: Board, pos: Pos, color: Color, directions: tuple[Pos, ...]
) -> list[Move]:
    moves: list[Move] = []
    for direction in directions:
        to_pos = pos + direction
        while True:
            target = board.get(to_pos)
            if target is OFF_BOARD:
                break
            if target is None:
                to_pos = to_pos + direction
                continue
            if target.color != color:
                moves.append((Go(to_pos),))
            break
    return moves
