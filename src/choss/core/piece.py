"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from choss.core.enums import Color, PawnMobility, PieceType
from choss.core.types import Pos

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a Choss piece.

    ``orientation`` and ``mobility`` only carry meaning for pawns and are
    ``None`` for every other kind.
    """

    color: Color
    piece_type: PieceType
    orientation: Pos | None = None
    mobility: PawnMobility | None = None

    @classmethod
    def pawn(
        cls,
        color: Color,
        orientation: Pos,
        mobility: PawnMobility = PawnMobility.CAN_LEAP,
    ) -> Piece:
        return cls(color, PieceType.PAWN, orientation, mobility)

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    # ── State transitions ────────────────────────────────────────────────

    def begin_turn(self) -> Piece:
        """State at the start of the owner's ply: en passant eligibility expires."""
        if self.is_pawn and self.mobility == PawnMobility.JUST_LEAPED:
            return replace(self, mobility=PawnMobility.CANNOT_LEAP)
        return self

    def moved(self, start: Pos, target: Pos) -> Piece:
        """State after relocating from *start* to *target*."""
        if not self.is_pawn:
            return self
        assert self.orientation is not None
        if start + self.orientation * 2 == target:
            return replace(self, mobility=PawnMobility.JUST_LEAPED)
        return replace(self, mobility=PawnMobility.CANNOT_LEAP)

    def promoted(self, piece_type: PieceType) -> Piece:
        """Same color, new kind; pawn-only state is dropped."""
        return Piece(self.color, piece_type)

    def with_color(self, color: Color) -> Piece:
        return replace(self, color=color)
