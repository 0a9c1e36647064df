"""Board - piece placement on a rectangular grid, and move application."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from choss.core.enums import Color, PieceType
from choss.core.move import Candidate, Go, Move, Promotion, Take
from choss.core.move_generator import generate_moves, generate_takes
from choss.core.piece import Piece
from choss.core.types import OFF_BOARD, OffBoard, Pos

Square = Piece | None


class Board:
    """Rectangular grid of squares indexed by ``x + y * width``.

    A board handed out by :meth:`play` is never mutated again: every move
    produces a fresh copy, so search branches cannot observe one another.
    """

    __slots__ = ("width", "height", "_squares")

    def __init__(
        self,
        width: int,
        height: int,
        squares: Iterable[Square] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        if squares is None:
            self._squares: list[Square] = [None] * (width * height)
        else:
            self._squares = list(squares)
            if len(self._squares) != width * height:
                raise ValueError(
                    f"Expected {width * height} squares, got {len(self._squares)}"
                )

    # -- Coordinates --------------------------------------------------------

    def in_bound(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def index(self, pos: Pos) -> int:
        return pos.x + pos.y * self.width

    def pos(self, index: int) -> Pos:
        return Pos(index % self.width, index // self.width)

    # -- Element access -----------------------------------------------------

    def get(self, pos: Pos) -> Square | OffBoard:
        """Square content at *pos*, or ``OFF_BOARD`` outside the grid."""
        if not self.in_bound(pos):
            return OFF_BOARD
        return self._squares[self.index(pos)]

    def set(self, pos: Pos, square: Square) -> None:
        self._squares[self.index(pos)] = square

    @property
    def squares(self) -> tuple[Square, ...]:
        return tuple(self._squares)

    def pieces(self, color: Color) -> Iterator[tuple[Pos, Piece]]:
        """``(pos, piece)`` for every piece of *color*, in index order."""
        for i, piece in enumerate(self._squares):
            if piece is not None and piece.color == color:
                yield self.pos(i), piece

    def king_pos(self, color: Color) -> Pos:
        """Square of *color*'s king."""
        for pos, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return pos
        raise ValueError(f"No {color.name} king on board")

    # -- King safety --------------------------------------------------------

    def is_checked(self, color: Color) -> bool:
        """Could the opponent capture *color*'s king right now?"""
        king_pos = self.king_pos(color)
        for candidate in self.takes(color.opposite, safe=False):
            for action in candidate.move:
                if isinstance(action, Go) and action.to == king_pos:
                    return True
                if isinstance(action, Take) and action.at == king_pos:
                    return True
        return False

    def filter_safe_moves(
        self, color: Color, origin: Pos, moves: Iterable[Move]
    ) -> list[Move]:
        """Keep the moves after which *color*'s own king is not in check."""
        return [
            move
            for move in moves
            if not self.play(color, origin, move).is_checked(color)
        ]

    # -- Move enumeration ---------------------------------------------------

    def takes(self, color: Color, safe: bool = True) -> list[Candidate]:
        """Capturing moves of every *color* piece (legal ones if *safe*)."""
        result: list[Candidate] = []
        for pos, piece in self.pieces(color):
            moves = generate_takes(self, pos, piece)
            if safe:
                moves = self.filter_safe_moves(color, pos, moves)
            result.extend(Candidate(pos, move) for move in moves)
        return result

    def moves(self, color: Color, safe: bool = True) -> list[Candidate]:
        """All moves of every *color* piece (legal ones if *safe*)."""
        result: list[Candidate] = []
        for pos, piece in self.pieces(color):
            moves = generate_moves(self, pos, piece)
            if safe:
                moves = self.filter_safe_moves(color, pos, moves)
            result.extend(Candidate(pos, move) for move in moves)
        return result

    # -- Transitions --------------------------------------------------------

    def begin_turn(self, color: Color) -> None:
        """Expire en passant eligibility of *color*'s pawns."""
        for i, piece in enumerate(self._squares):
            if piece is not None and piece.color == color:
                self._squares[i] = piece.begin_turn()

    def moved(self, start: Pos, target: Pos) -> None:
        """Update the state of the piece that just went from *start* to *target*."""
        piece = self._squares[self.index(target)]
        if piece is not None:
            self.set(target, piece.moved(start, target))

    def play(self, color: Color, origin: Pos, move: Move) -> Board:
        """New board with *move* of the *color* piece on *origin* applied."""
        mover = self.get(origin)
        if mover is OFF_BOARD or mover is None or mover.color != color:
            raise ValueError(f"No {color.name} piece to move on {origin!r}")

        board = self.copy()
        board.begin_turn(color)
        last_pos = origin
        for action in move:
            match action:
                case Go(to=to_pos):
                    board.set(last_pos, None)
                    board.set(to_pos, mover)
                    board.moved(last_pos, to_pos)
                    last_pos = to_pos
                case Take(at=at_pos):
                    board.set(at_pos, None)
                case Promotion(piece_type=piece_type):
                    board.set(last_pos, mover.promoted(piece_type))
        return board

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b.width = self.width
        b.height = self.height
        b._squares = self._squares.copy()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._squares == other._squares
        )

    def __str__(self) -> str:
        rows: list[str] = []
        for y in range(self.height):
            row = self._squares[y * self.width : (y + 1) * self.width]
            rows.append(" ".join(p.symbol if p else "·" for p in row))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height})\n{self}"
