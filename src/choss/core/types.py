"""Board coordinates, direction tables and square naming.

Coordinates are ``(x, y)`` pairs: ``x`` is the file (``a`` = 0) and ``y`` the
raw row index, 0 being the top row where Black sets up.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, Literal, TypeAlias

_FILES = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True, slots=True)
class Pos:
    """Immutable integer vector used both as a square and as a direction."""

    x: int
    y: int

    def __add__(self, other: Pos) -> Pos:
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos) -> Pos:
        return Pos(self.x - other.x, self.y - other.y)

    def __mul__(self, k: int) -> Pos:
        return Pos(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __neg__(self) -> Pos:
        return Pos(-self.x, -self.y)

    def neighbors(self) -> tuple[Pos, Pos]:
        """The two diagonals adjacent to an orthogonal or diagonal direction.

        For a pawn orientation these are its two capture directions.
        """
        if self.x == 0:
            return (Pos(1, self.y), Pos(-1, self.y))
        if self.y == 0:
            return (Pos(self.x, 1), Pos(self.x, -1))
        return (Pos(self.x, 0), Pos(0, self.y))

    def __repr__(self) -> str:
        return f"Pos({self.x}, {self.y})"


# ── Direction tables ────────────────────────────────────────────────────────

LINES: tuple[Pos, ...] = (Pos(0, 1), Pos(0, -1), Pos(1, 0), Pos(-1, 0))
DIAGS: tuple[Pos, ...] = (Pos(1, 1), Pos(1, -1), Pos(-1, 1), Pos(-1, -1))
LOS: tuple[Pos, ...] = LINES + DIAGS

UP = Pos(0, -1)
DOWN = Pos(0, 1)


def square_name(pos: Pos) -> str:
    """Human-readable name, e.g. ``Pos(4, 6)`` → ``'e6'``.

    The rank is the raw ``y`` index, not a 1-based chess rank.
    """
    return f"{_FILES[pos.x]}{pos.y}"


def parse_square(name: str) -> Pos:
    """Parse a square name, e.g. ``'e6'`` → ``Pos(4, 6)``."""
    if len(name) < 2 or name[0] not in _FILES or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    return Pos(_FILES.index(name[0]), int(name[1:]))


class _OffBoard(Enum):
    OFF_BOARD = auto()

    def __repr__(self) -> str:
        return "OFF_BOARD"


# Returned by ``Board.get`` for coordinates outside the grid, so that an
# empty square (``None``) and "no square at all" stay distinguishable.
OFF_BOARD: Final = _OffBoard.OFF_BOARD
OffBoard: TypeAlias = Literal[_OffBoard.OFF_BOARD]
