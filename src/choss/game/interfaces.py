"""Abstract interfaces for the game layer.

``GameController`` only talks to players through :class:`IPlayer`; where
their moves come from (mouse clicks, an engine worker) is the player's
business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from choss.core.enums import Color

if TYPE_CHECKING:
    from choss.core.board import Board


class GamePhase(IntEnum):
    """Where the controller stands between two plies."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()  # a human has the move
    THINKING = auto()  # an engine request is outstanding
    GAME_OVER = auto()


class IPlayer(ABC):
    """One side of a Choss game.

    Holds the side's color and display name. Subclasses decide how a move
    is produced once :meth:`request_move` hands them the board; the move
    itself always reaches the game through ``GameController.submit_move``.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str) -> None:
        self._color = color
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """It is this player's turn on *board*."""

    def cancel(self) -> None:
        """Forget the outstanding request, if any."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color}, {self._name!r})"
