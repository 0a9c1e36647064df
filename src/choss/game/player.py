"""Concrete players: a passive human seat and an engine-backed seat."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from choss.core.enums import Color
from choss.game.interfaces import IPlayer

if TYPE_CHECKING:
    from choss.core.board import Board
    from choss.core.move import Move
    from choss.core.types import Pos
    from choss.engine.search import ScoredCandidate

_LOGGER = logging.getLogger(__name__)

# Same argument list as ``EngineWorker.request_move``.
SearchRequest = Callable[["Board", Color, int], None]
MoveSink = Callable[["Pos", "Move"], bool]


class HumanPlayer(IPlayer):
    """Seat whose moves are submitted by the UI as the user picks them."""

    __slots__ = ()

    def __init__(self, color: Color, name: str = "") -> None:
        super().__init__(color, name or f"Player ({color})")

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        del board


class AIPlayer(IPlayer):
    """Seat driven by an engine search.

    Each :meth:`request_move` opens a new request id and forwards
    ``(board, color, request_id)`` to *on_request_move*, which is the
    signature of ``EngineWorker.request_move``. The worker's
    ``ranked_moves_ready`` signal connects straight to
    :meth:`receive_ranked`; the best candidate of the pending request is
    handed to *on_move* (usually ``GameController.submit_move``). Replies
    to a superseded or cancelled request are dropped.

    Args:
        color: Side the engine plays.
        name: Display name.
        on_request_move: Starts a search for ``(board, color, request_id)``.
        on_cancel: Aborts the running search.
        on_move: Receives ``(origin, move)`` of the chosen move.
    """

    __slots__ = (
        "_on_request_move",
        "_on_cancel",
        "_on_move",
        "_last_request_id",
        "_pending_id",
        "__weakref__",
    )

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        on_request_move: SearchRequest | None = None,
        on_cancel: Callable[[], None] | None = None,
        on_move: MoveSink | None = None,
    ) -> None:
        super().__init__(color, name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel
        self._on_move = on_move
        self._last_request_id = 0
        self._pending_id: int | None = None

    @property
    def is_human(self) -> bool:
        return False

    @property
    def pending_request(self) -> int | None:
        """Id of the request whose reply will be played, if any."""
        return self._pending_id

    def request_move(self, board: Board) -> None:
        self._last_request_id += 1
        self._pending_id = self._last_request_id
        _LOGGER.debug("%s: search request %d", self._name, self._pending_id)
        if self._on_request_move is not None:
            self._on_request_move(board, self._color, self._pending_id)

    def cancel(self) -> None:
        self._pending_id = None
        if self._on_cancel is not None:
            self._on_cancel()

    def receive_ranked(
        self, request_id: int, ranked: Sequence[ScoredCandidate]
    ) -> bool:
        """Play the best of *ranked* if it answers the pending request."""
        if request_id != self._pending_id:
            _LOGGER.debug("%s: dropping stale reply %d", self._name, request_id)
            return False
        self._pending_id = None
        if not ranked or self._on_move is None:
            return False
        best = ranked[0]
        return self._on_move(best.origin, best.move)

    def abandon(self, request_id: int, *_: object) -> None:
        """Close *request_id* after the worker gave up on it.

        Fits ``search_cancelled``, ``search_no_move`` and ``search_error``.
        """
        if request_id == self._pending_id:
            self._pending_id = None
