"""Qt bridge to run engine searches in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from choss.core.board import Board
from choss.core.enums import Color
from choss.engine.python_search import NegamaxEngine
from choss.engine.search import IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that ranks moves on demand.

    The search itself cannot be interrupted; ``cancel`` only makes the worker
    drop the result of the running request and report it as cancelled.
    """

    ranked_moves_ready = pyqtSignal(int, object)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, bool)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = 2,
        engine: IEngine | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = engine or NegamaxEngine()
        self._limits = SearchLimits(max_depth=max_depth)
        self._cancel_event = threading.Event()

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, object, int)
    def request_move(
        self, board_obj: object, color_obj: object, request_id: int
    ) -> None:
        """Rank the moves of *color_obj* on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board) or not isinstance(color_obj, Color):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        try:
            ranked = self._engine.rank(board_obj, color_obj, self._limits)
            in_check = not ranked and board_obj.is_checked(color_obj)
        except Exception as exc:
            _LOGGER.exception("Search %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if not ranked:
            self.search_no_move.emit(request_id, in_check)
            return

        self.ranked_moves_ready.emit(request_id, ranked)

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_limits(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
