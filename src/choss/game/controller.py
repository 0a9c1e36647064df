"""GameController — the central orchestrator of a Choss game.

Coordinates: Players, GameState, move legality.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from choss.core.board import Board
from choss.core.enums import Color, GameResult, PieceType
from choss.core.move import Go, Move
from choss.core.move_generator import generate_moves
from choss.core.types import OFF_BOARD, Pos
from choss.engine.python_search import PIECE_VALUES
from choss.game.interfaces import GamePhase, IPlayer
from choss.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: validates moves, switches turns,
    notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Engine replies come back through
    ``AIPlayer.receive_ranked``, which calls ``submit_move``; connect it to
    ``EngineWorker.ranked_moves_ready`` on the main thread.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        first: Color = Color.WHITE,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, first)
        _LOGGER.info(
            "New game: %s (white) vs %s (black) on %dx%d",
            white.name,
            black.name,
            self._state.board.width,
            self._state.board.height,
        )

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    # ── Move queries ─────────────────────────────────────────────────────

    def playable_moves(self, origin: Pos) -> list[Move] | None:
        """Legal moves of the piece on *origin*, if it belongs to the side to move."""
        if self._state.is_game_over:
            return None
        board = self._state.board
        piece = board.get(origin)
        if piece is OFF_BOARD or piece is None:
            return None
        if piece.color != self._state.side_to_move:
            return None
        return board.filter_safe_moves(
            piece.color, origin, generate_moves(board, origin, piece)
        )

    def playable_move(self, origin: Pos, target: Pos) -> Move | None:
        """First legal move from *origin* that goes to *target*.

        For promotions the Queen variant is generated first and wins.
        """
        for move in self.playable_moves(origin) or ():
            if any(isinstance(a, Go) and a.to == target for a in move):
                return move
        return None

    def remaining_value(self, color: Color) -> float:
        """Material of *color*, king excluded."""
        return sum(
            PIECE_VALUES[piece.piece_type]
            for _, piece in self._state.board.pieces(color)
            if piece.piece_type != PieceType.KING
        )

    # ── Move submission ──────────────────────────────────────────────────

    def submit_move(self, origin: Pos, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        legal = self.playable_moves(origin)
        if legal is None or move not in legal:
            return False

        record = self._state.apply_move(origin, move)
        _LOGGER.debug("%s played %s", record.color, record.text)
        self._emit_move(record)

        if self._state.is_game_over:
            _LOGGER.info(
                "Game over after %d plies: %s", self._state.ply, self._state.result.name
            )
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False

        # Cancel AI if it's thinking
        cp = self.current_player
        if cp and not cp.is_human:
            cp.cancel()

        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
