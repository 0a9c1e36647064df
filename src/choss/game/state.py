"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from choss.core.board import Board
from choss.core.enums import Color, GameResult
from choss.core.layouts import standard_board
from choss.core.move import Go, Move, Take
from choss.core.notation import move_to_text
from choss.core.rules import Rules
from choss.core.types import Pos
from choss.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history.

    ``was_check`` and ``was_capture`` are the feedback a presentation layer
    needs for sounds and highlights.
    """

    color: Color
    origin: Pos
    move: Move
    text: str
    board_before: Board
    was_check: bool = False
    was_capture: bool = False


def _is_capture(board: Board, move: Move) -> bool:
    for action in move:
        if isinstance(action, Go) and board.get(action.to) is not None:
            return True
        if isinstance(action, Take) and board.get(action.at) is not None:
            return True
    return False


@dataclass
class GameState:
    """Manages game lifecycle: board, side to move, phase, result, history.

    This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, first: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else standard_board()
        self.side_to_move = first
        self.phase = GamePhase.AWAITING_MOVE
        self.result = Rules.game_result(self.board, first)
        self.move_history.clear()
        if self.result != GameResult.IN_PROGRESS:
            self.phase = GamePhase.GAME_OVER

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, origin: Pos, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        color = self.side_to_move
        before = self.board
        was_capture = _is_capture(before, move)

        self.board = before.play(color, origin, move)
        self.side_to_move = color.opposite
        was_check = self.board.is_checked(self.side_to_move)

        record = MoveRecord(
            color=color,
            origin=origin,
            move=move,
            text=move_to_text(origin, move),
            board_before=before,
            was_check=was_check,
            was_capture=was_capture,
        )
        self.move_history.append(record)

        self.result = Rules.game_result(self.board, self.side_to_move)
        if self.result != GameResult.IN_PROGRESS:
            self.phase = GamePhase.GAME_OVER
        return record

    def undo_last_move(self) -> MoveRecord | None:
        if not self.move_history:
            return None
        record = self.move_history.pop()
        self.board = record.board_before
        self.side_to_move = record.color
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        return record

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def ply(self) -> int:
        return len(self.move_history)

    @property
    def movetext(self) -> str:
        return " ".join(record.text for record in self.move_history)
