"""Engine self-play, producing a move log."""

from __future__ import annotations

import logging

from choss.core.board import Board
from choss.core.enums import Color
from choss.core.notation import move_to_text, movetext
from choss.engine.python_search import NegamaxEngine
from choss.engine.search import IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


def auto_play(
    board: Board,
    starting_color: Color,
    depth: int,
    max_turns: int = 100,
    engine: IEngine | None = None,
) -> str:
    """Let *engine* play both sides from *board* and return the move log.

    The game stops when the side to move has no legal move or after
    *max_turns* plies, whichever comes first.
    """
    engine = engine or NegamaxEngine()
    limits = SearchLimits(max_depth=depth)
    texts: list[str] = []
    color = starting_color

    for turn in range(max_turns):
        _LOGGER.debug("Ply %d, %s to move\n%s", turn, color, board)
        ranked = engine.rank(board, color, limits)
        if not ranked:
            _LOGGER.info("No legal move left for %s after %d plies", color, turn)
            break
        best = ranked[0]
        texts.append(move_to_text(best.origin, best.move))
        board = board.play(color, best.origin, best.move)
        color = color.opposite
    else:
        _LOGGER.info("Game stopped after %d plies", max_turns)

    return movetext(texts)
