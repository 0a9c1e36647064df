"""Game management layer — controller, players, state machine.

Quick start::

    from choss.core import Color
    from choss.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
"""

from choss.game.controller import GameController, GameEvents
from choss.game.interfaces import GamePhase, IPlayer
from choss.game.player import AIPlayer, HumanPlayer
from choss.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
