"""Choss engine package: search implementation and Qt worker bridge."""

from choss.engine.autoplay import auto_play
from choss.engine.python_search import (
    MAX_QUIESCENCE_DEPTH,
    PIECE_VALUES,
    NegamaxEngine,
    RandomEngine,
    material_score,
    move_value,
    negamax,
    piece_value,
    random_move,
)
from choss.engine.search import IEngine, ScoredCandidate, SearchLimits

DefaultEngine: type[IEngine] = NegamaxEngine

__all__ = [
    "DefaultEngine",
    "IEngine",
    "MAX_QUIESCENCE_DEPTH",
    "NegamaxEngine",
    "PIECE_VALUES",
    "RandomEngine",
    "ScoredCandidate",
    "SearchLimits",
    "auto_play",
    "material_score",
    "move_value",
    "negamax",
    "piece_value",
    "random_move",
]
