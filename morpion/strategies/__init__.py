"""Interchangeable move-selection strategies for AI players."""

from .base import BoardLike, Strategy
from .random_strategy import RandomStrategy
from .tactical import TacticalStrategy, find_winning_move
from .minimax import MinimaxConfig, MinimaxStrategy
from .factory import Difficulty, make_strategy

__all__ = [
    "BoardLike",
    "Strategy",
    "RandomStrategy",
    "TacticalStrategy",
    "find_winning_move",
    "MinimaxConfig",
    "MinimaxStrategy",
    "Difficulty",
    "make_strategy",
]
