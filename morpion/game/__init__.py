"""Players, statistics and turn orchestration."""

from .players import AIPlayer, HumanPlayer, Player
from .stats import PlayerStats, StatisticsLedger
from .controller import GameController

__all__ = [
    "AIPlayer",
    "HumanPlayer",
    "Player",
    "PlayerStats",
    "StatisticsLedger",
    "GameController",
]
