"""Morpion: console Tic-Tac-Toe with AI opponents, migrating to Onitama."""

from . import core, strategies, game, view, env, evaluation, onitama
from .core import Board, GameResult, Marker, Move
from .env import MorpionEnv
from .strategies import (
    Difficulty,
    MinimaxConfig,
    MinimaxStrategy,
    RandomStrategy,
    Strategy,
    TacticalStrategy,
    make_strategy,
)
from .game import AIPlayer, GameController, HumanPlayer, PlayerStats, StatisticsLedger
from .evaluation import EvaluationResult, evaluate_strategies
from .config import AppConfig, load_config
from .errors import ConfigError, IllegalBoardError, MorpionError, NoMoveAvailableError

__all__ = [
    "core",
    "strategies",
    "game",
    "view",
    "env",
    "evaluation",
    "onitama",
    "Board",
    "GameResult",
    "Marker",
    "Move",
    "MorpionEnv",
    "Difficulty",
    "MinimaxConfig",
    "MinimaxStrategy",
    "RandomStrategy",
    "Strategy",
    "TacticalStrategy",
    "make_strategy",
    "AIPlayer",
    "GameController",
    "HumanPlayer",
    "PlayerStats",
    "StatisticsLedger",
    "EvaluationResult",
    "evaluate_strategies",
    "AppConfig",
    "load_config",
    "ConfigError",
    "IllegalBoardError",
    "MorpionError",
    "NoMoveAvailableError",
]
