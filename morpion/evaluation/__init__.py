"""Strategy-vs-strategy matches."""

from .match import EvaluationResult, evaluate_strategies, play_match

__all__ = ["EvaluationResult", "evaluate_strategies", "play_match"]
