from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from tqdm.auto import tqdm

from morpion.core import GameResult, Marker
from morpion.env import MorpionEnv
from morpion.strategies import Strategy


@dataclass
class EvaluationResult:
    games_played: int
    x_wins: int
    o_wins: int
    draws: int
    average_length: float

    def winrate_x(self) -> float:
        return self.x_wins / max(1, self.games_played)

    def winrate_o(self) -> float:
        return self.o_wins / max(1, self.games_played)

    def draw_rate(self) -> float:
        return self.draws / max(1, self.games_played)


def play_match(env: MorpionEnv, strategy_x: Strategy, strategy_o: Strategy) -> GameResult:
    """Play one game on an already reset ``env`` and return its result."""
    terminated = False
    while not terminated:
        marker = env.current_marker
        strategy = strategy_x if marker == Marker.X else strategy_o
        move = strategy.choose_move(env.board, marker)
        _, _, terminated, truncated, _ = env.step(move.to_index(env.board.size))
        if truncated:
            terminated = True
    return env.result


def evaluate_strategies(
    strategy_x: Strategy,
    strategy_o: Strategy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], MorpionEnv]] = None,
    alternate_start: bool = False,
    progress: bool = False,
) -> EvaluationResult:
    """Play ``episodes`` games between two strategies.

    With ``alternate_start`` the O side opens every other game.
    """
    env_factory = env_factory or MorpionEnv

    x_wins = 0
    o_wins = 0
    draws = 0
    total_ply = 0

    for episode in tqdm(range(episodes), desc="Games", disable=not progress):
        env = env_factory()
        starting = Marker.O if alternate_start and episode % 2 == 1 else Marker.X
        env.reset(options={"starting_marker": starting})
        result = play_match(env, strategy_x, strategy_o)

        total_ply += env.ply
        if result == GameResult.X_WIN:
            x_wins += 1
        elif result == GameResult.O_WIN:
            o_wins += 1
        else:
            draws += 1

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        x_wins=x_wins,
        o_wins=o_wins,
        draws=draws,
        average_length=average_length,
    )
