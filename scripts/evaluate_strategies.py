#!/usr/bin/env python3
"""Pit two AI difficulty levels against each other and report the tally."""

import argparse
import json
from typing import Dict, Optional, Sequence

import numpy as np

from morpion.evaluation import evaluate_strategies
from morpion.strategies import Difficulty, MinimaxConfig, make_strategy


def run(
    x_level: str,
    o_level: str,
    *,
    episodes: int,
    seed: Optional[int] = None,
    alpha_beta: bool = False,
    alternate_start: bool = False,
    progress: bool = False,
) -> Dict[str, object]:
    rng = np.random.default_rng(seed)
    minimax_config = MinimaxConfig(alpha_beta=alpha_beta)
    strategy_x = make_strategy(x_level, rng=rng, minimax_config=minimax_config)
    strategy_o = make_strategy(o_level, rng=rng, minimax_config=minimax_config)

    result = evaluate_strategies(
        strategy_x,
        strategy_o,
        episodes=episodes,
        alternate_start=alternate_start,
        progress=progress,
    )
    return {
        "x": strategy_x.name,
        "o": strategy_o.name,
        "games": result.games_played,
        "x_wins": result.x_wins,
        "o_wins": result.o_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "x_winrate": result.winrate_x(),
        "o_winrate": result.winrate_o(),
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    levels = [level.name.lower() for level in Difficulty]
    parser = argparse.ArgumentParser(description="Evaluate Morpion AI strategies against each other.")
    parser.add_argument("--x", choices=levels, default="hard")
    parser.add_argument("--o", choices=levels, default="easy")
    parser.add_argument("--episodes", type=int, default=100)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--alpha-beta", action="store_true")
    parser.add_argument("--alternate-start", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args(argv)

    output = run(
        args.x,
        args.o,
        episodes=args.episodes,
        seed=args.seed,
        alpha_beta=args.alpha_beta,
        alternate_start=args.alternate_start,
        progress=not args.quiet,
    )
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
