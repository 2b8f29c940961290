from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

import numpy as np

from .base import Strategy
from .minimax import MinimaxConfig, MinimaxStrategy
from .random_strategy import RandomStrategy
from .tactical import TacticalStrategy


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @staticmethod
    def parse(value: Union[int, str, "Difficulty"]) -> "Difficulty":
        """Map a menu entry or a name to a difficulty; unknown numbers mean EASY.

        Raises ``ValueError`` when ``value`` is neither a number nor a known name.
        """
        if isinstance(value, str):
            text = value.strip()
            if not text.lstrip("-").isdigit():
                key = text.upper()
                if key in Difficulty.__members__:
                    return Difficulty[key]
                raise ValueError(f"Unknown difficulty: {value!r}")
            value = int(text)
        try:
            return Difficulty(int(value))
        except ValueError:
            return Difficulty.EASY


def make_strategy(
    difficulty: Union[int, str, Difficulty],
    *,
    rng: Optional[np.random.Generator] = None,
    minimax_config: Optional[MinimaxConfig] = None,
) -> Strategy:
    level = Difficulty.parse(difficulty)
    if level == Difficulty.HARD:
        return MinimaxStrategy(minimax_config)
    if level == Difficulty.MEDIUM:
        return TacticalStrategy(rng=rng)
    return RandomStrategy(rng)
