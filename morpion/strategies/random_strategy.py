from __future__ import annotations

from typing import Optional

import numpy as np

from morpion.core import Marker, Move, empty_cells

from .base import BoardLike, Strategy, check_playable, scratch_grid


class RandomStrategy(Strategy):
    name = "Facile"
    description = "Joue aléatoirement sans stratégie"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose_move(self, board: BoardLike, marker: Marker) -> Move:
        grid = scratch_grid(board)
        check_playable(grid, marker)
        cells = empty_cells(grid)
        row, col = cells[int(self.rng.integers(len(cells)))]
        return Move(row, col)

    def spawn(self, seed: Optional[int] = None) -> "RandomStrategy":
        return RandomStrategy(np.random.default_rng(seed))
