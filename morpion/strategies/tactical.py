from __future__ import annotations

from typing import List, Optional

import numpy as np

from morpion.core import Marker, Move, empty_cells, has_winner

from .base import BoardLike, Strategy, check_playable, scratch_grid
from .random_strategy import RandomStrategy


def find_winning_move(grid: List[List[int]], marker: Marker) -> Optional[Move]:
    """First empty cell (row-major) that completes a line for ``marker``.

    Trial placements are undone before returning, so ``grid`` is left as given.
    """
    for row, col in empty_cells(grid):
        grid[row][col] = marker
        wins = has_winner(grid, marker)
        grid[row][col] = Marker.EMPTY
        if wins:
            return Move(row, col)
    return None


class TacticalStrategy(Strategy):
    """Win if possible, otherwise block, otherwise play randomly."""

    name = "Moyen"
    description = "Cherche à gagner et bloque l'adversaire"

    def __init__(
        self,
        fallback: Optional[Strategy] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.fallback = fallback or RandomStrategy(rng)

    def choose_move(self, board: BoardLike, marker: Marker) -> Move:
        grid = scratch_grid(board)
        check_playable(grid, marker)

        winning = find_winning_move(grid, marker)
        if winning is not None:
            return winning

        blocking = find_winning_move(grid, marker.opponent())
        if blocking is not None:
            return blocking

        return self.fallback.choose_move(grid, marker)

    def spawn(self, seed: Optional[int] = None) -> "TacticalStrategy":
        return TacticalStrategy(self.fallback.spawn(seed))
