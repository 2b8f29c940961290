from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from morpion.core import Marker, Move, centre_cell, empty_cells, has_winner, is_full

from .base import BoardLike, Strategy, check_playable, scratch_grid

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    # Play the centre immediately when it is free (odd board sizes only).
    prefer_centre: bool = True
    # Alpha-beta cuts never change the chosen move, only the number of nodes visited.
    alpha_beta: bool = False


class _Search:
    """State of a single tree walk for one AI marker."""

    def __init__(self, ai: Marker, alpha_beta: bool) -> None:
        self.ai = ai
        self.opponent = ai.opponent()
        self.alpha_beta = alpha_beta
        self.nodes = 0

    def value(self, grid: List[List[int]], maximizing: bool, alpha: float, beta: float) -> int:
        self.nodes += 1
        if has_winner(grid, self.ai):
            return 1
        if has_winner(grid, self.opponent):
            return -1
        if is_full(grid):
            return 0

        if maximizing:
            best = -2
            for row, col in empty_cells(grid):
                grid[row][col] = self.ai
                score = self.value(grid, False, alpha, beta)
                grid[row][col] = Marker.EMPTY
                best = max(best, score)
                if self.alpha_beta:
                    alpha = max(alpha, best)
                    if alpha >= beta:
                        break
            return best

        best = 2
        for row, col in empty_cells(grid):
            grid[row][col] = self.opponent
            score = self.value(grid, True, alpha, beta)
            grid[row][col] = Marker.EMPTY
            best = min(best, score)
            if self.alpha_beta:
                beta = min(beta, best)
                if alpha >= beta:
                    break
        return best


class MinimaxStrategy(Strategy):
    """Exhaustive minimax over the remaining game tree.

    Positions are scored from the AI's point of view: +1 when its marker owns a
    line, -1 when the opponent's does, 0 for a full grid. The search always runs
    to the end of the game and keeps no transposition table, which is only
    affordable on a 3x3 board.

    The strategy itself only holds its config; ``nodes_visited`` reports the
    size of the most recent search.
    """

    name = "Difficile"
    description = "Algorithme Minimax - imbattable !"

    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig()
        self.nodes_visited = 0

    def choose_move(self, board: BoardLike, marker: Marker) -> Move:
        grid = scratch_grid(board)
        check_playable(grid, marker)

        if self.config.prefer_centre:
            centre = centre_cell(len(grid))
            if centre is not None and grid[centre[0]][centre[1]] == Marker.EMPTY:
                self.nodes_visited = 0
                return Move(*centre)

        search = _Search(marker, self.config.alpha_beta)
        best_score = -math.inf
        best_move: Optional[Move] = None
        for row, col in empty_cells(grid):
            grid[row][col] = marker
            score = search.value(grid, False, best_score, math.inf)
            grid[row][col] = Marker.EMPTY
            if score > best_score:
                best_score = score
                best_move = Move(row, col)

        self.nodes_visited = search.nodes
        logger.debug(
            "minimax chose %s for %s (score=%s, nodes=%d)",
            best_move,
            marker.symbol,
            best_score,
            search.nodes,
        )
        return best_move

    def minimax(self, grid: List[List[int]], maximizing: bool, marker: Marker) -> int:
        """Value of ``grid`` for ``marker``; ``maximizing`` means ``marker`` moves next."""
        search = _Search(marker, self.config.alpha_beta)
        value = search.value(grid, maximizing, -math.inf, math.inf)
        self.nodes_visited = search.nodes
        return value

    def spawn(self, seed: Optional[int] = None) -> "MinimaxStrategy":
        return MinimaxStrategy(self.config)
