"""Board state and rules for the Morpion engine."""

from .state import Cell, GameResult, GridArray, Marker, Move
from .rules import (
    BOARD_SIZE,
    centre_cell,
    empty_cells,
    evaluate_result,
    has_winner,
    in_bounds,
    is_full,
    winning_lines,
)
from .board import Board

__all__ = [
    "Board",
    "Cell",
    "GameResult",
    "GridArray",
    "Marker",
    "Move",
    "BOARD_SIZE",
    "centre_cell",
    "empty_cells",
    "evaluate_result",
    "has_winner",
    "in_bounds",
    "is_full",
    "winning_lines",
]
