from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from morpion.errors import IllegalBoardError

from .state import Cell, GameResult, Marker

BOARD_SIZE = 3

# Anything indexable as grid[row][col]: a numpy array or nested lists.
Grid = Sequence[Sequence[int]]


@lru_cache(maxsize=None)
def winning_lines(size: int = BOARD_SIZE) -> Tuple[Tuple[Cell, ...], ...]:
    """All rows, all columns and both diagonals of a ``size`` x ``size`` grid."""
    if size < 1:
        raise ValueError("Board size must be positive.")
    lines: List[Tuple[Cell, ...]] = []
    for r in range(size):
        lines.append(tuple((r, c) for c in range(size)))
    for c in range(size):
        lines.append(tuple((r, c) for r in range(size)))
    lines.append(tuple((i, i) for i in range(size)))
    lines.append(tuple((i, size - 1 - i) for i in range(size)))
    return tuple(lines)


def has_winner(grid: Grid, marker: Marker) -> bool:
    if marker == Marker.EMPTY:
        return False
    for line in winning_lines(len(grid)):
        if all(grid[r][c] == marker for r, c in line):
            return True
    return False


def is_full(grid: Grid) -> bool:
    for row in grid:
        for value in row:
            if value == Marker.EMPTY:
                return False
    return True


def empty_cells(grid: Grid) -> List[Cell]:
    """Empty cells in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value == Marker.EMPTY
    ]


def in_bounds(row: int, col: int, size: int = BOARD_SIZE) -> bool:
    return 0 <= row < size and 0 <= col < size


def centre_cell(size: int = BOARD_SIZE) -> Optional[Cell]:
    if size % 2 == 0:
        return None
    return (size // 2, size // 2)


def evaluate_result(grid: Grid) -> GameResult:
    x_wins = has_winner(grid, Marker.X)
    o_wins = has_winner(grid, Marker.O)
    if x_wins and o_wins:
        raise IllegalBoardError("Both markers complete a line.")
    if x_wins:
        return GameResult.X_WIN
    if o_wins:
        return GameResult.O_WIN
    if is_full(grid):
        return GameResult.DRAW
    return GameResult.ONGOING
