from __future__ import annotations

from typing import List

import numpy as np

from . import rules
from .state import Cell, GameResult, GridArray, Marker


class Board:
    """Square grid of markers. ``place`` is the only way a cell gets filled."""

    def __init__(self, size: int = rules.BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError("Board size must be positive.")
        self._size = size
        self._grid: GridArray = np.zeros((size, size), dtype=np.int8)

    @property
    def size(self) -> int:
        return self._size

    def reset(self) -> None:
        self._grid[:, :] = Marker.EMPTY

    def place(self, row: int, col: int, marker: Marker) -> bool:
        if marker == Marker.EMPTY:
            raise ValueError("Cannot place an empty marker.")
        if not rules.in_bounds(row, col, self._size):
            return False
        if self._grid[row, col] != Marker.EMPTY:
            return False
        self._grid[row, col] = marker
        return True

    def snapshot(self) -> GridArray:
        return self._grid.copy()

    def cell(self, row: int, col: int) -> Marker:
        return Marker(int(self._grid[row, col]))

    def has_winner(self, marker: Marker) -> bool:
        return rules.has_winner(self._grid, marker)

    def is_full(self) -> bool:
        return rules.is_full(self._grid)

    def empty_cells(self) -> List[Cell]:
        return rules.empty_cells(self._grid)

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def result(self) -> GameResult:
        return rules.evaluate_result(self._grid)

    def copy(self) -> "Board":
        return Board.from_grid(self._grid)

    @staticmethod
    def from_grid(grid) -> "Board":
        array = np.array(grid, dtype=np.int8)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError("Grid must be square.")
        if np.any((array < Marker.EMPTY) | (array > Marker.O)):
            raise ValueError("Grid contains unknown marker values.")
        board = Board(array.shape[0])
        board._grid[:, :] = array
        return board

    def __repr__(self) -> str:
        board_str = "\n".join(
            "".join(Marker(int(cell)).symbol if cell else "." for cell in row) for row in self._grid
        )
        return f"Board(size={self._size}, occupied={self.occupied_count()})\n{board_str}"
