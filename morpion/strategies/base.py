from __future__ import annotations

from typing import List, Optional, Union

import numpy as np

from morpion.core import Board, Marker, Move, is_full
from morpion.errors import NoMoveAvailableError

BoardLike = Union[Board, np.ndarray, List[List[int]]]


class Strategy:
    """Move-selection policy for an AI player.

    Strategies are not bound to a board: every call receives the current board
    (or a raw grid) and the marker to play, and only ever reads a copy of it.
    """

    name: str = "abstract"
    description: str = ""

    def choose_move(self, board: BoardLike, marker: Marker) -> Move:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Strategy":
        """Return a copy of this strategy with its own entropy source."""
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def scratch_grid(board: BoardLike) -> List[List[int]]:
    # Search runs on nested lists; numpy scalar indexing is slow in tight loops.
    if isinstance(board, Board):
        return board.snapshot().tolist()
    return np.array(board, dtype=np.int8).tolist()


def check_playable(grid: List[List[int]], marker: Marker) -> None:
    if marker == Marker.EMPTY:
        raise NoMoveAvailableError("A strategy must play X or O.")
    if is_full(grid):
        raise NoMoveAvailableError("No empty cell left on the board.")
