from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

GridArray = NDArray[np.int8]


class Marker(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def opponent(self) -> "Marker":
        if self == Marker.X:
            return Marker.O
        if self == Marker.O:
            return Marker.X
        return Marker.EMPTY

    @staticmethod
    def from_symbol(symbol: str) -> "Marker":
        for marker, text in _SYMBOLS.items():
            if text == symbol.upper():
                return marker
        return Marker.EMPTY


_SYMBOLS = {Marker.EMPTY: " ", Marker.X: "X", Marker.O: "O"}


class GameResult(Enum):
    ONGOING = "ongoing"
    X_WIN = "x_win"
    O_WIN = "o_win"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameResult.ONGOING

    @property
    def winner(self) -> Optional[Marker]:
        if self == GameResult.X_WIN:
            return Marker.X
        if self == GameResult.O_WIN:
            return Marker.O
        return None

    @staticmethod
    def win_for(marker: Marker) -> "GameResult":
        if marker == Marker.X:
            return GameResult.X_WIN
        if marker == Marker.O:
            return GameResult.O_WIN
        raise ValueError("Only X or O can win a game.")


@dataclass(frozen=True)
class Move:
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def to_index(self, size: int) -> int:
        return self.row * size + self.col

    @staticmethod
    def from_index(index: int, size: int) -> "Move":
        if not 0 <= index < size * size:
            raise ValueError(f"Move index {index} out of range for a {size}x{size} board.")
        return Move(index // size, index % size)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


# Convenient tuple alias used across modules
Cell = Tuple[int, int]
