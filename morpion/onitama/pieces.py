from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

ONITAMA_SIZE = 5


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def moved(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)

    def is_valid(self) -> bool:
        return 0 <= self.row < ONITAMA_SIZE and 0 <= self.col < ONITAMA_SIZE

    def is_red_temple(self) -> bool:
        return self == RED_TEMPLE

    def is_blue_temple(self) -> bool:
        return self == BLUE_TEMPLE

    def to_notation(self) -> str:
        """Algebraic notation: columns a-e, row 1 at the bottom (row index 4)."""
        return f"{chr(ord('a') + self.col)}{ONITAMA_SIZE - self.row}"

    @staticmethod
    def from_notation(notation: Optional[str]) -> Optional["Position"]:
        if notation is None or len(notation) != 2:
            return None
        col, row = notation[0], notation[1]
        if not ("a" <= col <= "e") or not ("1" <= row <= "5"):
            return None
        return Position(ONITAMA_SIZE - int(row), ord(col) - ord("a"))

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


RED_TEMPLE = Position(0, 2)
BLUE_TEMPLE = Position(4, 2)


@dataclass(frozen=True)
class Step:
    """Displacement printed on a movement card, seen from the red side."""

    d_row: int
    d_col: int

    def apply_to(self, start: Position) -> Position:
        return start.moved(self.d_row, self.d_col)

    def inverted(self) -> "Step":
        return Step(-self.d_row, -self.d_col)

    def is_diagonal(self) -> bool:
        return self.d_row != 0 and self.d_col != 0

    def is_horizontal(self) -> bool:
        return self.d_row == 0 and self.d_col != 0

    def is_vertical(self) -> bool:
        return self.d_row != 0 and self.d_col == 0

    def manhattan(self) -> int:
        return abs(self.d_row) + abs(self.d_col)

    def arrow(self) -> str:
        if self.is_vertical():
            return "↓" if self.d_row > 0 else "↑"
        if self.is_horizontal():
            return "→" if self.d_col > 0 else "←"
        if self.is_diagonal():
            if self.d_row > 0:
                return "↘" if self.d_col > 0 else "↙"
            return "↗" if self.d_col > 0 else "↖"
        return "•"

    @staticmethod
    def parse(text: Optional[str]) -> Optional["Step"]:
        """Parse ``"(d_row, d_col)"``; anything malformed gives ``None``."""
        if not text:
            return None
        parts = text.replace("(", "").replace(")", "").strip().split(",")
        if len(parts) != 2:
            return None
        try:
            return Step(int(parts[0].strip()), int(parts[1].strip()))
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"({self.d_row},{self.d_col})"


class PlayerColour(Enum):
    RED = ("Rouge", "R")
    BLUE = ("Bleu", "B")

    def __init__(self, label: str, symbol: str) -> None:
        self.label = label
        self.symbol = symbol

    @property
    def opponent(self) -> "PlayerColour":
        return PlayerColour.BLUE if self is PlayerColour.RED else PlayerColour.RED

    @property
    def start_row(self) -> int:
        return 0 if self is PlayerColour.RED else ONITAMA_SIZE - 1

    @property
    def own_temple(self) -> Position:
        return RED_TEMPLE if self is PlayerColour.RED else BLUE_TEMPLE

    @property
    def target_temple(self) -> Position:
        return self.opponent.own_temple

    @staticmethod
    def from_symbol(symbol: str) -> Optional["PlayerColour"]:
        for colour in PlayerColour:
            if colour.symbol == symbol:
                return colour
        return None


class PieceType(Enum):
    MASTER = ("Maître", "M")
    STUDENT = ("Élève", "E")

    def __init__(self, label: str, symbol: str) -> None:
        self.label = label
        self.symbol = symbol

    @property
    def wins_by_temple(self) -> bool:
        return self is PieceType.MASTER

    @property
    def capture_ends_game(self) -> bool:
        return self is PieceType.MASTER

    @staticmethod
    def from_symbol(symbol: str) -> Optional["PieceType"]:
        for kind in PieceType:
            if kind.symbol == symbol:
                return kind
        return None


@dataclass(eq=False)
class Piece:
    kind: PieceType
    colour: PlayerColour
    position: Position
    in_play: bool = field(default=True)

    def move_to(self, position: Position) -> None:
        if position is None:
            raise ValueError("Position cannot be None.")
        self.position = position

    def capture(self) -> None:
        self.in_play = False

    @property
    def is_master(self) -> bool:
        return self.kind is PieceType.MASTER

    def belongs_to(self, colour: PlayerColour) -> bool:
        return self.colour is colour

    def reached_target_temple(self) -> bool:
        return self.is_master and self.in_play and self.position == self.colour.target_temple

    def compact(self) -> str:
        if not self.in_play:
            return "XX"
        return self.kind.symbol + self.colour.symbol

    def copy(self) -> "Piece":
        return Piece(self.kind, self.colour, self.position, self.in_play)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.kind is other.kind and self.colour is other.colour

    def __hash__(self) -> int:
        return hash((self.kind, self.colour))

    def __str__(self) -> str:
        suffix = "" if self.in_play else " (capturé)"
        return f"{self.kind.label} {self.colour.label} à {self.position}{suffix}"
