from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol

from morpion.core import Board, Marker, Move
from morpion.strategies import Strategy

logger = logging.getLogger(__name__)


class IntPrompter(Protocol):
    def read_int(self, prompt: str) -> int:
        ...


class Player:
    is_human: bool = False

    def __init__(self, name: str, marker: Marker) -> None:
        if name is None or not name.strip():
            raise ValueError("Player name cannot be empty.")
        if marker not in (Marker.X, Marker.O):
            raise ValueError("Player marker must be X or O.")
        self.name = name.strip()
        self.marker = Marker(marker)

    def next_move(self, board: Board) -> Move:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.marker.symbol})"


class HumanPlayer(Player):
    is_human = True

    def __init__(self, name: str, marker: Marker, prompter: IntPrompter) -> None:
        super().__init__(name, marker)
        self.prompter = prompter

    def next_move(self, board: Board) -> Move:
        last = board.size - 1
        row = self.prompter.read_int(f"Entrez la ligne (0-{last}): ")
        col = self.prompter.read_int(f"Entrez la colonne (0-{last}): ")
        return Move(row, col)


class AIPlayer(Player):
    """AI-controlled player; ``strategy`` may be reassigned between turns."""

    def __init__(
        self,
        name: str,
        marker: Marker,
        strategy: Strategy,
        *,
        think_delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(name, marker)
        if think_delay < 0:
            raise ValueError("think_delay must be non-negative.")
        self.strategy = strategy
        self.think_delay = think_delay
        self._sleep = sleep

    def next_move(self, board: Board) -> Move:
        if self.think_delay > 0:
            self._sleep(self.think_delay)
        move = self.strategy.choose_move(board, self.marker)
        logger.debug("%s (%s) plays %s", self.name, self.strategy.name, move)
        return move

    def __str__(self) -> str:
        return f"{self.name} (IA - {self.strategy.name})"
