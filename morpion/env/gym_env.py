from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from morpion.core import BOARD_SIZE, Board, GameResult, Marker, Move


class MorpionEnv(gym.Env):
    """Two-player Tic-Tac-Toe; the acting marker alternates after every step."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        size: int = BOARD_SIZE,
        starting_marker: Marker = Marker.X,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        if starting_marker == Marker.EMPTY:
            raise ValueError("starting_marker must be X or O.")
        self._size = size
        self._starting_marker = Marker(starting_marker)
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=int(Marker.EMPTY), high=int(Marker.O), shape=(size, size), dtype=np.int8
        )
        self.action_space = spaces.Discrete(size * size)

        self.board = Board(size)
        self.current_marker = self._starting_marker
        self.result = GameResult.ONGOING
        self.ply = 0

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        starting = options.get("starting_marker", self._starting_marker) if options else self._starting_marker
        self.board.reset()
        self.current_marker = Marker(starting)
        self.result = GameResult.ONGOING
        self.ply = 0
        return self.board.snapshot(), self._build_info()

    def step(self, action_index: int):
        if self.result.is_terminal:
            raise ValueError("Cannot step a finished game; call reset().")
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        move = Move.from_index(int(action_index), self._size)
        placed = self.board.place(move.row, move.col, self.current_marker)
        if not placed:
            if self._enforce_legal:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
            # Lenient mode: the turn is lost and nothing changes.
        else:
            self.ply += 1
            self.result = self.board.result()

        if not self.result.is_terminal:
            self.current_marker = self.current_marker.opponent()

        reward = self._compute_reward(self.result)
        terminated = self.result.is_terminal
        truncated = False
        return self.board.snapshot(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for row, col in self.board.empty_cells():
            mask[Move(row, col).to_index(self._size)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_marker": self.current_marker,
            "result": self.result,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.X_WIN:
            return 1.0
        if result == GameResult.O_WIN:
            return -1.0
        return 0.0

    def _render_ascii(self) -> str:
        grid = self.board.snapshot()
        rows = []
        for r in range(self._size):
            rows.append("".join(Marker(int(cell)).symbol if cell else "." for cell in grid[r]))
        return "\n".join(rows)
