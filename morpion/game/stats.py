from __future__ import annotations

import math
import threading
from dataclasses import dataclass, replace
from typing import Dict, List, Optional


@dataclass
class PlayerStats:
    name: str
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    moves: int = 0

    def __post_init__(self) -> None:
        if self.name is None or not self.name.strip():
            raise ValueError("Player name cannot be empty.")

    def record_win(self) -> None:
        self.wins += 1
        self.games_played += 1

    def record_loss(self) -> None:
        self.losses += 1
        self.games_played += 1

    def record_draw(self) -> None:
        self.draws += 1
        self.games_played += 1

    def add_moves(self, count: int) -> None:
        if count < 0:
            raise ValueError("Move count must be non-negative.")
        self.moves += count

    def reset(self) -> None:
        self.games_played = self.wins = self.losses = self.draws = self.moves = 0

    def copy(self) -> "PlayerStats":
        return replace(self)

    @property
    def win_rate(self) -> float:
        """Percentage of games won, 0 when nothing was played."""
        if self.games_played == 0:
            return 0.0
        return self.wins * 100.0 / self.games_played

    @property
    def win_loss_ratio(self) -> float:
        if self.losses == 0:
            return math.inf if self.wins > 0 else 0.0
        return self.wins / self.losses

    @property
    def average_moves(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.moves / self.games_played

    @property
    def has_positive_record(self) -> bool:
        return self.wins > self.losses

    def summary(self) -> str:
        return (
            f"Statistiques de {self.name}:\n"
            f"  Parties jouées: {self.games_played}\n"
            f"  Victoires: {self.wins}\n"
            f"  Défaites: {self.losses}\n"
            f"  Matchs nuls: {self.draws}\n"
            f"  Taux de victoire: {self.win_rate:.1f}%\n"
            f"  Coups joués: {self.moves}\n"
            f"  Moyenne coups/partie: {self.average_moves:.1f}"
        )


class StatisticsLedger:
    """Per-player counters for the current run, keyed by player name.

    Entries are created on first reference. The ledger is passed explicitly to
    whoever records results; every mutation happens under one lock so a shared
    instance stays consistent if games ever run on several threads.
    """

    def __init__(self) -> None:
        self._stats: Dict[str, PlayerStats] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> PlayerStats:
        with self._lock:
            return self._get_locked(name)

    def _get_locked(self, name: str) -> PlayerStats:
        stats = self._stats.get(name)
        if stats is None:
            stats = PlayerStats(name)
            self._stats[name] = stats
        return stats

    def record_win(self, name: str) -> None:
        with self._lock:
            self._get_locked(name).record_win()

    def record_loss(self, name: str) -> None:
        with self._lock:
            self._get_locked(name).record_loss()

    def record_draw(self, name: str) -> None:
        with self._lock:
            self._get_locked(name).record_draw()

    def add_moves(self, name: str, count: int) -> None:
        with self._lock:
            self._get_locked(name).add_moves(count)

    def has_player(self, name: str) -> bool:
        return name in self._stats

    def remove(self, name: str) -> bool:
        with self._lock:
            return self._stats.pop(name, None) is not None

    def reset_player(self, name: str) -> None:
        with self._lock:
            stats = self._stats.get(name)
            if stats is not None:
                stats.reset()

    def reset_all(self) -> None:
        with self._lock:
            self._stats.clear()

    def players(self) -> List[PlayerStats]:
        with self._lock:
            return [stats.copy() for stats in self._stats.values()]

    def __len__(self) -> int:
        return len(self._stats)

    def best_player(self) -> Optional[PlayerStats]:
        candidates = self.players()
        if not candidates:
            return None
        return max(candidates, key=lambda s: s.wins)

    def best_win_rate(self) -> Optional[PlayerStats]:
        candidates = [s for s in self.players() if s.games_played > 0]
        if not candidates:
            return None
        return max(candidates, key=lambda s: s.win_rate)

    def leaderboard(self) -> str:
        lines = ["", "=== CLASSEMENT DES JOUEURS ===", ""]
        ranked = sorted(self.players(), key=lambda s: s.wins, reverse=True)
        for stats in ranked:
            lines.append(
                f"{stats.name:<20} | V:{stats.wins:3d}  D:{stats.losses:3d}  "
                f"N:{stats.draws:3d} | Taux: {stats.win_rate:.1f}%"
            )
        if not ranked:
            lines.append("Aucun joueur enregistré.")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"StatisticsLedger({len(self)} joueurs enregistrés)"
