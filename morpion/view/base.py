from __future__ import annotations

from morpion.core import GridArray, Marker


class GameView:
    """Display hooks used by the game controller. The base class shows nothing."""

    def render_board(self, grid: GridArray) -> None:
        pass

    def show_turn(self, name: str, marker: Marker) -> None:
        pass

    def show_victory(self, name: str) -> None:
        pass

    def show_draw(self) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def show_info(self, message: str) -> None:
        pass

    def show_stats(self, stats) -> None:
        pass
