from __future__ import annotations

import os
import subprocess
import sys
from typing import Optional, TextIO

from morpion.core import GridArray, Marker

from .base import GameView
from .colors import BOLD, CYAN, GREEN, YELLOW, Palette

TITLE = "MORPION - TIC TAC TOE"


def stream_supports_unicode(stream: TextIO) -> bool:
    encoding = getattr(stream, "encoding", None) or ""
    return "utf" in encoding.lower()


def stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


class ConsoleView(GameView):
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        use_colour: Optional[bool] = None,
        unicode: Optional[bool] = None,
    ) -> None:
        self.stream = stream or sys.stdout
        if use_colour is None:
            use_colour = stream_is_tty(self.stream) and "NO_COLOR" not in os.environ
        if unicode is None:
            unicode = stream_supports_unicode(self.stream)
        self.palette = Palette(use_colour)
        self.unicode = unicode

    # ------------------------------------------------------------------
    def write(self, text: str = "") -> None:
        try:
            self.stream.write(text + "\n")
        except UnicodeEncodeError:
            encoding = getattr(self.stream, "encoding", None) or "ascii"
            self.stream.write(text.encode(encoding, "replace").decode(encoding) + "\n")
        self.stream.flush()

    def render_board(self, grid: GridArray) -> None:
        self.write(self.format_board(grid))

    def format_board(self, grid: GridArray) -> str:
        size = len(grid)
        p = self.palette
        header = p.style("   " + "".join(f"  {c} " for c in range(size)), CYAN)
        if self.unicode:
            vertical = "│"
            top = "   ┌" + "┬".join(["───"] * size) + "┐"
            middle = "   ├" + "┼".join(["───"] * size) + "┤"
            bottom = "   └" + "┴".join(["───"] * size) + "┘"
        else:
            vertical = "|"
            top = middle = bottom = "   +" + "+".join(["---"] * size) + "+"

        bar = p.style(vertical, CYAN)
        lines = ["", header, p.style(top, CYAN)]
        for r in range(size):
            cells = [f" {p.marker(Marker(int(grid[r][c])))} " for c in range(size)]
            lines.append(p.style(f" {r} ", CYAN) + bar + bar.join(cells) + bar)
            lines.append(p.style(middle if r < size - 1 else bottom, CYAN))
        lines.append("")
        return "\n".join(lines)

    def show_title(self) -> None:
        if self.unicode:
            self.write(self.palette.title(TITLE))
        else:
            self.write(self.palette.style(f"\n==== {TITLE} ====\n", CYAN, BOLD))

    def show_menu(self, title: str, *options: str) -> None:
        self.write()
        self.write(self.palette.style(title, CYAN, BOLD))
        for index, option in enumerate(options, start=1):
            self.write(self.palette.style(f"{index}. ", YELLOW) + option)
        self.write()

    def show_turn(self, name: str, marker: Marker) -> None:
        arrow = "▶️ " if self.unicode else ">"
        self.write()
        self.write(f"{arrow} C'est au tour de {self.palette.style(name, BOLD)} ({self.palette.marker(marker)})")

    def show_victory(self, name: str) -> None:
        message = f"{name.upper()} A GAGNÉ !"
        if self.unicode:
            message = f"🎉  {message}  🎉"
        self._banner(message, GREEN)

    def show_draw(self) -> None:
        message = "MATCH NUL !"
        if self.unicode:
            message = f"🤝  {message}  🤝"
        self._banner(message, YELLOW)

    def show_message(self, message: str) -> None:
        self.write(message)

    def show_error(self, message: str) -> None:
        if self.unicode:
            self.write(self.palette.error(message))
        else:
            self.write(self.palette.style(f"! {message}", BOLD))

    def show_info(self, message: str) -> None:
        if self.unicode:
            self.write(self.palette.info(message))
        else:
            self.write(message)

    def show_stats(self, stats) -> None:
        self.show_info("\n" + stats.summary())

    def clear_screen(self) -> None:
        try:
            if os.name == "nt":
                subprocess.run(["cmd", "/c", "cls"], check=True)
            else:
                self.stream.write("\033[H\033[2J")
                self.stream.flush()
        except (OSError, subprocess.SubprocessError):
            self.stream.write("\n" * 50)

    def _banner(self, message: str, colour: str) -> None:
        stars = "✨ " + "═" * 32 + " ✨" if self.unicode else "*" * 36
        self.write()
        self.write(self.palette.style(stars, CYAN))
        self.write(self.palette.style(message, colour, BOLD))
        self.write(self.palette.style(stars, CYAN))
        self.write()
