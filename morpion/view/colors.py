"""ANSI escape helpers for console output."""

from __future__ import annotations

from morpion.core import Marker

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"

BOLD = "\033[1m"

MARKER_COLOURS = {Marker.X: RED, Marker.O: BLUE}


class Palette:
    """Applies styles, or returns text untouched when colour is disabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def style(self, text: str, *styles: str) -> str:
        if not self.enabled or not styles:
            return text
        return "".join(styles) + text + RESET

    def marker(self, marker: Marker) -> str:
        if marker == Marker.EMPTY:
            return " "
        return self.style(marker.symbol, MARKER_COLOURS[marker], BOLD)

    def error(self, message: str) -> str:
        return self.style(f"❌ {message}", RED, BOLD)

    def info(self, message: str) -> str:
        return self.style(f"ℹ️  {message}", CYAN)

    def title(self, text: str) -> str:
        bar = "═" * (len(text) + 4)
        return (
            self.style(f"\n╔{bar}╗\n", CYAN, BOLD)
            + self.style(f"║  {text}  ║\n", CYAN, BOLD)
            + self.style(f"╚{bar}╝\n", CYAN, BOLD)
        )
