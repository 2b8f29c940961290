"""Console presentation."""

from .base import GameView
from .colors import Palette
from .console import ConsoleView, stream_supports_unicode

__all__ = ["GameView", "Palette", "ConsoleView", "stream_supports_unicode"]
