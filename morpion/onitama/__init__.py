"""Onitama pieces and movement cards.

Only the data model exists so far; the turn engine and the AI still play
Tic-Tac-Toe.
"""

from .pieces import (
    BLUE_TEMPLE,
    ONITAMA_SIZE,
    RED_TEMPLE,
    Piece,
    PieceType,
    PlayerColour,
    Position,
    Step,
)
from .cards import (
    CARDS_PER_GAME,
    OFFICIAL_CARDS,
    MovementCard,
    all_cards,
    card_by_name,
    describe_all,
    draw_five,
)

__all__ = [
    "BLUE_TEMPLE",
    "ONITAMA_SIZE",
    "RED_TEMPLE",
    "Piece",
    "PieceType",
    "PlayerColour",
    "Position",
    "Step",
    "CARDS_PER_GAME",
    "OFFICIAL_CARDS",
    "MovementCard",
    "all_cards",
    "card_by_name",
    "describe_all",
    "draw_five",
]
