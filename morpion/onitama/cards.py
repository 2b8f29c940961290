from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from .pieces import ONITAMA_SIZE, PlayerColour, Position, Step


class MovementCard:
    """Named set of steps a piece may take. Blue plays the card upside down."""

    def __init__(self, name: str, steps: Iterable[Step], description: Optional[str] = None) -> None:
        if not name:
            raise ValueError("Card name cannot be empty.")
        steps = tuple(steps)
        if not steps:
            raise ValueError("A card needs at least one step.")
        self.name = name
        self.steps: Tuple[Step, ...] = steps
        self.description = description or ""

    def oriented_steps(self, colour: PlayerColour) -> List[Step]:
        if colour is PlayerColour.BLUE:
            return [step.inverted() for step in self.steps]
        return list(self.steps)

    def reachable_positions(self, start: Position, colour: PlayerColour) -> List[Position]:
        destinations = (step.apply_to(start) for step in self.oriented_steps(colour))
        return [position for position in destinations if position.is_valid()]

    def can_move(self, start: Position, end: Position, colour: PlayerColour) -> bool:
        return end in self.reachable_positions(start, colour)

    def grid(self, colour: PlayerColour = PlayerColour.RED) -> str:
        centre = ONITAMA_SIZE // 2
        oriented = set(self.oriented_steps(colour))
        lines = ["┌─────────────┐", f"│ {self.name:<11} │", "├─────────────┤"]
        for r in range(ONITAMA_SIZE):
            cells = []
            for c in range(ONITAMA_SIZE):
                if r == centre and c == centre:
                    cells.append("◉")
                elif Step(r - centre, c - centre) in oriented:
                    cells.append("●")
                else:
                    cells.append("·")
            lines.append("│ " + " ".join(cells) + " │")
        lines.append("└─────────────┘")
        return "\n".join(lines)

    def copy(self) -> "MovementCard":
        return MovementCard(self.name, self.steps, self.description)

    def __len__(self) -> int:
        return len(self.steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MovementCard):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"MovementCard({self.name!r}, {len(self.steps)} steps)"


def _card(name: str, description: str, *steps: Tuple[int, int]) -> MovementCard:
    return MovementCard(name, [Step(dr, dc) for dr, dc in steps], description)


# Steps are written for red, moving "forward" towards row 0.
OFFICIAL_CARDS: Tuple[MovementCard, ...] = (
    _card("Tiger", "Bond puissant du tigre", (-2, 0), (1, 0)),
    _card("Dragon", "Vol majestueux du dragon", (-1, -2), (-1, 2), (1, -1), (1, 1)),
    _card("Frog", "Bonds agiles de la grenouille", (0, -2), (-1, -1), (1, 1)),
    _card("Rabbit", "Bonds vifs du lapin", (0, 2), (-1, 1), (1, -1)),
    _card("Crab", "Marche latérale du crabe", (-1, 0), (0, -2), (0, 2)),
    _card("Elephant", "Pas lourds de l'éléphant", (-1, -1), (-1, 1), (0, -1), (0, 1)),
    _card("Goose", "Vol gracieux de l'oie", (-1, -1), (0, -1), (0, 1), (1, 1)),
    _card("Rooster", "Pas fiers du coq", (-1, 1), (0, 1), (0, -1), (1, -1)),
    _card("Monkey", "Agilité du singe", (-1, -1), (-1, 1), (1, -1), (1, 1)),
    _card("Mantis", "Attaque de la mante religieuse", (-1, 0), (1, -1), (1, 1)),
    _card("Horse", "Galop du cheval", (-1, 0), (0, -1), (1, 0)),
    _card("Ox", "Force du bœuf", (-1, 0), (0, 1), (1, 0)),
    _card("Crane", "Élégance de la grue", (-1, 0), (1, -1), (1, 1)),
    _card("Boar", "Charge du sanglier", (-1, 0), (0, -1), (0, 1)),
    _card("Eel", "Ondulation de l'anguille", (-1, -1), (0, 1), (1, -1)),
    _card("Cobra", "Morsure du cobra", (-1, 1), (0, -1), (1, 1)),
)

CARDS_PER_GAME = 5


def all_cards() -> List[MovementCard]:
    return list(OFFICIAL_CARDS)


def draw_five(rng: Optional[np.random.Generator] = None) -> List[MovementCard]:
    """Five distinct cards for a game: two per player plus the side card."""
    rng = rng or np.random.default_rng()
    indices = rng.choice(len(OFFICIAL_CARDS), size=CARDS_PER_GAME, replace=False)
    return [OFFICIAL_CARDS[int(i)] for i in indices]


def card_by_name(name: Optional[str]) -> Optional[MovementCard]:
    if name is None:
        return None
    for card in OFFICIAL_CARDS:
        if card.name.lower() == name.lower():
            return card
    return None


def describe_all(colour: PlayerColour = PlayerColour.RED) -> str:
    parts = [
        "═══════════════════════════════════════",
        f"   LES {len(OFFICIAL_CARDS)} CARTES OFFICIELLES D'ONITAMA",
        "═══════════════════════════════════════",
        "",
    ]
    for card in OFFICIAL_CARDS:
        parts.append(card.grid(colour))
        if card.description:
            parts.append(f"  {card.description}")
        parts.append("")
    return "\n".join(parts)
