"""Console front end: menus, prompts and the rematch loop."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, Sequence, TextIO

import numpy as np

from morpion.config import AppConfig, load_config
from morpion.core import Board, Marker
from morpion.errors import ConfigError
from morpion.game import AIPlayer, GameController, HumanPlayer, Player, StatisticsLedger
from morpion.strategies import Difficulty, make_strategy
from morpion.view import ConsoleView

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

MODE_HUMAN_VS_HUMAN = 1
MODE_HUMAN_VS_AI = 2


class ConsolePrompter:
    def __init__(self, input_fn: InputFn, view: ConsoleView) -> None:
        self.input_fn = input_fn
        self.view = view

    def read_int(self, prompt: str) -> int:
        while True:
            raw = self.input_fn(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self.view.show_error("Veuillez entrer un nombre valide.")

    def read_name(self, prompt: str, default: str) -> str:
        return self.input_fn(prompt).strip() or default

    def choose_mode(self) -> int:
        self.view.show_menu("Mode de jeu", "Joueur vs Joueur", "Joueur vs IA")
        while True:
            choice = self.read_int("Votre choix: ")
            if choice in (MODE_HUMAN_VS_HUMAN, MODE_HUMAN_VS_AI):
                return choice
            self.view.show_error("Choix invalide. Veuillez entrer 1 ou 2.")

    def choose_difficulty(self) -> Difficulty:
        self.view.show_menu("Niveau de difficulté de l'IA", "Facile", "Moyen", "Difficile")
        return Difficulty.parse(self.read_int("Votre choix: "))

    def ask_rematch(self) -> bool:
        self.view.show_message("Voulez-vous rejouer ? (O/N)")
        return self.input_fn("").strip().lower() == "o"


class ConsoleApp:
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        input_fn: InputFn = input,
        view: Optional[ConsoleView] = None,
        ledger: Optional[StatisticsLedger] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or AppConfig()
        self.view = view or ConsoleView(use_colour=self.config.use_colour)
        self.ledger = ledger if ledger is not None else StatisticsLedger()
        self.prompter = ConsolePrompter(input_fn, self.view)
        self.rng = np.random.default_rng(self.config.seed)
        self._sleep = sleep
        self.controller: Optional[GameController] = None

    def create_players(self) -> List[Player]:
        mode = self.prompter.choose_mode()
        name_x = self.prompter.read_name("Nom du joueur 1 (X): ", "Joueur 1")
        player_x = HumanPlayer(name_x, Marker.X, self.prompter)
        if mode == MODE_HUMAN_VS_HUMAN:
            name_o = self.prompter.read_name("Nom du joueur 2 (O): ", "Joueur 2")
            return [player_x, HumanPlayer(name_o, Marker.O, self.prompter)]

        difficulty = self.prompter.choose_difficulty()
        strategy = make_strategy(difficulty, rng=self.rng)
        logger.info("AI difficulty %s (%s)", difficulty.name, strategy.name)
        player_o = AIPlayer(
            "IA",
            Marker.O,
            strategy,
            think_delay=self.config.ai_think_delay,
            sleep=self._sleep,
        )
        return [player_x, player_o]

    def setup(self) -> GameController:
        self.view.clear_screen()
        self.view.show_title()
        player_x, player_o = self.create_players()
        self.controller = GameController(
            Board(self.config.board_size),
            player_x,
            player_o,
            self.ledger,
            view=self.view,
        )
        return self.controller

    def run(self) -> None:
        controller = self.setup()
        while True:
            controller.new_game()
            controller.play_game()
            if not self.prompter.ask_rematch():
                break
        self.view.show_message(self.ledger.leaderboard())
        self.view.show_message("Merci d'avoir joué !")


def configure_encoding(stream: TextIO = sys.stdout) -> bool:
    """Switch ``stream`` to UTF-8; on failure keep the current encoding."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None:
        return False
    try:
        reconfigure(encoding="utf-8")
    except (ValueError, OSError) as exc:
        logger.warning("UTF-8 configuration failed, using simplified output: %s", exc)
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Morpion (Tic-Tac-Toe) in the console.")
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument("--ai-delay", type=float, help="Seconds the AI pauses before moving")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--no-colour", action="store_true")
    parser.add_argument("--log-level", type=str)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config).with_overrides(
            ai_think_delay=args.ai_delay,
            seed=args.seed,
            use_colour=False if args.no_colour else None,
            log_level=args.log_level,
        )
    except ConfigError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=config.log_level.upper())
    configure_encoding(sys.stdout)

    try:
        ConsoleApp(config).run()
    except (EOFError, KeyboardInterrupt):
        print("\nPartie interrompue.")


if __name__ == "__main__":
    main()
