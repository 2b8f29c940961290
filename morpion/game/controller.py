from __future__ import annotations

import logging
from typing import Optional

from morpion.core import Board, GameResult, GridArray, Marker
from morpion.view import GameView

from .players import Player
from .stats import StatisticsLedger

logger = logging.getLogger(__name__)


class GameController:
    """Alternates turns between two players on one board until the game ends."""

    def __init__(
        self,
        board: Board,
        player_x: Player,
        player_o: Player,
        ledger: StatisticsLedger,
        view: Optional[GameView] = None,
    ) -> None:
        if player_x.marker != Marker.X or player_o.marker != Marker.O:
            raise ValueError("Players must hold X and O respectively.")
        self.board = board
        self.player_x = player_x
        self.player_o = player_o
        self.ledger = ledger
        self.view = view or GameView()
        self.current_player: Player = player_x
        self.result = GameResult.ONGOING
        self.rejected_moves = 0

    @property
    def is_over(self) -> bool:
        return self.result.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        marker = self.result.winner
        if marker is None:
            return None
        return self.player_x if marker == Marker.X else self.player_o

    def opponent_of(self, player: Player) -> Player:
        return self.player_o if player is self.player_x else self.player_x

    def snapshot(self) -> GridArray:
        return self.board.snapshot()

    def new_game(self) -> None:
        self.board.reset()
        self.current_player = self.player_x
        self.result = GameResult.ONGOING
        self.rejected_moves = 0

    def play_game(self) -> GameResult:
        while not self.is_over:
            self.play_turn()
        return self.result

    def play_turn(self) -> GameResult:
        if self.is_over:
            raise RuntimeError("Cannot play a turn on a finished game.")
        player = self.current_player
        self.view.render_board(self.snapshot())
        self.view.show_turn(player.name, player.marker)

        self._place_for(player)
        self.ledger.add_moves(player.name, 1)

        if self.board.has_winner(player.marker):
            self.result = GameResult.win_for(player.marker)
            loser = self.opponent_of(player)
            self.ledger.record_win(player.name)
            self.ledger.record_loss(loser.name)
            logger.info("%s wins as %s", player.name, player.marker.symbol)
            self.view.render_board(self.snapshot())
            self.view.show_victory(player.name)
            self.view.show_stats(self.ledger.get(player.name))
        elif self.board.is_full():
            self.result = GameResult.DRAW
            self.ledger.record_draw(self.player_x.name)
            self.ledger.record_draw(self.player_o.name)
            logger.info("Draw between %s and %s", self.player_x.name, self.player_o.name)
            self.view.render_board(self.snapshot())
            self.view.show_draw()
        else:
            self.current_player = self.opponent_of(player)
        return self.result

    def _place_for(self, player: Player) -> None:
        # Humans retry forever; an AI gets one attempt per cell.
        ai_attempts_left = self.board.size * self.board.size
        while True:
            move = player.next_move(self.board)
            if self.board.place(move.row, move.col, player.marker):
                return
            self.rejected_moves += 1
            logger.debug("Rejected move %s from %s", move, player.name)
            if player.is_human:
                self.view.show_error("Coup invalide : case occupée ou hors du plateau.")
                continue
            ai_attempts_left -= 1
            if ai_attempts_left <= 0:
                raise RuntimeError(f"{player.name} keeps proposing illegal moves.")
