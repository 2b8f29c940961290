import pytest

from morpion.core import Board, GameResult, Marker, Move
from morpion.game import AIPlayer, GameController, HumanPlayer, StatisticsLedger
from morpion.strategies import MinimaxStrategy
from morpion.view import GameView


class FakePrompter:
    def __init__(self, values):
        self.values = list(values)

    def read_int(self, prompt):
        return self.values.pop(0)


class RecordingView(GameView):
    def __init__(self):
        self.events = []

    def render_board(self, grid):
        self.events.append(("board", grid.copy()))

    def show_turn(self, name, marker):
        self.events.append(("turn", name, marker))

    def show_victory(self, name):
        self.events.append(("victory", name))

    def show_draw(self):
        self.events.append(("draw",))

    def show_error(self, message):
        self.events.append(("error", message))

    def show_stats(self, stats):
        self.events.append(("stats", stats.name))

    def kinds(self):
        return [event[0] for event in self.events]


def humans(x_moves, o_moves):
    flat_x = [v for move in x_moves for v in move]
    flat_o = [v for move in o_moves for v in move]
    return (
        HumanPlayer("Alice", Marker.X, FakePrompter(flat_x)),
        HumanPlayer("Bob", Marker.O, FakePrompter(flat_o)),
    )


def test_row_win_records_stats():
    player_x, player_o = humans([(0, 0), (0, 1), (0, 2)], [(1, 0), (2, 2)])
    ledger = StatisticsLedger()
    view = RecordingView()
    controller = GameController(Board(), player_x, player_o, ledger, view)

    assert controller.play_game() == GameResult.X_WIN
    assert controller.is_over
    assert controller.winner is player_x
    assert controller.board.has_winner(Marker.X)
    assert not controller.board.is_full()

    assert ledger.get("Alice").wins == 1
    assert ledger.get("Bob").losses == 1
    assert ledger.get("Alice").moves == 3
    assert ledger.get("Bob").moves == 2
    assert view.kinds().count("victory") == 1
    assert ("stats", "Alice") in view.events


def test_full_board_draw_records_once():
    x_moves = [(0, 0), (0, 2), (1, 0), (2, 1), (2, 2)]
    o_moves = [(0, 1), (1, 1), (1, 2), (2, 0)]
    player_x, player_o = humans(x_moves, o_moves)
    ledger = StatisticsLedger()
    view = RecordingView()
    controller = GameController(Board(), player_x, player_o, ledger, view)

    assert controller.play_game() == GameResult.DRAW
    assert controller.winner is None
    assert controller.board.is_full()
    assert view.kinds().count("draw") == 1
    for name in ("Alice", "Bob"):
        stats = ledger.get(name)
        assert stats.draws == 1
        assert stats.games_played == 1


def test_illegal_moves_reprompt_same_player():
    # Bob first aims off the board, then at Alice's cell.
    player_x, player_o = humans([(1, 1), (0, 0), (2, 2)], [(5, 5), (1, 1), (0, 2), (0, 1)])
    view = RecordingView()
    controller = GameController(Board(), player_x, player_o, StatisticsLedger(), view)

    controller.play_turn()
    assert controller.current_player is player_o
    controller.play_turn()
    assert controller.rejected_moves == 2
    assert view.kinds().count("error") == 2
    assert controller.board.cell(0, 2) == Marker.O
    assert controller.current_player is player_x


def test_turn_alternates_and_snapshot_is_detached():
    player_x, player_o = humans([(0, 0)], [(1, 1)])
    controller = GameController(Board(), player_x, player_o, StatisticsLedger())
    assert controller.current_player is player_x
    controller.play_turn()
    assert controller.current_player is player_o

    snap = controller.snapshot()
    snap[2, 2] = Marker.X
    assert controller.board.cell(2, 2) == Marker.EMPTY


def test_new_game_keeps_players_and_resets_board():
    player_x, player_o = humans([(0, 0), (0, 1), (0, 2), (2, 2)], [(1, 0), (1, 1)])
    ledger = StatisticsLedger()
    controller = GameController(Board(), player_x, player_o, ledger)
    controller.play_game()

    controller.new_game()
    assert controller.result == GameResult.ONGOING
    assert controller.board.occupied_count() == 0
    assert controller.current_player is player_x
    controller.play_turn()
    assert controller.board.cell(2, 2) == Marker.X


def test_finished_game_refuses_more_turns():
    player_x, player_o = humans([(0, 0), (0, 1), (0, 2)], [(1, 0), (1, 1)])
    controller = GameController(Board(), player_x, player_o, StatisticsLedger())
    controller.play_game()
    with pytest.raises(RuntimeError):
        controller.play_turn()


def test_markers_must_match_seats():
    player_x, player_o = humans([], [])
    with pytest.raises(ValueError):
        GameController(Board(), player_o, player_x, StatisticsLedger())


def test_human_vs_minimax_blocks_row():
    player_x = HumanPlayer("Alice", Marker.X, FakePrompter([0, 0, 0, 1]))
    player_o = AIPlayer("IA", Marker.O, MinimaxStrategy())
    controller = GameController(Board(), player_x, player_o, StatisticsLedger())
    for _ in range(3):
        controller.play_turn()
    assert controller.board.cell(1, 1) == Marker.O
    controller.play_turn()
    assert controller.board.cell(0, 2) == Marker.O


class StubbornStrategy:
    name = "stubborn"

    def choose_move(self, board, marker):
        return Move(0, 0)


def test_ai_proposing_only_illegal_moves_is_an_error():
    player_x = HumanPlayer("Alice", Marker.X, FakePrompter([0, 0]))
    player_o = AIPlayer("IA", Marker.O, StubbornStrategy())
    controller = GameController(Board(), player_x, player_o, StatisticsLedger())
    controller.play_turn()
    with pytest.raises(RuntimeError):
        controller.play_turn()
