from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from morpion.core import Board, Marker, Move
from morpion.errors import NoMoveAvailableError
from morpion.strategies import (
    Difficulty,
    MinimaxConfig,
    MinimaxStrategy,
    RandomStrategy,
    TacticalStrategy,
    find_winning_move,
    make_strategy,
)

X, O, E = Marker.X, Marker.O, Marker.EMPTY


def board_from(rows) -> Board:
    symbols = {"X": X, "O": O, ".": E}
    return Board.from_grid([[symbols[ch] for ch in row] for row in rows])


class ScriptedStrategy:
    name = "scripted"

    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = 0

    def choose_move(self, board, marker):
        self.calls += 1
        return self.moves.pop(0)

    def spawn(self, seed=None):
        return self


# ---------------------------------------------------------------- random


def test_random_strategy_only_picks_empty_cells() -> None:
    strategy = RandomStrategy(np.random.default_rng(0))
    board = board_from(["XO.", "OX.", "X.O"])
    empties = set(board.empty_cells())
    seen = set()
    for _ in range(200):
        move = strategy.choose_move(board, X)
        assert move.as_tuple() in empties
        seen.add(move.as_tuple())
    assert seen == empties


def test_random_strategy_single_empty_cell() -> None:
    board = board_from(["XOX", "XOO", "OX."])
    assert RandomStrategy(np.random.default_rng(3)).choose_move(board, O) == Move(2, 2)


def test_random_strategy_refuses_full_board() -> None:
    board = board_from(["XOX", "XOO", "OXX"])
    with pytest.raises(NoMoveAvailableError):
        RandomStrategy().choose_move(board, X)


def test_random_strategy_refuses_empty_marker() -> None:
    with pytest.raises(NoMoveAvailableError):
        RandomStrategy().choose_move(Board(), E)


def test_spawned_random_strategies_are_reproducible() -> None:
    board = Board()
    a = RandomStrategy().spawn(11)
    b = RandomStrategy().spawn(11)
    assert [a.choose_move(board, X) for _ in range(10)] == [b.choose_move(board, X) for _ in range(10)]


def test_strategies_do_not_mutate_the_board() -> None:
    board = board_from(["XO.", ".X.", "O.."])
    before = board.snapshot()
    for strategy in (RandomStrategy(np.random.default_rng(1)), TacticalStrategy(), MinimaxStrategy()):
        strategy.choose_move(board, O)
        strategy.choose_move(board.snapshot(), X)
    assert np.array_equal(board.snapshot(), before)


# ---------------------------------------------------------------- tactical


def test_tactical_takes_win_over_block() -> None:
    # X can win on (0,2); O also threatens (1,2). The win comes first.
    board = board_from(["XX.", "OO.", "..."])
    fallback = ScriptedStrategy([Move(2, 2)])
    strategy = TacticalStrategy(fallback)
    assert strategy.choose_move(board, X) == Move(0, 2)
    assert strategy.choose_move(board, O) == Move(1, 2)
    assert fallback.calls == 0


def test_tactical_blocks_opponent() -> None:
    board = board_from(["X..", ".X.", "O.."])
    assert TacticalStrategy().choose_move(board, O) == Move(2, 2)


def test_tactical_first_win_in_scan_order() -> None:
    board = board_from(["X.X", "X..", "..."])
    assert TacticalStrategy().choose_move(board, X) == Move(0, 1)


def test_tactical_falls_back_when_nothing_is_forced() -> None:
    board = board_from(["X..", "...", "..."])
    fallback = ScriptedStrategy([Move(2, 1)])
    assert TacticalStrategy(fallback).choose_move(board, O) == Move(2, 1)
    assert fallback.calls == 1


def test_find_winning_move_leaves_grid_untouched() -> None:
    grid = [[X, X, E], [O, O, E], [E, E, E]]
    copy = [row[:] for row in grid]
    assert find_winning_move(grid, O) == Move(1, 2)
    assert grid == copy
    assert find_winning_move([[E] * 3 for _ in range(3)], X) is None


# ---------------------------------------------------------------- minimax


def test_minimax_prefers_centre_when_free() -> None:
    board = board_from(["X..", "...", "..."])
    assert MinimaxStrategy().choose_move(board, O) == Move(1, 1)
    assert MinimaxStrategy().choose_move(Board(), X) == Move(1, 1)


def test_minimax_takes_immediate_win() -> None:
    board = board_from(["OO.", "XX.", "X.."])
    assert MinimaxStrategy().choose_move(board, O) == Move(0, 2)


def test_minimax_blocks_immediate_threat() -> None:
    board = board_from(["X..", ".O.", "X.."])
    assert MinimaxStrategy().choose_move(board, O) == Move(1, 0)


def test_minimax_answers_corner_opening_without_losing() -> None:
    # After X corner / O centre / X opposite corner, O must play an edge.
    board = board_from(["X..", ".O.", "..X"])
    move = MinimaxStrategy().choose_move(board, O)
    assert move in {Move(0, 1), Move(1, 0), Move(1, 2), Move(2, 1)}


def test_minimax_values() -> None:
    strategy = MinimaxStrategy()
    won = [[O, O, O], [X, X, E], [X, E, E]]
    assert strategy.minimax(won, True, marker=O) == 1
    assert strategy.minimax(won, False, marker=X) == -1
    drawn = [[X, O, X], [X, O, O], [O, X, X]]
    assert strategy.minimax(drawn, True, marker=X) == 0
    # X to move with two threats against O.
    forked = [[X, E, X], [E, O, E], [X, E, O]]
    assert strategy.minimax(forked, True, marker=X) == 1


def test_minimax_avoids_the_losing_cell() -> None:
    board = board_from(["XOX", "XOO", "O.."])
    assert MinimaxStrategy().choose_move(board, X) == Move(2, 1)


def test_minimax_ties_keep_first_move_in_scan_order() -> None:
    # Every opening draws under perfect play.
    strategy = MinimaxStrategy(MinimaxConfig(prefer_centre=False, alpha_beta=True))
    assert strategy.choose_move(Board(), X) == Move(0, 0)


def test_alpha_beta_chooses_the_same_moves() -> None:
    rng = np.random.default_rng(5)
    plain = MinimaxStrategy(MinimaxConfig(prefer_centre=False))
    pruned = MinimaxStrategy(MinimaxConfig(prefer_centre=False, alpha_beta=True))
    for _ in range(20):
        board = Board()
        marker = X
        for _ in range(int(rng.integers(3, 6))):
            row, col = board.empty_cells()[int(rng.integers(len(board.empty_cells())))]
            board.place(row, col, marker)
            marker = marker.opponent()
            if board.result().is_terminal:
                break
        if board.result().is_terminal:
            continue
        assert plain.choose_move(board, marker) == pruned.choose_move(board, marker)
        assert pruned.nodes_visited <= plain.nodes_visited


# ---------------------------------------------------------------- factory


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, Difficulty.EASY),
        (2, Difficulty.MEDIUM),
        (3, Difficulty.HARD),
        (0, Difficulty.EASY),
        (42, Difficulty.EASY),
        ("3", Difficulty.HARD),
        ("hard", Difficulty.HARD),
        ("Medium", Difficulty.MEDIUM),
    ],
)
def test_difficulty_parse(value, expected) -> None:
    assert Difficulty.parse(value) == expected


def test_difficulty_parse_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        Difficulty.parse("impossible")


def test_make_strategy_levels() -> None:
    assert isinstance(make_strategy(Difficulty.EASY), RandomStrategy)
    assert isinstance(make_strategy(2), TacticalStrategy)
    hard = make_strategy("hard", minimax_config=MinimaxConfig(alpha_beta=True))
    assert isinstance(hard, MinimaxStrategy)
    assert hard.config.alpha_beta
    assert isinstance(make_strategy(9), RandomStrategy)


def test_shared_minimax_instance_serves_both_markers_concurrently() -> None:
    strategy = MinimaxStrategy(MinimaxConfig(prefer_centre=False))
    x_board = board_from(["X..", ".O.", "..."])
    o_board = board_from(["XX.", ".O.", "..."])
    expected_x = MinimaxStrategy(MinimaxConfig(prefer_centre=False)).choose_move(x_board, X)
    expected_o = MinimaxStrategy(MinimaxConfig(prefer_centre=False)).choose_move(o_board, O)

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [
            pool.submit(strategy.choose_move, board, marker)
            for board, marker in [(x_board, X), (o_board, O)] * 4
        ]
        moves = [future.result() for future in futures]

    assert moves == [expected_x, expected_o] * 4
    assert expected_o == Move(0, 2)


def test_minimax_value_does_not_leak_into_later_moves() -> None:
    strategy = MinimaxStrategy()
    board = board_from(["XX.", ".O.", "..."])
    before = strategy.choose_move(board, O)
    strategy.minimax(board.snapshot().tolist(), True, marker=X)
    assert strategy.choose_move(board, O) == before == Move(0, 2)
