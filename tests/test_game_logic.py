import random

import pytest

from tictactoe_history.config import EMPTY, PLAYER_X, PLAYER_O
from tictactoe_history.game_logic import (
    EMPTY_BOARD, GameState, evaluate_outcome, format_location,
    index_to_location, jump_to, move_entries, play_move, status_text,
    toggle_sort_order, winning_line
)

X, O, _ = PLAYER_X, PLAYER_O, EMPTY


def play_all(state, *cells):
    for cell in cells:
        state = play_move(state, cell)
    return state


# -----------------------------------------------------------------------------
# outcome
# -----------------------------------------------------------------------------

def test_empty_board_is_ongoing():
    outcome = evaluate_outcome(EMPTY_BOARD)
    assert outcome.status == "continue"
    assert outcome.winner is None and outcome.line is None
    assert not outcome.decided


def test_top_row_win():
    board = (X, X, X,
             O, O, _,
             _, _, _)
    outcome = evaluate_outcome(board)
    assert outcome.status == "win"
    assert outcome.winner == X
    assert outcome.line == (0, 1, 2)


@pytest.mark.parametrize("line", [
    (3, 4, 5), (6, 7, 8), (0, 3, 6), (1, 4, 7), (2, 5, 8), (0, 4, 8), (2, 4, 6),
])
def test_every_line_is_detected(line):
    board = [_] * 9
    for i in line:
        board[i] = O
    outcome = evaluate_outcome(tuple(board))
    assert (outcome.status, outcome.winner, outcome.line) == ("win", O, line)


def test_full_board_without_line_is_draw():
    board = (X, O, X,
             X, O, O,
             O, X, X)
    outcome = evaluate_outcome(board)
    assert outcome.status == "draw"
    assert outcome.winner is None
    assert outcome.decided


def test_win_on_last_cell_is_not_a_draw():
    board = (X, O, X,
             O, X, O,
             O, X, X)
    assert evaluate_outcome(board).status == "win"


def test_first_line_in_scan_order_is_reported():
    # row 0 and column 0 both complete
    board = (X, X, X,
             X, O, O,
             X, O, O)
    assert evaluate_outcome(board).line == (0, 1, 2)


# -----------------------------------------------------------------------------
# locations
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("index, expected", [
    (0, (1, 1)), (2, (1, 3)), (3, (2, 1)), (5, (2, 3)), (8, (3, 3)),
])
def test_index_to_location(index, expected):
    assert index_to_location(index) == expected


def test_format_location():
    assert format_location((3, 1)) == "(3, 1)"


# -----------------------------------------------------------------------------
# play_move
# -----------------------------------------------------------------------------

def test_new_state():
    state = GameState()
    assert state.history == (EMPTY_BOARD,)
    assert state.pointer == 0
    assert state.locations == ()
    assert state.ascending
    assert state.next_player == X


def test_play_move_appends_snapshot():
    state = play_move(GameState(), 4)
    assert state.pointer == 1
    assert len(state.history) == 2
    assert state.history[0] == EMPTY_BOARD
    assert state.current_board[4] == X
    assert state.locations == ((2, 2),)
    assert state.next_player == O


def test_play_move_does_not_mutate_previous_state():
    before = GameState()
    after = play_move(before, 0)
    assert before == GameState()
    assert after != before


def test_marks_alternate():
    state = play_all(GameState(), 0, 1, 2)
    assert state.current_board[:3] == (X, O, X)


def test_occupied_cell_is_ignored():
    state = play_all(GameState(), 0, 1)
    assert play_move(state, 0) is state
    assert play_move(state, 1) is state


@pytest.mark.parametrize("cell", [-1, 9, 42, "4", None, 1.0])
def test_out_of_range_cell_is_ignored(cell):
    state = GameState()
    assert play_move(state, cell) is state


def test_move_after_win_is_ignored():
    state = play_all(GameState(), 0, 3, 1, 4, 2)
    assert state.outcome.status == "win"
    assert play_move(state, 8) is state


def test_move_after_draw_is_ignored():
    state = play_all(GameState(), 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert state.outcome.status == "draw"
    assert len(state.history) == 10
    # board is full anyway, so every cell is rejected
    for cell in range(9):
        assert play_move(state, cell) is state


def test_each_snapshot_differs_by_one_cell():
    state = play_all(GameState(), 4, 0, 8, 2, 1)
    for prev, cur in zip(state.history, state.history[1:]):
        changed = [i for i in range(9) if prev[i] != cur[i]]
        assert len(changed) == 1
        assert prev[changed[0]] == EMPTY
        assert cur[changed[0]] != EMPTY


@pytest.mark.parametrize("seed", range(20))
def test_mark_counts_stay_balanced(seed):
    rng = random.Random(seed)
    state = GameState()
    for _ in range(30):
        state = play_move(state, rng.randrange(9))
        if rng.random() < 0.2:
            state = jump_to(state, rng.randrange(len(state.history)))
    for board in state.history:
        assert board.count(X) - board.count(O) in (0, 1)
    assert len(state.locations) == len(state.history) - 1


def test_diagonal_win_scenario():
    state = play_all(GameState(), 0, 1, 4, 2, 8)
    outcome = state.outcome
    assert outcome.status == "win"
    assert outcome.winner == X
    assert outcome.line == (0, 4, 8)
    assert format_location(state.locations[4]) == "(3, 3)"
    assert status_text(state) == "Winner: X"
    assert winning_line(state) == (0, 4, 8)


# -----------------------------------------------------------------------------
# jump_to / branching
# -----------------------------------------------------------------------------

def test_jump_keeps_history_and_locations():
    state = play_all(GameState(), 0, 1, 2)
    jumped = jump_to(state, 1)
    assert jumped.pointer == 1
    assert jumped.history == state.history
    assert jumped.locations == state.locations
    assert jumped.current_board == state.history[1]
    assert jumped.next_player == O


@pytest.mark.parametrize("move", [-1, 4, 100, "1", None])
def test_jump_out_of_range_is_ignored(move):
    state = play_all(GameState(), 0, 1, 2)
    assert jump_to(state, move) is state


def test_branching_truncates_future():
    state = play_all(GameState(), 0, 1, 2)
    assert len(state.history) == 4
    old_second = state.history[2]

    state = play_move(jump_to(state, 1), 5)
    assert len(state.history) == 3
    assert state.pointer == 2
    assert state.history[2] != old_second
    assert state.history[2][5] == O
    assert state.history[2][1] == EMPTY
    assert state.locations == ((1, 1), (2, 3))


def test_branch_from_start():
    state = play_all(GameState(), 0, 1, 2, 3)
    state = play_move(jump_to(state, 0), 8)
    assert len(state.history) == 2
    assert state.current_board == (_, _, _, _, _, _, _, _, X)
    assert state.locations == ((3, 3),)


def test_jump_back_out_of_finished_game_allows_play():
    state = play_all(GameState(), 0, 3, 1, 4, 2)
    state = jump_to(state, 4)
    assert status_text(state) == "Next player: X"
    assert winning_line(state) is None
    state = play_move(state, 8)
    assert state.pointer == 5
    assert state.outcome.status == "continue"


# -----------------------------------------------------------------------------
# presentation helpers
# -----------------------------------------------------------------------------

def test_status_text():
    assert status_text(GameState()) == "Next player: X"
    assert status_text(play_move(GameState(), 0)) == "Next player: O"
    draw = play_all(GameState(), 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert status_text(draw) == "It's a draw!"


def test_move_entries_labels():
    state = play_all(GameState(), 0, 5)
    labels = [e.label for e in move_entries(state)]
    assert labels == [
        "Go to game start",
        "Go to move #1 (1, 1)",
        "You are at move #2 (2, 3)",
    ]
    state = jump_to(state, 0)
    labels = [e.label for e in move_entries(state)]
    assert labels[0] == "You are at move #0"
    assert labels[2] == "Go to move #2 (2, 3)"


def test_move_entries_current_flag():
    state = jump_to(play_all(GameState(), 0, 5, 7), 1)
    current = [e.move for e in move_entries(state) if e.is_current]
    assert current == [1]


def test_descending_order():
    state = toggle_sort_order(play_all(GameState(), 0, 5, 7))
    assert not state.ascending
    assert [e.move for e in move_entries(state)] == [3, 2, 1, 0]


@pytest.mark.parametrize("moves", [(), (4,), (0, 1, 2), (0, 1, 4, 2, 8)])
def test_toggle_twice_restores_order(moves):
    state = play_all(GameState(), *moves)
    original = move_entries(state)
    assert move_entries(toggle_sort_order(toggle_sort_order(state))) == original


def test_toggle_does_not_touch_game():
    state = play_all(GameState(), 0, 1)
    toggled = toggle_sort_order(state)
    assert toggled.history == state.history
    assert toggled.pointer == state.pointer
    assert toggled.locations == state.locations
