import logging
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional, Tuple

from .config import (
    BOARD_SIZE, CELL_COUNT, EMPTY, PLAYER_X, PLAYER_O, WINNING_LINES
)

logger = logging.getLogger(__name__)

EMPTY_BOARD = (EMPTY,) * CELL_COUNT


class Outcome(NamedTuple):
    """
    result of scanning one snapshot
    status is 'win', 'draw' or 'continue'
    """
    status: str
    winner: Optional[str] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def decided(self):
        # win and draw are both terminal
        return self.status != "continue"


ONGOING = Outcome("continue")
DRAW = Outcome("draw")


class MoveEntry(NamedTuple):
    """
    one row of the move list as the ui shows it
    """
    move: int
    location: Optional[Tuple[int, int]]
    is_current: bool
    label: str


@dataclass(frozen=True)
class GameState:
    """
    snapshot history, pointer into it, move locations and sort flag

    never mutated: every update below returns a new GameState, or the
    same object when the update is rejected
    """
    history: Tuple[Tuple[str, ...], ...] = (EMPTY_BOARD,)
    pointer: int = 0
    locations: Tuple[Tuple[int, int], ...] = ()   # one per ply after start
    ascending: bool = True

    @property
    def current_board(self):
        return self.history[self.pointer]

    @property
    def next_player(self):
        # X plays the even plies
        return PLAYER_X if self.pointer % 2 == 0 else PLAYER_O

    @property
    def outcome(self):
        return evaluate_outcome(self.current_board)


def evaluate_outcome(board):
    """
    scan rows, cols, diags in fixed order
    first full line wins, else full board is a draw
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome("win", board[a], line)
    if all(cell != EMPTY for cell in board):
        return DRAW
    return ONGOING


def index_to_location(cell_index):
    """
    linear index -> 1-based (row, col)
    """
    return cell_index // BOARD_SIZE + 1, cell_index % BOARD_SIZE + 1


def format_location(location):
    return "(%d, %d)" % location


def play_move(state, cell_index):
    """
    place the next mark at cell_index
    returns the new state, or state itself if the move is not allowed
    """
    if not isinstance(cell_index, int) or not 0 <= cell_index < CELL_COUNT:
        logger.debug("ignoring move at out-of-range cell %r", cell_index)
        return state
    board = state.current_board
    if board[cell_index] != EMPTY:
        logger.debug("ignoring move at occupied cell %d", cell_index)
        return state
    if state.outcome.decided:
        logger.debug("ignoring move at cell %d, game already over", cell_index)
        return state

    cells = list(board)
    cells[cell_index] = state.next_player
    # drop any future left over from an earlier jump back
    history = state.history[:state.pointer + 1] + (tuple(cells),)
    locations = state.locations[:state.pointer] + (index_to_location(cell_index),)
    return replace(state, history=history, pointer=len(history) - 1,
                   locations=locations)


def jump_to(state, move):
    """
    point at an earlier (or later) snapshot without touching history
    """
    if not isinstance(move, int) or not 0 <= move < len(state.history):
        logger.debug("ignoring jump to move %r", move)
        return state
    if move == state.pointer:
        return state
    return replace(state, pointer=move)


def toggle_sort_order(state):
    return replace(state, ascending=not state.ascending)


def status_text(state):
    outcome = state.outcome
    if outcome.status == "win":
        return f"Winner: {outcome.winner}"
    if outcome.status == "draw":
        return "It's a draw!"
    return f"Next player: {state.next_player}"


def winning_line(state):
    """
    the three cells to highlight, or None
    """
    return state.outcome.line


def move_entries(state):
    """
    build the move list in display order
    """
    entries = []
    for move in range(len(state.history)):
        location = state.locations[move - 1] if move > 0 else None
        term = f"{move} {format_location(location)}" if location else str(move)
        if move == state.pointer:
            label = f"You are at move #{term}"
        elif move == 0:
            label = "Go to game start"
        else:
            label = f"Go to move #{term}"
        entries.append(MoveEntry(move, location, move == state.pointer, label))
    if not state.ascending:
        entries.reverse()
    return entries


class GameEngine:
    """
    owns the current GameState and swaps it on every interaction
    """
    def __init__(self, ascending=True):
        self.state = GameState(ascending=ascending)

    def play_move(self, cell_index):
        """
        returns 'win', 'draw', 'continue', or 'invalid'
        """
        new_state = play_move(self.state, cell_index)
        if new_state is self.state:
            return "invalid"
        self.state = new_state
        outcome = new_state.outcome
        if outcome.status == "win":
            logger.info("player %s wins on line %s", outcome.winner, outcome.line)
        elif outcome.status == "draw":
            logger.info("game drawn after %d moves", new_state.pointer)
        return outcome.status

    def jump_to(self, move):
        """
        returns True if the pointer moved
        """
        new_state = jump_to(self.state, move)
        changed = new_state is not self.state
        self.state = new_state
        return changed

    def toggle_sort_order(self):
        self.state = toggle_sort_order(self.state)

    def reset_game(self):
        # fresh board, keep the sort preference
        self.state = GameState(ascending=self.state.ascending)
        logger.info("new game started")

    # read-only views for the ui

    @property
    def current_board(self):
        return self.state.current_board

    @property
    def outcome(self):
        return self.state.outcome

    @property
    def game_over(self):
        return self.state.outcome.decided

    def status_text(self):
        return status_text(self.state)

    def winning_line(self):
        return winning_line(self.state)

    def move_entries(self):
        return move_entries(self.state)
