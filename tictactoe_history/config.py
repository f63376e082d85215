# -----------------------------------------------------------------------------
# GAME CONSTANTS
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                      # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

EMPTY = ''
PLAYER_X = 'X'                      # always moves first
PLAYER_O = 'O'

# order matters: first complete line found is the one reported
WINNING_LINES = (
    # rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # diagonals
    (0, 4, 8), (2, 4, 6),
)

# -----------------------------------------------------------------------------
# UI CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
MIN_BOARD_SIDE = 150

BOARD_BG_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_BORDER_COLOR = "#EE5D28"

SORT_ACTIVE_BG = "#FDEFEA"
SORT_ACTIVE_FG = "#EE5D28"
SORT_INACTIVE_BG = "#f9f9f9"
SORT_INACTIVE_FG = "#333"
