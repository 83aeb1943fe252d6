from collections import namedtuple

BOARD_SIZE = 3                        # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
EMPTY = ''
X = 'X'
O = 'O'

# checked in this order, first complete line wins
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)

IN_PROGRESS = "in_progress"
WON = "won"
DRAW = "draw"


class GameResult(namedtuple("GameResult", "state symbol line")):
    """
    outcome derived from a board: in progress, won (symbol + line) or draw
    """
    __slots__ = ()

    @property
    def is_over(self):
        return self.state != IN_PROGRESS


GameResult.in_progress = GameResult(IN_PROGRESS, None, None)
GameResult.draw = GameResult(DRAW, None, None)


Snapshot = namedtuple("Snapshot", "board turn result")


def compute_result(board):
    """
    scan the 8 lines, then fullness. pure, never touches board
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return GameResult(WON, board[a], line)
    if all(cell != EMPTY for cell in board):
        return GameResult.draw
    return GameResult.in_progress


def status_text(snapshot):
    """
    one line status shown under/over the board
    """
    result = snapshot.result
    if result.state == WON:
        return f"{result.symbol} wins!"
    if result.state == DRAW:
        return "Draw!"
    return f"Next player: {snapshot.turn}"


def other(symbol):
    return O if symbol == X else X


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        init empty board, x to move
        """
        self._board = [EMPTY] * CELL_COUNT  # row-major, idx = row*3 + col
        self._turn = X

    @property
    def board(self):
        # copy so callers can't write through it
        return tuple(self._board)

    @property
    def turn(self):
        return self._turn

    @property
    def result(self):
        return compute_result(self._board)

    @property
    def game_over(self):
        return self.result.is_over

    @property
    def winner(self):
        # 'X', 'O', or None
        return self.result.symbol

    def snapshot(self):
        """
        read-only (board, turn, result) for rendering
        """
        return Snapshot(self.board, self._turn, compute_result(self._board))

    def make_move(self, index):
        """
        mark index for whoever's turn it is and flip the turn.
        silently ignored if the game is decided or the cell is taken.
        returns the (possibly unchanged) snapshot
        """
        self._check_index(index)
        if self.result.is_over or self._board[index] != EMPTY:
            return self.snapshot()
        self._board[index] = self._turn
        self._turn = other(self._turn)
        return self.snapshot()

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CELL_COUNT:
            return self._board[index] == EMPTY
        return False

    def reset_game(self):
        """
        clear board, x to move again
        """
        self._board = [EMPTY] * CELL_COUNT
        self._turn = X
        return self.snapshot()

    @staticmethod
    def index_of(row, col):
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        return row * BOARD_SIZE + col

    @staticmethod
    def _check_index(index):
        # bools are ints, refuse them anyway
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"cell index must be an int, got {type(index).__name__}")
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell index {index} out of range 0..{CELL_COUNT - 1}")
