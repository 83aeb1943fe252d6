import sys

from .game_logic import GameLogic, BOARD_SIZE, CELL_COUNT, EMPTY, status_text

QUIT_WORDS = ("q", "quit", "exit")
RESTART_WORDS = ("r", "restart")


class ConsoleGame:
    """
    terminal front-end: prints the board, reads moves, forwards them to the engine
    """

    def __init__(self, game_logic=None, stdin=None, stdout=None):
        self.game_logic = GameLogic() if game_logic is None else game_logic
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout

    def _print(self, *args):
        print(*args, file=self.stdout)

    def print_board(self, snap):
        """Prints the board, empty cells show their index."""
        self._print("\n-------------")
        for r in range(BOARD_SIZE):
            cells = snap.board[r*BOARD_SIZE:(r + 1)*BOARD_SIZE]
            self._print(" " + " | ".join(
                cell if cell != EMPTY else str(r*BOARD_SIZE + c) for c, cell in enumerate(cells)
            ))
            if r < BOARD_SIZE - 1: self._print("  ---------")
        self._print("-------------")
        self._print(status_text(snap))

    def parse_move(self, text):
        """
        'row,col' or a single cell number -> index.
        raises ValueError with a user-facing message on bad input
        """
        if ',' in text:
            parts = text.split(',')
            if len(parts) != 2:
                raise ValueError("Use row,col (e.g. 1,1) or a cell number 0-8.")
            try:
                row, col = int(parts[0]), int(parts[1])
            except ValueError:
                raise ValueError("Row and column must be numbers (e.g. 1,1).") from None
            if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
                raise ValueError("Row/column must be between 0 and 2.")
            return GameLogic.index_of(row, col)
        try:
            idx = int(text)
        except ValueError:
            raise ValueError("Use row,col (e.g. 1,1) or a cell number 0-8.") from None
        if not 0 <= idx < CELL_COUNT:
            raise ValueError("Cell number must be between 0 and 8.")
        return idx

    def prompt(self, snap):
        if snap.result.is_over:
            return "Game over. (r)estart or (q)uit: "
        return f"{snap.turn} to move. Enter row,col or 0-8, (r)estart, (q)uit: "

    def run(self):
        """
        play until quit or end of input
        """
        snap = self.game_logic.snapshot()
        self.print_board(snap)
        while True:
            self.stdout.write(self.prompt(snap))
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self._print()
                break
            text = line.strip().lower()
            if not text:
                continue
            if text in QUIT_WORDS:
                break
            if text in RESTART_WORDS:
                snap = self.game_logic.reset_game()
                self.print_board(snap)
                continue
            try:
                idx = self.parse_move(text)
            except ValueError as e:
                self._print(f"!! {e}")
                continue
            snap = self.game_logic.make_move(idx)
            self.print_board(snap)
        self._print("Exiting.")
        return snap
