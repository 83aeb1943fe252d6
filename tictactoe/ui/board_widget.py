from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, EMPTY, WON, X

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_CELL_COLOR = "#4a5a3a"


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0..8 on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state, read only
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget: (x, y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None if outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        snap = self.game_logic.snapshot()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            cell_size = side / BOARD_SIZE
            # background
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            # winning cells under everything else
            if snap.result.state == WON:
                for idx in snap.result.line:
                    r, c = divmod(idx, BOARD_SIZE)
                    painter.fillRect(
                        QRectF(ox + c*cell_size, oy + r*cell_size, cell_size, cell_size),
                        QColor(WIN_CELL_COLOR),
                    )
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # draw marks
            for idx, sym in enumerate(snap.board):
                if sym == EMPTY: continue
                r, c = divmod(idx, BOARD_SIZE)
                cx = ox + c*cell_size + cell_size/2
                cy = oy + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        # ui-side guard, the engine ignores these anyway
        if self.game_logic.game_over:
            return
        pos = event.position()
        idx = self.cell_at(pos.x(), pos.y())
        if idx is None or not self.game_logic.is_cell_empty(idx):
            return
        self.cell_clicked.emit(idx)  # notify main window
