from ..game_logic import GameLogic, status_text, WON, DRAW, X
from ..ui.board_widget import BoardWidget, X_COLOR, O_COLOR

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: forwards clicks/restart to the engine, renders its snapshot
    """
    def __init__(self, game_logic=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic() if game_logic is None else game_logic
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._render(self.game_logic.snapshot())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QPushButton {
                background-color: #444; color: #eee;
                border: 1px solid #555; border-radius: 4px; padding: 6px 14px;
            }
            QPushButton:hover { background-color: #555; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.title_label = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(18); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        restart_action = QAction("Restart", self)
        restart_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(restart_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart")
        self.restart_button.setAccessibleName("Restart Game")
        self.restart_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.restart_button)

    def _render(self, snap):
        # status text + color, then repaint the board
        # next player label takes the color of their marks
        color = X_COLOR if snap.turn == X else O_COLOR
        style = f"color: {color}; font-weight: bold;"
        if snap.result.state == WON:
            style = "color: lime; font-weight: bold;"
        elif snap.result.state == DRAW:
            style = "color: #ffd27a; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(status_text(snap))
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, idx):
        self._render(self.game_logic.make_move(idx))

    @Slot()
    def reset_game(self):
        self._render(self.game_logic.reset_game())
