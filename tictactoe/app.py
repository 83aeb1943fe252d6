import sys
import argparse

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from .console import ConsoleGame
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

DARK_GREY = QColor(53, 53, 53)
DARKER_GREY = QColor(35, 35, 35)
BUTTON_GREY = QColor(66, 66, 66)
ACCENT_BLUE = QColor(42, 130, 218)
MUTED_GREY = QColor(127, 127, 127)

# role -> color, applied to every color group
PALETTE_ROLES = {
    QPalette.Window: DARK_GREY,
    QPalette.WindowText: Qt.white,
    QPalette.Base: DARKER_GREY,
    QPalette.AlternateBase: DARK_GREY,
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: BUTTON_GREY,
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Link: ACCENT_BLUE,
    QPalette.Highlight: ACCENT_BLUE,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

# greyed out text for disabled widgets (e.g. menu entries)
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette.
    """
    palette = QPalette()
    for role, color in PALETTE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED_GREY)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player Tic Tac Toe.")
    parser.add_argument(
        "--console", action="store_true",
        help="play in the terminal instead of opening a window",
    )
    # leftover args (e.g. -style) are handed to Qt
    return parser.parse_known_args(argv)


def main(argv=None):
    args, qt_args = parse_args(argv)
    if args.console:
        print("--- Tic Tac Toe ---")
        ConsoleGame().run()
        return 0

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()
