import sys

from PyQt6.QtWidgets import QApplication

from tictactoe.ui import TicTacToeGame

CURRENT_VERSION = "1.0"


def main():
    app = QApplication(sys.argv)
    app.setApplicationName("robot-tictactoe")
    app.setApplicationVersion(CURRENT_VERSION)

    game = TicTacToeGame()
    game.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
