from PyQt6.QtWidgets import QMainWindow, QWidget, QLabel, QGridLayout, QVBoxLayout
from PyQt6.QtGui import QPixmap, QPainter, QPen, QColor, QFont
from PyQt6.QtCore import Qt, QTimer, QRect

from desktop.dialogs import ResultDialog
from desktop.settings import GameSettings
from tictactoe.alerts import alert_for
from tictactoe.logic import Player, is_occupied
from tictactoe.session import GameSession, GameStatus

X_COLOR = "#4FC3F7"
O_COLOR = "#FF5252"


class DrawingAnimation(QWidget):
    """Draws a mark stroke by stroke on top of its cell, then removes itself."""

    def __init__(self, parent, rect, symbol, on_finish):
        super().__init__(parent)
        self.setGeometry(rect)
        self.symbol = symbol
        self.on_finish = on_finish
        self.progress = 0  # 0.0 to 1.0
        self.show()

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.animate)
        self.timer.start(16)  # ~60 FPS

    def animate(self):
        self.progress += 0.05
        if self.progress >= 1.0:
            self.progress = 1.0
            self.timer.stop()
            self.on_finish()
            self.deleteLater()
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w, h = self.width(), self.height()
        pen_width = max(3, min(w, h) // 15)
        margin = int(min(w, h) * 0.25)

        if self.symbol == 'X':
            pen = QPen(QColor(X_COLOR))
            pen.setWidth(pen_width)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(pen)

            # "\" during the first half, "/" during the second
            p1_end = min(self.progress * 2, 1.0)
            if p1_end > 0:
                x2 = margin + (w - 2 * margin) * p1_end
                y2 = margin + (h - 2 * margin) * p1_end
                painter.drawLine(margin, margin, int(x2), int(y2))

            if self.progress > 0.5:
                p2_end = (self.progress - 0.5) * 2
                x2 = (w - margin) - (w - 2 * margin) * p2_end
                y2 = margin + (h - 2 * margin) * p2_end
                painter.drawLine(w - margin, margin, int(x2), int(y2))

        elif self.symbol == 'O':
            pen = QPen(QColor(O_COLOR))
            pen.setWidth(pen_width)
            painter.setPen(pen)

            # Angles are in 1/16 of a degree, full circle = 5760
            span_angle = int(5760 * self.progress)
            rect = QRect(margin, margin, w - 2 * margin, h - 2 * margin)
            painter.drawArc(rect, 90 * 16, -span_angle)  # Start at the top

        painter.end()


class TicTacToeGame(QMainWindow):
    def __init__(self, session=None, settings=None):
        super().__init__()
        self.session = session or GameSession()
        settings = settings or GameSettings()
        self.resize(400, 450)
        self.setMinimumSize(200, 200)
        self.setWindowTitle("Tic-Tac-Toe vs Robot")
        self.setStyleSheet("QMainWindow { background-color: #1E1E2E; }")

        self.computer_delay_ms = settings.computer_delay_ms
        self.board_disabled = False
        self.hidden_cell = None
        self.result_dialog = None

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(20, 20, 20, 20)

        # Status on top
        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_label.setFont(QFont("Arial", 16, QFont.Weight.Bold))
        self.status_label.setFixedHeight(40)

        self.main_layout.addWidget(self.status_label)

        self.board_container = QWidget()
        self.main_layout.addWidget(self.board_container, 1)

        self.grid_layout = QGridLayout(self.board_container)
        self.grid_layout.setSpacing(0)
        self.grid_layout.setContentsMargins(0, 0, 0, 0)

        self.cells = {}
        self._init_board_ui()

    def _init_board_ui(self):
        for index in range(9):
            row, col = divmod(index, 3)
            label = QLabel()
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setScaledContents(True)
            # Semi-transparent so the cell borders stay visible
            label.setStyleSheet("background-color: rgba(0, 0, 0, 50); border: 2px solid rgba(255, 255, 255, 100);")
            self.grid_layout.addWidget(label, row, col)
            self.cells[index] = label

    def showEvent(self, event):
        super().showEvent(event)
        self._update_ui()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._update_ui()

    def mousePressEvent(self, event):
        super().mousePressEvent(event)
        if event.button() != Qt.MouseButton.LeftButton: return

        # Waiting for the robot or for the result dialog
        if self.board_disabled or self.session.is_over:
            return

        board_pos = self.board_container.mapFrom(self, event.position().toPoint())
        w = self.board_container.width()
        h = self.board_container.height()

        if board_pos.x() < 0 or board_pos.y() < 0 or board_pos.x() >= w or board_pos.y() >= h:
            return

        col = int(board_pos.x() // (w / 3))
        row = int(board_pos.y() // (h / 3))
        if not (0 <= row < 3 and 0 <= col < 3):
            return

        index = row * 3 + col
        if is_occupied(self.session.board, index):
            return

        self.session.play_human(index)
        # No more clicks until the robot has answered
        self.board_disabled = True
        self.start_animation(index, Player.HUMAN.mark)

    def computer_turn(self):
        if not self.session.awaiting_computer:
            return

        index = self.session.play_computer()
        self.start_animation(index, Player.COMPUTER.mark)

    def after_move(self):
        if self.session.is_over:
            self.show_result()
        elif self.session.awaiting_computer:
            QTimer.singleShot(self.computer_delay_ms, self.computer_turn)
        else:
            self.board_disabled = False
            self._update_ui()

    def show_result(self):
        self.result_dialog = ResultDialog(alert_for(self.session.status), self)
        self.result_dialog.restart_requested.connect(self.reset_game)
        self.result_dialog.rejected.connect(self.reset_game)  # Esc restarts too
        self.result_dialog.open()

    def reset_game(self):
        self.session.reset()
        self.board_disabled = False
        self.hidden_cell = None
        if self.result_dialog is not None:
            # Still inside its signal, so deleted on the next event loop pass
            self.result_dialog.deleteLater()
            self.result_dialog = None
        self._update_ui()

    def _update_ui(self):
        self._update_status()

        cell_w = max(1, self.board_container.width() // 3)
        cell_h = max(1, self.board_container.height() // 3)

        for index, label in self.cells.items():
            move = self.session.board[index]

            pixmap = QPixmap(cell_w, cell_h)
            pixmap.fill(Qt.GlobalColor.transparent)

            painter = QPainter(pixmap)
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)

            if index in self.session.winning_line:
                painter.fillRect(0, 0, cell_w, cell_h, QColor(0, 255, 0, 50))

            # Line width follows the window size
            pen_width = max(3, min(cell_w, cell_h) // 15)
            margin = int(min(cell_w, cell_h) * 0.25)

            if move is not None and self.hidden_cell != index:
                if move.indicator == 'X':
                    pen = QPen(QColor(X_COLOR))
                    pen.setWidth(pen_width)
                    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
                    painter.setPen(pen)
                    painter.drawLine(margin, margin, cell_w - margin, cell_h - margin)
                    painter.drawLine(cell_w - margin, margin, margin, cell_h - margin)
                else:
                    pen = QPen(QColor(O_COLOR))
                    pen.setWidth(pen_width)
                    painter.setPen(pen)
                    painter.setBrush(Qt.BrushStyle.NoBrush)
                    painter.drawEllipse(margin, margin, cell_w - margin * 2, cell_h - margin * 2)

            painter.end()
            label.setPixmap(pixmap)

    def _update_status(self):
        status = self.session.status
        if status is GameStatus.IN_PROGRESS:
            text = "Robot is thinking..." if self.board_disabled else "Your move (X)"
            color = "white"
        elif status is GameStatus.DRAW:
            text = "Draw!"
            color = "yellow"
        elif status is GameStatus.HUMAN_WON:
            text = "You win!"
            color = "#76FF03"
        else:
            text = "Robot wins!"
            color = "#FF5252"

        self.status_label.setText(text)
        self.status_label.setStyleSheet(
            f"color: {color}; background-color: rgba(0, 0, 0, 150); border-radius: 10px; padding: 5px;")

    def start_animation(self, index, symbol):
        # Hide the real mark while the animation draws it
        self.hidden_cell = index
        self._update_ui()

        label = self.cells[index]
        rect = label.geometry()
        offset = self.board_container.mapTo(self.central_widget, self.board_container.rect().topLeft())
        final_rect = QRect(rect.topLeft() + offset, rect.size())

        DrawingAnimation(self.central_widget, final_rect, symbol, self.finish_animation)

    def finish_animation(self):
        self.hidden_cell = None
        self._update_ui()
        self.after_move()
