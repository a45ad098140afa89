from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont


class ResultDialog(QDialog):
    # The only button restarts the game
    restart_requested = pyqtSignal()

    def __init__(self, alert, parent=None):
        super().__init__(parent)
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.Dialog)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setModal(True)
        self.resize(320, 220)

        self.layout = QVBoxLayout(self)

        self.frame = QLabel()
        self.frame.setStyleSheet("""
            background-color: #2c3e50; 
            border: 2px solid #ecf0f1; 
            border-radius: 20px;
        """)
        self.layout.addWidget(self.frame)

        self.inner_layout = QVBoxLayout(self.frame)

        self.title = QLabel(alert.title)
        self.title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title.setFont(QFont("Arial", 22, QFont.Weight.Bold))
        self.title.setStyleSheet("color: gold; border: none;")
        self.inner_layout.addWidget(self.title)

        self.message = QLabel(alert.message)
        self.message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message.setWordWrap(True)
        self.message.setFont(QFont("Arial", 11))
        self.message.setStyleSheet("color: white; border: none;")
        self.inner_layout.addWidget(self.message)

        btn = QPushButton(alert.button_title)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setStyleSheet("background: #27ae60; color: white; padding: 10px; border-radius: 5px;")
        btn.clicked.connect(self.on_button)
        self.inner_layout.addWidget(btn)

    def on_button(self):
        self.restart_requested.emit()
        self.accept()
