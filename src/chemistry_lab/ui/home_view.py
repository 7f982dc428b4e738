"""
Home page: welcome text and buttons to the periodic table and the quiz.
"""

from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal


class HomeView(QWidget):
    """Start page. Emits openTable / openQuiz; the main window does the navigation."""

    openTable = Signal()
    openQuiz = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.addStretch()

        title = QLabel("Welcome to Chemistry Lab")
        title.setObjectName("page_title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        blurb = QLabel(
            "Learn about the 118 elements of the periodic table, or take a quiz to see how much you know."
        )
        blurb.setWordWrap(True)
        blurb.setAlignment(Qt.AlignmentFlag.AlignCenter)
        blurb.setContentsMargins(120, 8, 120, 24)
        layout.addWidget(blurb)

        buttons = QHBoxLayout()
        buttons.addStretch()
        table_btn = QPushButton("Periodic Table")
        table_btn.setObjectName("pill")
        table_btn.clicked.connect(self.openTable.emit)
        quiz_btn = QPushButton("Elements Test")
        quiz_btn.setObjectName("pill")
        quiz_btn.clicked.connect(self.openQuiz.emit)
        buttons.addWidget(table_btn)
        buttons.addWidget(quiz_btn)
        buttons.addStretch()
        layout.addLayout(buttons)
        layout.addStretch()
