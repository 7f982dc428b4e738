"""
Quiz page: "What element does this describe?" with four lettered options and feedback.
"""

from __future__ import annotations

import random

from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QFrame,
)
from PySide6.QtCore import Qt

from ..services.app_state import AppState
from ..services.quiz import OPTION_LETTERS, QuizQuestion, new_question
from ..theme import COLOR_CORRECT, COLOR_INCORRECT, COLOR_OPTION_SELECTED


class QuizView(QWidget):
    """Asks one question at a time; the first answer is final until New question."""

    def __init__(self, app_state: AppState, parent: QWidget | None = None, rng: random.Random | None = None) -> None:
        super().__init__(parent)
        self.app_state = app_state
        self._rng = rng
        self.question: QuizQuestion | None = None
        layout = QVBoxLayout(self)

        title = QLabel("What element does this describe?")
        title.setObjectName("page_title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        panel = QFrame()
        panel.setObjectName("panel")
        panel_layout = QVBoxLayout(panel)
        self.description = QLabel()
        self.description.setWordWrap(True)
        self.description.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.description.setStyleSheet("font-size: 13pt;")
        panel_layout.addWidget(self.description)
        layout.addWidget(panel)

        self.option_buttons: list[QPushButton] = []
        options_layout = QVBoxLayout()
        for i, letter in enumerate(OPTION_LETTERS):
            btn = QPushButton()
            btn.setObjectName("pill")
            btn.clicked.connect(lambda checked=False, idx=i: self._choose(idx))
            self.option_buttons.append(btn)
            row = QHBoxLayout()
            row.addStretch()
            row.addWidget(btn)
            row.addStretch()
            options_layout.addLayout(row)
        layout.addLayout(options_layout)

        self.feedback = QFrame()
        feedback_layout = QVBoxLayout(self.feedback)
        self.feedback_title = QLabel()
        self.feedback_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.feedback_title.setStyleSheet("font-size: 18pt; font-weight: bold; color: #ffffff; background: transparent;")
        self.feedback_detail = QLabel()
        self.feedback_detail.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.feedback_detail.setStyleSheet("font-weight: 600; color: #ffffff; background: transparent;")
        next_btn = QPushButton("New question")
        next_btn.clicked.connect(self.new_question)
        feedback_layout.addWidget(self.feedback_title)
        feedback_layout.addWidget(self.feedback_detail)
        feedback_layout.addWidget(next_btn, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.feedback)
        layout.addStretch()

        self.new_question()

    def new_question(self) -> None:
        """Sample a fresh set of elements from a newly opened store."""
        conn = self.app_state.open_store()
        try:
            self.question = new_question(conn, len(OPTION_LETTERS), self._rng)
        finally:
            self.app_state.release(conn)
        self.feedback.hide()
        if self.question is None:
            self.description.setText("No element data available.")
            for btn in self.option_buttons:
                btn.hide()
            return
        self.description.setText(self.question.redacted)
        for i, btn in enumerate(self.option_buttons):
            if i < len(self.question.options):
                btn.setText(f"{OPTION_LETTERS[i]})  {self.question.options[i].name}")
                btn.setStyleSheet("")
                btn.show()
            else:
                btn.hide()

    def _choose(self, index: int) -> None:
        if self.question is None or self.question.answered:
            return
        correct = self.question.choose(index)
        self.option_buttons[index].setStyleSheet(
            f"QPushButton {{ background-color: {COLOR_OPTION_SELECTED}; color: #000000; }}"
        )
        if correct:
            self.feedback_title.setText("You're correct!")
            self.feedback_detail.setText("")
            self.feedback_detail.hide()
            color = COLOR_CORRECT
        else:
            self.feedback_title.setText("You're incorrect...")
            self.feedback_detail.setText(f"The correct answer was {self.question.answer.name}.")
            self.feedback_detail.show()
            color = COLOR_INCORRECT
        self.feedback.setStyleSheet(f"QFrame {{ background-color: {color}; border-radius: 15px; }}")
        self.feedback.show()
