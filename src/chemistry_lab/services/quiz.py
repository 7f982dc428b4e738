"""
Quiz logic: pick an answer among sampled elements and hide its name in the description.
No Qt here; the quiz view only renders a QuizQuestion.
"""

from __future__ import annotations

import random
import re
import sqlite3
from dataclasses import dataclass, field

from ..db.element import Element
from ..db.element_repo import fetch_random_sample

REDACTION_TOKEN = "??????"
OPTION_LETTERS = ("a", "b", "c", "d")


def redact_description(desc: str, name: str, token: str = REDACTION_TOKEN) -> str:
    """Replace every occurrence of name in desc, in any letter case, with token."""
    if not name:
        return desc
    return re.sub(re.escape(name), token, desc, flags=re.IGNORECASE)


@dataclass
class QuizQuestion:
    options: list[Element]
    answer_index: int
    redacted: str
    selected: int | None = field(default=None)

    @property
    def answer(self) -> Element:
        return self.options[self.answer_index]

    @property
    def answered(self) -> bool:
        return self.selected is not None

    def choose(self, index: int) -> bool:
        """Record the first choice only; later choices are ignored. Returns whether it is correct."""
        if self.selected is None:
            if not 0 <= index < len(self.options):
                raise IndexError(f"option {index} out of range")
            self.selected = index
        return self.is_correct

    @property
    def is_correct(self) -> bool:
        return self.selected is not None and self.options[self.selected].name == self.answer.name


def make_question(options: list[Element], rng: random.Random | None = None) -> QuizQuestion:
    """Build a question from already-sampled options. Raises ValueError if options is empty."""
    if not options:
        raise ValueError("a quiz question needs at least one option")
    answer_index = (rng or random).randrange(len(options))
    answer = options[answer_index]
    return QuizQuestion(
        options=list(options),
        answer_index=answer_index,
        redacted=redact_description(answer.desc, answer.name),
    )


def new_question(
    conn: sqlite3.Connection | None,
    option_count: int = len(OPTION_LETTERS),
    rng: random.Random | None = None,
) -> QuizQuestion | None:
    """Sample option_count elements and build a question. None when the store has no data."""
    options = fetch_random_sample(conn, option_count, rng)
    if not options:
        return None
    return make_question(options, rng)
