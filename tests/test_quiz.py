"""Unit tests for quiz redaction and question building."""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from chemistry_lab.db.element import Element, Family
from chemistry_lab.db.element_repo import open_store
from chemistry_lab.db.schema import build_store
from chemistry_lab.services.quiz import REDACTION_TOKEN, make_question, new_question, redact_description


def _element(id_: int, name: str, desc: str = "") -> Element:
    return Element(
        id=id_,
        name=name,
        symbol=name[:2],
        desc=desc or f"{name} is an element.",
        state=0,
        melting=None,
        boiling=None,
        group=1,
        family=Family.NONMETAL,
        mass=float(id_),
        image=None,
        colors=None,
    )


def test_redact_every_case_variant() -> None:
    text = redact_description("Helium is a noble gas. HELIUM and helium too.", "Helium")
    assert "helium" not in text.lower()
    assert text.count(REDACTION_TOKEN) == 3


def test_redact_leaves_other_text() -> None:
    assert redact_description("Helium is a noble gas", "Helium") == f"{REDACTION_TOKEN} is a noble gas"
    assert redact_description("No match here", "Neon") == "No match here"
    assert redact_description("Anything", "") == "Anything"


def test_redact_name_with_regex_characters() -> None:
    assert redact_description("a.b and axb", "a.b") == f"{REDACTION_TOKEN} and axb"


def test_make_question_hides_answer_name() -> None:
    options = [
        _element(1, "Hydrogen", "Hydrogen is light."),
        _element(2, "Helium", "Helium floats."),
        _element(3, "Lithium", "Lithium is soft."),
        _element(4, "Beryllium", "Beryllium is hard."),
    ]
    question = make_question(options, random.Random(1))
    assert 0 <= question.answer_index < 4
    assert question.answer.name.lower() not in question.redacted.lower()
    assert not question.answered


def test_first_choice_is_final() -> None:
    options = [_element(1, "Hydrogen"), _element(2, "Helium")]
    question = make_question(options, random.Random(0))
    wrong = 1 - question.answer_index
    assert question.choose(wrong) is False
    assert question.choose(question.answer_index) is False
    assert question.selected == wrong


def test_correct_choice() -> None:
    options = [_element(1, "Hydrogen"), _element(2, "Helium")]
    question = make_question(options, random.Random(0))
    assert question.choose(question.answer_index) is True
    assert question.is_correct


def test_choice_out_of_range() -> None:
    question = make_question([_element(1, "Hydrogen")])
    with pytest.raises(IndexError):
        question.choose(4)
    assert not question.answered


def test_make_question_needs_options() -> None:
    with pytest.raises(ValueError):
        make_question([])


def test_new_question_without_store() -> None:
    assert new_question(None) is None


def test_new_question_from_store(tmp_path: Path) -> None:
    build_store("chem", tmp_path)
    conn = open_store("chem", tmp_path)
    question = new_question(conn, rng=random.Random(5))
    conn.close()
    assert question is not None
    assert len(question.options) == 4
    assert len({e.id for e in question.options}) == 4
    assert question.answer.name.lower() not in question.redacted.lower()
