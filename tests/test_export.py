from __future__ import annotations

import json

import pytest

from quizdoc.export import dump_questions, write_questions
from quizdoc.parsing import parse_document

from fixtures import TXT_QUIZ, XML_QUIZ


def test_dump_questions_writes_packed_options():
    questions = parse_document(XML_QUIZ, "xml")

    records = json.loads(dump_questions(questions))

    assert records[0] == {
        "id": 3,
        "title": "Arithmetic",
        "question": "2 + 2?",
        "options": ["A) 3", "B) 4"],
        "correct_answer": "B",
        "explanation": "Basic addition.",
    }


def test_dumped_json_parses_back_to_same_questions():
    questions = parse_document(TXT_QUIZ, "txt")

    assert parse_document(dump_questions(questions), "json") == questions


def test_write_questions_refuses_to_overwrite(tmp_path):
    questions = parse_document(TXT_QUIZ, "txt")
    target = tmp_path / "out" / "quiz.json"

    write_questions(target, questions)
    assert target.read_text(encoding="utf-8").endswith("]\n")

    with pytest.raises(FileExistsError):
        write_questions(target, questions[:1])

    write_questions(target, questions[:1], overwrite=True)
    assert len(json.loads(target.read_text(encoding="utf-8"))) == 1


def test_xml_questions_survive_json_export():
    questions = parse_document(XML_QUIZ, "xml")

    assert parse_document(dump_questions(questions), "json") == questions


def test_lowercase_xml_keys_survive_json_export():
    raw = """
    <question>
      <text>Case?</text>
      <option key="a">lower</option>
      <option key="b">also lower</option>
      <correct>B</correct>
    </question>
    """
    questions = parse_document(raw, "xml")

    reparsed = parse_document(dump_questions(questions), "json")

    assert reparsed == questions
    assert reparsed[0].correct_answer == "b"
