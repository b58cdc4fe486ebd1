from __future__ import annotations

import logging

import pytest

from quizdoc.errors import EmptyDocumentError
from quizdoc.models import Option
from quizdoc.parsing import parse_document, txt_format
from quizdoc.parsing.txt_format import (
    BlockState,
    LineKind,
    Section,
    advance,
    classify_line,
)

from fixtures import TXT_QUIZ


def test_single_block_populates_every_field():
    raw = "TITLE: T1\nQUESTION: Q?\nA) x\nB) y\nCORRECT: A\nEXPLANATION: because"

    (question,) = parse_document(raw, "txt")

    assert question.id == 1
    assert question.title == "T1"
    assert question.question == "Q?"
    assert question.options == (Option("A", "x"), Option("B", "y"))
    assert question.correct_answer == "A"
    assert question.explanation == "because"


def test_both_keyword_spellings_are_accepted_per_block():
    first, second = parse_document(TXT_QUIZ, "txt")

    assert first.title == "Arithmetic"
    assert second.title == "Hoofdsteden"
    assert second.question == "Wat is de hoofdstad van Frankrijk?"
    assert second.correct_answer == "A"
    assert second.explanation == "Parijs is de hoofdstad."


def test_spellings_can_mix_inside_one_block():
    raw = "VRAAG: Mixed?\nA) yes\nB) no\nCORRECT: A\nTOELICHTING: fine"

    (question,) = parse_document(raw, "txt")

    assert question.question == "Mixed?"
    assert question.explanation == "fine"


def test_multiline_bodies_drop_blank_lines():
    raw = (
        "QUESTION: First line\n"
        "second line\n"
        "\n"
        "third line\n"
        "A) a\n"
        "B) b\n"
        "CORRECT: B\n"
        "EXPLANATION:\n"
        "Paragraph one.\n"
        "\n"
        "Paragraph two.\n"
    )

    (question,) = parse_document(raw, "txt")

    assert question.question == "First line\nsecond line\nthird line"
    assert question.explanation == "Paragraph one.\nParagraph two."


def test_orphan_lines_join_started_explanation():
    raw = (
        "QUESTION: Q?\n"
        "A) a\n"
        "B) b\n"
        "EXPLANATION: Start.\n"
        "CORRECT: A\n"
        "Trailing paragraph."
    )

    (question,) = parse_document(raw, "txt")

    assert question.explanation == "Start.\nTrailing paragraph."


def test_orphan_lines_without_explanation_are_dropped():
    raw = "QUESTION: Q?\nA) a\nstray text\nB) b\nCORRECT: A"

    (question,) = parse_document(raw, "txt")

    assert question.question == "Q?"
    assert question.explanation == "No explanation provided."
    assert question.packed_options == ["A) a", "B) b"]


def test_option_line_closes_question_body():
    raw = "QUESTION: Q?\nA) a\nnot part of question\nB) b\nCORRECT: B"

    (question,) = parse_document(raw, "txt")

    assert question.question == "Q?"


def test_incomplete_blocks_are_skipped_and_ids_renumbered(caplog):
    raw = (
        "QUESTION: no options\nCORRECT: A\n"
        "---\n"
        "QUESTION: kept?\nA) a\nB) b\nCORRECT: B\n"
        "---\n"
        "QUESTION: no answer\nA) a\nB) b\n"
        "---\n"
        "A) a\nB) b\nCORRECT: A\n"
    )
    logger = logging.getLogger("quizdoc.test_txt")
    logger.propagate = True

    with caplog.at_level(logging.DEBUG, logger="quizdoc.test_txt"):
        questions = parse_document(raw, "txt", logger=logger)

    assert [q.question for q in questions] == ["kept?"]
    assert questions[0].id == 1
    assert questions[0].title == "Question 1"
    skipped = [
        record for record in caplog.records
        if record.getMessage() == "Skipped incomplete TXT block"
    ]
    assert [record.block for record in skipped] == [1, 3, 4]


def test_all_blocks_skipped_is_empty_document():
    raw = "TITLE: nothing here\n---\nQUESTION: still nothing\n"

    with pytest.raises(EmptyDocumentError):
        parse_document(raw, "txt")


def test_separator_must_be_whole_line():
    raw = (
        "QUESTION: Is a---b a separator?\n"
        "A) no\nB) yes\nCORRECT: A\n"
        "   ---   \n"
        "QUESTION: second\nA) a\nB) b\nCORRECT: B\n"
    )

    first, second = parse_document(raw, "txt")

    assert first.question == "Is a---b a separator?"
    assert second.question == "second"


def test_windows_line_endings():
    raw = "QUESTION: Q?\r\nA) a\r\nB) b\r\nCORRECT: A\r\n"

    (question,) = parse_document(raw, "txt")

    assert question.packed_options == ["A) a", "B) b"]


@pytest.mark.parametrize(
    ("line", "kind", "payload"),
    [
        ("TITLE:  Hello ", LineKind.TITLE, "Hello"),
        ("TITEL: Hallo", LineKind.TITLE, "Hallo"),
        ("QUESTION: Why?", LineKind.QUESTION, "Why?"),
        ("ANTWOORD: b", LineKind.CORRECT, "b"),
        ("TOELICHTING: Omdat", LineKind.EXPLANATION, "Omdat"),
        ("C) option", LineKind.OPTION, "C) option"),
        ("c) lowercase", LineKind.CONTINUATION, "c) lowercase"),
        ("title: lowercase", LineKind.CONTINUATION, "title: lowercase"),
    ],
)
def test_classify_line(line, kind, payload):
    assert classify_line(line) == (kind, payload)


def test_advance_is_pure_state_transition():
    start = BlockState()

    opened = advance(start, "QUESTION: Q")
    continued = advance(opened, "more")
    closed = advance(continued, "A) a")

    assert start == BlockState()
    assert opened.section is Section.QUESTION
    assert continued.question == "Q\nmore"
    assert closed.section is Section.NONE
    assert closed.options == ("A) a",)


def test_repeated_question_keyword_replaces_body():
    state = BlockState()
    for line in ("QUESTION: old", "QUESTION: new", "tail"):
        state = advance(state, line)

    assert state.question == "new\ntail"


def test_split_blocks_ignores_empty_blocks():
    blocks = list(txt_format.split_blocks("---\n\n---\nA) a\n---\n"))

    assert blocks == [["A) a"]]
