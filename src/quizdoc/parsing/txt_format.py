"""Plain-text quiz decoder.

Documents hold one question per block; blocks are separated by a line that
reads exactly ``---``. Inside a block every non-blank line is classified by
its prefix::

    TITLE: Arithmetic            (alias TITEL:)
    QUESTION: What is 2 + 2?     (alias VRAAG:)
    A) 3
    B) 4
    CORRECT: B                   (alias ANTWOORD:)
    EXPLANATION: Basic addition. (alias TOELICHTING:)

``QUESTION`` and ``EXPLANATION`` open multi-line bodies: unprefixed lines that
follow are appended to the open body. Option lines and the single-line
keywords close it. An unprefixed line with no open body joins the
explanation when one has already started and is dropped otherwise.

Blocks missing question text, options or a correct answer are skipped rather
than failing the document.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional

from ..models import DraftQuestion, Option

__all__ = [
    "BLOCK_SEPARATOR",
    "BlockState",
    "LineKind",
    "Section",
    "advance",
    "classify_line",
    "decode",
    "decode_block",
    "split_blocks",
]

BLOCK_SEPARATOR = "---"

_OPTION_RE = re.compile(r"^[A-Z]\)")


class Section(Enum):
    """Body currently receiving continuation lines."""

    NONE = "none"
    QUESTION = "question"
    EXPLANATION = "explanation"


class LineKind(Enum):
    TITLE = "title"
    QUESTION = "question"
    CORRECT = "correct"
    EXPLANATION = "explanation"
    OPTION = "option"
    CONTINUATION = "continuation"


# Checked in order; each keyword has an English and a Dutch spelling.
_KEYWORDS: tuple[tuple[LineKind, tuple[str, ...]], ...] = (
    (LineKind.TITLE, ("TITLE:", "TITEL:")),
    (LineKind.QUESTION, ("QUESTION:", "VRAAG:")),
    (LineKind.CORRECT, ("CORRECT:", "ANTWOORD:")),
    (LineKind.EXPLANATION, ("EXPLANATION:", "TOELICHTING:")),
)


@dataclass(frozen=True)
class BlockState:
    """Accumulated fields of one block plus the open-section register."""

    section: Section = Section.NONE
    title: str = ""
    question_lines: tuple[str, ...] = ()
    options: tuple[str, ...] = ()
    correct_answer: str = ""
    explanation_lines: tuple[str, ...] = ()

    @property
    def question(self) -> str:
        return "\n".join(self.question_lines)

    @property
    def explanation(self) -> str:
        return "\n".join(self.explanation_lines)

    @property
    def is_complete(self) -> bool:
        return bool(self.question and self.options and self.correct_answer)


def classify_line(line: str) -> tuple[LineKind, str]:
    """Return the kind of ``line`` and its payload.

    Keyword payloads are stripped of the prefix and surrounding whitespace.
    Option and continuation payloads are the line itself.
    """
    for kind, prefixes in _KEYWORDS:
        for prefix in prefixes:
            if line.startswith(prefix):
                return kind, line[len(prefix):].strip()
    if _OPTION_RE.match(line):
        return LineKind.OPTION, line
    return LineKind.CONTINUATION, line


def advance(state: BlockState, line: str) -> BlockState:
    """Apply one non-blank, trimmed ``line`` to ``state``."""
    kind, payload = classify_line(line)

    if kind is LineKind.TITLE:
        return replace(state, title=payload, section=Section.NONE)
    if kind is LineKind.CORRECT:
        return replace(state, correct_answer=payload, section=Section.NONE)
    if kind is LineKind.QUESTION:
        return replace(
            state,
            question_lines=_start_body(payload),
            section=Section.QUESTION,
        )
    if kind is LineKind.EXPLANATION:
        return replace(
            state,
            explanation_lines=state.explanation_lines + _start_body(payload),
            section=Section.EXPLANATION,
        )
    if kind is LineKind.OPTION:
        return replace(
            state, options=state.options + (payload,), section=Section.NONE
        )
    return _continue(state, payload)


def _start_body(payload: str) -> tuple[str, ...]:
    return (payload,) if payload else ()


def _continue(state: BlockState, line: str) -> BlockState:
    if state.section is Section.QUESTION:
        return replace(state, question_lines=state.question_lines + (line,))
    if state.section is Section.EXPLANATION or state.explanation_lines:
        return replace(
            state, explanation_lines=state.explanation_lines + (line,)
        )
    return state


def split_blocks(raw_text: str) -> Iterator[list[str]]:
    """Yield the trimmed, non-blank lines of each ``---`` delimited block."""
    block: list[str] = []
    for raw_line in raw_text.splitlines():
        line = raw_line.strip()
        if line == BLOCK_SEPARATOR:
            if block:
                yield block
            block = []
            continue
        if line:
            block.append(line)
    if block:
        yield block


def decode_block(lines: Iterable[str]) -> Optional[DraftQuestion]:
    """Fold ``lines`` through :func:`advance`; ``None`` if incomplete."""
    state = BlockState()
    for line in lines:
        state = advance(state, line)
    if not state.is_complete:
        return None
    return DraftQuestion(
        title=state.title,
        question=state.question,
        options=[Option.from_packed(raw) for raw in state.options],
        correct_answer=state.correct_answer,
        explanation=state.explanation,
    )


def decode(
    raw_text: str, *, logger: Optional[logging.Logger] = None
) -> list[DraftQuestion]:
    """Decode every complete block; incomplete blocks are skipped."""
    drafts: list[DraftQuestion] = []
    for block_number, lines in enumerate(split_blocks(raw_text), start=1):
        draft = decode_block(lines)
        if draft is None:
            if logger is not None:
                logger.debug(
                    "Skipped incomplete TXT block",
                    extra={"block": block_number, "line_count": len(lines)},
                )
            continue
        drafts.append(draft)
    if logger is not None:
        logger.debug(
            "Decoded TXT quiz blocks",
            extra={"question_count": len(drafts)},
        )
    return drafts
