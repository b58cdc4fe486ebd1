"""Canonical quiz data structures shared by every document format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = [
    "DEFAULT_EXPLANATION",
    "DEFAULT_TITLE_TEMPLATE",
    "Option",
    "Question",
    "DraftQuestion",
    "is_option_letter",
]

DEFAULT_EXPLANATION = "No explanation provided."
DEFAULT_TITLE_TEMPLATE = "Question {n}"

_LETTER_PATTERN = r"[A-Za-z]"
_LETTER_RE = re.compile(_LETTER_PATTERN)
_PACKED_OPTION_RE = re.compile(
    rf"^\s*({_LETTER_PATTERN})\)\s?(.*)$", re.DOTALL
)


def is_option_letter(value: str) -> bool:
    """Return whether ``value`` is a single ASCII option letter."""
    return _LETTER_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class Option:
    """A single answer choice split into its letter marker and text."""

    letter: str
    text: str

    @classmethod
    def from_packed(cls, raw: str) -> "Option":
        """Parse the ``"LETTER) text"`` form used by quiz documents.

        Strings without a leading letter marker keep an empty ``letter`` so
        they can still be displayed, but never match a correct answer.
        """
        match = _PACKED_OPTION_RE.match(raw)
        if not match:
            return cls(letter="", text=raw.strip())
        return cls(letter=match.group(1), text=match.group(2).strip())

    @property
    def packed(self) -> str:
        if not self.letter:
            return self.text
        return f"{self.letter}) {self.text}"

    def matches(self, letter: Optional[str]) -> bool:
        if not letter or not self.letter:
            return False
        return self.letter.casefold() == letter.strip().casefold()


@dataclass(frozen=True)
class Question:
    """A validated quiz question; see :func:`quizdoc.parsing.validate`."""

    id: int
    title: str
    question: str
    options: tuple[Option, ...]
    correct_answer: str
    explanation: str

    def option_for(self, letter: Optional[str]) -> Optional[Option]:
        """Return the first option whose letter matches ``letter``."""
        for option in self.options:
            if option.matches(letter):
                return option
        return None

    @property
    def correct_option(self) -> Optional[Option]:
        return self.option_for(self.correct_answer)

    @property
    def packed_options(self) -> list[str]:
        return [option.packed for option in self.options]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "question": self.question,
            "options": self.packed_options,
            "correct_answer": self.correct_answer,
            "explanation": self.explanation,
        }


@dataclass
class DraftQuestion:
    """Decoder output before validation fills defaults and checks invariants."""

    id: Optional[int] = None
    title: str = ""
    question: str = ""
    options: list[Option] = field(default_factory=list)
    correct_answer: str = ""
    explanation: str = ""

    @classmethod
    def from_question(cls, question: Question) -> "DraftQuestion":
        return cls(
            id=question.id,
            title=question.title,
            question=question.question,
            options=list(question.options),
            correct_answer=question.correct_answer,
            explanation=question.explanation,
        )
