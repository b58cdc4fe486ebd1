"""Shared validation for decoded quiz drafts.

All three decoders converge here: whatever grammar produced the drafts, the
same invariants are checked in the same order and the same defaults are
filled, so a question list behaves identically regardless of its source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from ..errors import DocumentError, DocumentErrorKind, EmptyDocumentError
from ..models import (
    DEFAULT_EXPLANATION,
    DEFAULT_TITLE_TEMPLATE,
    DraftQuestion,
    Question,
)

__all__ = ["MIN_OPTIONS", "ValidationDefaults", "validate"]

MIN_OPTIONS = 2

Record = Union[DraftQuestion, Question]


@dataclass(frozen=True)
class ValidationDefaults:
    """Placeholder values filled into optional question fields."""

    explanation: str = DEFAULT_EXPLANATION
    title_template: str = DEFAULT_TITLE_TEMPLATE

    def title_for(self, position: int) -> str:
        return self.title_template.format(n=position)


def validate(
    records: Iterable[Record],
    *,
    defaults: ValidationDefaults | None = None,
) -> list[Question]:
    """Check invariants and return immutable, default-filled questions.

    Raises :class:`EmptyDocumentError` when ``records`` is empty and
    :class:`DocumentError` for the first question that breaks an invariant.
    Already validated :class:`Question` values are accepted, so validating
    twice yields equal results.
    """
    defaults = defaults or ValidationDefaults()
    drafts = [_as_draft(record) for record in records]
    if not drafts:
        raise EmptyDocumentError()
    return [
        _validate_one(draft, position, defaults)
        for position, draft in enumerate(drafts, start=1)
    ]


def _as_draft(record: Record) -> DraftQuestion:
    if isinstance(record, Question):
        return DraftQuestion.from_question(record)
    return record


def _validate_one(
    draft: DraftQuestion, position: int, defaults: ValidationDefaults
) -> Question:
    question_text = draft.question if isinstance(draft.question, str) else ""
    if not question_text.strip():
        raise DocumentError(position, DocumentErrorKind.MISSING_QUESTION_TEXT)

    options = tuple(draft.options or ())
    if len(options) < MIN_OPTIONS:
        raise DocumentError(position, DocumentErrorKind.TOO_FEW_OPTIONS)

    answer = (draft.correct_answer or "").strip()
    if not answer:
        raise DocumentError(position, DocumentErrorKind.MISSING_CORRECT_ANSWER)

    # First match by letter wins; duplicate letters are tolerated.
    matched = next((opt for opt in options if opt.matches(answer)), None)
    if matched is None:
        raise DocumentError(
            position,
            DocumentErrorKind.CORRECT_ANSWER_NOT_IN_OPTIONS,
            answer=answer,
        )

    return Question(
        id=_coerce_id(draft.id, position),
        title=draft.title or defaults.title_for(position),
        question=question_text,
        options=options,
        correct_answer=matched.letter,
        explanation=draft.explanation or defaults.explanation,
    )


def _coerce_id(value: object, position: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return position
    return value if value > 0 else position
