"""Error types raised while loading and validating quiz documents.

Every error renders a display-ready message through ``str()`` so callers can
show it as-is, while the type (and the ``kind`` on :class:`DocumentError`)
lets them branch on the failure.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

__all__ = [
    "QuizError",
    "UnsupportedFormatError",
    "ReadFailureError",
    "JsonSyntaxError",
    "XmlSyntaxError",
    "EmptyDocumentError",
    "DocumentErrorKind",
    "DocumentError",
]


class QuizError(RuntimeError):
    """Base class for quiz document failures."""


class UnsupportedFormatError(QuizError):
    """Raised when a file extension does not map to a known quiz format."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file format: {extension}")


class ReadFailureError(QuizError):
    """Raised when the raw document cannot be read from disk."""

    def __init__(self, path: Path, detail: Optional[str] = None) -> None:
        self.path = path
        self.detail = detail
        message = f"Failed to read file: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class JsonSyntaxError(QuizError):
    """Raised when a JSON quiz document is not valid JSON."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"JSON parsing error: {detail}")


class XmlSyntaxError(QuizError):
    """Raised when an XML quiz document is not well formed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"XML parsing error: Invalid XML format ({detail})")


class EmptyDocumentError(QuizError):
    """Raised when a document yields no questions at all."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        message = "Quiz must contain at least one question"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class DocumentErrorKind(Enum):
    """Validation failures reported for a single question."""

    MISSING_QUESTION_TEXT = "missing_question_text"
    TOO_FEW_OPTIONS = "too_few_options"
    MISSING_CORRECT_ANSWER = "missing_correct_answer"
    CORRECT_ANSWER_NOT_IN_OPTIONS = "correct_answer_not_in_options"


_KIND_MESSAGES = {
    DocumentErrorKind.MISSING_QUESTION_TEXT: "Missing or invalid question text",
    DocumentErrorKind.TOO_FEW_OPTIONS: "Must have at least 2 options",
    DocumentErrorKind.MISSING_CORRECT_ANSWER: (
        "Missing or invalid correct answer"
    ),
}


class DocumentError(QuizError):
    """Raised when question ``index`` (1-based) violates a model invariant."""

    def __init__(
        self,
        index: int,
        kind: DocumentErrorKind,
        *,
        answer: Optional[str] = None,
    ) -> None:
        self.index = index
        self.kind = kind
        self.answer = answer
        super().__init__(f"Question {index}: {_describe(kind, answer)}")


def _describe(kind: DocumentErrorKind, answer: Optional[str]) -> str:
    if kind is DocumentErrorKind.CORRECT_ANSWER_NOT_IN_OPTIONS:
        return f'Correct answer "{answer or ""}" not found in options'
    return _KIND_MESSAGES[kind]
