"""File boundary: read quiz documents from disk and parse them."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ReadFailureError
from .models import Question
from .parsing import (
    QuizFormat,
    ValidationDefaults,
    format_for_extension,
    parse_document,
)

__all__ = [
    "LoadedQuiz",
    "load_quiz_file",
    "quiz_title_from_filename",
    "read_document",
]

_SEPARATOR_RE = re.compile(r"[-_]")
_WORD_START_RE = re.compile(r"\b\w")


@dataclass(frozen=True)
class LoadedQuiz:
    """A parsed quiz together with where it came from."""

    path: Path
    format: QuizFormat
    title: str
    questions: tuple[Question, ...]

    @property
    def question_count(self) -> int:
        return len(self.questions)


def read_document(path: Path) -> str:
    """Read ``path`` as UTF-8 text, tolerating a byte order mark."""

    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailureError(path, str(exc)) from exc


def quiz_title_from_filename(name: str) -> str:
    """Build a display title from a file name.

    ``"world-capitals_eu.json"`` becomes ``"World Capitals Eu Quiz"``.
    """

    spaced = _SEPARATOR_RE.sub(" ", Path(name).stem)
    titled = _WORD_START_RE.sub(lambda match: match.group(0).upper(), spaced)
    return f"{titled} Quiz"


def load_quiz_file(
    path: Path,
    *,
    fmt: Optional[QuizFormat] = None,
    defaults: Optional[ValidationDefaults] = None,
    logger: Optional[logging.Logger] = None,
) -> LoadedQuiz:
    """Read and parse ``path``.

    The format comes from ``fmt`` when given, otherwise from the file
    extension; unknown extensions raise before the file is read.
    """

    source = Path(path)
    resolved = fmt or format_for_extension(source.suffix or source.name)
    raw_text = read_document(source)
    if logger is not None:
        logger.debug(
            "Read quiz document",
            extra={
                "source": str(source),
                "format": resolved.value,
                "characters": len(raw_text),
            },
        )
    questions = parse_document(
        raw_text, resolved, defaults=defaults, logger=logger
    )
    return LoadedQuiz(
        path=source,
        format=resolved,
        title=quiz_title_from_filename(source.name),
        questions=tuple(questions),
    )
