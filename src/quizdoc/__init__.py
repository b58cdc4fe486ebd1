"""Parse JSON, XML and TXT quiz documents and render their markup safely."""

from __future__ import annotations

from .errors import (
    DocumentError,
    DocumentErrorKind,
    EmptyDocumentError,
    JsonSyntaxError,
    QuizError,
    ReadFailureError,
    UnsupportedFormatError,
    XmlSyntaxError,
)
from .export import dump_questions, write_questions
from .loader import (
    LoadedQuiz,
    load_quiz_file,
    quiz_title_from_filename,
    read_document,
)
from .markup import render, render_question, sanitize
from .models import DraftQuestion, Option, Question
from .parsing import (
    QuizFormat,
    ValidationDefaults,
    format_for_extension,
    format_for_source,
    parse_document,
    parse_named_document,
    resolve_format,
    validate,
)

__all__ = [
    "DocumentError",
    "DocumentErrorKind",
    "EmptyDocumentError",
    "JsonSyntaxError",
    "QuizError",
    "ReadFailureError",
    "UnsupportedFormatError",
    "XmlSyntaxError",
    "dump_questions",
    "write_questions",
    "LoadedQuiz",
    "load_quiz_file",
    "quiz_title_from_filename",
    "read_document",
    "render",
    "render_question",
    "sanitize",
    "DraftQuestion",
    "Option",
    "Question",
    "QuizFormat",
    "ValidationDefaults",
    "format_for_extension",
    "format_for_source",
    "parse_document",
    "parse_named_document",
    "resolve_format",
    "validate",
]
