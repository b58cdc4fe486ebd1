"""Shared testing fixtures for the quizdoc test suite."""

from .documents import (  # noqa: F401
    JSON_QUIZ,
    TXT_QUIZ,
    XML_QUIZ,
    QuizFiles,
    write_tree,
)

__all__ = [
    "JSON_QUIZ",
    "TXT_QUIZ",
    "XML_QUIZ",
    "QuizFiles",
    "write_tree",
]
