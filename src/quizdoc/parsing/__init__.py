"""Quiz document decoders, validation and format dispatch."""

from __future__ import annotations

from .dispatcher import (
    DECODERS,
    SUPPORTED_EXTENSIONS,
    QuizFormat,
    format_for_extension,
    format_for_source,
    parse_document,
    parse_named_document,
    resolve_format,
)
from .validator import MIN_OPTIONS, ValidationDefaults, validate

__all__ = [
    "DECODERS",
    "SUPPORTED_EXTENSIONS",
    "QuizFormat",
    "format_for_extension",
    "format_for_source",
    "parse_document",
    "parse_named_document",
    "resolve_format",
    "MIN_OPTIONS",
    "ValidationDefaults",
    "validate",
]
