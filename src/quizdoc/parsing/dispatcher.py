"""Format selection and the decode-then-validate pipeline."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import PurePath
from typing import Callable, Mapping, Optional

from ..errors import QuizError, UnsupportedFormatError
from ..models import DraftQuestion, Question
from . import json_format, txt_format, xml_format
from .validator import ValidationDefaults, validate

__all__ = [
    "Decoder",
    "DECODERS",
    "QuizFormat",
    "SUPPORTED_EXTENSIONS",
    "format_for_extension",
    "format_for_source",
    "parse_document",
    "parse_named_document",
    "resolve_format",
]

Decoder = Callable[..., list[DraftQuestion]]


class QuizFormat(Enum):
    """Quiz document encodings understood by the dispatcher."""

    JSON = "json"
    XML = "xml"
    TXT = "txt"


DECODERS: Mapping[QuizFormat, Decoder] = {
    QuizFormat.JSON: json_format.decode,
    QuizFormat.XML: xml_format.decode,
    QuizFormat.TXT: txt_format.decode,
}

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(fmt.value for fmt in QuizFormat)


def resolve_format(hint: Optional[str]) -> QuizFormat:
    """Map a loose hint (name, extension or MIME type) to a format.

    Absent or unrecognized hints fall back to :attr:`QuizFormat.TXT`.
    """
    if not hint:
        return QuizFormat.TXT
    normalized = hint.strip().lower()
    if "/" in normalized:
        return _format_for_media_type(normalized) or QuizFormat.TXT
    normalized = normalized.lstrip(".")
    for fmt in QuizFormat:
        if fmt.value == normalized:
            return fmt
    return QuizFormat.TXT


def format_for_extension(extension: str) -> QuizFormat:
    """Return the format for a file ``extension`` or raise.

    Unlike :func:`resolve_format`, unknown extensions are rejected with
    :class:`UnsupportedFormatError`.
    """
    normalized = extension.strip().lstrip(".").lower()
    for fmt in QuizFormat:
        if fmt.value == normalized:
            return fmt
    raise UnsupportedFormatError(normalized)


def format_for_source(
    *,
    content_type: Optional[str] = None,
    extension: Optional[str] = None,
) -> QuizFormat:
    """Pick a format from a response content type and/or URL extension.

    JSON wins when either signal says JSON, then XML; anything else is read
    as TXT.
    """
    media = (content_type or "").lower()
    ext = (extension or "").strip().lstrip(".").lower()
    if "json" in media or ext == QuizFormat.JSON.value:
        return QuizFormat.JSON
    if "xml" in media or ext == QuizFormat.XML.value:
        return QuizFormat.XML
    return QuizFormat.TXT


def _format_for_media_type(media_type: str) -> Optional[QuizFormat]:
    essence = media_type.split(";", 1)[0].strip()
    if essence.endswith("json"):
        return QuizFormat.JSON
    if essence.endswith("xml"):
        return QuizFormat.XML
    if essence == "text/plain":
        return QuizFormat.TXT
    return None


def parse_document(
    raw_text: str,
    format_hint: Optional[str | QuizFormat] = None,
    *,
    defaults: Optional[ValidationDefaults] = None,
    logger: Optional[logging.Logger] = None,
) -> list[Question]:
    """Decode ``raw_text`` with the hinted format and validate the result."""
    fmt = (
        format_hint
        if isinstance(format_hint, QuizFormat)
        else resolve_format(format_hint)
    )
    decoder = DECODERS[fmt]
    try:
        drafts = decoder(raw_text, logger=logger)
        questions = validate(drafts, defaults=defaults)
    except QuizError as exc:
        if logger is not None:
            logger.warning(
                "Quiz document rejected",
                extra={"format": fmt.value, "reason": str(exc)},
            )
        raise
    if logger is not None:
        logger.info(
            "Parsed quiz document",
            extra={"format": fmt.value, "question_count": len(questions)},
        )
    return questions


def parse_named_document(
    name: str,
    raw_text: str,
    *,
    defaults: Optional[ValidationDefaults] = None,
    logger: Optional[logging.Logger] = None,
) -> list[Question]:
    """Parse ``raw_text`` using the format implied by the file ``name``."""
    suffix = PurePath(name).suffix
    fmt = format_for_extension(suffix or name)
    return parse_document(raw_text, fmt, defaults=defaults, logger=logger)
