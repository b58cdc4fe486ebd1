"""JSON quiz decoder."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from ..errors import EmptyDocumentError, JsonSyntaxError
from ..models import DraftQuestion, Option

__all__ = ["decode"]


def decode(
    raw_text: str, *, logger: Optional[logging.Logger] = None
) -> list[DraftQuestion]:
    """Decode a JSON array of question records into drafts.

    Required fields are not enforced here; records with missing or mistyped
    fields produce drafts that the validator rejects.
    """
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise JsonSyntaxError(str(exc)) from exc

    if not isinstance(data, list):
        raise EmptyDocumentError(
            f"expected a JSON array, found {type(data).__name__}"
        )

    drafts = [_draft_from_record(record) for record in data]
    if logger is not None:
        logger.debug(
            "Decoded JSON quiz records",
            extra={"record_count": len(drafts)},
        )
    return drafts


def _draft_from_record(record: Any) -> DraftQuestion:
    if not isinstance(record, Mapping):
        return DraftQuestion()
    return DraftQuestion(
        id=_coerce_id(record.get("id")),
        title=_string_field(record, "title"),
        question=_string_field(record, "question"),
        options=_options_field(record.get("options")),
        correct_answer=_string_field(record, "correct_answer"),
        explanation=_string_field(record, "explanation"),
    )


def _string_field(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    return value if isinstance(value, str) else ""


def _options_field(value: Any) -> list[Option]:
    if not isinstance(value, list):
        return []
    return [Option.from_packed(item) for item in value if isinstance(item, str)]


def _coerce_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None
