"""Serialize validated questions back into the JSON quiz format."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from .models import Question

__all__ = ["dump_questions", "write_questions"]


def dump_questions(questions: Iterable[Question], *, indent: int = 2) -> str:
    """Return a JSON array that the JSON decoder parses back unchanged."""

    records = [question.to_dict() for question in questions]
    return json.dumps(records, ensure_ascii=False, indent=indent) + "\n"


def write_questions(
    path: Path,
    questions: Iterable[Question],
    *,
    overwrite: bool = False,
) -> Path:
    if path.exists() and not overwrite:
        raise FileExistsError(f"Output already exists: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_questions(questions), encoding="utf-8")
    return path
