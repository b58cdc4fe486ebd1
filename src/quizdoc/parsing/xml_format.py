"""XML quiz decoder.

Expected shape::

    <quiz>
      <question id="1">
        <title>Arithmetic</title>
        <text>2 + 2?</text>
        <options>
          <option key="A">3</option>
          <option key="B">4</option>
        </options>
        <correct>B</correct>
        <explanation>Basic addition.</explanation>
      </question>
    </quiz>

``question`` elements may appear at any depth; the ``options`` wrapper is
optional since ``option`` elements are looked up among all descendants.
Elements are matched by local name, so a default ``xmlns`` is accepted.
Option ``key`` attributes must be a single letter, the same rule the packed
``"A) text"`` form follows in JSON and TXT documents.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from ..errors import EmptyDocumentError, XmlSyntaxError
from ..models import DraftQuestion, Option, is_option_letter

__all__ = ["decode"]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def decode(
    raw_text: str, *, logger: Optional[logging.Logger] = None
) -> list[DraftQuestion]:
    """Decode ``question`` elements in document order into drafts."""
    try:
        root = ET.fromstring(raw_text)
    except ET.ParseError as exc:
        raise XmlSyntaxError(str(exc)) from exc

    drafts: list[DraftQuestion] = []
    dropped = 0
    for position, node in enumerate(_iter_named(root, "question"), start=1):
        options, skipped = _options(node)
        dropped += skipped
        drafts.append(
            DraftQuestion(
                id=_parse_id(node.get("id"), position),
                title=_child_text(node, "title"),
                question=_child_text(node, "text"),
                options=options,
                correct_answer=_child_text(node, "correct"),
                explanation=_child_text(node, "explanation"),
            )
        )

    if not drafts:
        raise EmptyDocumentError("no <question> elements found")

    if logger is not None:
        logger.debug(
            "Decoded XML quiz elements",
            extra={"question_count": len(drafts), "dropped_options": dropped},
        )
    return drafts


def _local_name(tag: object) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _iter_named(node: ET.Element, name: str) -> Iterator[ET.Element]:
    for element in node.iter():
        if _local_name(element.tag) == name:
            yield element


def _options(node: ET.Element) -> tuple[list[Option], int]:
    options: list[Option] = []
    dropped = 0
    for option_node in _iter_named(node, "option"):
        key = (option_node.get("key") or "").strip()
        text = _text_content(option_node)
        if not is_option_letter(key) or not text:
            dropped += 1
            continue
        options.append(Option(letter=key, text=text))
    return options, dropped


def _parse_id(raw: Optional[str], position: int) -> int:
    if raw is None:
        return position
    match = _LEADING_INT_RE.match(raw)
    if not match:
        return position
    return int(match.group(1)) or position


def _child_text(node: ET.Element, tag: str) -> str:
    for child in _iter_named(node, tag):
        if child is not node:
            return _text_content(child)
    return ""


def _text_content(node: ET.Element) -> str:
    return "".join(node.itertext()).strip()
