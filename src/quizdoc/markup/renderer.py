"""Lightweight markup to sanitized HTML.

Supported syntax, applied in this order::

    # / ## / ###     headings (h2 / h3 / h4)
    **bold**         <strong>
    *emphasis*       <em>
    `code`           <code>
    __underline__    <u>
    ~~strike~~       <del>
    [label](url)     <a target="_blank" rel="noopener noreferrer">
    - item           unordered list item
    1. item          ordered list item

CRLF and CR line endings are normalized to LF. Inline substitutions run on the
whole text first; list detection then works line by line on the substituted
text. The output always passes through
:func:`quizdoc.markup.sanitizer.sanitize`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from html import escape
from typing import Any, Optional, Sequence, Union

from ..models import Question
from .sanitizer import sanitize

__all__ = [
    "ListBlock",
    "ListKind",
    "TextLine",
    "parse_blocks",
    "render",
    "render_blocks",
    "render_inline",
    "render_question",
]

# Longest prefix first so "### " is never read as "# ".
_HEADING_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^### (.+)$", re.MULTILINE), "h4"),
    (re.compile(r"^## (.+)$", re.MULTILINE), "h3"),
    (re.compile(r"^# (.+)$", re.MULTILINE), "h2"),
)

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
# Lone asterisks only, so leftovers of bold delimiters are never re-matched.
_EMPHASIS_RE = re.compile(r"(?<!\*)\*([^*\n]+?)\*(?!\*)")
_CODE_RE = re.compile(r"`([^`\n]+?)`")
_UNDERLINE_RE = re.compile(r"__(.*?)__")
_STRIKE_RE = re.compile(r"~~(.*?)~~")
_LINK_RE = re.compile(r"\[([^\]\n]+)\]\(([^)\n]+)\)")

_BULLET_RE = re.compile(r"^- (.+)$")
_NUMBERED_RE = re.compile(r"^\d+\. (.+)$")
_LINE_ENDING_RE = re.compile(r"\r\n?")


class ListKind(Enum):
    UNORDERED = "ul"
    ORDERED = "ol"


@dataclass(frozen=True)
class TextLine:
    html: str


@dataclass(frozen=True)
class ListBlock:
    kind: ListKind
    items: tuple[str, ...]


Block = Union[TextLine, ListBlock]


def _link(match: re.Match[str]) -> str:
    label, url = match.group(1), match.group(2).strip()
    return (
        f'<a href="{escape(url, quote=True)}" target="_blank" '
        f'rel="noopener noreferrer">{label}</a>'
    )


def render_inline(text: str) -> str:
    """Apply heading and inline substitutions without list handling."""
    for pattern, tag in _HEADING_RULES:
        text = pattern.sub(rf"<{tag}>\1</{tag}>", text)
    text = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    text = _EMPHASIS_RE.sub(r"<em>\1</em>", text)
    text = _CODE_RE.sub(r"<code>\1</code>", text)
    text = _UNDERLINE_RE.sub(r"<u>\1</u>", text)
    text = _STRIKE_RE.sub(r"<del>\1</del>", text)
    return _LINK_RE.sub(_link, text)


def _list_item(line: str) -> Optional[tuple[ListKind, str]]:
    match = _BULLET_RE.match(line)
    if match:
        return ListKind.UNORDERED, match.group(1)
    match = _NUMBERED_RE.match(line)
    if match:
        return ListKind.ORDERED, match.group(1)
    return None


def parse_blocks(text: str) -> list[Block]:
    """Group lines into text lines and runs of same-kind list items.

    Blank lines are dropped and do not interrupt a list.
    """
    blocks: list[Block] = []
    current: Optional[ListKind] = None
    items: list[str] = []

    def close_list() -> None:
        nonlocal current, items
        if current is not None:
            blocks.append(ListBlock(kind=current, items=tuple(items)))
        current, items = None, []

    for line in text.splitlines():
        if not line.strip():
            continue
        item = _list_item(line)
        if item is None:
            close_list()
            blocks.append(TextLine(html=line))
            continue
        kind, content = item
        if kind is not current:
            close_list()
            current = kind
        items.append(content)
    close_list()
    return blocks


def render_blocks(blocks: Sequence[Block]) -> str:
    """Serialize blocks; ``<br>`` only separates adjacent text lines."""
    parts: list[str] = []
    previous: Optional[Block] = None
    for block in blocks:
        if isinstance(block, ListBlock):
            tag = block.kind.value
            inner = "".join(f"<li>{item}</li>" for item in block.items)
            parts.append(f"<{tag}>{inner}</{tag}>")
        else:
            if isinstance(previous, TextLine):
                parts.append("<br>")
            parts.append(block.html)
        previous = block
    return "".join(parts)


def render(text: Optional[str]) -> str:
    """Render lightweight markup ``text`` into sanitized HTML."""
    if not text:
        return ""
    text = _LINE_ENDING_RE.sub("\n", text)
    return sanitize(render_blocks(parse_blocks(render_inline(text))))


def render_question(question: Question) -> dict[str, Any]:
    """Render every display field of ``question`` for a presentation layer."""
    return {
        "id": question.id,
        "title": render(question.title),
        "question": render(question.question),
        "options": [
            {"letter": option.letter, "html": render(option.text)}
            for option in question.options
        ],
        "explanation": render(question.explanation),
    }
