"""Allow-list HTML sanitizer for rendered quiz text.

Sanitizing runs in two passes over parsed markup:

1. A tag-aware pass drops ``script``, ``style``, ``iframe``, ``object`` and
   ``embed`` elements together with everything nested inside them.
2. ``bleach`` parses the remainder into a tree and keeps only the allowed
   elements and link attributes. Other elements are unwrapped so their text
   stays visible.
"""

from __future__ import annotations

from html import escape
from html.parser import HTMLParser
from typing import Optional

import bleach

__all__ = [
    "ALLOWED_ATTRIBUTES",
    "ALLOWED_PROTOCOLS",
    "ALLOWED_TAGS",
    "REMOVED_TAGS",
    "sanitize",
]

ALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "strong",
        "em",
        "u",
        "del",
        "code",
        "br",
        "li",
        "ol",
        "ul",
        "h2",
        "h3",
        "h4",
        "a",
    }
)

ALLOWED_ATTRIBUTES: dict[str, list[str]] = {"a": ["href", "target", "rel"]}

ALLOWED_PROTOCOLS: frozenset[str] = frozenset({"http", "https", "mailto"})

REMOVED_TAGS: frozenset[str] = frozenset(
    {"script", "style", "iframe", "object", "embed"}
)

# Elements that never carry an end tag, so they must not open a removed span.
_VOID_REMOVED_TAGS = frozenset({"embed"})


class _SubtreeRemover(HTMLParser):
    """Re-emit markup while skipping removed elements and their content."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self._output: list[str] = []
        self._depth = 0

    def handle_starttag(
        self, tag: str, attrs: list[tuple[str, Optional[str]]]
    ) -> None:
        if tag in REMOVED_TAGS:
            if tag not in _VOID_REMOVED_TAGS:
                self._depth += 1
            return
        if not self._depth:
            self._output.append(self.get_starttag_text() or "")

    def handle_startendtag(
        self, tag: str, attrs: list[tuple[str, Optional[str]]]
    ) -> None:
        if tag in REMOVED_TAGS or self._depth:
            return
        self._output.append(self.get_starttag_text() or "")

    def handle_endtag(self, tag: str) -> None:
        if tag in REMOVED_TAGS:
            if tag not in _VOID_REMOVED_TAGS and self._depth:
                self._depth -= 1
            return
        if not self._depth:
            self._output.append(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        if not self._depth:
            self._output.append(escape(data, quote=False))

    def handle_entityref(self, name: str) -> None:
        if not self._depth:
            self._output.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        if not self._depth:
            self._output.append(f"&#{name};")

    def get_markup(self) -> str:
        return "".join(self._output)


def _remove_dangerous_subtrees(markup: str) -> str:
    parser = _SubtreeRemover()
    parser.feed(markup)
    parser.close()
    return parser.get_markup()


def sanitize(markup: Optional[str]) -> str:
    """Restrict ``markup`` to the display allow-list."""

    if not markup:
        return ""
    stripped = _remove_dangerous_subtrees(markup)
    return bleach.clean(
        stripped,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
