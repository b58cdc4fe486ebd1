"""Markup rendering and sanitizing for quiz display text."""

from __future__ import annotations

from .renderer import render, render_question
from .sanitizer import ALLOWED_ATTRIBUTES, ALLOWED_TAGS, REMOVED_TAGS, sanitize

__all__ = [
    "render",
    "render_question",
    "sanitize",
    "ALLOWED_TAGS",
    "ALLOWED_ATTRIBUTES",
    "REMOVED_TAGS",
]
