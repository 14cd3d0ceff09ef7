"""Markdown to HTML rendering."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Any

import mistune

_PLUGINS = ["table", "strikethrough", "url", "footnotes"]
_TAG_PATTERN = re.compile(r"<[^>]+>")
_NON_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


@dataclass(slots=True)
class MarkdownOptions:
    """Rendering switches."""

    header_ids: bool = True
    hard_wrap: bool = False


class _HeaderIdRenderer(mistune.HTMLRenderer):
    """HTML renderer that gives every heading a stable, unique id."""

    def __init__(self, *, header_ids: bool) -> None:
        super().__init__(escape=False)
        self._header_ids = header_ids
        self._seen: dict[str, int] = {}

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        if not self._header_ids:
            return super().heading(text, level, **attrs)
        anchor = self._unique(slugify(text))
        return f'<h{level} id="{anchor}">{text}</h{level}>\n'

    def _unique(self, anchor: str) -> str:
        count = self._seen.get(anchor, 0) + 1
        self._seen[anchor] = count
        return anchor if count == 1 else f"{anchor}-{count}"


def slugify(text: str) -> str:
    """Turn heading text (possibly with inline markup) into an anchor id."""

    plain = html.unescape(_TAG_PATTERN.sub("", text)).lower()
    slug = _NON_SLUG_PATTERN.sub("-", plain).strip("-")
    return slug or "section"


def render_markdown(source: str, options: MarkdownOptions | None = None) -> str:
    """Render markdown source to HTML. Raw HTML blocks pass through unchanged."""

    options = options or MarkdownOptions()
    markdown = mistune.create_markdown(
        renderer=_HeaderIdRenderer(header_ids=options.header_ids),
        hard_wrap=options.hard_wrap,
        plugins=_PLUGINS,
    )
    return str(markdown(source))
