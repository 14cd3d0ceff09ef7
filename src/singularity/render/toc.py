"""Table-of-contents extraction from rendered article HTML."""

from __future__ import annotations

import html
from dataclasses import dataclass
from html.parser import HTMLParser

TOC_LEVELS = ("h2", "h3", "h4")


@dataclass(slots=True)
class Heading:
    level: int
    anchor: str
    title: str


class _HeadingParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.headings: list[Heading] = []
        self._current: tuple[int, str] | None = None
        self._text: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag not in TOC_LEVELS:
            return
        anchor = dict(attrs).get("id")
        if anchor:
            self._current = (int(tag[1]), anchor)
            self._text = []

    def handle_endtag(self, tag: str) -> None:
        if self._current is None or tag != f"h{self._current[0]}":
            return
        level, anchor = self._current
        self.headings.append(Heading(level=level, anchor=anchor, title="".join(self._text).strip()))
        self._current = None

    def handle_data(self, data: str) -> None:
        if self._current is not None:
            self._text.append(data)


def extract_headings(content: str) -> list[Heading]:
    parser = _HeadingParser()
    parser.feed(content)
    parser.close()
    return parser.headings


def render_toc(content: str) -> str:
    """Render a nested ordered list linking to the h2-h4 headings of ``content``.

    Headings without an ``id`` cannot be linked and are skipped. Returns an
    empty string when nothing qualifies.
    """

    headings = extract_headings(content)
    if not headings:
        return ""

    parts: list[str] = []
    levels: list[int] = []
    for heading in headings:
        if not levels or heading.level > levels[-1]:
            parts.append("<ol>")
            levels.append(heading.level)
        else:
            parts.append("</li>")
            while len(levels) > 1 and heading.level < levels[-1]:
                levels.pop()
                parts.append("</ol></li>")
        parts.append(
            f'<li><a href="#{html.escape(heading.anchor)}">{html.escape(heading.title)}</a>',
        )

    parts.append("</li>")
    while levels:
        levels.pop()
        parts.append("</ol>")
        if levels:
            parts.append("</li>")
    return "".join(parts)
