"""Layout + view template rendering on top of Jinja2."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TextIO

from jinja2 import (
    Environment,
    FileSystemLoader,
    PrefixLoader,
    StrictUndefined,
    Template,
    select_autoescape,
)
from markupsafe import Markup


class ViewTemplate:
    """A view rendered inside a layout.

    The view is rendered first; its output is handed to the layout as the
    ``content`` local. Both see the same locals and helper functions.
    """

    def __init__(self, *, layout: Template, view: Template) -> None:
        self.layout = layout
        self.view = view

    def render(self, locals_: Mapping[str, Any]) -> str:
        view_output = self.view.render(**locals_)
        return self.layout.render(**{**locals_, "content": Markup(view_output)})

    def execute(self, writer: TextIO, locals_: Mapping[str, Any]) -> None:
        """Render completely, then write, so a failed render leaves no partial output."""

        writer.write(self.render(locals_))


def load_template(
    layout_path: Path,
    view_path: Path,
    helpers: Mapping[str, Callable[..., Any]] | None = None,
) -> ViewTemplate:
    """Load ``view_path`` wrapped in ``layout_path``.

    Views may include partials that sit next to them as ``view/<name>``, and
    layouts likewise as ``layout/<name>``.
    """

    environment = Environment(
        loader=PrefixLoader(
            {
                "layout": FileSystemLoader(layout_path.parent),
                "view": FileSystemLoader(view_path.parent),
            },
        ),
        autoescape=select_autoescape(["html", "htm", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    for name, helper in (helpers or {}).items():
        environment.filters[name] = helper
        environment.globals[name] = helper

    return ViewTemplate(
        layout=environment.get_template(f"layout/{layout_path.name}"),
        view=environment.get_template(f"view/{view_path.name}"),
    )
