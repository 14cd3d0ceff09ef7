"""Markdown, table-of-contents and template rendering."""

from singularity.render.helpers import FUNC_MAP
from singularity.render.markdown import MarkdownOptions, render_markdown
from singularity.render.templates import ViewTemplate, load_template
from singularity.render.toc import render_toc

__all__ = [
    "FUNC_MAP",
    "MarkdownOptions",
    "ViewTemplate",
    "load_template",
    "render_markdown",
    "render_toc",
]
