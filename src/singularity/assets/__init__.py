"""Asset compilation and linking."""

from singularity.assets.compiler import compile_javascripts, compile_stylesheets
from singularity.assets.links import ensure_symlink

__all__ = [
    "compile_javascripts",
    "compile_stylesheets",
    "ensure_symlink",
]
