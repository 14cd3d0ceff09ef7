"""Bundle JS and CSS sources into single versioned files."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

import csscompressor
import rjsmin

from singularity.errors import AssetCompileError

logger = logging.getLogger(__name__)


def compile_javascripts(source_dir: Path, output_file: Path, *, minify: bool = False) -> None:
    """Concatenate every ``*.js`` file in ``source_dir`` into ``output_file``."""

    _compile_bundle(
        source_dir,
        output_file,
        suffix=".js",
        minifier=rjsmin.jsmin if minify else None,
    )


def compile_stylesheets(source_dir: Path, output_file: Path, *, minify: bool = False) -> None:
    """Concatenate every ``*.css`` file in ``source_dir`` into ``output_file``."""

    _compile_bundle(
        source_dir,
        output_file,
        suffix=".css",
        minifier=csscompressor.compress if minify else None,
    )


def _compile_bundle(
    source_dir: Path,
    output_file: Path,
    *,
    suffix: str,
    minifier: Callable[[str], str] | None,
) -> None:
    started = time.monotonic()
    try:
        sources = sorted(
            entry
            for entry in source_dir.iterdir()
            if entry.suffix == suffix and not entry.name.startswith(".") and entry.is_file()
        )
        chunks = [f"/* {entry.name} */\n\n{entry.read_text(encoding='utf-8')}" for entry in sources]
    except OSError as error:
        raise AssetCompileError(f"Cannot read assets from {source_dir}: {error}") from error

    bundle = "\n\n".join(chunks)
    if minifier is not None:
        bundle = minifier(bundle)

    try:
        output_file.write_text(bundle, encoding="utf-8")
    except OSError as error:
        raise AssetCompileError(f"Cannot write asset bundle {output_file}: {error}") from error

    logger.debug(
        "Compiled %d %s file(s) into %s in %.3fs",
        len(sources),
        suffix,
        output_file,
        time.monotonic() - started,
    )
