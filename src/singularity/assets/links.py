"""Idempotent symlink maintenance for linked asset directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from singularity.errors import LinkError

logger = logging.getLogger(__name__)


def ensure_symlink(source: Path, dest: Path) -> None:
    """Make ``dest`` a symlink to ``source``.

    Missing or dangling links are created, links to another target are
    replaced, and a link that already points at ``source`` is left untouched.
    A real file or directory at ``dest`` is never removed.
    """

    logger.debug("Checking symbolic link (%s): %s -> %s", source.name, source, dest)

    if dest.is_symlink():
        actual = Path(os.readlink(dest))
        if actual == source and dest.exists():
            logger.debug("Link exists.")
            return
        logger.debug("Destination links to wrong or missing source. Replacing.")
        dest.unlink()
    elif dest.exists():
        raise LinkError(f"Refusing to replace non-symlink path with link: {dest}")
    else:
        logger.debug("Destination link does not exist. Creating.")

    try:
        dest.symlink_to(source)
    except OSError as error:
        raise LinkError(f"Cannot link {dest} -> {source}: {error}") from error
