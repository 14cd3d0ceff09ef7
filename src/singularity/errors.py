"""Build error taxonomy.

Fatal errors abort a build before any job runs. Every other error raised by
a job is captured on its task and surfaced only through the result reporter.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BuildError(Exception):
    """Base build error."""

    message: str
    code: str = "build_error"

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class FatalBuildError(BuildError):
    """Startup error that must stop the build before the pool runs."""

    code: str = "fatal"


@dataclass(slots=True)
class ConfigurationError(FatalBuildError):
    """Environment could not be decoded into settings."""

    code: str = "configuration"


@dataclass(slots=True)
class OutputDirectoryError(FatalBuildError):
    """Output directory tree could not be created."""

    code: str = "output_directory"
    path: str | None = None


@dataclass(slots=True)
class ContentEnumerationError(FatalBuildError):
    """A content directory could not be listed, so the job set is incomplete."""

    code: str = "content_enumeration"
    path: str | None = None


@dataclass(slots=True)
class DuplicateOutputError(FatalBuildError):
    """Two jobs would write the same output path."""

    code: str = "duplicate_output"
    path: str | None = None


@dataclass(slots=True)
class LinkError(BuildError):
    """Symlink could not be verified or created."""

    code: str = "link"


@dataclass(slots=True)
class AssetCompileError(BuildError):
    """JS/CSS bundle could not be compiled."""

    code: str = "asset_compile"


@dataclass(slots=True)
class RenderError(BuildError):
    """Article or page could not be rendered."""

    code: str = "render"
