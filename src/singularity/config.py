"""Runtime configuration for site builds."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from singularity.pool import DEFAULT_CONCURRENCY

DEFAULT_RELEASE = "1"


@dataclass(slots=True)
class SitePaths:
    """Fixed on-disk layout of a site, resolved from one root directory."""

    root: Path = Path()

    @property
    def content_dir(self) -> Path:
        return self.root / "content"

    @property
    def articles_dir(self) -> Path:
        return self.content_dir / "articles"

    @property
    def pages_dir(self) -> Path:
        return self.content_dir / "pages"

    @property
    def static_dir(self) -> Path:
        return self.content_dir / "static"

    @property
    def javascripts_dir(self) -> Path:
        return self.content_dir / "javascripts"

    @property
    def stylesheets_dir(self) -> Path:
        return self.content_dir / "stylesheets"

    @property
    def fonts_dir(self) -> Path:
        return self.content_dir / "fonts"

    @property
    def images_dir(self) -> Path:
        return self.content_dir / "images"

    @property
    def layouts_dir(self) -> Path:
        return self.root / "layouts"

    @property
    def main_layout(self) -> Path:
        return self.layouts_dir / "main.html"

    @property
    def article_view(self) -> Path:
        return self.layouts_dir / "article.html"

    @property
    def target_dir(self) -> Path:
        return self.root / "public"

    @property
    def assets_dir(self) -> Path:
        return self.target_dir / "assets"

    def versioned_assets_dir(self, release: str) -> Path:
        """Directory for compiled JS/CSS, invalidated by bumping the release."""

        return self.assets_dir / release


@dataclass(slots=True)
class Settings:
    """Build settings, decoded once at startup and passed explicitly."""

    concurrency: int = DEFAULT_CONCURRENCY
    google_analytics_id: str = ""
    # Serve locally downloaded fonts instead of the Google Fonts CDN.
    local_fonts: bool = False
    verbose: bool = False
    minify_assets: bool = False
    release: str = DEFAULT_RELEASE
    paths: SitePaths = field(default_factory=SitePaths)

    @classmethod
    def from_env(cls, root: Path | None = None) -> Settings:
        """Load settings from environment variables."""

        return cls(
            concurrency=_env_int("CONCURRENCY", DEFAULT_CONCURRENCY),
            google_analytics_id=os.getenv("GOOGLE_ANALYTICS_ID", "").strip(),
            local_fonts=_env_bool("LOCAL_FONTS", default=False),
            verbose=_env_bool("VERBOSE", default=False),
            minify_assets=_env_bool("MINIFY_ASSETS", default=False),
            release=os.getenv("RELEASE", DEFAULT_RELEASE).strip(),
            paths=SitePaths(root=root or Path()),
        )

    def validate(self) -> None:
        """Raise ValueError if settings cannot drive a build."""

        if self.concurrency < 1:
            raise ValueError("CONCURRENCY must be a positive integer.")
        if not self.release:
            raise ValueError("RELEASE must not be empty.")
        if "/" in self.release or self.release in {".", ".."}:
            raise ValueError(f"RELEASE must be a plain directory name: {self.release!r}")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as error:
        raise ValueError(f"Invalid integer value for {name}: {value!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")
