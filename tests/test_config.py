from __future__ import annotations

from pathlib import Path

import allure
import pytest

from singularity.config import Settings, SitePaths

pytestmark = [
    allure.epic("Site Build"),
    allure.feature("Configuration"),
]


def test_from_env_defaults() -> None:
    settings = Settings.from_env()

    assert settings.concurrency == 10
    assert settings.google_analytics_id == ""
    assert settings.local_fonts is False
    assert settings.verbose is False
    assert settings.minify_assets is False
    assert settings.release == "1"
    assert settings.paths.root == Path()
    settings.validate()


def test_from_env_parses_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CONCURRENCY", "4")
    monkeypatch.setenv("GOOGLE_ANALYTICS_ID", " UA-123 ")
    monkeypatch.setenv("LOCAL_FONTS", "true")
    monkeypatch.setenv("VERBOSE", "yes")
    monkeypatch.setenv("MINIFY_ASSETS", "1")
    monkeypatch.setenv("RELEASE", "42")

    settings = Settings.from_env(root=tmp_path)

    assert settings.concurrency == 4
    assert settings.google_analytics_id == "UA-123"
    assert settings.local_fonts is True
    assert settings.verbose is True
    assert settings.minify_assets is True
    assert settings.release == "42"
    assert settings.paths.root == tmp_path


def test_from_env_rejects_invalid_boolean(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCAL_FONTS", "maybe")

    with pytest.raises(ValueError, match="Invalid boolean value for LOCAL_FONTS"):
        Settings.from_env()


def test_from_env_rejects_invalid_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONCURRENCY", "ten")

    with pytest.raises(ValueError, match="Invalid integer value for CONCURRENCY"):
        Settings.from_env()


@pytest.mark.parametrize("concurrency", [0, -3])
def test_validate_rejects_non_positive_concurrency(concurrency: int) -> None:
    with pytest.raises(ValueError, match="CONCURRENCY must be a positive integer"):
        Settings(concurrency=concurrency).validate()


@pytest.mark.parametrize("release", ["", "a/b", ".."])
def test_validate_rejects_bad_release(release: str) -> None:
    with pytest.raises(ValueError, match="RELEASE"):
        Settings(release=release).validate()


def test_site_paths_layout(tmp_path: Path) -> None:
    paths = SitePaths(root=tmp_path)

    assert paths.articles_dir == tmp_path / "content" / "articles"
    assert paths.pages_dir == tmp_path / "content" / "pages"
    assert paths.static_dir == tmp_path / "content" / "static"
    assert paths.javascripts_dir == tmp_path / "content" / "javascripts"
    assert paths.stylesheets_dir == tmp_path / "content" / "stylesheets"
    assert paths.fonts_dir == tmp_path / "content" / "fonts"
    assert paths.images_dir == tmp_path / "content" / "images"
    assert paths.main_layout == tmp_path / "layouts" / "main.html"
    assert paths.article_view == tmp_path / "layouts" / "article.html"
    assert paths.target_dir == tmp_path / "public"
    assert paths.versioned_assets_dir("7") == tmp_path / "public" / "assets" / "7"
