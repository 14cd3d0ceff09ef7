"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from singularity.config import Settings, SitePaths

MAIN_LAYOUT = """<!doctype html>
<html>
<head>
<title>{{ title }}</title>
<link rel="stylesheet" href="/assets/{{ release }}/app.css">
</head>
<body>
{{ content }}
</body>
</html>
"""

ARTICLE_VIEW = """<article>
<nav>{{ toc }}</nav>
{{ content }}
</article>
"""

HELLO_ARTICLE = """# Hello

## First section

Some *text*.

### Detail

More.

## Second section

Done.
"""

_CONFIG_ENV_VARS = (
    "CONCURRENCY",
    "GOOGLE_ANALYTICS_ID",
    "LOCAL_FONTS",
    "MINIFY_ASSETS",
    "RELEASE",
    "VERBOSE",
)


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def write_site(root: Path) -> Path:
    """Lay out a small but complete site under ``root``."""

    content = root / "content"
    _write(content / "articles" / "hello.md", HELLO_ARTICLE)
    _write(content / "articles" / "index.md", "# Index\n\nWelcome.\n")
    _write(content / "articles" / ".draft.md", "# Draft\n")
    _write(
        content / "pages" / "about.html",
        "<p>About {{ title }}: {{ number_with_delimiter(1234567) }}</p>\n",
    )
    _write(content / "pages" / ".hidden.html", "{{ undefined_local }}\n")
    _write(content / "static" / "downloads" / "file.txt", "download me\n")
    _write(content / "static" / ".cache" / "junk", "junk\n")
    _write(content / "javascripts" / "a.js", "var a = 1;\n")
    _write(content / "javascripts" / "b.js", "var b = 2;\n")
    _write(content / "stylesheets" / "main.css", "body { color: red; }\n")
    _write(content / "fonts" / "font.woff", "font\n")
    _write(content / "images" / "logo.png", "png\n")
    _write(content / "images" / ".DS_Store", "\n")
    _write(root / "layouts" / "main.html", MAIN_LAYOUT)
    _write(root / "layouts" / "article.html", ARTICLE_VIEW)
    return root


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def site_root(tmp_path: Path) -> Path:
    return write_site(tmp_path / "site")


@pytest.fixture()
def settings(site_root: Path) -> Settings:
    return Settings(concurrency=3, paths=SitePaths(root=site_root))
