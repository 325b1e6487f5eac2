"""Shared fixtures: a small content tree on disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from portfolio_press.config import AppConfig

RESUME = [
    {
        "title": "Senior Mobile Developer",
        "company": "Cellarpoint",
        "location": "Vancouver",
        "date": "2019 - present",
        "application": "Flutter and iOS apps for banking clients.",
    },
    {
        "title": "Development Lead",
        "company": "Example Securities",
        "location": "Toronto",
        "date": "2012 - 2019",
        "application": "Commercial foreign exchange desktop applications.",
    },
]


def _article_text(title: str, date: str, tags: list[str] | None = None, body: str = "Body text.") -> str:
    lines = ["---", f"title: {title}", f"date: {date}"]
    if tags:
        lines.append(f"tags: [{', '.join(tags)}]")
    lines.append("---")
    lines.append(body)
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_article():
    def _write(root: Path, filename: str, title: str, date: str, tags=None, body="Body text.") -> Path:
        path = root / "articles" / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_article_text(title, date, tags, body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_root(tmp_path: Path, write_article) -> Path:
    root = tmp_path / "content"
    write_article(root, "clean.md", "Clean Architecture", "2024-03-18", ["architecture", "flutter"])
    write_article(root, "tdd.md", "Test Driven Development", "2023-11-02", ["architecture", "swift"])
    write_article(root, "dart.md", "Dart Records", "2024-01-05", ["flutter"])
    data = root / "data"
    data.mkdir(parents=True)
    (data / "cv.json").write_text(json.dumps(RESUME), encoding="utf-8")
    assets = root / "assets" / "js"
    assets.mkdir(parents=True)
    (assets / "main.js").write_text("// comment form\n", encoding="utf-8")
    return root


@pytest.fixture
def quiet_config() -> AppConfig:
    cfg = AppConfig()
    cfg.site.name = "Test Site"
    cfg.site.author = "Test Author"
    cfg.site.email = "author@example.com"
    cfg.site.repository_url = "https://github.com/example/site"
    cfg.site.title_suffix = " - Test Author"
    cfg.logging.console = False
    cfg.output.workers = 1
    return cfg
