"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SiteConfig: Site identity, chrome text and base URL
- HomeConfig: Home page heading and biography
- NavItem: One navigation bar entry (label and static page key)
- ContentConfig: Where content lives and how it is measured
- OutputConfig: Output layout and rendering settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError


@dataclass
class SiteConfig:
    """Site-wide identity used by the layout and the feeds.

    Attributes:
        name: Site name, used in the feed and as the default logo text
        title_suffix: Appended to every page title in the document head
        url: Absolute base URL the site is served from
        author: Author name shown in the footer and feed
        email: Contact address for the footer mailto link
        repository_url: Source repository linked from the footer
        repository_label: Link text for the repository link
        repository_icon: Image shown before the repository label, if any
        logo: Navigation bar brand text (falls back to author)
        brand_color: Accent color for links and the navigation bar
        language: Document language attribute
        description: Meta description for pages without their own
    """

    name: str = "Portfolio"
    title_suffix: str = ""
    url: str = "https://example.com"
    author: str = ""
    email: str = ""
    repository_url: str = ""
    repository_label: str = "Github"
    repository_icon: str | None = None
    logo: str | None = None
    brand_color: str = "#2ccabd"
    language: str = "en"
    description: str = ""


@dataclass
class HomeConfig:
    """Home page content.

    Attributes:
        heading: Title heading shown at the top of the page
        bio: Markdown biography rendered below the heading
    """

    heading: str = "Welcome"
    bio: str = ""


@dataclass
class NavItem:
    """Navigation entry pointing at a static page by key."""

    label: str
    target: str


def _default_navigation() -> list[NavItem]:
    return [NavItem(label="Blog", target="blog"), NavItem(label="Resume", target="resume")]


@dataclass
class ContentConfig:
    """Configuration for content discovery.

    Attributes:
        articles_dir: Directory of markdown articles, relative to the content root
        resume_file: JSON resume records, relative to the content root
        assets_dir: Static assets copied verbatim into the output
        words_per_minute: Reading speed used for reading time estimates
        min_reading_minutes: Floor applied to reading time estimates
        description_chars: Maximum length of derived article descriptions
        markdown_extensions: Python-Markdown extensions used for bodies
    """

    articles_dir: str = "articles"
    resume_file: str = "data/cv.json"
    assets_dir: str = "assets"
    words_per_minute: int = 200
    min_reading_minutes: int = 0
    description_chars: int = 160
    markdown_extensions: list[str] = field(
        default_factory=lambda: ["fenced_code", "codehilite", "tables", "sane_lists"]
    )


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        articles_path: Output folder holding one folder per article
        tags_path: Output folder holding one folder per tag
        workers: Number of render threads (1 renders inline)
        sitemap: Whether to write sitemap.xml
        feed: Whether to write the RSS feed.xml
        highlight_css: Whether to write the Pygments stylesheet
        highlight_style: Pygments style name for the stylesheet
    """

    articles_path: str = "articles"
    tags_path: str = "tags"
    workers: int = 4
    sitemap: bool = True
    feed: bool = True
    highlight_css: bool = True
    highlight_style: str = "default"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Folder for the log file (never inside the output tree)
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "publish.jsonl"
    directory: str = ".logs"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    home: HomeConfig = field(default_factory=HomeConfig)
    navigation: list[NavItem] = field(default_factory=_default_navigation)
    content: ContentConfig = field(default_factory=ContentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration: {exc.strerror}", path) from exc
    except (yaml.YAMLError, ValueError) as exc:
        raise ConfigError(f"Invalid YAML in configuration: {exc}", path) from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping", path)

    return _merge_config(AppConfig(), raw, path)


def _merge_config(base: AppConfig, raw: dict[str, Any], path: str | Path | None = None) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        elif isinstance(data[key], dict):
            raise ConfigError(f"Section '{key}' must be a mapping", path)
        else:
            data[key] = value
    try:
        return _fromdict(data)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid configuration: {exc}", path) from exc


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "site": {
            "name": cfg.site.name,
            "title_suffix": cfg.site.title_suffix,
            "url": cfg.site.url,
            "author": cfg.site.author,
            "email": cfg.site.email,
            "repository_url": cfg.site.repository_url,
            "repository_label": cfg.site.repository_label,
            "repository_icon": cfg.site.repository_icon,
            "logo": cfg.site.logo,
            "brand_color": cfg.site.brand_color,
            "language": cfg.site.language,
            "description": cfg.site.description,
        },
        "home": {
            "heading": cfg.home.heading,
            "bio": cfg.home.bio,
        },
        "navigation": [
            {"label": item.label, "target": item.target} for item in cfg.navigation
        ],
        "content": {
            "articles_dir": cfg.content.articles_dir,
            "resume_file": cfg.content.resume_file,
            "assets_dir": cfg.content.assets_dir,
            "words_per_minute": cfg.content.words_per_minute,
            "min_reading_minutes": cfg.content.min_reading_minutes,
            "description_chars": cfg.content.description_chars,
            "markdown_extensions": list(cfg.content.markdown_extensions),
        },
        "output": {
            "articles_path": cfg.output.articles_path,
            "tags_path": cfg.output.tags_path,
            "workers": cfg.output.workers,
            "sitemap": cfg.output.sitemap,
            "feed": cfg.output.feed,
            "highlight_css": cfg.output.highlight_css,
            "highlight_style": cfg.output.highlight_style,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "directory": cfg.logging.directory,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    navigation = data["navigation"]
    if not isinstance(navigation, list):
        raise ValueError("navigation must be a list of {label, target} entries")
    cfg = AppConfig(
        site=SiteConfig(**data["site"]),
        home=HomeConfig(**data["home"]),
        navigation=[NavItem(**item) for item in navigation],
        content=ContentConfig(**data["content"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
    for name in ("site", "home", "content", "output", "logging"):
        _check_types(name, getattr(cfg, name))
    for item in cfg.navigation:
        _check_types("navigation", item)
    if cfg.content.words_per_minute <= 0:
        raise ValueError("content.words_per_minute must be positive")
    if cfg.output.workers < 1:
        raise ValueError("output.workers must be at least 1")
    return cfg


_TYPE_NAMES = {"str": "a string", "int": "an integer", "bool": "true or false", "list[str]": "a list of strings"}


def _check_types(section: str, value: Any) -> None:
    """Raise ValueError when a YAML value does not match its field type."""
    for f in fields(value):
        item = getattr(value, f.name)
        expected = str(f.type)
        if expected.endswith(" | None"):
            if item is None:
                continue
            expected = expected[: -len(" | None")]
        if expected == "bool":
            ok = isinstance(item, bool)
        elif expected == "int":
            ok = isinstance(item, int) and not isinstance(item, bool)
        elif expected == "list[str]":
            ok = isinstance(item, list) and all(isinstance(entry, str) for entry in item)
        else:
            ok = isinstance(item, str)
        if not ok:
            raise ValueError(f"{section}.{f.name} must be {_TYPE_NAMES.get(expected, expected)}, got {item!r}")
