from pathlib import Path

import pytest

from portfolio_press.config import AppConfig, NavItem, load_config
from portfolio_press.errors import ConfigError


def test_load_config_without_path_returns_fresh_defaults() -> None:
    first = load_config(None)
    first.output.workers = 9

    second = load_config(None)

    assert second.output.workers == 4
    assert second.content.words_per_minute == 200
    assert [item.target for item in second.navigation] == ["blog", "resume"]


def test_load_config_merges_sections_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text(
        "site:\n"
        "  name: Lyle Resnick\n"
        "  title_suffix: ' - Lyle'\n"
        "content:\n"
        "  words_per_minute: 250\n"
        "navigation:\n"
        "  - {label: Writing, target: blog}\n"
        "unknown_section: ignored\n",
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.site.name == "Lyle Resnick"
    assert cfg.site.title_suffix == " - Lyle"
    assert cfg.site.brand_color == "#2ccabd"
    assert cfg.content.words_per_minute == 250
    assert cfg.content.resume_file == "data/cv.json"
    assert cfg.navigation == [NavItem(label="Writing", target="blog")]


def test_load_config_rejects_unknown_section_keys(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("site:\n  nmae: typo\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("site: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_rejects_non_positive_reading_speed(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("content:\n  words_per_minute: 0\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_rejects_scalar_section(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("output: fast\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_default_config_has_no_log_file() -> None:
    assert AppConfig().logging.file is False


@pytest.mark.parametrize(
    "text",
    [
        "site:\n  url: 5\n",
        "site:\n  title_suffix: 3\n",
        "site:\n  brand_color: [red]\n",
        "site:\n  logo: 7\n",
        "content:\n  description_chars: many\n",
        "content:\n  min_reading_minutes: 1.5\n",
        "content:\n  words_per_minute: true\n",
        "content:\n  markdown_extensions: fenced_code\n",
        "content:\n  markdown_extensions: [fenced_code, 3]\n",
        "output:\n  sitemap: 'yes'\n",
        "navigation:\n  - {label: 1, target: blog}\n",
        "navigation:\n  - blog\n",
    ],
)
def test_load_config_rejects_wrongly_typed_values(tmp_path: Path, text: str) -> None:
    path = tmp_path / "site.yaml"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_names_the_bad_field(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("site:\n  url: 5\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(path)

    assert "site.url must be a string" in str(excinfo.value)


def test_load_config_accepts_optional_fields_left_null(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text(
        "site:\n  logo: null\n  repository_label: Code\n  repository_icon: /images/mark.svg\n",
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.site.logo is None
    assert cfg.site.repository_label == "Code"
    assert cfg.site.repository_icon == "/images/mark.svg"
