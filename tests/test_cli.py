from pathlib import Path

from typer.testing import CliRunner

from portfolio_press.cli import app

runner = CliRunner()


def _config(tmp_path: Path) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(
        "site:\n  name: CLI Site\n  author: CLI Author\nlogging:\n  console: false\n",
        encoding="utf-8",
    )
    return path


def test_build_command_publishes_site(content_root: Path, tmp_path: Path) -> None:
    output = tmp_path / "public"

    result = runner.invoke(
        app,
        ["build", "-i", str(content_root), "-o", str(output), "-c", str(_config(tmp_path)), "--no-progress"],
    )

    assert result.exit_code == 0, result.output
    assert "Site published" in result.output
    assert "(9 pages)" in result.output
    assert "CLI Author" in (output / "index.html").read_text(encoding="utf-8")


def test_build_command_reads_site_yaml_from_content_root(content_root: Path, tmp_path: Path) -> None:
    (content_root / "site.yaml").write_text(
        "site:\n  title_suffix: ' | From Content'\nlogging:\n  console: false\n", encoding="utf-8"
    )
    output = tmp_path / "public"

    result = runner.invoke(app, ["build", "-i", str(content_root), "-o", str(output), "--no-progress"])

    assert result.exit_code == 0, result.output
    assert "<title>Home | From Content</title>" in (output / "index.html").read_text(encoding="utf-8")


def test_build_command_fails_with_single_error(content_root: Path, tmp_path: Path) -> None:
    (content_root / "data" / "cv.json").unlink()
    output = tmp_path / "public"

    result = runner.invoke(
        app,
        ["build", "-i", str(content_root), "-o", str(output), "-c", str(_config(tmp_path)), "--no-progress"],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "Resume data not found" in result.output
    assert not output.exists()


def test_check_command_renders_without_writing(content_root: Path, tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", "-i", str(content_root), "-c", str(_config(tmp_path))])

    assert result.exit_code == 0, result.output
    assert "Content OK: 9 pages, 3 articles, 3 tags" in result.output
    assert not (tmp_path / "public").exists()


def test_build_command_rejects_output_over_content(content_root: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["build", "-i", str(content_root), "-o", str(content_root), "-c", str(_config(tmp_path)), "--no-progress"],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert (content_root / "articles" / "clean.md").exists()


def test_build_command_reports_output_file_in_the_way(content_root: Path, tmp_path: Path) -> None:
    output = tmp_path / "public"
    output.write_text("keep me", encoding="utf-8")

    result = runner.invoke(
        app,
        ["build", "-i", str(content_root), "-o", str(output), "-c", str(_config(tmp_path)), "--no-progress"],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert output.read_text(encoding="utf-8") == "keep me"
    assert not list(tmp_path.glob(".public-*"))
