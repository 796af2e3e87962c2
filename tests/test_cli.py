"""Tests for the CLI entry points."""

from pathlib import Path

from click.testing import CliRunner

from lanegraph.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
PIPELINE = EXAMPLES_DIR / "pipeline.lanes"
PINNED = EXAMPLES_DIR / "pinned.lanes"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(PIPELINE), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    content = out.read_text()
    assert "<svg" in content
    assert content.endswith("\n")
    assert "Rendered 6 nodes" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    lanes = tmp_path / "test.lanes"
    lanes.write_text(PIPELINE.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(lanes)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_render_html_format(tmp_path):
    lanes = tmp_path / "test.lanes"
    lanes.write_text(PIPELINE.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(lanes), "--format", "html"])
    assert result.exit_code == 0, result.output
    html = (tmp_path / "test.html").read_text()
    assert html.startswith("<!DOCTYPE html>")
    assert "Build pipeline" in html


def test_render_with_theme_and_sizes(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(PINNED), "-o", str(out),
        "--theme", "light",
        "--node-height", "30",
        "--node-width", "100",
        "--gap", "20",
        "--stroke-width", "1",
    ])
    assert result.exit_code == 0, result.output
    assert out.exists()


def test_render_rejects_bad_gap(tmp_path):
    """A gap too small for the stroke width is reported, not raised."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(PIPELINE), "-o", str(out), "--gap", "4"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not out.exists()


def test_render_nonexistent_file():
    """render command fails gracefully on missing input."""
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/file.lanes"])
    assert result.exit_code != 0


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(PIPELINE)])
    assert result.exit_code == 0
    assert "Valid: 6 nodes, 6 links, 4 columns" in result.output


def test_validate_bad_file(tmp_path):
    bad = tmp_path / "bad.lanes"
    bad.write_text("not a valid lanes file")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "line 1" in result.output


def test_validate_cycle(tmp_path):
    cyclic = tmp_path / "cyclic.lanes"
    cyclic.write_text("a --> b\nb --> a\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(cyclic)])
    assert result.exit_code == 1
    assert "cycle" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(PINNED)])
    assert result.exit_code == 0, result.output
    assert "Title: Release train" in result.output
    assert "Nodes: 5" in result.output
    assert "[1] docs, code" in result.output
    assert "Lanes:" in result.output
    assert "Canvas:" in result.output


def test_demo(tmp_path):
    out = tmp_path / "index.html"
    runner = CliRunner()
    result = runner.invoke(cli, ["demo", "-o", str(out), "--nodes", "10", "--columns", "3"])
    assert result.exit_code == 0, result.output
    assert "Rendered 10 nodes" in result.output
    assert "<svg" in out.read_text()


def test_spacing():
    runner = CliRunner()
    result = runner.invoke(cli, ["spacing", "12", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "0 8 -8 4 -4 6 -6 3 -3 4 -4"


def test_spacing_invalid():
    runner = CliRunner()
    result = runner.invoke(cli, ["spacing", "2", "2"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_verbose_flag():
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "validate", str(PIPELINE)])
    assert result.exit_code == 0


def test_version():
    """--version flag prints version string."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()
