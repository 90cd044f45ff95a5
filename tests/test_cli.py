"""Tests for the command-line interface."""

from PIL import Image
from typer.testing import CliRunner

from polygon_plotter.cli import app

runner = CliRunner()


def test_writes_gif(tmp_path, monkeypatch):
    monkeypatch.delenv("POLYGON_PLOTTER_NUM_POINTS", raising=False)
    target = tmp_path / "square.gif"

    result = runner.invoke(
        app,
        ["4", "--output", str(target), "--frames", "3", "--size", "40", "--rotation-step", "0.5"],
    )

    assert result.exit_code == 0, result.output
    with Image.open(target) as img:
        assert img.size == (40, 40)
        assert img.n_frames == 3


def test_writes_webp_with_color_table(tmp_path):
    target = tmp_path / "star.webp"

    result = runner.invoke(
        app, ["5", "-o", str(target), "-n", "2", "--size", "32", "--colors", "--theme", "light"]
    )

    assert result.exit_code == 0, result.output
    assert target.read_bytes().startswith(b"RIFF")
    assert "Line colors" in result.stdout


def test_too_few_points_is_an_error(tmp_path):
    result = runner.invoke(app, ["1", "-o", str(tmp_path / "x.gif")])

    assert result.exit_code == 1
    assert "at least two points" in (result.stdout + result.stderr)


def test_unsupported_output_format(tmp_path):
    result = runner.invoke(app, ["3", "-o", str(tmp_path / "x.mp4"), "-n", "1", "--size", "16"])

    assert result.exit_code == 1
    assert "Unsupported output format" in (result.stdout + result.stderr)


def test_unknown_theme(tmp_path):
    result = runner.invoke(
        app, ["3", "-o", str(tmp_path / "x.gif"), "-n", "1", "--size", "16", "--theme", "neon"]
    )

    assert result.exit_code == 1
    assert "Unknown theme" in (result.stdout + result.stderr)


def test_num_points_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("POLYGON_PLOTTER_NUM_POINTS", "6")
    target = tmp_path / "env.gif"

    result = runner.invoke(app, ["-o", str(target), "-n", "1", "--size", "16"])

    assert result.exit_code == 0, result.output
    assert "15" in result.stdout  # 6 points -> 15 lines
