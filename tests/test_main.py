"""
Tests for artgen/main.py (CLI)
"""

import pytest
from PIL import Image

from artgen.main import main


def test_single_render(tmp_path, capsys):
    main(["--pattern", "lines", "--output", str(tmp_path)])
    path = tmp_path / "random-art-lines.png"
    assert Image.open(path).size == (400, 400)
    assert str(path) in capsys.readouterr().out


def test_multiple_renders_are_indexed(tmp_path):
    main(["--pattern", "mosaic", "--count", "3", "--output", str(tmp_path)])
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["random-art-mosaic-00.png", "random-art-mosaic-01.png", "random-art-mosaic-02.png"]


def test_fractal_color(tmp_path):
    main(["--pattern", "fractals", "--color", "#00ff00", "--output", str(tmp_path)])
    colors = {c for _, c in Image.open(tmp_path / "random-art-fractals.png").convert("RGB").getcolors()}
    assert colors == {(255, 255, 255), (0, 255, 0)}


def test_grid(tmp_path):
    main(["--grid", "--thumb-size", "32", "--output", str(tmp_path)])
    assert (tmp_path / "random-art-grid.png").exists()


def test_bad_color_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--color", "purple", "--output", str(tmp_path)])


def test_unknown_pattern_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--pattern", "spiral", "--output", str(tmp_path)])


def test_multiple_renders_keep_existing_single_render(tmp_path):
    existing = tmp_path / "random-art-mosaic.png"
    existing.write_bytes(b"keep me")
    main(["--pattern", "mosaic", "--count", "2", "--output", str(tmp_path)])
    assert existing.read_bytes() == b"keep me"
    assert (tmp_path / "random-art-mosaic-00.png").exists()
    assert (tmp_path / "random-art-mosaic-01.png").exists()
