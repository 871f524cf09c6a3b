"""
Tests for artgen/art/palettes.py
"""

import pytest

from artgen.art.palettes import hex_to_rgb, normalize_hex, rgb_to_hex


def test_hex_to_rgb():
    assert hex_to_rgb("#000000") == (0, 0, 0)
    assert hex_to_rgb("#FF8000") == (255, 128, 0)
    assert hex_to_rgb("3366cc") == (51, 102, 204)


def test_short_hex():
    assert hex_to_rgb("#f0a") == (255, 0, 170)


@pytest.mark.parametrize("bad", ["", "#12345", "#gg0000", "red", "#1234567"])
def test_invalid_hex(bad):
    with pytest.raises(ValueError, match="Invalid color"):
        hex_to_rgb(bad)


def test_rgb_to_hex_clamps():
    assert rgb_to_hex((255, 128, 0)) == "#ff8000"
    assert rgb_to_hex((300, -5, 12.7)) == "#ff000c"


def test_normalize_hex():
    assert normalize_hex("#ABCDEF") == "#abcdef"
