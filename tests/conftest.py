"""Shared fixtures: a surface that records primitive calls instead of drawing,
and random sources that return fixed or scripted values."""

from __future__ import annotations

import random

import pytest

from artgen.config import CANVAS_SIZE


class FixedRandom:
    """Stands in for random.Random; always returns the same fraction."""

    def __init__(self, fraction: float):
        self.fraction = fraction

    def random(self) -> float:
        return self.fraction


class ScriptedRandom:
    """Returns the given fractions in order, then repeats the last one."""

    def __init__(self, fractions):
        self.fractions = list(fractions)
        self.pos = 0

    def random(self) -> float:
        value = self.fractions[min(self.pos, len(self.fractions) - 1)]
        self.pos += 1
        return value


class RecordingSurface:
    width = CANVAS_SIZE
    height = CANVAS_SIZE

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.calls: list[tuple] = []
        self.draws: list[tuple] = []

    def clear_background(self, color):
        self.calls.append(("clear_background", tuple(color)))

    def set_fill_color(self, r, g, b):
        self.calls.append(("set_fill_color", (r, g, b)))

    def set_stroke_color(self, r, g, b):
        self.calls.append(("set_stroke_color", (r, g, b)))

    def set_no_stroke(self):
        self.calls.append(("set_no_stroke", ()))

    def draw_ellipse(self, cx, cy, diameter):
        self.calls.append(("draw_ellipse", (cx, cy, diameter)))

    def draw_rect(self, x, y, w, h):
        self.calls.append(("draw_rect", (x, y, w, h)))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("draw_line", (x1, y1, x2, y2)))

    def uniform_random(self, lo, hi):
        value = lo + self.rng.random() * (hi - lo)
        self.draws.append((lo, hi, value))
        return value

    def named(self, name: str) -> list[tuple]:
        return [args for n, args in self.calls if n == name]


@pytest.fixture
def recorder():
    return RecordingSurface()


@pytest.fixture
def make_recorder():
    def _make(rng=None):
        return RecordingSurface(rng)
    return _make


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
