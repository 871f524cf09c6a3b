#!/usr/bin/env python3
"""Random Art Generator -- CLI Interface.

Renders one or more canvases of a pattern family and saves them as
``random-art-<pattern>.png``, or a contact sheet with every family.

Usage:
    python -m artgen.main [--pattern abstract|pixel|lines|fractals|mosaic] [--color #RRGGBB]
                          [--count N] [--output DIR] [--grid]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from artgen import config
from artgen.art.export import export_canvas, export_filename, save_canvas
from artgen.art.palettes import hex_to_rgb
from artgen.patterns.generator import PATTERN_TYPES, generate
from artgen.patterns.renderer import new_canvas, render_pattern_grid


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Random Art Generator")
    p.add_argument(
        "--pattern",
        choices=list(PATTERN_TYPES),
        default=config.DEFAULT_PATTERN,
        help=f"Pattern family (default: {config.DEFAULT_PATTERN})",
    )
    p.add_argument(
        "--color",
        default=config.DEFAULT_COLOR,
        help=f"Accent color for fractals as #RRGGBB (default: {config.DEFAULT_COLOR})",
    )
    p.add_argument("--count", type=int, default=1, help="Number of canvases to render (default: 1)")
    p.add_argument("--output", type=Path, default=config.OUTPUT_DIR, help="Output directory (default: output)")
    p.add_argument("--grid", action="store_true", help="Render a contact sheet of every pattern family")
    p.add_argument("--thumb-size", type=int, default=config.THUMB_SIZE,
                   help=f"Thumbnail size for --grid (default: {config.THUMB_SIZE})")
    return p


def run(args) -> list[Path]:
    accent = hex_to_rgb(args.color)
    args.output.mkdir(parents=True, exist_ok=True)
    saved: list[Path] = []

    if args.grid:
        path = args.output / "random-art-grid.png"
        render_pattern_grid(accent, thumb_size=args.thumb_size, cols=config.GRID_COLS).save(path)
        print(f"Grid saved to: {path}")
        return [path]

    surface = new_canvas()
    stem = Path(export_filename(args.pattern)).stem
    for i in range(args.count):
        generate(surface, args.pattern, accent)
        if args.count > 1:
            _, data = export_canvas(surface, args.pattern)
            path = args.output / f"{stem}-{i:02d}.png"
            path.write_bytes(data)
        else:
            path = save_canvas(surface, args.pattern, args.output)
        print(f"[{i + 1}/{args.count}] Saved {path}")
        saved.append(path)

    return saved


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        hex_to_rgb(args.color)
    except ValueError as e:
        parser.error(str(e))
    if args.count < 1:
        parser.error("--count must be at least 1")
    run(args)


if __name__ == "__main__":
    main()
