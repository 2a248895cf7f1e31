"""Command line entry point that writes a bitmap font texture and atlas."""

from __future__ import annotations

import argparse
import sys

from termatlas.generator import DEFAULT_FONT_PATH, GLYPHS, BitmapFontGenerator


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termatlas", description="Generate a bitmap font texture and atlas."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--font", default=DEFAULT_FONT_PATH, help="font file to rasterise")
    source.add_argument(
        "--default-font", action="store_true", help="use the built-in font instead of a file"
    )
    parser.add_argument("--size", type=float, default=10.0, help="font size in pixels")
    parser.add_argument("--width", type=int, default=1024, help="texture width in pixels")
    parser.add_argument("--chars", default=GLYPHS, help="characters to include")
    parser.add_argument("--texture", default="./data/bitmap_font.png", help="output PNG")
    parser.add_argument(
        "--metadata", default="./data/bitmap_font.atlas", help="output atlas file"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    font_path = None if args.default_font else args.font
    try:
        font = BitmapFontGenerator(args.size, args.width, font_path=font_path).generate(
            args.chars
        )
        font.save_texture(args.texture)
        font.save_metadata(args.metadata)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    meta = font.metadata
    print("Bitmap font generated!")
    print(f"Texture size: {meta.texture_width}x{meta.texture_height}")
    print(f"Cell size: {meta.cell_width}x{meta.cell_height}")
    print(f"Glyph count: {len(meta.glyphs)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())