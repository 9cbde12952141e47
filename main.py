from __future__ import annotations

import argparse
import logging
from pathlib import Path

from turtlefont import (
    CanvasPainter,
    MappingGlyphProvider,
    RenderConfig,
    TurtleFont,
    load_render_config,
    new_canvas,
    save_png,
)


SAMPLE_GLYPHS = {
    " ": "a4",
    ".": "a3 M12d",
    "!": "a3 M14 P18 M12d",
    "E": "a6 M58 P18 P12 P52 M15 P45",
    "H": "a6 M12 P18 M52 P58 M15 P55",
    "I": "a3 M12 P18",
    "L": "a6 M18 P12 P52",
    "O": "a7 M13 P17 p11 p30 p1-1 P53 p-1-1 p-30 p-11",
    "T": "a6 M08 P58 M38 P32",
    "a": "a6 M46 p0-4 p-30 p-11 p02 p11 p20 p1-1 M18d M38d",
}


def main() -> None:
    parser = argparse.ArgumentParser(prog="turtlefont")
    parser.add_argument("text", help="Text to render; `\\n` starts a new line.")
    parser.add_argument("out", type=Path, help="PNG output path.")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [render] table.")
    parser.add_argument("--size", type=int, default=None, help="Font size in pixels (min 8).")
    parser.add_argument("--stroke", type=int, default=None, help="Stroke width in pixels (min 1).")
    parser.add_argument("--dot-size", type=int, default=None)
    parser.add_argument("--max-width", type=int, default=0, help="Wrap width in pixels; 0 disables wrapping.")
    parser.add_argument("--margin", type=int, default=8)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_render_config(args.config) if args.config is not None else RenderConfig()
    if args.size is not None:
        config.set_font_size(args.size)
    if args.stroke is not None:
        config.set_stroke_width(args.stroke)
    if args.dot_size is not None:
        config.set_dot_size(args.dot_size)

    text = args.text.replace("\\n", "\n")
    font = TurtleFont(config, glyphs=MappingGlyphProvider(SAMPLE_GLYPHS))

    # Measure first so the surface fits the text, then render into it.
    width = font.measure_string(text, args.max_width) + 2 * args.margin + config.stroke_width
    height = font.render_string(0, 0, text, args.max_width) + 2 * args.margin
    canvas = new_canvas(max(1, width), max(1, height))
    font.set_painter(CanvasPainter(canvas))
    font.render_string(args.margin, args.margin + config.font_size, text, args.max_width)
    save_png(canvas, args.out)
    print(f"wrote {args.out} ({width}x{height})")


if __name__ == "__main__":
    main()
