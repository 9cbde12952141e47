from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TypeAlias

from turtlefont.config import RenderConfig
from turtlefont.errors import MalformedGlyphProgram
from turtlefont.raster.primitives import Painter, draw_dot, draw_line
from turtlefont.scale import ScaleMapper
from turtlefont.tokenizer import TERMINATOR, GlyphTokenizer


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineStroke:
    x0: int
    y0: int
    x1: int
    y1: int


@dataclass(frozen=True)
class DotStamp:
    x: int
    y: int


Primitive: TypeAlias = LineStroke | DotStamp


@dataclass(frozen=True)
class GlyphTrace:
    """Pen output for one glyph, in glyph units."""

    advance: int
    primitives: tuple[Primitive, ...]


def trace_glyph(program: str) -> GlyphTrace:
    """Run the turtle over `program` without painting.

    Raises MalformedGlyphProgram when an operand is cut off by the end of input.
    """
    tokens = GlyphTokenizer(program)
    primitives: list[Primitive] = []
    advance = 0
    x = y = 0
    px = py = 0
    while True:
        op = tokens.next_opcode()
        if op == TERMINATOR:
            break
        if op == "a":
            advance = tokens.next_number()
        elif op == "M":
            x = tokens.next_number()
            y = tokens.next_number()
        elif op == "m":
            x += tokens.next_number()
            y += tokens.next_number()
        elif op == "P":
            x = tokens.next_number()
            y = tokens.next_number()
            primitives.append(LineStroke(px, py, x, y))
        elif op == "p":
            x += tokens.next_number()
            y += tokens.next_number()
            primitives.append(LineStroke(px, py, x, y))
        elif op == "d":
            primitives.append(DotStamp(x, y))
        else:
            LOGGER.debug("ignoring unknown glyph opcode %r at offset %d", op, tokens.position - 1)
        px, py = x, y
    return GlyphTrace(advance=advance, primitives=tuple(primitives))


def glyph_advance(program: str) -> int:
    """Advance operand of the first `a` opcode, or 0. Nothing after it is read."""
    tokens = GlyphTokenizer(program)
    while True:
        op = tokens.next_opcode()
        if op == TERMINATOR:
            return 0
        if op == "a":
            return tokens.next_number()


def glyph_width(program: str, config: RenderConfig) -> int:
    try:
        advance = glyph_advance(program)
    except MalformedGlyphProgram as exc:
        LOGGER.warning("measuring malformed glyph as zero width: %s", exc)
        return 0
    return ScaleMapper(config.font_size).scalex(advance)


def checked_trace(program: str) -> GlyphTrace | None:
    """Trace `program`, or return None (with a warning) when it is malformed."""
    try:
        return trace_glyph(program)
    except MalformedGlyphProgram as exc:
        LOGGER.warning("skipping malformed glyph: %s", exc)
        return None


def paint_trace(x: int, y: int, trace: GlyphTrace, config: RenderConfig, painter: Painter | None = None) -> int:
    """Rasterize an already traced glyph; returns its scaled advance."""
    mapper = ScaleMapper(config.font_size)
    for prim in trace.primitives:
        if isinstance(prim, LineStroke):
            x0, y0 = mapper.to_device(x, y, prim.x0, prim.y0)
            x1, y1 = mapper.to_device(x, y, prim.x1, prim.y1)
            draw_line(painter, x0, y0, x1, y1, stroke_width=config.stroke_width)
        else:
            dx, dy = mapper.to_device(x, y, prim.x, prim.y)
            draw_dot(painter, dx, dy, config.dot_radius)
    return mapper.scale(trace.advance)


def render_glyph(x: int, y: int, program: str, config: RenderConfig, painter: Painter | None = None) -> int:
    """Rasterize `program` with its left edge at `x` and baseline at `y`.

    Returns the scaled advance width. A malformed program paints nothing and
    returns 0.
    """
    trace = checked_trace(program)
    if trace is None:
        return 0
    return paint_trace(x, y, trace, config, painter)
