from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Mapping, Protocol

from turtlefont.config import RenderConfig
from turtlefont.interpreter import GlyphTrace, checked_trace, paint_trace
from turtlefont.raster.primitives import Painter
from turtlefont.scale import ScaleMapper


LOGGER = logging.getLogger(__name__)


class GlyphProvider(Protocol):
    """Codepoint to glyph program lookup. None means the font has no glyph."""

    def lookup_glyph(self, codepoint: int) -> str | None:
        ...


@dataclass
class MappingGlyphProvider:
    """Glyph store backed by a dict keyed by character or codepoint."""

    glyphs: Mapping[str | int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized: dict[int, str] = {}
        for key, program in self.glyphs.items():
            if isinstance(key, str):
                if len(key) != 1:
                    raise ValueError(f"glyph key must be a single character, got {key!r}")
                key = ord(key)
            normalized[key] = program
        self._by_codepoint = normalized

    def lookup_glyph(self, codepoint: int) -> str | None:
        return self._by_codepoint.get(codepoint)


def _wraps(line_width: int, advance: int, max_width: int) -> bool:
    # Shared by render and measure so both break before the same glyph.
    return max_width > 0 and line_width + advance >= max_width


def _resolve(glyphs: GlyphProvider, ch: str, config: RenderConfig) -> tuple[GlyphTrace | None, int] | None:
    """Trace and width for `ch`; None when the font has no glyph.

    A malformed program resolves to (None, 0) so it takes no space in either mode.
    """
    program = glyphs.lookup_glyph(ord(ch))
    if program is None:
        LOGGER.debug("no glyph for %r", ch)
        return None
    trace = checked_trace(program)
    if trace is None:
        return (None, 0)
    return (trace, ScaleMapper(config.font_size).scalex(trace.advance))


def render_string(
    x: int,
    y: int,
    text: str,
    config: RenderConfig,
    glyphs: GlyphProvider | None,
    painter: Painter | None = None,
    *,
    max_width: int = 0,
) -> int:
    """Render `text` with its first baseline at `y`; returns the vertical extent."""
    if glyphs is None:
        return 0
    line_height = config.line_height
    cx, cy = x, y
    for ch in text:
        if ch == "\n":
            cx = x
            cy += line_height
            continue
        resolved = _resolve(glyphs, ch, config)
        if resolved is None:
            continue
        trace, advance = resolved
        if _wraps(cx - x, advance, max_width):
            cx = x
            cy += line_height
        if trace is not None:
            paint_trace(cx, cy, trace, config, painter)
        cx += advance
    return cy - y + line_height


def measure_string(
    text: str,
    config: RenderConfig,
    glyphs: GlyphProvider | None,
    *,
    max_width: int = 0,
) -> int:
    """Widest line of `text` in pixels after newlines and wrapping."""
    if glyphs is None:
        return 0
    widest = 0
    line = 0
    for ch in text:
        if ch == "\n":
            widest = max(widest, line)
            line = 0
            continue
        resolved = _resolve(glyphs, ch, config)
        if resolved is None:
            continue
        _, advance = resolved
        if _wraps(line, advance, max_width):
            widest = max(widest, line)
            line = 0
        line += advance
    return max(widest, line)
