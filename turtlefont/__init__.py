"""Turtle-font glyph interpreter, rasterizer and string layout."""

from turtlefont.config import RenderConfig, load_render_config
from turtlefont.engine import TurtleFont
from turtlefont.errors import MalformedGlyphProgram, RenderConfigError
from turtlefont.interpreter import DotStamp, GlyphTrace, LineStroke, glyph_width, render_glyph, trace_glyph
from turtlefont.layout import GlyphProvider, MappingGlyphProvider, measure_string, render_string
from turtlefont.raster import CallbackPainter, CanvasPainter, Painter, new_canvas, save_png
from turtlefont.scale import ScaleMapper
from turtlefont.tokenizer import GlyphTokenizer

__all__ = [
    "CallbackPainter",
    "CanvasPainter",
    "DotStamp",
    "GlyphProvider",
    "GlyphTokenizer",
    "GlyphTrace",
    "LineStroke",
    "MalformedGlyphProgram",
    "MappingGlyphProvider",
    "Painter",
    "RenderConfig",
    "RenderConfigError",
    "ScaleMapper",
    "TurtleFont",
    "glyph_width",
    "load_render_config",
    "measure_string",
    "new_canvas",
    "render_glyph",
    "render_string",
    "save_png",
    "trace_glyph",
]
