from __future__ import annotations

from typing import Any, Callable

from turtlefont.config import RenderConfig
from turtlefont.interpreter import glyph_width, render_glyph
from turtlefont.layout import GlyphProvider, measure_string, render_string
from turtlefont.raster.primitives import CallbackPainter, Painter


class TurtleFont:
    """Render context binding configuration, painter and glyph provider.

    Instances share nothing, so several can render independently. A single
    instance is not thread-safe and the painter must not change settings
    while a render is in progress.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        painter: Painter | None = None,
        glyphs: GlyphProvider | None = None,
    ) -> None:
        self.config = config or RenderConfig()
        self._painter = painter
        self._glyphs = glyphs

    @property
    def painter(self) -> Painter | None:
        return self._painter

    @property
    def glyphs(self) -> GlyphProvider | None:
        return self._glyphs

    def set_painter(self, painter: Painter | Callable[[int, int, Any], None] | None, context: Any = None) -> None:
        """Bind a Painter, or a plain `put(x, y, context)` callable plus its context."""
        if painter is not None and hasattr(painter, "paint"):
            if context is not None:
                raise TypeError("context applies only to callable painters; Painter objects carry their own")
        elif painter is not None:
            if not callable(painter):
                raise TypeError("painter must provide paint(x, y) or be callable")
            painter = CallbackPainter(painter, context)
        self._painter = painter

    def set_font(self, glyphs: GlyphProvider | None) -> None:
        self._glyphs = glyphs

    def set_size(self, size: int) -> None:
        self.config.set_font_size(size)

    def get_size(self) -> int:
        return self.config.font_size

    def set_dot_size(self, size: int) -> None:
        self.config.set_dot_size(size)

    def get_dot_size(self) -> int:
        return self.config.dot_radius

    def set_stroke(self, stroke: int) -> None:
        self.config.set_stroke_width(stroke)

    def get_stroke(self) -> int:
        return self.config.stroke_width

    def set_line_spacing(self, spacing: float) -> None:
        self.config.set_line_spacing(spacing)

    def get_line_spacing(self) -> float:
        return self.config.line_spacing

    def get_line_height(self) -> int:
        return self.config.line_height

    def width(self, program: str) -> int:
        return glyph_width(program, self.config)

    def render_glyph(self, x: int, y: int, program: str) -> int:
        return render_glyph(x, y, program, self.config, self._painter)

    def render_string(self, x: int, y: int, text: str, max_width: int = 0) -> int:
        return render_string(x, y, text, self.config, self._glyphs, self._painter, max_width=max_width)

    def measure_string(self, text: str, max_width: int = 0) -> int:
        return measure_string(text, self.config, self._glyphs, max_width=max_width)
