from .canvas import CanvasPainter, draw_pixel, new_canvas, save_png
from .primitives import CallbackPainter, Painter, draw_dot, draw_line, stroke_block_height

__all__ = [
    "CallbackPainter",
    "CanvasPainter",
    "Painter",
    "draw_dot",
    "draw_line",
    "draw_pixel",
    "new_canvas",
    "save_png",
    "stroke_block_height",
]
