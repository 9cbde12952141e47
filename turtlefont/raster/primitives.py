from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol


class Painter(Protocol):
    """Host pixel sink. Called once per rasterized pixel; owns clipping."""

    def paint(self, x: int, y: int) -> None:
        ...


@dataclass(frozen=True)
class CallbackPainter:
    """Adapts a `put(x, y, context)` callable to the Painter protocol."""

    put: Callable[[int, int, Any], None]
    context: Any = None

    def paint(self, x: int, y: int) -> None:
        self.put(x, y, self.context)


def draw_line(painter: Painter | None, x0: int, y0: int, x1: int, y1: int, stroke_width: int = 1) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        if stroke_width > 1:
            _draw_stroke_block(painter, x0, y0, stroke_width)
        else:
            _put(painter, x0, y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > dy:
            err += dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def draw_dot(painter: Painter | None, x: int, y: int, radius: int) -> None:
    r2 = radius * radius
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy <= r2:
                _put(painter, x + dx, y + dy)


def stroke_block_height(stroke_width: int) -> int:
    return (stroke_width + 2) // 2


def _draw_stroke_block(painter: Painter | None, x: int, y: int, stroke_width: int) -> None:
    # Axis-aligned thickness: w columns by ceil((w+1)/2) rows from the stepped point.
    rows = stroke_block_height(stroke_width)
    for i in range(stroke_width):
        for j in range(rows):
            _put(painter, x + i, y + j)


def _put(painter: Painter | None, x: int, y: int) -> None:
    if painter is not None:
        painter.paint(x, y)
