from __future__ import annotations

from dataclasses import dataclass


BASELINE_OFFSET = 2


@dataclass(frozen=True)
class ScaleMapper:
    """Glyph units to device pixels for one font size.

    Glyph space is an 8-unit em; y grows upward and y=2 sits on the baseline.
    """

    font_size: int

    def scale(self, v: int) -> int:
        # Truncates toward zero like a C float-to-int cast.
        return int(float(self.font_size) * v / 8.0)

    def scalex(self, x: int) -> int:
        return self.scale(x)

    def scaley(self, y: int) -> int:
        return self.scale(y - BASELINE_OFFSET)

    def to_device(self, origin_x: int, baseline_y: int, x: int, y: int) -> tuple[int, int]:
        return (origin_x + self.scalex(x), baseline_y - self.scaley(y))
