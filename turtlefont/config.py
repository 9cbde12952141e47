from __future__ import annotations

from pathlib import Path
import tomllib

from turtlefont.errors import RenderConfigError


MIN_FONT_SIZE = 8
MIN_STROKE_WIDTH = 1
DEFAULT_FONT_SIZE = 16
DEFAULT_LINE_SPACING = 1.2
LINE_HEIGHT_FACTOR = 1.25


class RenderConfig:
    """Clamped render settings for one TurtleFont context.

    Values change only through the setters. `dot_radius` is stored as the
    requested dot size minus one, so a dot size of 1 stamps a single pixel.
    """

    def __init__(
        self,
        font_size: int = DEFAULT_FONT_SIZE,
        dot_radius: int = 0,
        stroke_width: int = MIN_STROKE_WIDTH,
        line_spacing: float = DEFAULT_LINE_SPACING,
    ) -> None:
        self._font_size = max(MIN_FONT_SIZE, font_size)
        self._dot_radius = max(0, dot_radius)
        self._stroke_width = max(MIN_STROKE_WIDTH, stroke_width)
        self._line_spacing = line_spacing

    def __repr__(self) -> str:
        return (
            f"RenderConfig(font_size={self._font_size}, dot_radius={self._dot_radius}, "
            f"stroke_width={self._stroke_width}, line_spacing={self._line_spacing})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenderConfig):
            return NotImplemented
        return self._key() == other._key()

    def _key(self) -> tuple[int, int, int, float]:
        return (self._font_size, self._dot_radius, self._stroke_width, self._line_spacing)

    @property
    def font_size(self) -> int:
        return self._font_size

    @property
    def dot_radius(self) -> int:
        return self._dot_radius

    @property
    def stroke_width(self) -> int:
        return self._stroke_width

    @property
    def line_spacing(self) -> float:
        return self._line_spacing

    def set_font_size(self, size: int) -> None:
        self._font_size = max(MIN_FONT_SIZE, size)

    def set_dot_size(self, size: int) -> None:
        self._dot_radius = max(0, size - 1)

    def set_stroke_width(self, width: int) -> None:
        self._stroke_width = max(MIN_STROKE_WIDTH, width)

    def set_line_spacing(self, spacing: float) -> None:
        # Not clamped; callers own sensible values.
        self._line_spacing = spacing

    @property
    def line_height(self) -> int:
        return int(self._line_spacing * self._font_size * LINE_HEIGHT_FACTOR)


_RENDER_KEYS = {"font_size", "dot_size", "stroke_width", "line_spacing"}


def load_render_config(path: str | Path) -> RenderConfig:
    """Build a RenderConfig from the `[render]` table of a TOML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"render config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return render_config_from_mapping(raw.get("render", {}))


def render_config_from_mapping(raw: object) -> RenderConfig:
    if not isinstance(raw, dict):
        raise RenderConfigError("`render` must be a table")
    unknown = sorted(set(raw) - _RENDER_KEYS)
    if unknown:
        raise RenderConfigError(f"unknown render settings: {', '.join(unknown)}")
    config = RenderConfig()
    if "font_size" in raw:
        config.set_font_size(_coerce_int(raw["font_size"], "font_size"))
    if "dot_size" in raw:
        config.set_dot_size(_coerce_int(raw["dot_size"], "dot_size"))
    if "stroke_width" in raw:
        config.set_stroke_width(_coerce_int(raw["stroke_width"], "stroke_width"))
    if "line_spacing" in raw:
        config.set_line_spacing(_coerce_float(raw["line_spacing"], "line_spacing"))
    return config


def _coerce_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RenderConfigError(f"`{field_name}` must be an integer")
    return value


def _coerce_float(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RenderConfigError(f"`{field_name}` must be a number")
    return float(value)
