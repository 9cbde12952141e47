from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from turtlefont.config import RenderConfig, load_render_config
from turtlefont.errors import RenderConfigError
from turtlefont.scale import ScaleMapper


class ScaleMapperTests(unittest.TestCase):
    def test_scale_is_font_size_over_eight(self) -> None:
        self.assertEqual(ScaleMapper(24).scale(6), 18)
        self.assertEqual(ScaleMapper(8).scale(15), 15)
        self.assertEqual(ScaleMapper(12).scale(3), 4)

    def test_negative_values_truncate_toward_zero(self) -> None:
        self.assertEqual(ScaleMapper(12).scale(-1), -1)
        self.assertEqual(ScaleMapper(12).scale(-3), -4)

    def test_y_is_offset_to_baseline_and_flipped(self) -> None:
        mapper = ScaleMapper(16)
        self.assertEqual(mapper.scaley(2), 0)
        self.assertEqual(mapper.to_device(10, 40, 0, 2), (10, 40))
        self.assertEqual(mapper.to_device(10, 40, 3, 6), (16, 32))
        self.assertEqual(mapper.to_device(10, 40, 0, 0), (10, 44))


class RenderConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = RenderConfig()
        self.assertEqual(config.font_size, 16)
        self.assertEqual(config.dot_radius, 0)
        self.assertEqual(config.stroke_width, 1)
        self.assertEqual(config.line_spacing, 1.2)
        self.assertEqual(config.line_height, 24)

    def test_setters_clamp(self) -> None:
        config = RenderConfig()
        config.set_font_size(0)
        self.assertEqual(config.font_size, 8)
        config.set_stroke_width(-5)
        self.assertEqual(config.stroke_width, 1)
        config.set_dot_size(0)
        self.assertEqual(config.dot_radius, 0)
        config.set_dot_size(3)
        self.assertEqual(config.dot_radius, 2)

    def test_fields_change_only_through_setters(self) -> None:
        config = RenderConfig()
        for name in ("font_size", "dot_radius", "stroke_width", "line_spacing"):
            with self.assertRaises(AttributeError):
                setattr(config, name, 0)
        self.assertEqual(config, RenderConfig())

    def test_line_spacing_is_not_clamped(self) -> None:
        config = RenderConfig()
        config.set_line_spacing(-0.5)
        self.assertEqual(config.line_spacing, -0.5)

    def test_line_height_follows_size_and_spacing(self) -> None:
        config = RenderConfig(font_size=8, line_spacing=1.0)
        self.assertEqual(config.line_height, 10)
        config.set_font_size(32)
        self.assertEqual(config.line_height, 40)

    def test_constructor_values_are_clamped(self) -> None:
        config = RenderConfig(font_size=2, dot_radius=-1, stroke_width=0)
        self.assertEqual((config.font_size, config.dot_radius, config.stroke_width), (8, 0, 1))


class RenderConfigFileTests(unittest.TestCase):
    def test_load_render_table(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "turtlefont.toml"
            path.write_text(
                "[render]\nfont_size = 24\ndot_size = 2\nstroke_width = 3\nline_spacing = 1.5\n",
                encoding="utf-8",
            )
            config = load_render_config(path)
        self.assertEqual(config.font_size, 24)
        self.assertEqual(config.dot_radius, 1)
        self.assertEqual(config.stroke_width, 3)
        self.assertEqual(config.line_spacing, 1.5)

    def test_loaded_values_go_through_clamps(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "turtlefont.toml"
            path.write_text("[render]\nfont_size = 4\nstroke_width = 0\n", encoding="utf-8")
            config = load_render_config(path)
        self.assertEqual(config.font_size, 8)
        self.assertEqual(config.stroke_width, 1)

    def test_missing_table_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "turtlefont.toml"
            path.write_text("title = 'demo'\n", encoding="utf-8")
            self.assertEqual(load_render_config(path), RenderConfig())

    def test_unknown_key_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "turtlefont.toml"
            path.write_text("[render]\nkerning = true\n", encoding="utf-8")
            with self.assertRaises(RenderConfigError):
                load_render_config(path)

    def test_wrong_type_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "turtlefont.toml"
            path.write_text("[render]\nfont_size = true\n", encoding="utf-8")
            with self.assertRaises(RenderConfigError):
                load_render_config(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_render_config("/nonexistent/turtlefont.toml")


if __name__ == "__main__":
    unittest.main()
