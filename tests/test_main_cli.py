from __future__ import annotations

from pathlib import Path
import tempfile
import unittest
from unittest import mock

import numpy as np
from PIL import Image

import main as turtlefont_main


class MainCliTests(unittest.TestCase):
    def test_renders_text_to_png(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "hello.png"
            argv = ["turtlefont", "HI!\\nLOT", str(out), "--size", "16", "--stroke", "2"]
            with mock.patch("sys.argv", argv), mock.patch("builtins.print"):
                turtlefont_main.main()
            with Image.open(out) as image:
                pixels = np.asarray(image.convert("RGBA"))
        self.assertTrue(np.any(pixels[:, :, 0] == 255))
        self.assertGreater(pixels.shape[0], 2 * 24)

    def test_sample_glyphs_are_well_formed(self) -> None:
        from turtlefont import trace_glyph

        for ch, program in turtlefont_main.SAMPLE_GLYPHS.items():
            with self.subTest(ch=ch):
                trace_glyph(program)


if __name__ == "__main__":
    unittest.main()
