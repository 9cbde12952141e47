from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> bool:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return False
    a = color[3] / 255.0
    inv = 1.0 - a
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, 0:3] = (np.asarray(color[0:3], dtype=np.float32) * a + current * inv).astype(np.uint8)
    dst[y, x, 3] = 255
    return True


@dataclass
class CanvasPainter:
    """Painter that writes into an (h, w, 4) uint8 canvas, dropping off-surface pixels."""

    canvas: np.ndarray
    color: RGBA = (255, 255, 0, 255)
    painted: int = 0
    discarded: int = 0

    def paint(self, x: int, y: int) -> None:
        if draw_pixel(self.canvas, x, y, self.color):
            self.painted += 1
        else:
            self.discarded += 1


def save_png(canvas: np.ndarray, out_path: str | Path) -> Path:
    path = Path(out_path)
    Image.fromarray(np.ascontiguousarray(canvas)).save(path)
    return path
