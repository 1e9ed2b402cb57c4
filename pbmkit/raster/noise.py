from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..types import Pixel

if TYPE_CHECKING:
    from ..image.pixmap import Pixmap

NOISE_SCALE = 10.0


def noise_value(x: int, y: int) -> float:
    """Deterministic stand-in for Perlin noise, in ``[-2, 2]``."""
    return math.sin(x / NOISE_SCALE) + math.sin(y / NOISE_SCALE)


def lerp_color(color1: Pixel, color2: Pixel, t: float) -> Pixel:
    t = max(0.0, min(1.0, t))
    return Pixel(
        int(color1.r * (1 - t) + color2.r * t),
        int(color1.g * (1 - t) + color2.g * t),
        int(color1.b * (1 - t) + color2.b * t),
    )


def draw_perlin_noise(canvas: "Pixmap", color1: Pixel, color2: Pixel) -> None:
    for y in range(canvas.height):
        for x in range(canvas.width):
            canvas.paint(x, y, lerp_color(color1, color2, (noise_value(x, y) + 1) / 2))
