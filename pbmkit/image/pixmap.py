from __future__ import annotations

from typing import Sequence

from ..raster import fill, line, noise, shapes
from ..types import Pixel, Point
from .base import ScaledImage, rescale

P3 = "P3"

BLACK = Pixel(0, 0, 0)


class Pixmap(ScaledImage[Pixel]):
    """RGB image with every channel in ``0..max_value``.

    Besides the geometric and tonal operations it exposes the rasterizer;
    every ``draw_*`` method paints in place.
    """

    MAGIC_NUMBERS = (P3,)

    def invert(self) -> None:
        top = self.max_value
        self._data = [[Pixel(top - p.r, top - p.g, top - p.b) for p in row] for row in self._data]

    def to_pgm(self):
        from ..convert import to_greymap

        return to_greymap(self)

    def to_pbm(self):
        from ..convert import to_bitmap

        return to_bitmap(self)

    def paint(self, x: int, y: int, color: Pixel) -> None:
        """Set a pixel if it lies on the canvas, ignore it otherwise."""
        self._check_sample(color)
        if 0 <= x < self.width and 0 <= y < self.height:
            self._data[y][x] = color

    def draw_line(self, p1: Point, p2: Point, color: Pixel) -> None:
        self._check_sample(color)
        line.draw_line(self, p1, p2, color)

    def draw_rectangle(self, p1: Point, width: int, height: int, color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_rectangle(self, p1, width, height, color)

    def draw_filled_rectangle(self, p1: Point, width: int, height: int, color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_filled_rectangle(self, p1, width, height, color)

    def draw_triangle(self, p1: Point, p2: Point, p3: Point, color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_polygon(self, (p1, p2, p3), color)

    def draw_filled_triangle(self, p1: Point, p2: Point, p3: Point, color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_filled_polygon(self, (p1, p2, p3), color)

    def draw_polygon(self, points: Sequence[Point], color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_polygon(self, points, color)

    def draw_filled_polygon(self, points: Sequence[Point], color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_filled_polygon(self, points, color)

    def draw_circle(self, center: Point, radius: int, color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_circle(self, center, radius, color)

    def draw_filled_circle(self, center: Point, radius: int, color: Pixel) -> None:
        self._check_sample(color)
        shapes.draw_filled_circle(self, center, radius, color)

    def fill_between(self, color: Pixel) -> None:
        self._check_sample(color)
        fill.fill_between(self, color)

    def draw_perlin_noise(self, color1: Pixel, color2: Pixel) -> None:
        self._check_sample(color1)
        self._check_sample(color2)
        noise.draw_perlin_noise(self, color1, color2)

    def _blank_sample(self) -> Pixel:
        return BLACK

    def _check_sample(self, value: Pixel) -> None:
        if not isinstance(value, Pixel):
            raise TypeError(f"Pixmap samples must be Pixel, got {type(value).__name__}")
        if value.max_channel() > self.max_value:
            raise ValueError(f"Pixel {tuple(value)} outside 0..{self.max_value}")

    def _rescale_sample(self, value: Pixel, new: int, old: int) -> Pixel:
        return Pixel(rescale(value.r, new, old), rescale(value.g, new, old), rescale(value.b, new, old))
