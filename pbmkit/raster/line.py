from __future__ import annotations

from typing import TYPE_CHECKING

from ..types import Pixel, Point

if TYPE_CHECKING:
    from ..image.pixmap import Pixmap


def draw_line(canvas: "Pixmap", p1: Point, p2: Point, color: Pixel) -> None:
    """Draw a line with the integer Bresenham algorithm.

    The start point is clamped onto the canvas first; after that only the
    points that fall inside the canvas are painted.
    """
    x = min(max(p1.x, 0), canvas.width - 1)
    y = min(max(p1.y, 0), canvas.height - 1)
    dx = abs(p2.x - x)
    dy = abs(p2.y - y)
    sx = 1 if p2.x > x else -1
    sy = 1 if p2.y > y else -1
    err = dx - dy
    while True:
        canvas.paint(x, y, color)
        if x == p2.x and y == p2.y:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
