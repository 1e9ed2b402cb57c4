from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from ..types import Pixel, Point
from .fill import fill_polygon
from .line import draw_line

if TYPE_CHECKING:
    from ..image.pixmap import Pixmap


def _hline(canvas: "Pixmap", x0: int, x1: int, y: int, color: Pixel) -> None:
    for x in range(max(x0, 0), min(x1, canvas.width - 1) + 1):
        canvas.paint(x, y, color)


def _vline(canvas: "Pixmap", x: int, y0: int, y1: int, color: Pixel) -> None:
    for y in range(max(y0, 0), min(y1, canvas.height - 1) + 1):
        canvas.paint(x, y, color)


def draw_rectangle(canvas: "Pixmap", p1: Point, width: int, height: int, color: Pixel) -> None:
    """Outline the ``width`` x ``height`` block whose top-left cell is ``p1``.

    Every edge is clipped to the canvas on its own, so a partly visible
    rectangle keeps the edges that are on the canvas.
    """
    if width <= 0 or height <= 0:
        return
    x0, y0 = p1.x, p1.y
    x1, y1 = x0 + width - 1, y0 + height - 1
    _hline(canvas, x0, x1, y0, color)
    _hline(canvas, x0, x1, y1, color)
    _vline(canvas, x0, y0, y1, color)
    _vline(canvas, x1, y0, y1, color)


def draw_filled_rectangle(canvas: "Pixmap", p1: Point, width: int, height: int, color: Pixel) -> None:
    if width <= 0 or height <= 0:
        return
    for y in range(max(p1.y, 0), min(p1.y + height - 1, canvas.height - 1) + 1):
        _hline(canvas, p1.x, p1.x + width - 1, y, color)


def draw_polygon(canvas: "Pixmap", points: Sequence[Point], color: Pixel) -> None:
    """Connect consecutive vertices and close the shape; needs 3 or more."""
    if len(points) < 3:
        return
    for start, end in zip(points, points[1:]):
        draw_line(canvas, start, end, color)
    draw_line(canvas, points[-1], points[0], color)


def draw_filled_polygon(canvas: "Pixmap", points: Sequence[Point], color: Pixel) -> None:
    if len(points) < 3:
        return
    draw_polygon(canvas, points, color)
    fill_polygon(canvas, points, color)


def circle_points(center: Point, radius: int) -> List[Tuple[int, int]]:
    """Outline of a circle by the midpoint algorithm, one octant mirrored 8 ways."""
    if radius < 0:
        return []
    cx, cy = center.x, center.y
    points = []
    x, y = radius, 0
    err = 1 - radius
    while x >= y:
        points.extend(
            [
                (cx + x, cy + y),
                (cx - x, cy + y),
                (cx + x, cy - y),
                (cx - x, cy - y),
                (cx + y, cy + x),
                (cx - y, cy + x),
                (cx + y, cy - x),
                (cx - y, cy - x),
            ]
        )
        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x) + 1
    return points


def draw_circle(canvas: "Pixmap", center: Point, radius: int, color: Pixel) -> None:
    for x, y in circle_points(center, radius):
        canvas.paint(x, y, color)


def draw_filled_circle(canvas: "Pixmap", center: Point, radius: int, color: Pixel) -> None:
    spans: Dict[int, Tuple[int, int]] = {}
    for x, y in circle_points(center, radius):
        canvas.paint(x, y, color)
        left, right = spans.get(y, (x, x))
        spans[y] = (min(left, x), max(right, x))
    for y, (left, right) in spans.items():
        if 0 <= y < canvas.height:
            _hline(canvas, left, right, y, color)
