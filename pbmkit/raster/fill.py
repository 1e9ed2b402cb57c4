from __future__ import annotations

import math
from fractions import Fraction
from typing import TYPE_CHECKING, List, Sequence

from ..types import Pixel, Point

if TYPE_CHECKING:
    from ..image.pixmap import Pixmap


def fill_between(canvas: "Pixmap", color: Pixel) -> None:
    """Same-color scanline fill.

    On every row holding at least two pixels of ``color``, paint everything
    strictly between the first and the last of them. Only correct for a
    single convex outline on a canvas with no other pixels of that color.
    """
    for y in range(canvas.height):
        columns = [x for x in range(canvas.width) if canvas.get(x, y) == color]
        if len(columns) < 2:
            continue
        for x in range(columns[0] + 1, columns[-1]):
            canvas.paint(x, y, color)


def fill_polygon(canvas: "Pixmap", points: Sequence[Point], color: Pixel) -> None:
    """Edge-list scanline fill of a closed polygon, even-odd rule.

    A pixel is inside when its centre lies between an odd number of edge
    crossings on its row. Each edge covers the half-open span
    ``ymin <= y < ymax`` so shared vertices are counted once.
    """
    if len(points) < 3 or canvas.width == 0:
        return
    top = max(min(p.y for p in points), 0)
    bottom = min(max(p.y for p in points), canvas.height - 1)
    for y in range(top, bottom + 1):
        crossings = _crossings(points, y)
        for left, right in zip(crossings[0::2], crossings[1::2]):
            start = max(math.ceil(left), 0)
            end = min(math.floor(right), canvas.width - 1)
            for x in range(start, end + 1):
                canvas.paint(x, y, color)


def _crossings(points: Sequence[Point], y: int) -> List[Fraction]:
    xs = []
    for i, a in enumerate(points):
        b = points[(i + 1) % len(points)]
        if a.y == b.y:
            continue
        lo, hi = (a, b) if a.y < b.y else (b, a)
        if lo.y <= y < hi.y:
            xs.append(lo.x + Fraction((y - lo.y) * (hi.x - lo.x), hi.y - lo.y))
    xs.sort()
    return xs
