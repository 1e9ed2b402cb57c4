from __future__ import annotations

from typing import Union

from .image import P1, P2, Bitmap, Greymap, Pixmap


def to_greymap(pixmap: Pixmap) -> Greymap:
    """Average the three channels of every pixel, keeping the max value."""
    data = [[(p.r + p.g + p.b) // 3 for p in row] for row in pixmap.rows]
    return Greymap(pixmap.width, pixmap.height, pixmap.max_value, P2, data)


def to_bitmap(image: Union[Greymap, Pixmap]) -> Bitmap:
    """Threshold at half the max value; brighter samples become set bits."""
    if isinstance(image, Pixmap):
        image = to_greymap(image)
    if not isinstance(image, Greymap):
        raise TypeError(f"Cannot convert {type(image).__name__} to a bitmap")
    threshold = image.max_value // 2
    data = [[value > threshold for value in row] for row in image.rows]
    return Bitmap(image.width, image.height, P1, data)
