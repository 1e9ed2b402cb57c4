from .fill import fill_between, fill_polygon
from .line import draw_line
from .noise import draw_perlin_noise
from .shapes import (
    draw_circle,
    draw_filled_circle,
    draw_filled_polygon,
    draw_filled_rectangle,
    draw_polygon,
    draw_rectangle,
)

__all__ = [
    "draw_circle",
    "draw_filled_circle",
    "draw_filled_polygon",
    "draw_filled_rectangle",
    "draw_line",
    "draw_perlin_noise",
    "draw_polygon",
    "draw_rectangle",
    "fill_between",
    "fill_polygon",
]
