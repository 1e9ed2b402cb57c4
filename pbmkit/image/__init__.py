from .base import MAX_SAMPLE, Image, ScaledImage
from .bitmap import P1, P4, Bitmap
from .greymap import P2, Greymap
from .pixmap import P3, Pixmap

__all__ = [
    "Bitmap",
    "Greymap",
    "Image",
    "MAX_SAMPLE",
    "P1",
    "P2",
    "P3",
    "P4",
    "Pixmap",
    "ScaledImage",
]
