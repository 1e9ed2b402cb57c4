from .codec import decode, load, read_pbm, read_pgm, read_ppm, save
from .convert import to_bitmap, to_greymap
from .errors import (
    MalformedHeader,
    MalformedPixelData,
    NetpbmError,
    TruncatedData,
    UnexpectedEOF,
    UnsupportedFormat,
)
from .image import Bitmap, Greymap, Image, Pixmap
from .settings import CodecSettings
from .types import Pixel, Point

__version__ = "0.1.0"

__all__ = [
    "Bitmap",
    "CodecSettings",
    "Greymap",
    "Image",
    "MalformedHeader",
    "MalformedPixelData",
    "NetpbmError",
    "Pixel",
    "Pixmap",
    "Point",
    "TruncatedData",
    "UnexpectedEOF",
    "UnsupportedFormat",
    "decode",
    "load",
    "read_pbm",
    "read_pgm",
    "read_ppm",
    "save",
    "to_bitmap",
    "to_greymap",
]
