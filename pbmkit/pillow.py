from __future__ import annotations

import logging
from typing import List

from PIL import Image as PILImage
from PIL import ImageOps

from .image import MAX_SAMPLE, Bitmap, Greymap, Image, Pixmap
from .image.base import rescale
from .types import Pixel

logger = logging.getLogger(__name__)


def to_pil(image: Image) -> PILImage.Image:
    """Render a Netpbm image as a Pillow image with 8-bit samples.

    Bitmaps become mode ``1`` (set bits black), greymaps mode ``L`` and
    pixmaps mode ``RGB``; samples are stretched from ``0..max_value`` to
    ``0..255``.
    """
    size = image.size()
    if isinstance(image, Bitmap):
        raw = bytes(0 if pix else 255 for row in image.rows for pix in row)
        return PILImage.frombytes("L", size, raw).convert("1", dither=PILImage.Dither.NONE)
    if isinstance(image, Greymap):
        top = image.max_value
        raw = bytes(rescale(value, MAX_SAMPLE, top) for row in image.rows for value in row)
        return PILImage.frombytes("L", size, raw)
    if isinstance(image, Pixmap):
        top = image.max_value
        raw = bytes(rescale(channel, MAX_SAMPLE, top) for row in image.rows for p in row for channel in p)
        return PILImage.frombytes("RGB", size, raw)
    raise TypeError(f"Unsupported image type: {type(image).__name__}")


def from_pil(img: PILImage.Image) -> Image:
    """Build a Netpbm image from a Pillow image.

    Mode ``1`` gives a bitmap (black pixels set), ``L`` a greymap and any
    other mode is converted to RGB and gives a pixmap.
    """
    width, height = img.size
    if img.mode == "1":
        raw = img.convert("L").tobytes()
        return Bitmap(width, height, data=_rows([value == 0 for value in raw], width, height))
    if img.mode == "L":
        return Greymap(width, height, MAX_SAMPLE, data=_rows(list(img.tobytes()), width, height))
    if img.mode != "RGB":
        img = img.convert("RGB")
    raw = img.tobytes()
    pixels = [Pixel(raw[i], raw[i + 1], raw[i + 2]) for i in range(0, len(raw), 3)]
    return Pixmap(width, height, MAX_SAMPLE, data=_rows(pixels, width, height))


def open_image(path: str) -> Image:
    """Read any file Pillow understands, honouring EXIF orientation."""
    with PILImage.open(path) as img:
        img = ImageOps.exif_transpose(img)
        img = img.copy()
    logger.debug("Opened %s via Pillow, mode=%s size=%s", path, img.mode, img.size)
    return from_pil(img)


def export_image(image: Image, path: str) -> None:
    to_pil(image).save(path)


def _rows(flat: List, width: int, height: int) -> List[List]:
    return [flat[y * width : (y + 1) * width] for y in range(height)]
