from __future__ import annotations

import logging
from typing import BinaryIO, Callable, Dict, Optional, Set, Type

from ..errors import UnsupportedFormat
from ..image import Bitmap, Greymap, Image, Pixmap
from ..settings import CodecSettings
from .header import Header, read_magic
from .pbm import bytes_per_row, decode_pbm, decode_pbm_body, encode_pbm, pack_row, read_pbm, unpack_row
from .pgm import decode_pgm, decode_pgm_body, encode_pgm, read_pgm
from .ppm import decode_ppm, decode_ppm_body, encode_ppm, read_ppm
from .reader import TokenReader

logger = logging.getLogger(__name__)

BodyDecoder = Callable[[TokenReader, str, Optional[CodecSettings]], Image]
Encoder = Callable[[Image, BinaryIO, Optional[CodecSettings]], None]


class CodecRegistry:
    """Maps magic numbers to body decoders and image types to encoders."""

    def __init__(
        self,
        decoders: Optional[Dict[str, BodyDecoder]] = None,
        encoders: Optional[Dict[Type[Image], Encoder]] = None,
    ) -> None:
        if decoders is None:
            decoders = {}
            for magic_number in Bitmap.MAGIC_NUMBERS:
                decoders[magic_number] = decode_pbm_body
            for magic_number in Greymap.MAGIC_NUMBERS:
                decoders[magic_number] = decode_pgm_body
            for magic_number in Pixmap.MAGIC_NUMBERS:
                decoders[magic_number] = decode_ppm_body
        if encoders is None:
            encoders = {Bitmap: encode_pbm, Greymap: encode_pgm, Pixmap: encode_ppm}
        self._decoders = decoders
        self._encoders = encoders

    @property
    def magic_numbers(self) -> Set[str]:
        return set(self._decoders.keys())

    def decode(self, stream: BinaryIO, settings: Optional[CodecSettings] = None) -> Image:
        reader = TokenReader(stream)
        magic_number = read_magic(reader, sorted(self._decoders))
        return self._decoders[magic_number](reader, magic_number, settings)

    def encode(self, image: Image, stream: BinaryIO, settings: Optional[CodecSettings] = None) -> None:
        encoder = self._encoders.get(type(image))
        if not encoder:
            raise UnsupportedFormat(f"No encoder for {type(image).__name__}")
        encoder(image, stream, settings)


def decode(stream: BinaryIO, settings: Optional[CodecSettings] = None) -> Image:
    return CodecRegistry().decode(stream, settings)


def load(path: str, settings: Optional[CodecSettings] = None) -> Image:
    """Read any supported Netpbm file, picking the decoder from its magic number."""
    with open(path, "rb") as handle:
        image = decode(handle, settings)
    logger.info("Loaded %r from %s", image, path)
    return image


def save(image: Image, path: str, settings: Optional[CodecSettings] = None) -> None:
    with open(path, "wb") as handle:
        CodecRegistry().encode(image, handle, settings)
    logger.info("Saved %r to %s", image, path)


__all__ = [
    "CodecRegistry",
    "Header",
    "TokenReader",
    "bytes_per_row",
    "decode",
    "decode_pbm",
    "decode_pgm",
    "decode_ppm",
    "encode_pbm",
    "encode_pgm",
    "encode_ppm",
    "load",
    "pack_row",
    "read_pbm",
    "read_pgm",
    "read_ppm",
    "save",
    "unpack_row",
]
