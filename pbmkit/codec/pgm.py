from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from ..image.greymap import Greymap
from ..settings import CodecSettings
from .header import Header, read_header_body, read_magic, write_header
from .reader import TokenReader
from .samples import SampleParser

logger = logging.getLogger(__name__)


def decode_pgm_body(reader: TokenReader, magic_number: str, settings: Optional[CodecSettings] = None) -> Greymap:
    settings = settings or CodecSettings()
    settings.validate()
    header = read_header_body(reader, magic_number, with_max_value=True)
    width, height, max_value = header.width, header.height, header.max_value
    if header.is_empty:
        return Greymap(width, height, max_value, magic_number)
    parser = SampleParser(max_value, settings)
    data = [[parser.parse(reader.next_token()) for _ in range(width)] for _ in range(height)]
    parser.report()
    logger.debug("Decoded %s greymap %dx%d max=%d", magic_number, width, height, max_value)
    return Greymap(width, height, max_value, magic_number, data)


def decode_pgm(stream: BinaryIO, settings: Optional[CodecSettings] = None) -> Greymap:
    reader = TokenReader(stream)
    return decode_pgm_body(reader, read_magic(reader, Greymap.MAGIC_NUMBERS), settings)


def encode_pgm(image: Greymap, stream: BinaryIO, settings: Optional[CodecSettings] = None) -> None:
    write_header(stream, Header(image.magic_number, image.width, image.height, image.max_value))
    for row in image.rows:
        stream.write(" ".join(str(value) for value in row).encode("ascii") + b"\n")
    logger.debug("Encoded %s greymap %dx%d", image.magic_number, image.width, image.height)


def read_pgm(path: str, settings: Optional[CodecSettings] = None) -> Greymap:
    with open(path, "rb") as handle:
        return decode_pgm(handle, settings)
