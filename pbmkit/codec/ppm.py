from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional

from ..image.pixmap import Pixmap
from ..settings import CodecSettings
from ..types import Pixel
from .header import Header, read_header_body, read_magic, write_header
from .reader import TokenReader
from .samples import SampleParser

logger = logging.getLogger(__name__)


def _read_row(reader: TokenReader, parser: SampleParser, width: int) -> List[Pixel]:
    # a row's 3 * width tokens may wrap over any number of lines
    row = []
    for _ in range(width):
        r = parser.parse(reader.next_token())
        g = parser.parse(reader.next_token())
        b = parser.parse(reader.next_token())
        row.append(Pixel(r, g, b))
    return row


def decode_ppm_body(reader: TokenReader, magic_number: str, settings: Optional[CodecSettings] = None) -> Pixmap:
    settings = settings or CodecSettings()
    settings.validate()
    header = read_header_body(reader, magic_number, with_max_value=True)
    width, height, max_value = header.width, header.height, header.max_value
    if header.is_empty:
        return Pixmap(width, height, max_value, magic_number)
    parser = SampleParser(max_value, settings)
    data = [_read_row(reader, parser, width) for _ in range(height)]
    parser.report()
    logger.debug("Decoded %s pixmap %dx%d max=%d", magic_number, width, height, max_value)
    return Pixmap(width, height, max_value, magic_number, data)


def decode_ppm(stream: BinaryIO, settings: Optional[CodecSettings] = None) -> Pixmap:
    reader = TokenReader(stream)
    return decode_ppm_body(reader, read_magic(reader, Pixmap.MAGIC_NUMBERS), settings)


def encode_ppm(image: Pixmap, stream: BinaryIO, settings: Optional[CodecSettings] = None) -> None:
    write_header(stream, Header(image.magic_number, image.width, image.height, image.max_value))
    for row in image.rows:
        line = " ".join(f"{p.r} {p.g} {p.b}" for p in row)
        stream.write(line.encode("ascii") + b"\n")
    logger.debug("Encoded %s pixmap %dx%d", image.magic_number, image.width, image.height)


def read_ppm(path: str, settings: Optional[CodecSettings] = None) -> Pixmap:
    with open(path, "rb") as handle:
        return decode_ppm(handle, settings)
