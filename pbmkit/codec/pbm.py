from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional, Sequence

from ..errors import MalformedPixelData, TruncatedData
from ..image.bitmap import P1, P4, Bitmap
from ..settings import CodecSettings
from .header import Header, read_header_body, read_magic, write_header
from .reader import TokenReader

logger = logging.getLogger(__name__)


def padding_bits(width: int) -> int:
    return (8 - width % 8) % 8


def bytes_per_row(width: int) -> int:
    return (width + padding_bits(width)) // 8


def pack_row(row: Sequence[bool]) -> bytes:
    """Pack a bilevel row into bytes, MSB first, zero-padding the last byte."""
    out = bytearray()
    for i in range(0, len(row), 8):
        value = 0
        for bit, pix in enumerate(row[i : i + 8]):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def unpack_row(data: bytes, width: int) -> List[bool]:
    """Unpack ``width`` MSB-first bits; trailing padding bits are ignored."""
    return [bool((data[j // 8] >> (7 - j % 8)) & 1) for j in range(width)]


def _parse_ascii_row(tokens: Sequence[str], width: int) -> List[bool]:
    row = [False] * width
    column = 0
    for token in tokens:
        # "0110" and "0 1 1 0" are both valid P1 rows
        for digit in token:
            if digit not in "01":
                raise MalformedPixelData(f"Invalid bitmap sample {digit!r}")
            if column >= width:
                raise MalformedPixelData(f"Bitmap row holds more than {width} samples")
            row[column] = digit == "1"
            column += 1
    return row


def decode_pbm_body(reader: TokenReader, magic_number: str, settings: Optional[CodecSettings] = None) -> Bitmap:
    header = read_header_body(reader, magic_number, with_max_value=False)
    width, height = header.width, header.height
    if header.is_empty:
        return Bitmap(width, height, magic_number)
    data = []
    if magic_number == P1:
        for _ in range(height):
            data.append(_parse_ascii_row(reader.next_line_tokens(), width))
    else:
        reader.end_header()
        row_size = bytes_per_row(width)
        for index in range(height):
            chunk = reader.read_bytes(row_size)
            if len(chunk) != row_size:
                raise TruncatedData(f"Row {index}: expected {row_size} bytes, got {len(chunk)}")
            data.append(unpack_row(chunk, width))
    logger.debug("Decoded %s bitmap %dx%d", magic_number, width, height)
    return Bitmap(width, height, magic_number, data)


def decode_pbm(stream: BinaryIO, settings: Optional[CodecSettings] = None) -> Bitmap:
    reader = TokenReader(stream)
    return decode_pbm_body(reader, read_magic(reader, Bitmap.MAGIC_NUMBERS), settings)


def encode_pbm(image: Bitmap, stream: BinaryIO, settings: Optional[CodecSettings] = None) -> None:
    settings = settings or CodecSettings()
    settings.validate()
    write_header(stream, Header(image.magic_number, image.width, image.height))
    for row in image.rows:
        if image.magic_number == P4:
            stream.write(pack_row(row))
        else:
            text = settings.bitmap_separator.join("1" if pix else "0" for pix in row)
            stream.write(text.encode("ascii") + b"\n")
    logger.debug("Encoded %s bitmap %dx%d", image.magic_number, image.width, image.height)


def read_pbm(path: str, settings: Optional[CodecSettings] = None) -> Bitmap:
    with open(path, "rb") as handle:
        return decode_pbm(handle, settings)
