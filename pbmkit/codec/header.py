from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional, Sequence

from ..errors import MalformedHeader, UnexpectedEOF, UnsupportedFormat
from ..image.base import MAX_SAMPLE
from .reader import TokenReader


@dataclass(frozen=True)
class Header:
    """Magic number, size and (for grey and color) the max sample value."""

    magic_number: str
    width: int
    height: int
    max_value: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.width * self.height == 0

    def encode(self) -> bytes:
        text = f"{self.magic_number}\n{self.width} {self.height}\n"
        if self.max_value is not None:
            text += f"{self.max_value}\n"
        return text.encode("ascii")


def read_magic(reader: TokenReader, allowed: Sequence[str]) -> str:
    try:
        magic_number = reader.next_token()
    except UnexpectedEOF as exc:
        raise UnsupportedFormat("Empty file, no magic number") from exc
    if magic_number not in allowed:
        raise UnsupportedFormat(f"Unsupported magic number {magic_number!r}, expected one of {tuple(allowed)}")
    return magic_number


def read_header_body(reader: TokenReader, magic_number: str, with_max_value: bool) -> Header:
    width = reader.next_int("width")
    height = reader.next_int("height")
    max_value = None
    if with_max_value:
        max_value = reader.next_int("max value")
        if not 1 <= max_value <= MAX_SAMPLE:
            raise MalformedHeader(f"Max value must be between 1 and {MAX_SAMPLE}, got {max_value}")
    return Header(magic_number, width, height, max_value)


def write_header(stream: BinaryIO, header: Header) -> None:
    stream.write(header.encode())
