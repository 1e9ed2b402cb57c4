from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Pixel:
    """RGB sample triple, one byte per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError(f"Channel value must be int, got {type(channel).__name__}")
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel value out of range: {channel}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def max_channel(self) -> int:
        return max(self.r, self.g, self.b)


@dataclass(frozen=True)
class Point:
    x: int
    y: int
