from __future__ import annotations

from .base import Image

P1 = "P1"
P4 = "P4"


class Bitmap(Image[bool]):
    """Bilevel image; a set sample (``True``) is a black pixel."""

    MAGIC_NUMBERS = (P1, P4)

    @property
    def is_binary(self) -> bool:
        return self.magic_number == P4

    def invert(self) -> None:
        self._data = [[not value for value in row] for row in self._data]

    def _blank_sample(self) -> bool:
        return False

    def _check_sample(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"Bitmap samples must be bool, got {type(value).__name__}")
