from __future__ import annotations

from .base import ScaledImage, rescale

P2 = "P2"


class Greymap(ScaledImage[int]):
    """Single channel image with samples in ``0..max_value``."""

    MAGIC_NUMBERS = (P2,)

    def invert(self) -> None:
        top = self.max_value
        self._data = [[top - value for value in row] for row in self._data]

    def to_pbm(self):
        from ..convert import to_bitmap

        return to_bitmap(self)

    def _blank_sample(self) -> int:
        return 0

    def _check_sample(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Greymap samples must be int, got {type(value).__name__}")
        if not 0 <= value <= self.max_value:
            raise ValueError(f"Sample {value} outside 0..{self.max_value}")

    def _rescale_sample(self, value: int, new: int, old: int) -> int:
        return rescale(value, new, old)
