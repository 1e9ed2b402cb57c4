from __future__ import annotations

from dataclasses import dataclass

OVERFLOW_ERROR = "error"
OVERFLOW_CLAMP = "clamp"
DEFAULT_BITMAP_SEPARATOR = " "
BITMAP_SEPARATOR_CHARS = " \t"


@dataclass
class CodecSettings:
    """Knobs shared by the decoders and encoders.

    overflow: what to do with a sample above the declared max value,
        ``"error"`` raises, ``"clamp"`` saturates to the max value.
    bitmap_separator: text written between cells of a P1 row.
    """

    overflow: str = OVERFLOW_ERROR
    bitmap_separator: str = DEFAULT_BITMAP_SEPARATOR

    def validate(self) -> None:
        if self.overflow not in (OVERFLOW_ERROR, OVERFLOW_CLAMP):
            raise ValueError(f"Unknown overflow policy: {self.overflow}")
        if self.bitmap_separator.strip(BITMAP_SEPARATOR_CHARS):
            raise ValueError("Bitmap separator must be empty or made of spaces and tabs")
