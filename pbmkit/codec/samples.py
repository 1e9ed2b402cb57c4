from __future__ import annotations

import logging

from ..errors import MalformedPixelData
from ..settings import OVERFLOW_CLAMP, CodecSettings

logger = logging.getLogger(__name__)


class SampleParser:
    """Turns pixel tokens into integer samples bounded by a max value."""

    def __init__(self, max_value: int, settings: CodecSettings) -> None:
        self._max_value = max_value
        self._clamp = settings.overflow == OVERFLOW_CLAMP
        self.clamped = 0

    def parse(self, token: str) -> int:
        if not token.isdigit():
            raise MalformedPixelData(f"Invalid sample {token!r}")
        digits = token.lstrip("0") or "0"
        # anything longer than the max value is above it, no need to build the int
        if len(digits) <= len(str(self._max_value)):
            value = int(digits)
            if value <= self._max_value:
                return value
        shown = digits if len(digits) <= 16 else digits[:16] + "..."
        if not self._clamp:
            raise MalformedPixelData(f"Sample {shown} exceeds max value {self._max_value}")
        if not self.clamped:
            logger.warning("Sample %s exceeds max value %d, clamping", shown, self._max_value)
        self.clamped += 1
        return self._max_value

    def report(self) -> None:
        if self.clamped > 1:
            logger.warning("Clamped %d samples to max value %d", self.clamped, self._max_value)
