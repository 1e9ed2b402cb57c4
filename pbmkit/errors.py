from __future__ import annotations


class NetpbmError(Exception):
    """Base class for every error raised while reading or writing images."""


class UnsupportedFormat(NetpbmError, ValueError):
    """The magic number is not one the decoder understands."""


class MalformedHeader(NetpbmError, ValueError):
    """Dimension or max-value tokens are missing, non-numeric or out of range."""


class MalformedPixelData(NetpbmError, ValueError):
    """A pixel token is non-numeric or outside the declared sample range."""


class TruncatedData(NetpbmError):
    """The file ended before all declared pixel data was read."""


class UnexpectedEOF(TruncatedData):
    pass
