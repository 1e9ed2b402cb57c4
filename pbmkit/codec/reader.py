from __future__ import annotations

from collections import deque
from typing import BinaryIO, Deque, List

from ..errors import MalformedHeader, UnexpectedEOF

COMMENT = "#"


class TokenReader:
    """Line and token reader for the text parts of a Netpbm file.

    Reads one physical line at a time, so after the header the underlying
    stream is positioned right after the last line consumed and raw bytes
    can be read from it.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pending: Deque[str] = deque()

    def next_line(self) -> str:
        """Return the next non-empty, non-comment line, stripped."""
        while True:
            raw = self._stream.readline()
            if not raw:
                raise UnexpectedEOF("Unexpected end of file")
            line = raw.decode("ascii", errors="replace")
            line = line.split(COMMENT, 1)[0].strip()
            if line:
                return line

    def next_token(self) -> str:
        """Return the next whitespace-delimited token, crossing line breaks."""
        while not self._pending:
            self._pending.extend(self.tokens(self.next_line()))
        return self._pending.popleft()

    def next_line_tokens(self) -> List[str]:
        """Return the tokens left on the current line, or those of the next one."""
        if self._pending:
            tokens = list(self._pending)
            self._pending.clear()
            return tokens
        return self.tokens(self.next_line())

    def next_int(self, what: str) -> int:
        """Read a header token and parse it as a non-negative integer."""
        try:
            token = self.next_token()
        except UnexpectedEOF as exc:
            raise MalformedHeader(f"Missing {what}") from exc
        if not token.isdigit():
            raise MalformedHeader(f"Invalid {what}: {token!r}")
        try:
            return int(token)
        except ValueError as exc:
            raise MalformedHeader(f"{what.capitalize()} too long: {token[:16]}...") from exc

    def end_header(self) -> None:
        """Check that nothing but binary data follows the header line."""
        if self._pending:
            raise MalformedHeader(f"Unexpected header tokens: {' '.join(self._pending)}")

    def read_bytes(self, count: int) -> bytes:
        return self._stream.read(count)

    @staticmethod
    def tokens(line: str) -> List[str]:
        return line.split()
