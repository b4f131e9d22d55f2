"""Line reading and C-style string helpers used by the scene parser."""

from __future__ import annotations

from itertools import zip_longest
from typing import AnyStr, Generic, Iterator, Optional, Union

BUFFER_SIZE = 10
INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, as a C ``int`` would hold it."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def parse_int(text: str) -> int:
    """Parse a leading integer the way the scene format expects.

    Leading blanks (tab, newline, vertical tab, form feed, carriage return
    and space) are skipped, one optional sign is accepted, then decimal
    digits are read until the first non-digit.  Text without digits gives 0.
    A magnitude beyond the range of a signed 64-bit value gives -1 for a
    positive number and 0 for a negative one.  The result is reduced to a
    signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        digit = ord(text[pos]) - ord("0")
        if value > LONG_MAX // 10 or (value == LONG_MAX // 10 and digit > LONG_MAX % 10):
            return -1 if sign == 1 else 0
        value = value * 10 + digit
        pos += 1
    return _wrap_int(sign * value)


def _as_bytes(text: Union[str, bytes]) -> bytes:
    data = text if isinstance(text, bytes) else text.encode("utf-8")
    return data.split(b"\0", 1)[0]


def compare_prefix(first: Union[str, bytes], second: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` leading bytes of two strings.

    Returns 0 when they agree, otherwise the difference between the first
    pair of differing byte values.  A string that ends early compares as if
    followed by a zero byte; anything after an embedded zero byte is ignored.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    a = _as_bytes(first)
    b = _as_bytes(second)
    limit = min(n, max(len(a), len(b)) + 1)
    for x, y in zip_longest(a[:limit], b[:limit], fillvalue=0):
        if x != y:
            return x - y
    return 0


class LineReader(Generic[AnyStr]):
    """Read a stream line by line in fixed-size chunks.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline is returned without one.  Works with both
    text and binary streams.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE) -> None:
        if not 0 < buffer_size <= INT_MAX:
            raise ValueError(f"buffer size must be between 1 and {INT_MAX}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        line: Optional[AnyStr] = None
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    return line
                self._pending = chunk
            newline = "\n" if isinstance(self._pending, str) else b"\n"
            head, sep, tail = self._pending.partition(newline)
            line = head + sep if line is None else line + head + sep
            self._pending = tail
            if sep:
                return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream) -> Iterator:
    """Yield every line of ``stream``, newlines included."""
    yield from LineReader(stream)