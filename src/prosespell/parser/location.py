"""Offset bookkeeping: UTF-8 byte offsets ↔ text offsets ↔ line/column."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import accumulate


def _utf8_width(ch: str) -> int:
    code = ord(ch)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


class ByteOffsetIndex:
    """Converts byte offsets in the UTF-8 encoding of ``text`` to ``str`` indices.

    The parser reports byte offsets; every range stored in a segment is a
    ``str`` index so that slicing the decoded text is direct.
    """

    def __init__(self, text: str) -> None:
        self._identity = text.isascii()
        self._byte_starts: list[int] = []
        if not self._identity:
            self._byte_starts = list(accumulate((_utf8_width(ch) for ch in text), initial=0))

    def to_char(self, byte_offset: int) -> int:
        if self._identity:
            return byte_offset
        return bisect_left(self._byte_starts, byte_offset)


class SourceLocator:
    """Maps offsets into ``text`` to 1-based line/column pairs."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(text) if ch == "\n")

    def position(self, offset: int) -> tuple[int, int]:
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} outside source of length {self._length}")
        line = bisect_right(self._line_starts, offset)
        return line, offset - self._line_starts[line - 1] + 1
