"""Tests for byte/text offset conversion and line/column lookup."""

from __future__ import annotations

import pytest

from prosespell.parser.location import ByteOffsetIndex, SourceLocator


class TestByteOffsetIndex:
    def test_ascii_is_identity(self) -> None:
        index = ByteOffsetIndex("hello")
        assert index.to_char(3) == 3

    def test_multibyte_characters(self) -> None:
        text = "hé€😀x"
        index = ByteOffsetIndex(text)
        encoded = text.encode("utf-8")
        assert index.to_char(encoded.index(b"x")) == text.index("x")
        assert index.to_char(len(encoded)) == len(text)
        assert index.to_char(1) == 1  # start of é


class TestSourceLocator:
    def test_first_line(self) -> None:
        assert SourceLocator("abc\ndef").position(0) == (1, 1)

    def test_later_line(self) -> None:
        locator = SourceLocator("abc\ndef\nghi")
        assert locator.position(5) == (2, 2)
        assert locator.position(8) == (3, 1)

    def test_end_of_text(self) -> None:
        assert SourceLocator("abc\n").position(4) == (2, 1)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            SourceLocator("abc").position(4)
