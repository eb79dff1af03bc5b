"""Immutable natural-language nodes produced by the English parser.

Offsets are relative to the text handed to the parser, ``[start, end)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WordNode:
    """A word: letters/digits, possibly joined by ``'``, ``-`` or ``.``."""

    value: str
    start: int
    end: int


@dataclass(frozen=True)
class PunctuationNode:
    value: str
    start: int
    end: int


@dataclass(frozen=True)
class SymbolNode:
    """Any other non-space character run: operators, brackets, emoji."""

    value: str
    start: int
    end: int


@dataclass(frozen=True)
class WhiteSpaceNode:
    value: str
    start: int
    end: int


InlineNode = WordNode | PunctuationNode | SymbolNode | WhiteSpaceNode


@dataclass(frozen=True)
class SentenceNode:
    """A run of inline nodes ending at terminal punctuation or a blank line."""

    children: tuple[InlineNode, ...] = field(default_factory=tuple)

    @property
    def start(self) -> int:
        return self.children[0].start if self.children else 0

    @property
    def end(self) -> int:
        return self.children[-1].end if self.children else 0

    @property
    def words(self) -> list[WordNode]:
        return [c for c in self.children if isinstance(c, WordNode)]
