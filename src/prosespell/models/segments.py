"""Immutable segment model: a source file split into prose and code stretches."""

from __future__ import annotations

from dataclasses import dataclass, field

from prosespell.nlp.nodes import SentenceNode, WhiteSpaceNode, WordNode


@dataclass(frozen=True, order=True)
class SourceRange:
    """Half-open ``[start, end)`` offsets into the decoded source text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid source range [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: SourceRange) -> bool:
        return self.start < other.end and other.start < self.end

    def within(self, length: int) -> bool:
        return self.end <= length


@dataclass(frozen=True)
class ProseSegment:
    """Natural-language text found inside one syntax node (or run of JSX text nodes).

    ``raw_text`` is the source slice.  When the source encodes characters as
    references (``isn&apos;t``), ``decoded_text`` holds the decoded prose and
    ``offset_map`` gives, for each decoded offset and the end, the matching
    offset into ``raw_text``.  ``children`` tokenize ``text``.
    """

    range: SourceRange
    raw_text: str
    children: tuple[SentenceNode | WhiteSpaceNode, ...] = field(default_factory=tuple)
    decoded_text: str | None = None
    offset_map: tuple[int, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return self.raw_text if self.decoded_text is None else self.decoded_text

    def source_offset(self, index: int) -> int:
        """Absolute source offset of ``index`` into ``text``."""
        if self.offset_map:
            return self.range.start + self.offset_map[index]
        return self.range.start + index

    def words(self) -> list[WordNode]:
        return [
            word
            for child in self.children
            if isinstance(child, SentenceNode)
            for word in child.words
        ]


@dataclass(frozen=True)
class CodeSegment:
    """Source text between prose segments; never tokenized or checked."""

    range: SourceRange
    raw_text: str


Segment = ProseSegment | CodeSegment


@dataclass(frozen=True)
class Document:
    """All segments of one file, sorted by start and mutually non-overlapping."""

    source: str
    segments: tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def prose_segments(self) -> list[ProseSegment]:
        return [s for s in self.segments if isinstance(s, ProseSegment)]

    @property
    def code_segments(self) -> list[CodeSegment]:
        return [s for s in self.segments if isinstance(s, CodeSegment)]
