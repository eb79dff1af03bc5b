"""Document reconstruction: interleave prose segments with opaque code segments."""

from __future__ import annotations

from collections.abc import Sequence

from prosespell.models.errors import ProseSpellError
from prosespell.models.segments import CodeSegment, Document, ProseSegment, Segment, SourceRange


class ReconstructionError(ProseSpellError):
    """Raised when prose segments overlap or fall outside the source."""


class DocumentReconstructor:
    """Builds a ``Document`` covering the whole source from its prose segments.

    Code segments fill the gaps between prose.  Each gap stops one offset
    short of the next prose segment and starts one offset past the previous
    one, so the character on either side of a prose segment belongs to
    neither segment.
    """

    def reconstruct(self, prose: Sequence[ProseSegment], source: str) -> Document:
        ordered = sorted(prose, key=lambda s: (s.range.start, s.range.end))
        self._check_prose(ordered, len(source))
        if not ordered:
            return Document(source=source, segments=(self._code(source, 0, len(source)),))

        gaps: list[CodeSegment] = []
        first, last = ordered[0], ordered[-1]
        if first.range.start != 0:
            gaps.append(self._code(source, 0, first.range.start - 1))
        for prev, nxt in zip(ordered, ordered[1:]):
            start, end = prev.range.end + 1, nxt.range.start - 1
            if end >= start:
                gaps.append(self._code(source, start, end))
        if last.range.end != len(source):
            gaps.append(self._code(source, last.range.end + 1, len(source)))

        segments: list[Segment] = [*ordered, *gaps]
        segments.sort(key=lambda s: s.range.start)
        self._check_document(segments, len(source))
        return Document(source=source, segments=tuple(segments))

    @staticmethod
    def _code(source: str, start: int, end: int) -> CodeSegment:
        return CodeSegment(range=SourceRange(start, end), raw_text=source[start:end])

    @staticmethod
    def _check_prose(ordered: Sequence[ProseSegment], length: int) -> None:
        for segment in ordered:
            if not segment.range.within(length):
                raise ReconstructionError(
                    f"Prose segment [{segment.range.start}, {segment.range.end}) "
                    f"lies outside source of length {length}"
                )
        for prev, nxt in zip(ordered, ordered[1:]):
            if prev.range.overlaps(nxt.range):
                raise ReconstructionError(
                    f"Prose segments [{prev.range.start}, {prev.range.end}) and "
                    f"[{nxt.range.start}, {nxt.range.end}) overlap"
                )

    @staticmethod
    def _check_document(segments: Sequence[Segment], length: int) -> None:
        for prev, nxt in zip(segments, segments[1:]):
            if prev.range.overlaps(nxt.range):
                raise ReconstructionError(
                    f"Segments [{prev.range.start}, {prev.range.end}) and "
                    f"[{nxt.range.start}, {nxt.range.end}) overlap"
                )
        if segments and segments[-1].range.end > length:
            raise ReconstructionError(f"Document extends past source length {length}")
