"""Domain models for prosespell."""

from prosespell.models.errors import FileError, ProseSpellError, SourceSpan
from prosespell.models.findings import BatchResult, FileResult, Finding
from prosespell.models.segments import (
    CodeSegment,
    Document,
    ProseSegment,
    Segment,
    SourceRange,
)

__all__ = [
    "BatchResult",
    "CodeSegment",
    "Document",
    "FileError",
    "FileResult",
    "Finding",
    "ProseSegment",
    "ProseSpellError",
    "Segment",
    "SourceRange",
    "SourceSpan",
]
