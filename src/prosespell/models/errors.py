"""Error models with source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to an exact location in a source file (1-based line/column)."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class FileError(BaseModel):
    """A per-file pipeline failure, attributed to the file that caused it."""

    file_path: str
    kind: str
    message: str

    @classmethod
    def from_exception(cls, file_path: str, exc: BaseException) -> FileError:
        return cls(file_path=file_path, kind=type(exc).__name__, message=str(exc))


class ProseSpellError(Exception):
    """Base class for all errors raised by the prosespell pipeline.

    ``file_path`` is filled in by the per-file pipeline when the raising
    component does not know which file it is working on.
    """

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.file_path:
            return f"{self.file_path}: {message}"
        return message
