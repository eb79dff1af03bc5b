"""Findings produced by the checker and aggregated by the batch orchestrator."""

from __future__ import annotations

from pydantic import BaseModel, Field

from prosespell.models.errors import FileError, SourceSpan


class Finding(BaseModel):
    """One misspelled word inside a prose segment."""

    file_path: str
    span: SourceSpan
    offset: int  # 0-based start offset into the decoded source text
    message: str
    rule_id: str
    source: str = "prosespell"
    actual: str
    expected: list[str] = []


class FileResult(BaseModel):
    """Outcome of running the per-file pipeline on one path."""

    file_path: str
    findings: list[Finding] = []
    error: FileError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class BatchResult(BaseModel):
    """Findings for every file that has at least one, keyed by path."""

    results: dict[str, list[Finding]] = Field(default_factory=dict)
    errors: list[FileError] = []

    @property
    def finding_count(self) -> int:
        return sum(len(findings) for findings in self.results.values())

    @classmethod
    def collect(cls, file_results: list[FileResult]) -> BatchResult:
        """Drop clean files and order the rest by path."""
        results = {
            r.file_path: r.findings
            for r in sorted(file_results, key=lambda r: r.file_path)
            if r.findings
        }
        errors = sorted(
            (r.error for r in file_results if r.error is not None),
            key=lambda e: e.file_path,
        )
        return cls(results=results, errors=errors)
