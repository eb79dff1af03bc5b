"""Tests for the batch orchestrator."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from prosespell.models.findings import FileResult
from prosespell.pipeline import CheckPipeline
from prosespell.service.batch import BatchOrchestrator

GOOD = "const p = <p>Mapbx is great</p>;\n"
CLEAN = "const p = <p>All good here</p>;\n"
BROKEN = "export const = ;\n"


def write(tmp_path: Path, name: str, content: str) -> str:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


class _TrackingOrchestrator(BatchOrchestrator):
    """Records how many files are being read at the same time."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.active = 0
        self.peak = 0

    async def read_source(self, path: str) -> str:
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(0.01)
            return await super().read_source(path)
        finally:
            self.active -= 1


class TestBatchOrchestrator:
    def test_only_files_with_findings(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        good = write(tmp_path, "good.jsx", GOOD)
        clean = write(tmp_path, "clean.jsx", CLEAN)
        result = BatchOrchestrator(pipeline).run_sync([good, clean])
        assert list(result.results) == [good]
        assert [f.actual for f in result.results[good]] == ["Mapbx"]
        assert result.errors == []

    def test_parse_failure_is_isolated(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        paths = [write(tmp_path, f"f{i}.jsx", GOOD) for i in range(4)]
        paths[1] = write(tmp_path, "f1.jsx", BROKEN)
        result = BatchOrchestrator(pipeline).run_sync(paths)
        assert sorted(result.results) == sorted(p for i, p in enumerate(paths) if i != 1)
        assert [(e.file_path, e.kind) for e in result.errors] == [(paths[1], "ParseError")]

    def test_missing_file_is_isolated(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        good = write(tmp_path, "good.jsx", GOOD)
        missing = str(tmp_path / "missing.jsx")
        result = BatchOrchestrator(pipeline).run_sync([missing, good])
        assert list(result.results) == [good]
        assert [(e.file_path, e.kind) for e in result.errors] == [(missing, "ReadError")]

    def test_invalid_utf8_is_read_error(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        path = tmp_path / "latin1.js"
        path.write_bytes(b"const p = <p>caf\xe9</p>;\n")
        result = BatchOrchestrator(pipeline).run_sync([str(path)])
        assert [e.kind for e in result.errors] == ["ReadError"]

    def test_unexpected_error_is_isolated(self, tmp_path: Path) -> None:
        class Exploding:
            def check_source(self, source: str, file_path: str):
                raise RuntimeError("boom")

        path = write(tmp_path, "a.js", GOOD)
        result = BatchOrchestrator(Exploding()).run_sync([path])
        assert result.results == {}
        assert result.errors[0].kind == "RuntimeError"
        assert result.errors[0].message == "boom"

    def test_concurrency_is_bounded(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        paths = [write(tmp_path, f"f{i}.jsx", GOOD) for i in range(12)]
        orchestrator = _TrackingOrchestrator(pipeline)
        result = orchestrator.run_sync(paths)
        assert orchestrator.peak == 5
        assert len(result.results) == 12

    def test_custom_concurrency(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        paths = [write(tmp_path, f"f{i}.jsx", GOOD) for i in range(6)]
        orchestrator = _TrackingOrchestrator(pipeline, concurrency=2)
        orchestrator.run_sync(paths)
        assert orchestrator.peak == 2

    def test_invalid_concurrency(self, pipeline: CheckPipeline) -> None:
        with pytest.raises(ValueError):
            BatchOrchestrator(pipeline, concurrency=0)

    def test_results_sorted_by_path(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        paths = [write(tmp_path, name, GOOD) for name in ("c.jsx", "a.jsx", "b.jsx")]
        result = BatchOrchestrator(pipeline).run_sync(paths)
        assert list(result.results) == sorted(paths)

    def test_idempotent(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        paths = [write(tmp_path, f"f{i}.jsx", GOOD) for i in range(3)]
        orchestrator = BatchOrchestrator(pipeline)
        assert orchestrator.run_sync(paths) == orchestrator.run_sync(paths)

    def test_check_file_returns_error_result(self, tmp_path: Path, pipeline: CheckPipeline) -> None:
        path = write(tmp_path, "broken.js", BROKEN)
        result = asyncio.run(BatchOrchestrator(pipeline).check_file(path))
        assert isinstance(result, FileResult)
        assert result.failed
        assert result.findings == []
