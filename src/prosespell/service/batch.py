"""Batch orchestration: run the per-file pipeline over many files, five at a time."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Protocol

import aiofiles

from prosespell.models.errors import FileError, ProseSpellError
from prosespell.models.findings import BatchResult, FileResult
from prosespell.pipeline import CheckResult

logger = logging.getLogger("prosespell.batch")

DEFAULT_CONCURRENCY = 5


class ReadError(ProseSpellError):
    """Raised when a file is missing, unreadable or not valid UTF-8."""


class SourceChecker(Protocol):
    def check_source(self, source: str, file_path: str) -> CheckResult: ...


class BatchOrchestrator:
    """Checks a list of files with bounded concurrency.

    At most ``concurrency`` files are in flight (read + checked) at once.
    A failure in one file is logged with its path and recorded in
    ``BatchResult.errors``; it never stops the other files.  Only files with
    at least one finding appear in ``BatchResult.results``.
    """

    def __init__(self, pipeline: SourceChecker, concurrency: int = DEFAULT_CONCURRENCY) -> None:
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self._pipeline = pipeline
        self._concurrency = concurrency

    @property
    def concurrency(self) -> int:
        return self._concurrency

    async def read_source(self, path: str) -> str:
        try:
            async with aiofiles.open(path, mode="r", encoding="utf-8") as handle:
                return await handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot read file: {exc}", file_path=path) from exc

    async def check_file(self, path: str) -> FileResult:
        """Read and check one file, converting any failure into a ``FileError``."""
        try:
            source = await self.read_source(path)
            result = self._pipeline.check_source(source, path)
        except ProseSpellError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            return FileResult(file_path=path, error=FileError.from_exception(path, exc))
        except Exception as exc:
            logger.exception("Unexpected failure while checking %s", path)
            return FileResult(file_path=path, error=FileError.from_exception(path, exc))
        return FileResult(file_path=path, findings=result.findings)

    async def run(self, paths: Iterable[str]) -> BatchResult:
        paths = [str(p) for p in paths]
        semaphore = asyncio.Semaphore(self._concurrency)

        async def bounded(path: str) -> FileResult:
            async with semaphore:
                return await self.check_file(path)

        logger.info("Checking %d file(s), concurrency=%d", len(paths), self._concurrency)
        file_results = await asyncio.gather(*(bounded(p) for p in paths))
        batch = BatchResult.collect(list(file_results))
        logger.info(
            "Done: %d finding(s) in %d file(s), %d failed",
            batch.finding_count,
            len(batch.results),
            len(batch.errors),
        )
        return batch

    def run_sync(self, paths: Iterable[str]) -> BatchResult:
        return asyncio.run(self.run(paths))
