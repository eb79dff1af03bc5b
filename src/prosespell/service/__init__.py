"""Batch processing and reporting."""

from prosespell.service.batch import DEFAULT_CONCURRENCY, BatchOrchestrator, ReadError
from prosespell.service.reporter import Reporter

__all__ = [
    "DEFAULT_CONCURRENCY",
    "BatchOrchestrator",
    "ReadError",
    "Reporter",
]
