"""Command-line entry point: ``prosespell FILE...``."""

from __future__ import annotations

import argparse
import logging
import traceback
from collections.abc import Sequence

from prosespell import __version__
from prosespell.models.findings import BatchResult
from prosespell.pipeline import CheckPipeline
from prosespell.service.batch import BatchOrchestrator
from prosespell.service.reporter import Reporter
from prosespell.settings import Settings

logger = logging.getLogger("prosespell.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prosespell",
        description="Spell-check the prose inside JSX text and template literals.",
    )
    parser.add_argument("files", nargs="*", help="JavaScript/JSX/TypeScript files to check")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(
    files: Sequence[str],
    settings: Settings | None = None,
    reporter: Reporter | None = None,
) -> BatchResult | None:
    """Check ``files`` and report findings to stderr.

    Errors that escape per-file isolation are printed with their traceback
    to stdout; the run still completes normally and returns ``None``.
    """
    settings = settings or Settings()
    reporter = reporter or Reporter()
    try:
        pipeline = CheckPipeline.from_settings(settings)
        orchestrator = BatchOrchestrator(pipeline, concurrency=settings.concurrency)
        result = orchestrator.run_sync(files)
        reporter.report(result)
    except Exception as exc:
        print(exc)
        print(traceback.format_exc())
        return None
    return result


def main(argv: Sequence[str] | None = None) -> None:
    """Run the checker using settings from environment / .env file."""
    args = build_parser().parse_args(argv)
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("prosespell v%s checking %d file(s)", __version__, len(args.files))

    run(args.files, settings=settings)


if __name__ == "__main__":
    main()
