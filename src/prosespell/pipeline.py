"""Orchestrates the per-file pipeline: Source → Tree → Prose → Document → Findings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from prosespell.checker.allowlist import AllowList, default_allow_list
from prosespell.checker.dictionary import Dictionary
from prosespell.checker.spell import ProseChecker
from prosespell.extract.document import DocumentReconstructor
from prosespell.extract.prose import ProseExtractor
from prosespell.models.errors import ProseSpellError
from prosespell.models.findings import Finding
from prosespell.models.segments import Document
from prosespell.nlp.english import EnglishParser, LinguisticAdapter
from prosespell.parser.source import SourceParser
from prosespell.settings import Settings

logger = logging.getLogger("prosespell.pipeline")


@dataclass
class CheckResult:
    """The result of checking one file's source text."""

    file_path: str
    findings: list[Finding] = field(default_factory=list)
    document: Document | None = None  # None when the file has no prose


class CheckPipeline:
    """Orchestrates: Parse → Extract prose → Reconstruct document → Check."""

    def __init__(
        self,
        allow_list: AllowList | None = None,
        language: str = "en",
        max_suggestions: int = 30,
        adapter: LinguisticAdapter | None = None,
        dictionary: Dictionary | None = None,
    ) -> None:
        allow_list = allow_list if allow_list is not None else default_allow_list()
        self._parser = SourceParser()
        self._extractor = ProseExtractor(adapter or EnglishParser())
        self._reconstructor = DocumentReconstructor()
        self._checker = ProseChecker(
            dictionary or Dictionary(allow_list, language=language),
            max_suggestions=max_suggestions,
        )

    @classmethod
    def from_settings(cls, settings: Settings, allow_list: AllowList | None = None) -> CheckPipeline:
        return cls(
            allow_list=allow_list,
            language=settings.language,
            max_suggestions=settings.max_suggestions,
        )

    def check_source(self, source: str, file_path: str) -> CheckResult:
        """Check one file's text; errors are tagged with ``file_path``."""
        try:
            # Phase 1: Parse
            parsed = self._parser.parse(source, path=file_path)

            # Phase 2: Prose extraction; pure-code files stop here
            prose = self._extractor.extract(parsed)
            if not prose:
                logger.debug("No prose found in %s", file_path)
                return CheckResult(file_path=file_path)

            # Phase 3: Full-coverage document
            document = self._reconstructor.reconstruct(prose, source)

            # Phase 4: Spell checking of prose segments
            findings = self._checker.check(document, file_path)
        except ProseSpellError as exc:
            if exc.file_path is None:
                exc.file_path = file_path
            raise

        return CheckResult(file_path=file_path, findings=findings, document=document)
