"""Shared test fixtures for prosespell."""

from __future__ import annotations

from pathlib import Path

import pytest

from prosespell.checker.allowlist import AllowList, default_allow_list
from prosespell.checker.dictionary import Dictionary
from prosespell.checker.spell import ProseChecker
from prosespell.extract.document import DocumentReconstructor
from prosespell.extract.prose import ProseExtractor
from prosespell.parser.source import SourceParser
from prosespell.pipeline import CheckPipeline

FIXTURES_DIR = Path(__file__).parent / "fixtures"
PROJECT_DIR = FIXTURES_DIR / "project"

BANNER_JSX = """\
const Banner = () => <div className="banner">Mapbx is great</div>;
"""

ENTITY_JSX = """\
const p = <p>This isn&apos;t right and doesn&rsquo;t work, we&apos;re ok</p>;
"""


@pytest.fixture
def parser() -> SourceParser:
    return SourceParser()


@pytest.fixture
def extractor() -> ProseExtractor:
    return ProseExtractor()


@pytest.fixture
def reconstructor() -> DocumentReconstructor:
    return DocumentReconstructor()


@pytest.fixture(scope="session")
def allow_list() -> AllowList:
    return default_allow_list()


@pytest.fixture(scope="session")
def dictionary(allow_list: AllowList) -> Dictionary:
    """Loading the English word list is slow; share one per test session."""
    return Dictionary(allow_list)


@pytest.fixture
def checker(dictionary: Dictionary) -> ProseChecker:
    return ProseChecker(dictionary)


@pytest.fixture(scope="session")
def pipeline(allow_list: AllowList, dictionary: Dictionary) -> CheckPipeline:
    return CheckPipeline(allow_list=allow_list, dictionary=dictionary)
