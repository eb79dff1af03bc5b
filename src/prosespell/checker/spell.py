"""Spell-checks the prose segments of a reconstructed document."""

from __future__ import annotations

import re

from prosespell.checker.dictionary import CheckerError, Dictionary
from prosespell.models.errors import SourceSpan
from prosespell.models.findings import Finding
from prosespell.models.segments import Document, ProseSegment
from prosespell.nlp.nodes import PunctuationNode, SentenceNode, WordNode
from prosespell.parser.location import SourceLocator

_DIGIT_RE = re.compile(r"\d")
_COMPOUND_SPLIT_RE = re.compile(r"[._\-]")
_CONTRACTIONS = ("n't", "'s", "'re", "'ve", "'ll", "'d", "'m", "'")
# Stems that only exist inside a contraction: can't, won't, shan't, ain't.
_IRREGULAR_STEMS = frozenset({"ca", "wo", "sha", "ai"})
_LITERAL_PAIRS = {'"': '"', "'": "'", "“": "”", "‘": "’", "«": "»", "(": ")", "[": "]", "{": "}"}


def _is_literal(sentence: SentenceNode, index: int) -> bool:
    """A word wrapped directly in quotes or brackets is a literal, not prose."""
    children = sentence.children
    if index == 0 or index + 1 >= len(children):
        return False
    before, after = children[index - 1], children[index + 1]
    if not (isinstance(before, PunctuationNode) and isinstance(after, PunctuationNode)):
        return False
    return _LITERAL_PAIRS.get(before.value) == after.value


class ProseChecker:
    """Checks every word of every prose segment against the dictionary.

    Code segments are skipped.  Words containing digits and literals wrapped
    in quotes are ignored; allow-listed words are accepted.  Each remaining
    unknown word becomes one ``Finding`` positioned in the original file.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        max_suggestions: int = 30,
        ignore_literal: bool = True,
    ) -> None:
        self._dictionary = dictionary
        self._max_suggestions = max_suggestions
        self._ignore_literal = ignore_literal

    def check(self, document: Document, file_path: str) -> list[Finding]:
        locator = SourceLocator(document.source)
        findings: list[Finding] = []
        try:
            for segment in document.prose_segments:
                findings.extend(self._check_segment(segment, locator, file_path))
        except CheckerError:
            raise
        except Exception as exc:
            raise CheckerError(f"Checking failed: {exc}", file_path=file_path) from exc
        return findings

    def _check_segment(
        self, segment: ProseSegment, locator: SourceLocator, file_path: str
    ) -> list[Finding]:
        findings: list[Finding] = []
        for sentence in segment.children:
            if not isinstance(sentence, SentenceNode):
                continue
            for index, node in enumerate(sentence.children):
                if not isinstance(node, WordNode):
                    continue
                if self._ignore_literal and _is_literal(sentence, index):
                    continue
                if self.accepts(node.value):
                    continue
                findings.append(self._finding(node, segment, locator, file_path))
        return findings

    def accepts(self, word: str) -> bool:
        """True when ``word`` is ignored, allow-listed or spelled correctly."""
        if _DIGIT_RE.search(word):
            return True
        normalized = word.replace("’", "'")
        if normalized in self._dictionary.allow_list or self._dictionary.is_known(normalized):
            return True
        lowered = normalized.lower()
        for suffix in _CONTRACTIONS:
            if lowered.endswith(suffix) and len(lowered) > len(suffix):
                stem = normalized[: -len(suffix)]
                if suffix == "n't" and stem.lower() in _IRREGULAR_STEMS:
                    return True
                return self.accepts(stem)
        parts = [p for p in _COMPOUND_SPLIT_RE.split(normalized) if p]
        if len(parts) > 1:
            return all(self.accepts(part) for part in parts)
        return False

    def _finding(
        self,
        word: WordNode,
        segment: ProseSegment,
        locator: SourceLocator,
        file_path: str,
    ) -> Finding:
        start = segment.source_offset(word.start)
        end = segment.source_offset(word.end)
        line, column = locator.position(start)
        end_line, end_column = locator.position(end)
        suggestions = self._dictionary.suggest(word.value, self._max_suggestions)
        message = f"`{word.value}` is misspelt"
        if suggestions:
            message += "; did you mean " + ", ".join(f"`{s}`" for s in suggestions) + "?"
        return Finding(
            file_path=file_path,
            span=SourceSpan(
                file=file_path,
                line=line,
                column=column,
                end_line=end_line,
                end_column=end_column,
            ),
            offset=start,
            message=message,
            rule_id=word.value.lower(),
            actual=word.value,
            expected=suggestions,
        )
