"""English dictionary backed by pyspellchecker, extended with the allow-list."""

from __future__ import annotations

from spellchecker import SpellChecker

from prosespell.checker.allowlist import AllowList
from prosespell.models.errors import ProseSpellError


class CheckerError(ProseSpellError):
    """Raised when the dictionary or tokenizer fails while checking a file."""


class Dictionary:
    """Word lookups and suggestions for one language.

    Allow-list terms are loaded into the word list so that they are also
    offered as suggestions (``Mapbx`` → ``Mapbox``).
    """

    def __init__(self, allow_list: AllowList, language: str = "en", distance: int = 2) -> None:
        try:
            self._spell = SpellChecker(language=language, distance=distance)
        except ValueError as exc:
            raise CheckerError(f"No dictionary for language '{language}': {exc}") from exc
        self._spell.word_frequency.load_words(sorted(allow_list.terms))
        self.allow_list = allow_list
        self.language = language

    def is_known(self, word: str) -> bool:
        return not self._spell.unknown([word])

    def suggest(self, word: str, limit: int) -> list[str]:
        """Known words near ``word``, most frequent first, in ``word``'s casing."""
        if limit <= 0:
            return []
        candidates = self._spell.candidates(word) or set()
        counts = self._spell.word_frequency.dictionary
        ranked = sorted(candidates, key=lambda c: (-counts.get(c, 0), c))
        suggestions: list[str] = []
        for candidate in ranked:
            if candidate == word.lower():
                continue
            cased = self._match_case(word, candidate)
            if cased not in suggestions:
                suggestions.append(cased)
            if len(suggestions) >= limit:
                break
        return suggestions

    def _match_case(self, word: str, candidate: str) -> str:
        canonical = self.allow_list.canonical(candidate)
        if canonical is not None:
            return canonical
        if len(word) > 1 and word.isupper():
            return candidate.upper()
        if word[:1].isupper():
            return candidate[:1].upper() + candidate[1:]
        return candidate
