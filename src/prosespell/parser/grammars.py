"""Grammar registry: which tree-sitter grammar parses which file."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import cache
from pathlib import PurePath
from typing import Any

import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript
from tree_sitter import Language

from prosespell.models.errors import ProseSpellError

DEFAULT_GRAMMAR = "javascript"


class UnsupportedGrammarError(ProseSpellError):
    """Raised when a requested grammar is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.grammar_name = name
        self.available = available
        super().__init__(f"Unsupported grammar '{name}'. Available: {', '.join(available)}")


@dataclass(frozen=True)
class Grammar:
    """A tree-sitter grammar and the file extensions it handles."""

    name: str
    extensions: tuple[str, ...]
    loader: Callable[[], Any]  # returns the grammar's language pointer
    # grammar to retry with when this one leaves syntax errors in the tree
    fallback: str | None = None


@cache
def _language(grammar: Grammar) -> Language:
    return Language(grammar.loader())


class GrammarRegistry:
    """Registry for the grammars the tool is built with."""

    _grammars: dict[str, Grammar] = {}

    @classmethod
    def register(cls, grammar: Grammar) -> Grammar:
        cls._grammars[grammar.name] = grammar
        return grammar

    @classmethod
    def get(cls, name: str) -> Grammar:
        if name not in cls._grammars:
            raise UnsupportedGrammarError(name, available=cls.available())
        return cls._grammars[name]

    @classmethod
    def language(cls, name: str) -> Language:
        return _language(cls.get(name))

    @classmethod
    def for_path(cls, path: str | PurePath | None) -> Grammar:
        """Pick a grammar by file extension, falling back to JavaScript."""
        if path is not None:
            suffix = PurePath(path).suffix.lower()
            for grammar in cls._grammars.values():
                if suffix in grammar.extensions:
                    return grammar
        return cls.get(DEFAULT_GRAMMAR)

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._grammars.keys())


# The JavaScript grammar includes JSX. Flow-annotated files (`type Props = {...}`,
# `(p: Props) =>`) fail it and are re-parsed as TSX.
GrammarRegistry.register(
    Grammar(
        "javascript",
        (".js", ".jsx", ".mjs", ".cjs"),
        tsjavascript.language,
        fallback="tsx",
    )
)
GrammarRegistry.register(
    Grammar("typescript", (".ts", ".mts", ".cts"), tstypescript.language_typescript)
)
GrammarRegistry.register(Grammar("tsx", (".tsx",), tstypescript.language_tsx))
