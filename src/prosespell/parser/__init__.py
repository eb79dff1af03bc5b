"""Source parsing with tree-sitter grammars."""

from prosespell.parser.grammars import Grammar, GrammarRegistry, UnsupportedGrammarError
from prosespell.parser.location import ByteOffsetIndex, SourceLocator
from prosespell.parser.source import ParsedSource, ParseError, SourceParser, iter_nodes

__all__ = [
    "ByteOffsetIndex",
    "Grammar",
    "GrammarRegistry",
    "ParseError",
    "ParsedSource",
    "SourceLocator",
    "SourceParser",
    "UnsupportedGrammarError",
    "iter_nodes",
]
