"""Natural-language tokenization for extracted prose."""

from prosespell.nlp.english import EnglishParser, LinguisticAdapter
from prosespell.nlp.nodes import (
    PunctuationNode,
    SentenceNode,
    SymbolNode,
    WhiteSpaceNode,
    WordNode,
)

__all__ = [
    "EnglishParser",
    "LinguisticAdapter",
    "PunctuationNode",
    "SentenceNode",
    "SymbolNode",
    "WhiteSpaceNode",
    "WordNode",
]
