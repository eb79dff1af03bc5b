"""English tokenizer built on spaCy: text → sentences of words, punctuation and space."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from functools import cache

import spacy
from spacy.language import Language
from spacy.tokens import Doc, Token

from prosespell.nlp.nodes import (
    InlineNode,
    PunctuationNode,
    SentenceNode,
    SymbolNode,
    WhiteSpaceNode,
    WordNode,
)

ParagraphChild = SentenceNode | WhiteSpaceNode

# Letters/digits joined by apostrophes, hyphens or dots form one word.
_WORD_RE = re.compile(r"[^\W_]+(?:['’.\-][^\W_]+)*")
_ESCAPE_RE = re.compile(r"\\(?:u\{[0-9A-Fa-f]+\}|u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{2}|.)", re.DOTALL)
_GAP_RE = re.compile(rf"(?P<escape>{_ESCAPE_RE.pattern})|(?P<space>\s+)", re.DOTALL)
_BLANK_LINE_RE = re.compile(r"\n[^\S\n]*\n")


@cache
def english_pipeline() -> Language:
    """Blank English pipeline with rule-based sentence boundaries (no model download)."""
    nlp = spacy.blank("en")
    nlp.add_pipe("sentencizer")
    return nlp


def _mask_escapes(text: str) -> str:
    # Same-length blanks keep every offset valid for the original text.
    return _ESCAPE_RE.sub(lambda m: " " * len(m.group()), text)


def _paragraphs(text: str) -> Iterator[tuple[int, int]]:
    cursor = 0
    for match in _BLANK_LINE_RE.finditer(text):
        yield cursor, match.start()
        cursor = match.end()
    yield cursor, len(text)


def _token_node(token: Token, value: str, start: int) -> InlineNode:
    end = start + len(value)
    if token.is_punct:
        return PunctuationNode(value=value, start=start, end=end)
    if token.like_url or token.like_email or not any(ch.isalnum() for ch in value):
        return SymbolNode(value=value, start=start, end=end)
    return WordNode(value=value, start=start, end=end)


def _gap_nodes(text: str, start: int, end: int) -> Iterator[InlineNode]:
    for match in _GAP_RE.finditer(text, start, end):
        node_type = SymbolNode if match.lastgroup == "escape" else WhiteSpaceNode
        yield node_type(value=match.group(), start=match.start(), end=match.end())


class LinguisticAdapter(ABC):
    """Turns a prose string into nodes the checker can walk for word boundaries."""

    @abstractmethod
    def parse(self, text: str) -> tuple[ParagraphChild, ...]:
        """Return sentences (and the whitespace between them) for ``text``."""


class EnglishParser(LinguisticAdapter):
    """Splits English prose into sentences, words, punctuation and whitespace.

    Tokens and sentence boundaries come from spaCy's tokenizer and
    ``sentencizer``; blank lines always end a sentence.  spaCy splits
    contractions and hyphenated compounds (``do`` + ``n't``), so pieces
    written without a space between them are merged back into one word
    before sentences are found.  Escape sequences (``\\n``) become
    ``SymbolNode`` and whitespace between sentences is kept as top-level
    ``WhiteSpaceNode``, so the returned children cover the whole input.
    """

    def __init__(self, nlp: Language | None = None) -> None:
        self._nlp = nlp or english_pipeline()

    def analyze(self, text: str) -> Doc:
        doc = self._nlp.make_doc(text)
        with doc.retokenize() as retokenizer:
            for match in _WORD_RE.finditer(text):
                span = doc.char_span(match.start(), match.end())
                if span is not None and len(span) > 1:
                    retokenizer.merge(span)
        for _, component in self._nlp.pipeline:
            doc = component(doc)
        return doc

    def parse(self, text: str) -> tuple[ParagraphChild, ...]:
        children: list[ParagraphChild] = []
        current: list[InlineNode] = []
        cursor = 0

        def emit(node: InlineNode) -> None:
            if isinstance(node, WhiteSpaceNode) and not current:
                children.append(node)
            else:
                current.append(node)

        def flush() -> None:
            trailing: list[WhiteSpaceNode] = []
            while current and isinstance(current[-1], WhiteSpaceNode):
                trailing.insert(0, current.pop())  # type: ignore[arg-type]
            if current:
                children.append(SentenceNode(children=tuple(current)))
                current.clear()
            children.extend(trailing)

        masked = _mask_escapes(text)
        for para_start, para_end in _paragraphs(masked):
            if not masked[para_start:para_end].strip():
                continue
            doc = self.analyze(masked[para_start:para_end])
            for sentence in doc.sents:
                for token in sentence:
                    if token.is_space:
                        continue
                    start = para_start + token.idx
                    end = start + len(token)
                    for gap in _gap_nodes(text, cursor, start):
                        emit(gap)
                    current.append(_token_node(token, text[start:end], start))
                    cursor = end
                flush()

        for gap in _gap_nodes(text, cursor, len(text)):
            emit(gap)
        flush()
        return tuple(children)
