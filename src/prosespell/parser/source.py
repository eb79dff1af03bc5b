"""Source parsing: text → tree-sitter syntax tree with text-offset helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import PurePath

from tree_sitter import Node, Parser, Tree

from prosespell.models.errors import ProseSpellError
from prosespell.models.segments import SourceRange
from prosespell.parser.grammars import GrammarRegistry
from prosespell.parser.location import ByteOffsetIndex, SourceLocator

logger = logging.getLogger("prosespell.parser")


class ParseError(ProseSpellError):
    """Raised when the source contains syntax the grammar cannot parse."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        file_path: str | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message, file_path=file_path)


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node of the tree once, in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


@dataclass
class ParsedSource:
    """A syntax tree together with the text it was parsed from."""

    text: str
    tree: Tree
    grammar: str
    _offsets: ByteOffsetIndex = field(repr=False)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def char_offset(self, byte_offset: int) -> int:
        return self._offsets.to_char(byte_offset)

    def node_range(self, node: Node) -> SourceRange:
        return SourceRange(self.char_offset(node.start_byte), self.char_offset(node.end_byte))

    def slice(self, source_range: SourceRange) -> str:
        return self.text[source_range.start : source_range.end]


class SourceParser:
    """Parses JavaScript/JSX/TypeScript source with tree-sitter.

    The grammar is chosen from the file extension (see ``GrammarRegistry``)
    unless one is named explicitly.  tree-sitter recovers from syntax errors;
    a tree containing error or missing nodes is retried with the grammar's
    fallback (JavaScript falls back to TSX, which reads Flow annotations) and
    rejected with ``ParseError`` when that fails too.  The error points at
    the first problem found by the primary grammar.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, Parser] = {}

    def _parser_for(self, grammar: str) -> Parser:
        parser = self._parsers.get(grammar)
        if parser is None:
            parser = Parser(GrammarRegistry.language(grammar))
            self._parsers[grammar] = parser
        return parser

    def parse(
        self,
        text: str,
        path: str | PurePath | None = None,
        grammar: str | None = None,
    ) -> ParsedSource:
        name = grammar or GrammarRegistry.for_path(path).name
        offsets = ByteOffsetIndex(text)
        parsed = self._parse_with(name, text, offsets)
        if not parsed.root.has_error:
            return parsed
        fallback = GrammarRegistry.get(name).fallback
        if fallback is not None:
            retry = self._parse_with(fallback, text, offsets)
            if not retry.root.has_error:
                logger.debug("Parsed %s with the %s grammar after %s failed", path, fallback, name)
                return retry
        raise self._syntax_error(parsed, path)

    def _parse_with(self, grammar: str, text: str, offsets: ByteOffsetIndex) -> ParsedSource:
        tree = self._parser_for(grammar).parse(text.encode("utf-8"))
        return ParsedSource(text=text, tree=tree, grammar=grammar, _offsets=offsets)

    @staticmethod
    def _syntax_error(parsed: ParsedSource, path: str | PurePath | None) -> ParseError:
        file_path = str(path) if path is not None else None
        for node in iter_nodes(parsed.root):
            if node.type == "ERROR" or node.is_missing:
                offset = parsed.char_offset(node.start_byte)
                line, column = SourceLocator(parsed.text).position(offset)
                what = f"missing {node.type}" if node.is_missing else "unexpected syntax"
                return ParseError(
                    f"Syntax error ({what}) at {line}:{column}",
                    line=line,
                    column=column,
                    file_path=file_path,
                )
        return ParseError("Syntax error", file_path=file_path)
