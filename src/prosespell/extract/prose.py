"""Prose extraction: find the natural-language text inside a syntax tree."""

from __future__ import annotations

import html
import re
from collections.abc import Iterator, Sequence
from itertools import groupby

from tree_sitter import Node

from prosespell.extract.visitor import TreeVisitor
from prosespell.models.segments import ProseSegment, SourceRange
from prosespell.nlp.english import EnglishParser, LinguisticAdapter
from prosespell.parser.source import ParsedSource

# A template chunk is prose when it spans more than this many newlines ...
TEMPLATE_NEWLINE_THRESHOLD = 2
# ... or when it contains an uppercase letter.
_UPPERCASE_RE = re.compile(r"[A-Z]")
# Markup text pieces; the grammar emits a separate node per `&name;` reference.
_JSX_TEXT_TYPES = frozenset({"jsx_text", "html_character_reference"})


def is_prose_template_chunk(raw: str) -> bool:
    """Heuristic for template-literal text: multi-line or capitalized means prose.

    Short, all-lowercase, single-line chunks are usually code-ish
    interpolation glue (class names, URLs, paths) and are skipped.
    """
    return raw.count("\n") > TEMPLATE_NEWLINE_THRESHOLD or _UPPERCASE_RE.search(raw) is not None


def template_chunks(parsed: ParsedSource, node: Node) -> Iterator[SourceRange]:
    """Yield the literal chunks of a ``template_string`` node.

    Chunks are the raw text between the backticks and ``${...}``
    substitutions, escape sequences included verbatim.  Empty chunks are
    skipped.
    """
    cursor = node.start_byte + 1  # opening backtick
    close = node.end_byte - 1  # closing backtick
    for child in node.children:
        if child.type != "template_substitution":
            continue
        if child.start_byte > cursor:
            yield SourceRange(parsed.char_offset(cursor), parsed.char_offset(child.start_byte))
        cursor = child.end_byte
    if close > cursor:
        yield SourceRange(parsed.char_offset(cursor), parsed.char_offset(close))


def decode_jsx_text(parsed: ParsedSource, run: Sequence[Node]) -> tuple[str, tuple[int, ...]]:
    """Decode the character references in a run of JSX text nodes.

    Returns the decoded text and, for every decoded offset plus the end, the
    offset into the run's raw source text.  Characters produced by one
    reference all map to the reference's first offset.
    """
    span = SourceRange(parsed.node_range(run[0]).start, parsed.node_range(run[-1]).end)
    chars: list[str] = []
    offsets: list[int] = []
    cursor = span.start
    for node in run:
        if node.type != "html_character_reference":
            continue
        ref = parsed.node_range(node)
        for index in range(cursor, ref.start):
            chars.append(parsed.text[index])
            offsets.append(index - span.start)
        for char in html.unescape(parsed.slice(ref)):
            chars.append(char)
            offsets.append(ref.start - span.start)
        cursor = ref.end
    for index in range(cursor, span.end):
        chars.append(parsed.text[index])
        offsets.append(index - span.start)
    offsets.append(span.length)
    return "".join(chars), tuple(offsets)


class _ProseCollector(TreeVisitor):
    """Single-pass collector of prose ranges for one parsed file.

    Maps each prose range to its decoded text and offset map, or to ``None``
    when the raw text is the prose.
    """

    def __init__(self, parsed: ParsedSource) -> None:
        self._parsed = parsed
        self.prose: dict[SourceRange, tuple[str, tuple[int, ...]] | None] = {}

    def visit_jsx_element(self, node: Node) -> None:
        # The grammar splits markup text at every character reference;
        # adjacent pieces form one prose run.
        for is_text, group in groupby(node.children, key=lambda c: c.type in _JSX_TEXT_TYPES):
            if not is_text:
                continue
            run = list(group)
            span = SourceRange(
                self._parsed.node_range(run[0]).start, self._parsed.node_range(run[-1]).end
            )
            if all(piece.type == "jsx_text" for piece in run):
                self.prose[span] = None
            else:
                self.prose[span] = decode_jsx_text(self._parsed, run)

    def visit_template_string(self, node: Node) -> None:
        for chunk in template_chunks(self._parsed, node):
            if is_prose_template_chunk(self._parsed.slice(chunk)):
                self.prose.setdefault(chunk, None)


class ProseExtractor:
    """Extracts prose segments from a parsed source file.

    JSX text is always prose: each run of text and character references
    between child elements becomes one segment, tokenized with the
    references decoded.  Template-literal chunks are prose only when
    ``is_prose_template_chunk`` accepts them.  The result is deduplicated
    and sorted by start offset; an empty list means the file has no prose.
    """

    def __init__(self, adapter: LinguisticAdapter | None = None) -> None:
        self._adapter = adapter or EnglishParser()

    def extract(self, parsed: ParsedSource) -> list[ProseSegment]:
        collector = _ProseCollector(parsed)
        collector.walk(parsed.root)
        segments = []
        for source_range in sorted(collector.prose):
            raw_text = parsed.slice(source_range)
            decoded_text, offset_map = collector.prose[source_range] or (None, ())
            segments.append(
                ProseSegment(
                    range=source_range,
                    raw_text=raw_text,
                    children=self._adapter.parse(raw_text if decoded_text is None else decoded_text),
                    decoded_text=decoded_text,
                    offset_map=offset_map,
                )
            )
        return segments
