"""Prose extraction and document reconstruction."""

from prosespell.extract.document import DocumentReconstructor, ReconstructionError
from prosespell.extract.prose import ProseExtractor, is_prose_template_chunk, template_chunks
from prosespell.extract.visitor import TreeVisitor

__all__ = [
    "DocumentReconstructor",
    "ProseExtractor",
    "ReconstructionError",
    "TreeVisitor",
    "is_prose_template_chunk",
    "template_chunks",
]
