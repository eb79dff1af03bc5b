"""Visitor pattern for syntax-tree traversal."""

from __future__ import annotations

from typing import Any

from tree_sitter import Node

from prosespell.parser.source import iter_nodes


class TreeVisitor:
    """Base visitor for tree-sitter syntax trees.

    Override ``visit_<node type>`` methods (e.g. ``visit_jsx_text``) to handle
    specific named nodes.  ``walk`` visits every node of a tree exactly once;
    handlers do not need to recurse into children themselves.
    """

    def visit(self, node: Node) -> Any:
        """Dispatch to the appropriate visit_* method."""
        if not node.is_named:
            return self.generic_visit(node)
        method = getattr(self, f"visit_{node.type}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: Node) -> Any:
        return None

    def walk(self, root: Node) -> None:
        for node in iter_nodes(root):
            self.visit(node)
