"""Parse JavaScript source into a tree-sitter tree with byte offsets.

The grammar comes from tree-sitter-language-pack. tree-sitter recovers from
syntax errors by inserting ERROR and MISSING nodes; any such node makes the
source unparseable here.
"""

from __future__ import annotations

from dataclasses import dataclass

import tree_sitter_language_pack

from ..errors import ParseError

LANGUAGE = "javascript"

# Node types that open a new function scope. Returns and declarations
# inside them belong to that inner function.
SCOPE_TYPES: set[str] = {
    "arrow_function",
    "class_body",
    "function",
    "function_declaration",
    "function_expression",
    "generator_function",
    "generator_function_declaration",
    "method_definition",
}


@dataclass
class SourceTree:
    """Encoded source plus its parse tree."""

    src: bytes
    tree: object

    @property
    def root(self):
        return self.tree.root_node


def parse(source: str) -> SourceTree:
    """Parse source, raising ParseError at the first syntax error."""
    src = source.encode("utf-8")
    parser = tree_sitter_language_pack.get_parser(LANGUAGE)
    tree = parser.parse(src)
    if tree.root_node.has_error:
        raise _error_at(src, _first_error(tree.root_node))
    return SourceTree(src, tree)


def _first_error(node):
    """Find the first ERROR or MISSING node in pre-order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _error_at(src: bytes, node) -> ParseError:
    if node is None:
        return ParseError("syntax error", 1, 1)
    lineno = node.start_point[0] + 1
    col = node.start_point[1] + 1
    if node.is_missing:
        return ParseError("missing '" + node.type + "'", lineno, col)
    text = src[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
    text = text.split("\n")[0].strip()
    if len(text) > 20:
        text = text[:20] + "..."
    if text == "":
        return ParseError("unexpected end of input", lineno, col)
    return ParseError("unexpected '" + text + "'", lineno, col)


def children_without_comments(node) -> list:
    return [c for c in node.named_children if c.type != "comment"]


def walk_scope(node):
    """Yield descendants of node in pre-order, not entering nested scopes."""
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        yield current
        if current.type in SCOPE_TYPES:
            continue
        stack.extend(reversed(current.children))
