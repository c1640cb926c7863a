"""Strip let/var/const keywords; GenExpr bindings are plain assignments."""

from __future__ import annotations

from ..frontend.parse import walk_scope
from ..spans import Replacement, SourceSpan

KEYWORDS: set[str] = {"const", "let", "var"}

DECLARATION_TYPES: set[str] = {"lexical_declaration", "variable_declaration"}

WHITESPACE: bytes = b" \t\r\n"


def declaration_replacements(src: bytes, scope) -> list[Replacement]:
    """Delete each declaration keyword and the whitespace after it.

    `let x = 1;` becomes `x = 1;`. Loop heads such as `for (let i = 0; ...)`
    and `for (const k of ks)` are handled the same way. scope itself is
    checked as well as everything under it.
    """
    result: list[Replacement] = []
    for node in [scope, *walk_scope(scope)]:
        keyword = None
        binding = None
        if node.type in DECLARATION_TYPES:
            keyword = node.children[0]
            declarators = [c for c in node.named_children if c.type == "variable_declarator"]
            if declarators:
                binding = declarators[0]
        elif node.type == "for_in_statement":
            keyword = node.child_by_field_name("kind")
            binding = node.child_by_field_name("left")
        if keyword is None or binding is None or keyword.type not in KEYWORDS:
            continue
        end = keyword.end_byte
        while end < binding.start_byte and src[end] in WHITESPACE:
            end += 1
        result.append(Replacement(SourceSpan(keyword.start_byte, end), ""))
    return result
