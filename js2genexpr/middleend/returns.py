"""Return expansion: `return [a, b];` becomes GenExpr's `return a, b;`.

Only returns whose argument is an array literal are rewritten; every other
return is left alone. Returns inside nested functions are not touched.
"""

from __future__ import annotations

import logging

from ..errors import ConvertError, ParseError
from ..frontend.parse import children_without_comments, parse, walk_scope
from ..spans import Replacement, apply_replacements, node_span, node_text

logger = logging.getLogger(__name__)


def return_argument(node):
    """Argument expression of a return statement, or None for `return;`."""
    args = children_without_comments(node)
    if len(args) == 0:
        return None
    return args[0]


def array_elements(node) -> list | None:
    """Element nodes if node is an array literal, else None.

    Holes (`[a, , b]`) have no element node to bind, so they are rejected.
    """
    if node is None or node.type != "array":
        return None
    prev = "["
    for child in node.children:
        if child.type == "comment":
            continue
        if child.type == "," and prev in ("[", ","):
            raise ConvertError(
                "array with holes is not supported",
                child.start_point[0] + 1,
                child.start_point[1] + 1,
            )
        prev = child.type
    return children_without_comments(node)


def expand_return(src: bytes, node) -> Replacement | None:
    """Replacement for one return statement, or None if it is not an array return."""
    elements = array_elements(return_argument(node))
    if elements is None:
        return None
    text = "return " + ", ".join(node_text(src, e) for e in elements)
    if node_text(src, node).endswith(";"):
        text += ";"
    return Replacement(node_span(node), text)


def return_replacements(src: bytes, scope) -> list[Replacement]:
    """Replacements for every array return under scope, at any block depth."""
    result: list[Replacement] = []
    for node in walk_scope(scope):
        if node.type != "return_statement":
            continue
        rep = expand_return(src, node)
        if rep is not None:
            result.append(rep)
    return result


def expand_returns(body_text: str) -> str:
    """Expand array returns in a function body given as text.

    The body is parsed on its own. If it does not parse, it is returned
    unchanged and a warning is logged.
    """
    try:
        tree = parse(body_text)
    except ParseError as e:
        logger.warning("cannot parse function body, returns left unexpanded: %s", e)
        return body_text
    return apply_replacements(tree.src, return_replacements(tree.src, tree.root))
