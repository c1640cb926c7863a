"""GenExpr function declarations: `function f(a, b=2) {...}` becomes `f(a, b=2) {...}`."""

from __future__ import annotations

import logging

from ..frontend.functions import (
    FunctionInfo,
    body_span,
    exported_functions,
    function_name,
    read_params,
    top_level_functions,
)
from ..frontend.parse import SourceTree, parse
from ..middleend.declarations import declaration_replacements
from ..middleend.returns import return_replacements
from ..options import Options, resolve_options
from ..spans import Replacement, apply_replacements, node_span

logger = logging.getLogger(__name__)


def render_body(src: bytes, node) -> str:
    """Body text between the braces, keywords stripped and returns expanded."""
    body = node.child_by_field_name("body")
    decls = declaration_replacements(src, body)
    rets = return_replacements(src, body)
    logger.debug(
        "%s: %d declaration keyword(s), %d array return(s)",
        function_name(src, node),
        len(decls),
        len(rets),
    )
    reps = decls + rets
    return apply_replacements(src, reps, body_span(node))


def function_info(src: bytes, node, options: Options) -> FunctionInfo:
    params = read_params(src, node, options)
    name = function_name(src, node)
    defaults: dict[str, str] = {}
    for p in params:
        if p.default is not None:
            defaults[p.name] = p.default
    return FunctionInfo(
        name=name,
        params=[p.name for p in params],
        default_params=defaults,
        body=render_body(src, node),
        is_main=name == options.main_name,
        node=node,
    )


def collect_functions(tree: SourceTree, options: Options | None = None) -> list[FunctionInfo]:
    """FunctionInfo for every top-level function declaration, in source order."""
    opts = options if options is not None else Options()
    for node in exported_functions(tree.root):
        logger.warning(
            "exported function '%s' is not converted; remove 'export'",
            function_name(tree.src, node),
        )
    infos = [function_info(tree.src, n, opts) for n in top_level_functions(tree.root)]
    logger.debug("collected %d function declarations", len(infos))
    return infos


def render_function(src: bytes, node, options: Options | None = None) -> str:
    """GenExpr declaration text for one function declaration node."""
    opts = options if options is not None else Options()
    return function_info(src, node, opts).declaration()


def convert(source: str, options: Options | None = None) -> str:
    """Rewrite top-level function declarations in place.

    Text outside the declarations is kept as is. A `main` function is
    rewritten like any other.
    """
    opts = resolve_options(source, options)
    tree = parse(source)
    reps: list[Replacement] = []
    for info in collect_functions(tree, opts):
        reps.append(Replacement(node_span(info.node), info.declaration()))
    return apply_replacements(tree.src, reps)
