"""Patch synthesis: turn `main` into a gen~ patch body.

`main`'s parameters become `Param` declarations (when they have a default)
or `in<k>` inputs, its statements are copied as top-level assignments, and
its return value is bound to `out<k>` outputs.
"""

from __future__ import annotations

import logging

from ..errors import ConvertError
from ..frontend.functions import read_params
from ..frontend.parse import parse, walk_scope
from ..middleend.declarations import DECLARATION_TYPES, declaration_replacements
from ..middleend.returns import array_elements, return_argument
from ..options import Options, resolve_options
from ..spans import apply_replacements, node_span, node_text
from .genexpr import collect_functions

logger = logging.getLogger(__name__)


class PatchSynthesizer:
    """Builds the patch body for one parsed `main` declaration."""

    def __init__(self, src: bytes, node, options: Options | None = None) -> None:
        self.src = src
        self.node = node
        self.options: Options = options if options is not None else Options()
        self._header: list[str] = []
        self._body: list[str] = []
        self._outputs: list[str] = []

    # ── Public ──────────────────────────────────────────────

    def synthesize(self) -> str:
        self._header = self.param_lines()
        self._body = []
        self._outputs = []
        ret = None
        dropped = 0
        for stmt in self.node.child_by_field_name("body").named_children:
            if ret is not None:
                if stmt.type != "comment":
                    dropped += 1
                continue
            if stmt.type == "return_statement":
                ret = stmt
                continue
            self._emit_stmt(stmt)
        if dropped > 0:
            logger.warning(
                "%d statement(s) after the return in '%s' are unreachable and dropped",
                dropped,
                self.options.main_name,
            )
        if ret is not None:
            self._outputs = self.output_lines(ret)
        tail = self._body + self._outputs
        blocks = ["\n".join(lines) for lines in (self._header, tail) if lines]
        return "\n\n".join(blocks)

    def param_lines(self) -> list[str]:
        """`Param` lines for defaulted parameters, then `in<k>` bindings."""
        params = read_params(self.src, self.node, self.options)
        lines: list[str] = []
        for p in params:
            if p.default is not None:
                lines.append("Param " + p.name + "(" + p.default + ");")
        k = 0
        for p in params:
            if p.default is None:
                k += 1
                lines.append(p.name + " = in" + str(k) + ";")
        return lines

    def output_lines(self, ret) -> list[str]:
        """`out<k>` bindings for the return statement of main."""
        arg = return_argument(ret)
        if arg is None:
            return []
        elements = array_elements(arg)
        if elements is None:
            return ["out1 = " + node_text(self.src, arg) + ";"]
        lines: list[str] = []
        for i, elem in enumerate(elements):
            lines.append("out" + str(i + 1) + " = " + node_text(self.src, elem) + ";")
        return lines

    # ── Statements ──────────────────────────────────────────

    def _emit_stmt(self, stmt) -> None:
        if stmt.type in DECLARATION_TYPES:
            self._emit_declaration(stmt)
        elif stmt.type == "expression_statement":
            text = node_text(self.src, stmt)
            if not text.endswith(";"):
                text += ";"
            self._body.append(text)
        elif stmt.type == "comment":
            self._body.append(node_text(self.src, stmt))
        elif stmt.type == "empty_statement":
            return
        else:
            self._emit_verbatim(stmt)

    def _emit_declaration(self, stmt) -> None:
        for decl in stmt.named_children:
            if decl.type != "variable_declarator":
                continue
            name = decl.child_by_field_name("name")
            if name.type != "identifier":
                raise _error(self.src, decl, "destructuring declaration")
            value = decl.child_by_field_name("value")
            init = "0" if value is None else node_text(self.src, value)
            self._body.append(node_text(self.src, name) + " = " + init + ";")

    def _emit_verbatim(self, stmt) -> None:
        for node in walk_scope(stmt):
            if node.type == "return_statement":
                raise _error(self.src, node, "return nested inside '" + self.options.main_name + "'")
        reps = declaration_replacements(self.src, stmt)
        self._body.append(apply_replacements(self.src, reps, node_span(stmt)))


def _error(src: bytes, node, what: str) -> ConvertError:
    text = node_text(src, node).split("\n")[0]
    return ConvertError(
        what + " is not supported: " + text,
        node.start_point[0] + 1,
        node.start_point[1] + 1,
    )


def convert_to_genexpr(source: str, options: Options | None = None) -> str:
    """Render non-main functions as GenExpr declarations followed by the patch body."""
    opts = resolve_options(source, options)
    tree = parse(source)
    sections: list[str] = []
    main = None
    for info in collect_functions(tree, opts):
        if info.is_main:
            if main is None:
                main = info
            else:
                logger.warning("ignoring duplicate declaration of '%s'", info.name)
            continue
        sections.append(info.declaration())
    if main is not None:
        patch = PatchSynthesizer(tree.src, main.node, opts).synthesize()
        if patch != "":
            sections.append(patch)
    return "\n\n".join(sections)
