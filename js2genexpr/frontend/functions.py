"""Top-level function declarations and their parameter lists."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ConvertError
from ..options import Options
from ..spans import SourceSpan, node_text
from .parse import children_without_comments

LITERAL_TYPES: set[str] = {
    "false",
    "null",
    "number",
    "string",
    "true",
    "undefined",
}


@dataclass(frozen=True)
class Param:
    """One formal parameter. default is the default's source text, if any."""

    name: str
    default: str | None


@dataclass(frozen=True)
class FunctionInfo:
    """A top-level function declaration, ready to render as GenExpr."""

    name: str
    params: list[str]
    default_params: dict[str, str]
    body: str
    is_main: bool
    node: object = field(default=None, compare=False, repr=False)

    def signature(self) -> str:
        parts: list[str] = []
        for name in self.params:
            if name in self.default_params:
                parts.append(name + "=" + self.default_params[name])
            else:
                parts.append(name)
        return self.name + "(" + ", ".join(parts) + ")"

    def declaration(self) -> str:
        return self.signature() + " {" + self.body + "}"


def top_level_functions(root) -> list:
    """Function declarations that are direct children of the program."""
    return [n for n in root.named_children if n.type == "function_declaration"]


def exported_functions(root) -> list:
    """Function declarations wrapped in a top-level `export` statement."""
    result = []
    for n in root.named_children:
        if n.type != "export_statement":
            continue
        decl = n.child_by_field_name("declaration")
        if decl is not None and decl.type == "function_declaration":
            result.append(decl)
    return result


def function_name(src: bytes, node) -> str:
    return node_text(src, node.child_by_field_name("name"))


def body_span(node) -> SourceSpan:
    """Span strictly between the braces of a function body."""
    body = node.child_by_field_name("body")
    return SourceSpan(body.start_byte + 1, body.end_byte - 1)


def is_literal(node) -> bool:
    """Whether a default value is a literal token."""
    if node.type in LITERAL_TYPES:
        return True
    if node.type == "template_string":
        return all(c.type != "template_substitution" for c in node.named_children)
    if node.type == "unary_expression":
        op = node.child_by_field_name("operator")
        arg = node.child_by_field_name("argument")
        if op is not None and op.type in ("-", "+") and arg is not None:
            return arg.type == "number"
    return False


def read_params(src: bytes, node, options: Options) -> list[Param]:
    """Read the formal parameters of a function declaration in order."""
    params: list[Param] = []
    for p in children_without_comments(node.child_by_field_name("parameters")):
        if p.type == "identifier":
            params.append(Param(node_text(src, p), None))
            continue
        if p.type == "assignment_pattern":
            left = p.child_by_field_name("left")
            right = p.child_by_field_name("right")
            if left.type != "identifier":
                raise _unsupported(src, p, "destructuring parameter")
            name = node_text(src, left)
            if options.strict_defaults and not is_literal(right):
                raise ConvertError(
                    "default for '" + name + "' is not a literal: "
                    + node_text(src, right),
                    right.start_point[0] + 1,
                    right.start_point[1] + 1,
                )
            params.append(Param(name, node_text(src, right)))
            continue
        if p.type == "rest_pattern":
            raise _unsupported(src, p, "rest parameter")
        raise _unsupported(src, p, "destructuring parameter")
    return params


def _unsupported(src: bytes, node, what: str) -> ConvertError:
    return ConvertError(
        what + " '" + node_text(src, node) + "' is not supported",
        node.start_point[0] + 1,
        node.start_point[1] + 1,
    )
