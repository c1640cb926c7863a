"""JavaScript to GenExpr converter: public API."""

from __future__ import annotations

from .backend.genexpr import collect_functions, convert, render_function
from .backend.patch import PatchSynthesizer, convert_to_genexpr
from .errors import ConvertError, GenExprError, ParseError
from .frontend.functions import FunctionInfo, Param
from .frontend.parse import SourceTree, parse
from .middleend.returns import expand_returns
from .options import Options
from .spans import Replacement, SourceSpan, apply_replacements, extract

__all__ = [
    "ConvertError",
    "FunctionInfo",
    "GenExprError",
    "Options",
    "Param",
    "ParseError",
    "PatchSynthesizer",
    "Replacement",
    "SourceSpan",
    "SourceTree",
    "apply_replacements",
    "collect_functions",
    "convert",
    "convert_to_genexpr",
    "expand_returns",
    "extract",
    "parse",
    "render_function",
]
