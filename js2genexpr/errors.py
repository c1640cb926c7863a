"""Diagnostics raised by the GenExpr converter."""

from __future__ import annotations


class GenExprError(Exception):
    """Conversion error with location info, 1-indexed."""

    def __init__(self, msg: str, lineno: int, col: int):
        self.msg: str = msg
        self.lineno: int = lineno
        self.col: int = col
        super().__init__(msg + " at line " + str(lineno) + " col " + str(col))


class ParseError(GenExprError):
    """Source does not parse as JavaScript."""


class ConvertError(GenExprError):
    """Source parses but uses a construct GenExpr cannot express."""
