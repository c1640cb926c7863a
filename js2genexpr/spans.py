"""Byte spans over the source and the text patching built on them.

Offsets are byte offsets into the UTF-8 encoding of the source, which is
what the parse tree reports. Text only leaves this module decoded.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceSpan:
    """Half-open span [start, end) into the encoded source."""

    start: int
    end: int


@dataclass(frozen=True)
class Replacement:
    """Replace the bytes covered by `span` with `text`."""

    span: SourceSpan
    text: str


def node_span(node) -> SourceSpan:
    """Span of a parse tree node."""
    return SourceSpan(node.start_byte, node.end_byte)


def extract(src: bytes, span: SourceSpan) -> str:
    """Source text covered by span, verbatim."""
    return src[span.start : span.end].decode("utf-8")


def node_text(src: bytes, node) -> str:
    return extract(src, node_span(node))


def apply_replacements(
    src: bytes, replacements: list[Replacement], span: SourceSpan | None = None
) -> str:
    """Splice replacements into src and return the decoded result.

    Replacements are applied from the highest start offset down, so the
    offsets of those still pending stay valid against the original source.
    With `span`, only that window is rendered; every replacement must lie
    inside it.
    """
    base = 0
    limit = len(src)
    out = src
    if span is not None:
        base = span.start
        limit = span.end
        out = src[span.start : span.end]
    ordered = sorted(replacements, key=lambda r: r.span.start, reverse=True)
    for rep in ordered:
        assert rep.span.end <= limit, "overlapping replacements"
        assert base <= rep.span.start <= rep.span.end, "replacement outside span"
        start = rep.span.start - base
        end = rep.span.end - base
        out = out[:start] + rep.text.encode("utf-8") + out[end:]
        limit = rep.span.start
    return out.decode("utf-8")
