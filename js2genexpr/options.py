"""Conversion options and the source pragmas that set them."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_MAIN = "main"


@dataclass(frozen=True)
class Options:
    """Per-call configuration.

    strict_defaults: reject parameter defaults that are not literals instead
    of copying their text through.
    main_name: function rendered as the patch body in patch mode.
    """

    strict_defaults: bool = False
    main_name: str = DEFAULT_MAIN


def extract_pragmas(source: str) -> dict[str, str]:
    """Scan leading comment lines for `// pragma ...` directives."""
    pragmas: dict[str, str] = {}
    for line in source.split("\n"):
        stripped = line.strip()
        if stripped == "":
            continue
        if not stripped.startswith("//"):
            break
        body = stripped[2:].strip()
        if not body.startswith("pragma "):
            continue
        words = body[len("pragma ") :].split()
        if len(words) == 0:
            continue
        pragmas[words[0]] = " ".join(words[1:])
    return pragmas


def resolve_options(source: str, options: Options | None) -> Options:
    """Merge caller options with pragmas found at the top of source."""
    opts = options if options is not None else Options()
    pragmas = extract_pragmas(source)
    if "strict-defaults" in pragmas:
        opts = replace(opts, strict_defaults=True)
    main = pragmas.get("main", "")
    if main != "" and opts.main_name == DEFAULT_MAIN:
        opts = replace(opts, main_name=main)
    return opts
