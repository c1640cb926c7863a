"""Pytest configuration for the js2genexpr test suite."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so tests run without an install
sys.path.insert(0, str(Path(__file__).parent.parent))

from js2genexpr.frontend.functions import top_level_functions  # noqa: E402
from js2genexpr.frontend.parse import parse  # noqa: E402


@pytest.fixture
def find_fn():
    """Parse source and return (tree, node) for the named top-level function."""

    def _find(source: str, name: str):
        tree = parse(source)
        for node in top_level_functions(tree.root):
            fn_name = node.child_by_field_name("name")
            if tree.src[fn_name.start_byte : fn_name.end_byte].decode() == name:
                return tree, node
        raise ValueError(f"no fn {name}")

    return _find
