"""Tests for patch synthesis from `main`."""

import logging

import pytest

from js2genexpr import ConvertError, Options, PatchSynthesizer, convert_to_genexpr


def test_default_params_scenario():
    source = (
        "function multiply(a, b=2) { return a * b; }\n"
        "function main(x, y=3) { return multiply(x, y); }"
    )
    assert convert_to_genexpr(source) == (
        "multiply(a, b=2) { return a * b; }\n\nParam y(3);\nx = in1;\n\nout1 = multiply(x, y);"
    )


def test_multi_output_scenario():
    source = (
        "function calc(x, y) { return x * y + 1; }\n"
        "function main(a, b, c=5) { let d = c * a * b; return [calc(a, b), d, a + b + c]; }"
    )
    assert convert_to_genexpr(source) == (
        "calc(x, y) { return x * y + 1; }\n\nParam c(5);\na = in1;\nb = in2;\n\n"
        "d = c * a * b;\nout1 = calc(a, b);\nout2 = d;\nout3 = a + b + c;"
    )


def test_empty_input():
    assert convert_to_genexpr("") == ""


def test_no_function_declarations():
    assert convert_to_genexpr("let a = 1;\nconsole.log(a);") == ""


def test_param_lines_numbering(find_fn):
    tree, node = find_fn("function main(a, b=1, c, d=2, e) { return a; }", "main")
    lines = PatchSynthesizer(tree.src, node).param_lines()
    assert lines == ["Param b(1);", "Param d(2);", "a = in1;", "c = in2;", "e = in3;"]


def test_output_lines_scalar(find_fn):
    tree, node = find_fn("function main(a) { return Math.max(a, 0); }", "main")
    ret = node.child_by_field_name("body").named_children[0]
    assert PatchSynthesizer(tree.src, node).output_lines(ret) == ["out1 = Math.max(a, 0);"]


def test_output_lines_bare_return(find_fn):
    tree, node = find_fn("function main(a) { a = 2; return; }", "main")
    assert PatchSynthesizer(tree.src, node).synthesize() == "a = in1;\n\na = 2;"


@pytest.mark.parametrize("n", [1, 2, 4])
def test_output_numbering(n: int):
    elements = [f"x * {i}" for i in range(n)]
    source = "function main(x) { return [" + ", ".join(elements) + "]; }"
    out = convert_to_genexpr(source).split("\n\n")[1].split("\n")
    assert out == [f"out{i + 1} = x * {i};" for i in range(n)]


def test_nested_return_rejected():
    source = "function main(a) { if (a) { return [a]; } return 0; }"
    with pytest.raises(ConvertError) as info:
        convert_to_genexpr(source)
    assert "return nested inside 'main'" in info.value.msg


def test_destructuring_declaration_rejected():
    with pytest.raises(ConvertError):
        convert_to_genexpr("function main(a) { let [b, c] = a; return b; }")


def test_statements_after_return_dropped(caplog):
    source = "function main(a) { return a; a = 2; }"
    with caplog.at_level(logging.WARNING, logger="js2genexpr.backend.patch"):
        assert convert_to_genexpr(source) == "a = in1;\n\nout1 = a;"
    assert "unreachable" in caplog.text


def test_duplicate_main_ignored(caplog):
    source = "function main(a) { return a; }\nfunction main(b) { return b; }"
    with caplog.at_level(logging.WARNING, logger="js2genexpr.backend.patch"):
        assert convert_to_genexpr(source) == "a = in1;\n\nout1 = a;"
    assert "duplicate" in caplog.text


def test_main_name_option():
    source = "function helper(v) { return v; }\nfunction patch(x) { return helper(x); }"
    expected = "helper(v) { return v; }\n\nx = in1;\n\nout1 = helper(x);"
    assert convert_to_genexpr(source, Options(main_name="patch")) == expected


def test_main_name_pragma():
    source = "// pragma main dsp\nfunction dsp(x) { return x; }"
    assert convert_to_genexpr(source) == "x = in1;\n\nout1 = x;"


def test_empty_main_only_declarations():
    source = "function f(a) { return a; }\nfunction main() {}"
    assert convert_to_genexpr(source) == "f(a) { return a; }"


def test_empty_statements_dropped():
    assert convert_to_genexpr("function main(a) { ;; return a; }") == "a = in1;\n\nout1 = a;"


def test_non_literal_main_default_strict():
    source = "function main(a, b = a * 2) { return b; }"
    assert convert_to_genexpr(source) == "Param b(a * 2);\na = in1;\n\nout1 = b;"
    with pytest.raises(ConvertError):
        convert_to_genexpr(source, Options(strict_defaults=True))


def test_array_holes_in_main_rejected():
    with pytest.raises(ConvertError):
        convert_to_genexpr("function main(a, b) { return [a, , b]; }")


def test_loop_heads_keywords_stripped():
    source = "function main(a) { let s = 0; for (const k of a) { s += k; } return s; }"
    assert convert_to_genexpr(source) == "a = in1;\n\ns = 0;\nfor (k of a) { s += k; }\nout1 = s;"


def test_exported_main_warned(caplog):
    with caplog.at_level(logging.WARNING, logger="js2genexpr.backend.genexpr"):
        assert convert_to_genexpr("export function main(x) { return x; }") == ""
    assert "exported function 'main'" in caplog.text
