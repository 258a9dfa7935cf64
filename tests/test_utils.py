import pytest

from ast_printer.util import append_escaped_multibyte_chars
from ast_printer.util import escape_multibyte_chars
from ast_printer.util import not_optional
from ast_printer.util import unqualify


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("plain ascii", "plain ascii"),
        ("caf\u00e9", "caf\u00e9"),
        # 256 itself is left alone, only code points above it are escaped
        ("\u0100", "\u0100"),
        ("\u0101", "\\u101"),
        ("snow\u2603man", "snow\\u2603man"),
        ("\u00ff\u4e2d", "\u00ff\\u4e2d"),
        # Characters outside the BMP are escaped as a single code point
        ("\U0001f600", "\\u1f600"),
        ("\u00c0\u03a9", "\u00c0\\u3a9"),
    ],
)
def test_escape_multibyte_chars(text: str, expected: str) -> None:
    assert escape_multibyte_chars(text) == expected


def test_append_escaped_multibyte_chars_appends_to_existing_buffer() -> None:
    buf = ["'"]
    append_escaped_multibyte_chars("x\u2603", buf)
    buf.append("'")
    assert "".join(buf) == "'x\\u2603'"


@pytest.mark.parametrize(
    ("qualified_name", "expected"),
    [
        ("Node", "Node"),
        ("pkg.module.Node", "Node"),
        ("test_func.<locals>.Node", "Node"),
        ("", ""),
    ],
)
def test_unqualify(qualified_name: str, expected: str) -> None:
    assert unqualify(qualified_name) == expected


def test_not_optional() -> None:
    assert not_optional(0) == 0
    with pytest.raises(TypeError):
        not_optional(None)
