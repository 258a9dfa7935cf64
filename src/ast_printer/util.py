from typing import List
from typing import Optional
from typing import TypeVar

__all__ = ["not_optional", "unqualify", "append_escaped_multibyte_chars", "escape_multibyte_chars"]

_T = TypeVar("_T")

_MULTIBYTE_THRESHOLD = 256
"""Characters with a code point strictly greater than this are escaped"""


def not_optional(val: Optional[_T]) -> _T:
    """Raise TypeError if the given value is None"""
    if val is None:
        raise TypeError("Value cannot be None")
    return val


def unqualify(qualified_name: str) -> str:
    """Strip everything up to and including the last '.' (e.g. 'pkg.mod.Node' -> 'Node')"""
    return qualified_name.rpartition(".")[2]


def append_escaped_multibyte_chars(text: str, buf: List[str]) -> None:
    """
    Append the given text to buf, replacing every character above the multibyte threshold with a `\\u` escape of its
    code point in lowercase hex (no padding)
    """
    for ch in text:
        code_point = ord(ch)
        if code_point > _MULTIBYTE_THRESHOLD:
            buf.append(f"\\u{code_point:x}")
        else:
            buf.append(ch)


def escape_multibyte_chars(text: str) -> str:
    buf: List[str] = []
    append_escaped_multibyte_chars(text, buf)
    return "".join(buf)
