from ._version import version as __version__

__all__ = [
    "__version__",
    "AstPrinter",
    "TokenNameTable",
    "build_token_name_table",
    "resolve_token_name",
    "escape_multibyte_chars",
    "TreeNode",
    "DisplayableNode",
    "SimpleNode",
    "DisplayableSimpleNode",
]

from .nodes import (
    DisplayableNode,
    DisplayableSimpleNode,
    SimpleNode,
    TreeNode,
)
from .printer import AstPrinter
from .tokens import (
    build_token_name_table,
    resolve_token_name,
    TokenNameTable,
)
from .util import escape_multibyte_chars
