import io
import logging
from typing import Any
from typing import ClassVar
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import TextIO
from typing import Union

from more_itertools import mark_ends

from ast_printer.nodes import DisplayableNode
from ast_printer.nodes import has_next_sibling
from ast_printer.nodes import iter_children
from ast_printer.nodes import TreeNode
from ast_printer.tokens import build_token_name_table
from ast_printer.tokens import SymbolSource
from ast_printer.tokens import TokenNameTable
from ast_printer.util import append_escaped_multibyte_chars
from ast_printer.util import not_optional
from ast_printer.util import unqualify

__all__ = ["AstPrinter"]

logger = logging.getLogger(__name__)


class _PathEntry(NamedTuple):
    node: Any
    is_last: bool
    """True if node was the last child of its own parent"""


class AstPrinter:
    """
    Renders a syntax tree in 'ASCII art' form, e.g.:

    ```
     \\-[QUERY] SimpleNode: 'query'
        +-[SELECT] SimpleNode: 'select'
        |  \\-[IDENT] SimpleNode: 'a'
        \\-[FROM] SimpleNode: 'from'
    ```

    A printer holds nothing but its (immutable) token name table, so one instance can be reused for any number of
    trees, from any number of threads.

    The glyphs and placeholder strings are class variables and may be overridden in a subclass.
    """

    NULL_TREE_LINE: ClassVar[str] = "AST is null!"
    NULL_TEXT: ClassVar[str] = "{text:null}"
    NULL_NODE: ClassVar[str] = "{node:null}"
    CONNECTOR: ClassVar[str] = " +-"
    LAST_CONNECTOR: ClassVar[str] = " \\-"
    CONTINUATION: ClassVar[str] = " | "
    BLANK: ClassVar[str] = "   "

    token_names: TokenNameTable

    def __init__(self, token_names: Union[TokenNameTable, SymbolSource]) -> None:
        """
        token_names is either a ready-built table (which may be shared between printers) or any symbol source that
        `build_token_name_table()` accepts, typically the token type constants of the grammar that produced the trees
        """
        token_names = not_optional(token_names)
        if isinstance(token_names, TokenNameTable):
            self.token_names = token_names
        else:
            self.token_names = build_token_name_table(token_names)

    def token_type_name(self, code: int) -> str:
        return self.token_names.resolve(code)

    def render_to_string(self, root: Optional[TreeNode], header: str = "") -> str:
        """Return the header line followed by the rendering of the tree"""
        out = io.StringIO()
        out.write(header + "\n")
        self._render(root, out)
        return out.getvalue()

    def render_to_sink(
        self, root: Optional[TreeNode], sink: Union[TextIO, io.RawIOBase, io.BufferedIOBase], encoding: str = "utf-8"
    ) -> None:
        """
        Write the rendering of the tree to sink, one line at a time, and flush it. Binary streams receive the text
        encoded with the given encoding. The sink is never closed.
        """
        if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
            logger.debug("Wrapping binary sink %r for %s output", sink, encoding)
            # Unbuffered streams may accept only part of a write
            buffered = io.BufferedWriter(sink) if isinstance(sink, io.RawIOBase) else sink
            text_sink = io.TextIOWrapper(buffered, encoding=encoding, write_through=True)
            try:
                self._render(root, text_sink)
                text_sink.flush()
            finally:
                # Give the stream back to the caller without closing it
                if text_sink.detach() is not sink:
                    buffered.detach()
        else:
            self._render(root, sink)
        sink.flush()

    def node_label(self, node: Optional[TreeNode]) -> str:
        """
        Format the single line shown for node:

            [<token type name>] <node class name>: '<escaped text>'[ <display text>]
        """
        if node is None:
            return self.NULL_NODE

        buf: List[str] = ["[", self.token_type_name(node.type), "] ", unqualify(type(node).__qualname__), ": '"]
        text = node.text
        if text is None:
            text = self.NULL_TEXT
        append_escaped_multibyte_chars(text, buf)
        buf.append("'")
        if isinstance(node, DisplayableNode):
            buf.append(" ")
            buf.append(node.get_display_text())
        return "".join(buf)

    def _render(self, root: Optional[TreeNode], out: TextIO) -> None:
        if root is None:
            out.write(self.NULL_TREE_LINE + "\n")
            return

        # The root's own siblings are never printed, but they still decide its connector
        self._render_node(root, not has_next_sibling(root), [], out)

    def _render_node(self, node: TreeNode, is_last: bool, ancestors: List[_PathEntry], out: TextIO) -> None:
        prefix = "".join(self.BLANK if ancestor.is_last else self.CONTINUATION for ancestor in ancestors)
        connector = self.LAST_CONNECTOR if is_last else self.CONNECTOR
        out.write(prefix + connector + self.node_label(node) + "\n")

        path = ancestors + [_PathEntry(node, is_last)]
        for _, child_is_last, child in mark_ends(iter_children(node)):
            self._render_node(child, child_is_last, path, out)
