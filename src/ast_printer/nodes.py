"""
The node capabilities the printer relies on.

Nothing here requires a common base class: any object with an integer `type`, a `text` (may be None) and some way of
reaching its children can be printed. Children are found either through a `children` iterable or, for ANTLR2 style
trees, by following `first_child` and then `next_sibling` links.
"""
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Iterator
from typing import List
from typing import Optional
from typing import Protocol
from typing import runtime_checkable

from typing_extensions import Self

__all__ = [
    "TreeNode",
    "SiblingLinkedNode",
    "DisplayableNode",
    "iter_children",
    "has_next_sibling",
    "SimpleNode",
    "DisplayableSimpleNode",
]


# noinspection PyPropertyDefinition
@runtime_checkable
class TreeNode(Protocol):
    @property
    def type(self) -> int:
        ...

    @property
    def text(self) -> Optional[str]:
        ...


# noinspection PyPropertyDefinition
@runtime_checkable
class SiblingLinkedNode(TreeNode, Protocol):
    @property
    def first_child(self) -> Optional["SiblingLinkedNode"]:
        ...

    @property
    def next_sibling(self) -> Optional["SiblingLinkedNode"]:
        ...


@runtime_checkable
class DisplayableNode(Protocol):
    """A node which can supply extra text to show after its label"""

    def get_display_text(self) -> str:
        ...


def iter_children(node: Any) -> Iterator[Any]:
    """
    Yield the children of node in order. A node exposing neither `children` nor `first_child` is a leaf
    """
    children = getattr(node, "children", None)
    if children is not None:
        yield from children
        return

    child = getattr(node, "first_child", None)
    while child is not None:
        yield child
        child = getattr(child, "next_sibling", None)


def has_next_sibling(node: Any) -> bool:
    """Only sibling-linked nodes know about their siblings. Nodes held in a `children` list are always reported last"""
    return isinstance(node, SiblingLinkedNode) and node.next_sibling is not None


@dataclass
class SimpleNode:
    """Plain tree node for building trees by hand"""

    type: int
    text: Optional[str] = None
    children: List["SimpleNode"] = field(default_factory=list)

    def add_child(self, child: "SimpleNode") -> Self:
        self.children.append(child)
        return self


@dataclass
class DisplayableSimpleNode(SimpleNode):
    display_text: str = ""

    def get_display_text(self) -> str:
        return self.display_text
