"""Layout tree nodes

A node is either a leaf wrapping one Content, or an internal node that
splits its extent among ordered children along one axis.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .errors import StructuralError

if TYPE_CHECKING:
    from .content import Content

# (node, extent along the split axis) -> one extent per visible child
SizeFunc = Callable[["Node", int], Sequence[int]]


class NodeKind(Enum):
    """Node variant tag"""

    LEAF = "leaf"
    INTERNAL = "internal"


class Orientation(Enum):
    """Split direction of an internal node

    - HORIZONTAL: children left to right, split axis is the width
    - VERTICAL: children top to bottom, split axis is the height
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def is_vertical(self) -> bool:
        return self is Orientation.VERTICAL


@dataclass
class Node:
    """Layout tree node

    Build nodes with ``Node.leaf`` and ``Node.split`` rather than calling
    the constructor directly.

    Attributes:
        kind: LEAF or INTERNAL
        name: Leaf address; optional for internal nodes
        content: Leaf content (leaves only)
        children: Ordered children (internal nodes only)
        orientation: Split direction (internal nodes only)
        draw_border: Draw single-cell separators between children
        size_func: Custom distributor, defaults to an even split
        hidden: Exclude this node and its subtree from layout
    """

    kind: NodeKind
    name: str = ""
    content: "Content | None" = None
    children: list["Node"] = field(default_factory=list)
    orientation: Orientation = Orientation.HORIZONTAL
    draw_border: bool = False
    size_func: SizeFunc | None = None
    hidden: bool = False

    def __post_init__(self):
        if self.kind is NodeKind.LEAF:
            if not self.name:
                raise StructuralError("a leaf needs a non-empty name")
            if self.content is None:
                raise StructuralError(f"leaf '{self.name}' has no content")
            if self.children:
                raise StructuralError(f"leaf '{self.name}' cannot have children")
            if self.size_func is not None or self.draw_border:
                raise StructuralError(f"leaf '{self.name}' cannot split space")
        else:
            if self.content is not None:
                raise StructuralError("an internal node cannot hold content")
            if not self.children:
                raise StructuralError(
                    "an internal node needs at least one child, use a leaf instead"
                )

    @classmethod
    def leaf(cls, name: str, content: "Content", hidden: bool = False) -> "Node":
        """Create a leaf binding ``name`` to ``content``."""
        return cls(kind=NodeKind.LEAF, name=name, content=content, hidden=hidden)

    @classmethod
    def split(
        cls,
        children: Sequence["Node"],
        orientation: Orientation = Orientation.HORIZONTAL,
        draw_border: bool = False,
        size_func: SizeFunc | None = None,
        name: str = "",
        hidden: bool = False,
    ) -> "Node":
        """Create an internal node over ``children``."""
        return cls(
            kind=NodeKind.INTERNAL,
            name=name,
            children=list(children),
            orientation=orientation,
            draw_border=draw_border,
            size_func=size_func,
            hidden=hidden,
        )

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    @property
    def visible_children(self) -> list["Node"]:
        """Non-hidden children in display order"""
        return [child for child in self.children if not child.hidden]

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"Node.leaf({self.name!r})"
        return (
            f"Node.split({self.orientation.value}, name={self.name!r}, "
            f"children={len(self.children)})"
        )
