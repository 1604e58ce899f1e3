"""Tree editor - locate and change nodes by name

All helpers walk the tree depth-first, parent before children, children in
display order. Hidden nodes are visited too.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from .node import Node

if TYPE_CHECKING:
    from .content import Content


def iter_nodes(tree: Node) -> Iterator[Node]:
    """Pre-order walk over ``tree``."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def visit(tree: Node, fn: Callable[[Node], None]) -> None:
    """Apply ``fn`` to every node in pre-order.

    The first exception raised by ``fn`` stops the walk and propagates.
    """
    for node in iter_nodes(tree):
        fn(node)


def edit_content_by_name(
    tree: Node, name: str, fn: Callable[["Content"], "Content | None"]
) -> int:
    """Replace the content of every leaf called ``name`` with ``fn(content)``.

    Several leaves may share a name; all of them are edited. If ``fn``
    returns None the content is assumed to be edited in place and is kept.
    If ``fn`` raises, the current leaf keeps its old content, the walk
    stops and the exception propagates.

    Returns:
        Number of leaves edited
    """
    edited = 0

    def apply(node: Node) -> None:
        nonlocal edited
        if not node.is_leaf or node.name != name:
            return
        new_content = fn(node.content)
        if new_content is not None:
            node.content = new_content
        edited += 1

    visit(tree, apply)
    return edited


def find_leaves(tree: Node, name: str) -> list[Node]:
    """All leaves called ``name``."""
    return [node for node in iter_nodes(tree) if node.is_leaf and node.name == name]


def leaf_names(tree: Node) -> list[str]:
    """Leaf names in walk order (duplicates kept)."""
    return [node.name for node in iter_nodes(tree) if node.is_leaf]


def set_hidden(tree: Node, name: str, hidden: bool = True) -> int:
    """Show or hide every node called ``name``; returns how many matched."""
    matched = 0
    for node in iter_nodes(tree):
        if name and node.name == name:
            node.hidden = hidden
            matched += 1
    return matched
