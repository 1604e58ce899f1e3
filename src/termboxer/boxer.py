"""Boxer - root holder of a layout tree

Owns the tree and the last viewport size reported by the host. The host
forwards size changes through ``update_size`` and asks for the composed
screen with ``view``.
"""

from collections.abc import Callable

from pydantic import BaseModel, Field

from termboxer import config
from termboxer.core import editor
from termboxer.core.content import Content
from termboxer.core.engine import render
from termboxer.core.errors import InsufficientSpaceError, LayoutError, StructuralError
from termboxer.core.node import Node
from termboxer.telemetry import get_logger, metrics

logger = get_logger(__name__)


class SizeUpdate(BaseModel):
    """Viewport size notice from the host, in character cells"""

    width: int = Field(ge=1)
    height: int = Field(ge=1)


class Boxer:
    """Layout tree container

    Usage:
        boxer = Boxer()
        boxer.layout_tree = Node.split([
            boxer.create_leaf("left", left),
            boxer.create_leaf("right", right),
        ])
        boxer.update_size(80, 24)
        print(boxer.view())
    """

    def __init__(self, layout_tree: Node | None = None):
        self.layout_tree = layout_tree
        self.width = 0
        self.height = 0
        self._leaf_names: set[str] = set()

    @property
    def leaf_names(self) -> set[str]:
        """Names registered through ``create_leaf``"""
        return set(self._leaf_names)

    @property
    def is_sized(self) -> bool:
        return self.width > 0 and self.height > 0

    def create_leaf(self, name: str, content: Content) -> Node:
        """Create a leaf whose name is unique among this Boxer's leaves.

        Raises:
            StructuralError: empty name, missing content or name already used
        """
        if name in self._leaf_names:
            raise StructuralError(f"leaf name '{name}' is already in use")
        leaf = Node.leaf(name, content)
        self._leaf_names.add(name)
        return leaf

    def update_size(self, width: int, height: int) -> None:
        """Store a new viewport size; used verbatim by the next ``view``.

        Raises:
            pydantic.ValidationError: width or height below 1
        """
        size = SizeUpdate(width=width, height=height)
        self.width, self.height = size.width, size.height
        metrics.gauge("viewport.width", size.width)
        metrics.gauge("viewport.height", size.height)
        logger.debug(f"[Boxer] size updated: {size.width}x{size.height}")

    def render_lines(self) -> list[str]:
        """Render the tree at the stored size.

        Raises:
            StructuralError: no layout tree assigned
            LayoutError: any layout failure in the tree
        """
        if self.layout_tree is None:
            raise StructuralError("no layout tree to render")
        try:
            lines = render(self.layout_tree, self.width, self.height)
        except LayoutError as e:
            metrics.inc("render.fail", {"error": type(e).__name__})
            raise
        metrics.inc("render.ok")
        return lines

    def view(self) -> str:
        """Composed screen, or a placeholder before the first size update.

        Raises:
            LayoutError: any layout failure in the tree
        """
        if not self.is_sized:
            return config.WAITING_MESSAGE
        return config.NEWLINE.join(self.render_lines())

    def safe_view(self) -> str:
        """Like ``view`` but shows a fallback message when space runs out.

        Only InsufficientSpaceError is turned into the fallback; any other
        layout error still propagates.
        """
        try:
            return self.view()
        except InsufficientSpaceError as e:
            logger.warning(f"[Boxer] not enough space at {self.width}x{self.height}: {e}")
            return config.INSUFFICIENT_SPACE_MESSAGE

    def get_content(self, name: str) -> Content:
        """Content of the first leaf called ``name``.

        Raises:
            KeyError: no such leaf
        """
        if self.layout_tree is not None:
            leaves = editor.find_leaves(self.layout_tree, name)
            if leaves:
                return leaves[0].content
        raise KeyError(name)

    def edit_content(self, name: str, fn: Callable[[Content], Content | None]) -> int:
        """Apply ``fn`` to the content of every leaf called ``name``.

        Returns:
            Number of leaves edited
        """
        if self.layout_tree is None:
            return 0
        return editor.edit_content_by_name(self.layout_tree, name, fn)
