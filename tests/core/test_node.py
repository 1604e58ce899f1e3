"""Tests for core.node"""

import pytest

from termboxer.core.content import Content, StaticContent
from termboxer.core.errors import StructuralError
from termboxer.core.node import Node, NodeKind, Orientation


class TestLeaf:
    """Leaf construction"""

    def test_create_leaf(self):
        content = StaticContent("hi")
        leaf = Node.leaf("a", content)

        assert leaf.kind is NodeKind.LEAF
        assert leaf.is_leaf is True
        assert leaf.name == "a"
        assert leaf.content is content
        assert leaf.children == []
        assert leaf.hidden is False

    def test_empty_name_rejected(self):
        with pytest.raises(StructuralError, match="non-empty name"):
            Node.leaf("", StaticContent())

    def test_missing_content_rejected(self):
        with pytest.raises(StructuralError, match="no content"):
            Node.leaf("a", None)

    def test_leaf_with_children_rejected(self):
        child = Node.leaf("b", StaticContent())
        with pytest.raises(StructuralError, match="cannot have children"):
            Node(kind=NodeKind.LEAF, name="a", content=StaticContent(), children=[child])

    def test_leaf_with_border_rejected(self):
        with pytest.raises(StructuralError):
            Node(kind=NodeKind.LEAF, name="a", content=StaticContent(), draw_border=True)


class TestSplit:
    """Internal node construction"""

    def test_create_split(self):
        a = Node.leaf("a", StaticContent())
        b = Node.leaf("b", StaticContent())
        node = Node.split([a, b], orientation=Orientation.VERTICAL, draw_border=True)

        assert node.kind is NodeKind.INTERNAL
        assert node.is_leaf is False
        assert node.children == [a, b]
        assert node.orientation is Orientation.VERTICAL
        assert node.draw_border is True
        assert node.size_func is None
        assert node.name == ""

    def test_default_orientation_is_horizontal(self):
        node = Node.split([Node.leaf("a", StaticContent())])
        assert node.orientation is Orientation.HORIZONTAL
        assert node.orientation.is_vertical is False

    def test_no_children_rejected(self):
        with pytest.raises(StructuralError, match="at least one child"):
            Node.split([])

    def test_internal_with_content_rejected(self):
        with pytest.raises(StructuralError, match="cannot hold content"):
            Node(
                kind=NodeKind.INTERNAL,
                content=StaticContent(),
                children=[Node.leaf("a", StaticContent())],
            )

    def test_children_list_is_copied(self):
        children = [Node.leaf("a", StaticContent())]
        node = Node.split(children)
        children.append(Node.leaf("b", StaticContent()))
        assert len(node.children) == 1

    def test_visible_children_skips_hidden(self):
        a = Node.leaf("a", StaticContent())
        b = Node.leaf("b", StaticContent(), hidden=True)
        c = Node.leaf("c", StaticContent())
        node = Node.split([a, b, c])
        assert node.visible_children == [a, c]


class TestContentProtocol:
    """Content protocol check"""

    def test_static_content_is_content(self):
        assert isinstance(StaticContent(), Content)

    def test_object_without_view_is_not_content(self):
        class OnlyResize:
            def resize(self, width, height):
                pass

        assert not isinstance(OnlyResize(), Content)

    def test_static_content_splits_lines(self):
        content = StaticContent("a\nbc")
        content.resize(4, 3)
        assert content.view() == ["a", "bc"]
        assert (content.width, content.height) == (4, 3)

    def test_empty_static_content_has_no_lines(self):
        assert StaticContent().view() == []
