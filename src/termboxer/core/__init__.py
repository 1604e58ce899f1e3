"""Core module - layout tree, distribution and rendering"""

from .content import Content, StaticContent
from .distribute import border_cost, distribute, even_split
from .editor import edit_content_by_name, find_leaves, iter_nodes, leaf_names, set_hidden, visit
from .engine import render
from .errors import (
    ContentError,
    ContentOverflowError,
    DistributionShapeError,
    DistributionSumError,
    InsufficientSpaceError,
    LayoutError,
    PathFrame,
    StructuralError,
)
from .measure import display_width
from .node import Node, NodeKind, Orientation, SizeFunc

__all__ = [
    "Content",
    "StaticContent",
    "Node",
    "NodeKind",
    "Orientation",
    "SizeFunc",
    "even_split",
    "border_cost",
    "distribute",
    "render",
    "display_width",
    "visit",
    "iter_nodes",
    "edit_content_by_name",
    "find_leaves",
    "leaf_names",
    "set_hidden",
    "LayoutError",
    "PathFrame",
    "InsufficientSpaceError",
    "DistributionShapeError",
    "DistributionSumError",
    "ContentOverflowError",
    "StructuralError",
    "ContentError",
]
