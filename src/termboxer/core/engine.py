"""Recursive layout engine

Renders a node tree bottom-up into exactly ``height`` lines of exactly
``width`` cells:

- leaves: resize content, fetch its lines, check they fit, pad
- internal nodes: reserve separator cells, distribute the split axis,
  render children, compose them (stacked or side by side)

Failures are raised as LayoutError subclasses. On the way up every
internal node adds a PathFrame to the error.
"""

from collections.abc import Iterable

from termboxer import config
from termboxer.telemetry import format_node_log, get_logger, metrics

from .distribute import border_cost, distribute
from .errors import (
    ContentError,
    ContentOverflowError,
    InsufficientSpaceError,
    LayoutError,
    PathFrame,
    StructuralError,
)
from .measure import blank_line, display_width, pad_line
from .node import Node

logger = get_logger(__name__)


def render(node: Node, width: int, height: int) -> list[str]:
    """Render ``node`` into a ``width`` x ``height`` block of lines.

    Raises:
        LayoutError: any layout failure in the subtree
    """
    if width <= 0 or height <= 0:
        raise InsufficientSpaceError(
            f"cannot render node '{node.name}' at {width}x{height}"
        )
    if node.is_leaf:
        return _render_leaf(node, width, height)
    return _render_internal(node, width, height)


def _render_leaf(node: Node, width: int, height: int) -> list[str]:
    content = node.content
    try:
        content.resize(width, height)
        lines = _view_lines(content.view())
    except LayoutError:
        raise
    except Exception as e:
        raise ContentError(f"content of leaf '{node.name}' failed: {e}", leaf=node.name) from e

    metrics.inc("leaf.render")

    if len(lines) > height:
        raise ContentOverflowError(
            f"content of leaf '{node.name}' has too many lines: {len(lines)} > {height}",
            leaf=node.name,
            axis="height",
            actual=len(lines),
            allowed=height,
        )

    block = []
    for index, line in enumerate(lines):
        line_width = display_width(line)
        if line_width > width:
            raise ContentOverflowError(
                f"content of leaf '{node.name}' has a too wide line {index}: "
                f"{line_width} > {width}",
                leaf=node.name,
                axis="width",
                actual=line_width,
                allowed=width,
            )
        block.append(pad_line(line, width))

    block.extend(blank_line(width) for _ in range(height - len(block)))
    return block


def _view_lines(raw) -> list[str]:
    """Normalise a content view to single lines.

    Embedded newlines are split so every entry is exactly one screen row.

    Raises:
        TypeError: view is neither a str nor an iterable of str
    """
    if isinstance(raw, str):
        return raw.split(config.NEWLINE)
    if raw is None or not isinstance(raw, Iterable):
        raise TypeError(f"view() returned {type(raw).__name__}, expected str or a sequence of str")
    lines: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            raise TypeError(f"view() returned a non-str line {item!r}")
        lines.extend(item.split(config.NEWLINE))
    return lines


def _render_internal(node: Node, width: int, height: int) -> list[str]:
    visible = [(i, child) for i, child in enumerate(node.children) if not child.hidden]
    if not visible:
        raise StructuralError(
            f"node '{node.name}' has no visible children - it should be a leaf or be hidden"
        )

    vertical = node.orientation.is_vertical
    axis_extent = height if vertical else width
    available = axis_extent - border_cost(node)
    if available <= 0:
        raise InsufficientSpaceError(
            f"node '{node.name}' has {axis_extent} cells along its "
            f"{node.orientation.value} axis, not enough for {len(visible)} children"
        )

    extents = distribute(node, available)
    logger.debug(
        format_node_log(
            "Engine", node.name, f"{node.orientation.value} {width}x{height} -> {extents}"
        )
    )

    blocks: list[list[str]] = []
    used = 0
    for (index, child), extent in zip(visible, extents):
        if extent == 0:
            continue
        child_width, child_height = (width, extent) if vertical else (extent, height)
        try:
            blocks.append(render(child, child_width, child_height))
        except LayoutError as err:
            err.add_frame(PathFrame(index, node.orientation, node.name))
            raise
        used += extent

    if node.draw_border:
        used += len(blocks) - 1

    if vertical:
        return _compose_vertical(node, blocks, width, height - used)
    return _compose_horizontal(node, blocks, width - used)


def _compose_vertical(node: Node, blocks: list[list[str]], width: int, slack: int) -> list[str]:
    separator = config.HORIZONTAL_SEPARATOR * width
    lines: list[str] = []
    for i, block in enumerate(blocks):
        if i and node.draw_border:
            lines.append(separator)
        lines.extend(block)
    # unused separator rows (zero-height children) become blank lines
    lines.extend(blank_line(width) for _ in range(slack))
    return lines


def _compose_horizontal(node: Node, blocks: list[list[str]], slack: int) -> list[str]:
    joiner = config.VERTICAL_SEPARATOR if node.draw_border else ""
    tail = blank_line(slack)
    return [joiner.join(row) + tail for row in zip(*blocks)]
