"""Size distribution along a node's split axis.

``even_split`` is the default policy. Custom size functions attached to a
node are validated by ``distribute`` right after every call.
"""

from .errors import DistributionShapeError, DistributionSumError, LayoutError
from .node import Node


def even_split(node: Node, extent: int) -> list[int]:
    """Split ``extent`` evenly among the visible children.

    The remainder goes one unit at a time to the leading children, so the
    result always sums to ``extent`` and no two entries differ by more
    than one.
    """
    count = len(node.visible_children)
    if count == 0:
        return []
    base, remainder = divmod(extent, count)
    return [base + 1 if i < remainder else base for i in range(count)]


def border_cost(node: Node) -> int:
    """Cells reserved for separators along the split axis."""
    if not node.draw_border:
        return 0
    return max(len(node.visible_children) - 1, 0)


def distribute(node: Node, extent: int) -> list[int]:
    """Extents for each visible child of ``node``.

    Raises:
        DistributionShapeError: not a sequence, wrong entry count, or an
            entry that is not a non-negative int
        DistributionSumError: entries do not sum to ``extent``
        LayoutError: the size function itself raised
    """
    size_func = node.size_func or even_split
    try:
        result = size_func(node, extent)
    except LayoutError:
        raise
    except Exception as e:
        raise LayoutError(f"size function of node '{node.name}' failed: {e}") from e

    try:
        extents = list(result)
    except TypeError as e:
        raise DistributionShapeError(
            f"size function of node '{node.name}' returned {type(result).__name__}, "
            f"expected a sequence of extents"
        ) from e

    expected = len(node.visible_children)
    if len(extents) != expected:
        raise DistributionShapeError(
            f"size function of node '{node.name}' returned {len(extents)} extents "
            f"for {expected} visible children",
            expected=expected,
            actual=len(extents),
        )

    for i, value in enumerate(extents):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise DistributionShapeError(
                f"size function of node '{node.name}' returned invalid extent "
                f"{value!r} at position {i}"
            )

    total = sum(extents)
    if total != extent:
        raise DistributionSumError(
            f"size function of node '{node.name}' returned extents {extents} "
            f"summing to {total}, expected {extent}",
            expected=extent,
            actual=total,
            extents=extents,
        )
    return extents
