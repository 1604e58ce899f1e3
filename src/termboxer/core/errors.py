"""Layout error taxonomy

Every failure raised by the engine derives from LayoutError. Errors raised
inside a subtree travel up unchanged in type; each internal node on the way
appends a PathFrame so the route from the root to the failing node can be
reconstructed from ``err.path``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Orientation


@dataclass(frozen=True)
class PathFrame:
    """One step of an error path: child ``index`` of an internal node."""

    index: int
    orientation: "Orientation"
    name: str = ""

    def __str__(self) -> str:
        label = f"{self.orientation.value}[{self.index}]"
        if self.name:
            return f"{self.name}:{label}"
        return label


class LayoutError(Exception):
    """Base class for all layout failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.path: list[PathFrame] = []

    def add_frame(self, frame: PathFrame) -> None:
        """Record the enclosing node; called while unwinding, so frames arrive leaf first."""
        self.path.insert(0, frame)

    @property
    def location(self) -> str:
        return " > ".join(str(frame) for frame in self.path)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.message} (at {self.location})"


class InsufficientSpaceError(LayoutError):
    """Not enough room left after border reservation.

    Recoverable: expected on small viewports, the host should show a
    fallback until the viewport grows.
    """


class DistributionShapeError(LayoutError):
    """A size function returned the wrong number of entries, or invalid ones."""

    def __init__(self, message: str, expected: int | None = None, actual: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DistributionSumError(LayoutError):
    """A size function's entries do not add up to the available extent."""

    def __init__(self, message: str, expected: int, actual: int, extents: list[int]):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.extents = extents


class ContentOverflowError(LayoutError):
    """A leaf produced more lines, or wider lines, than its extent allows."""

    def __init__(self, message: str, leaf: str, axis: str, actual: int, allowed: int):
        super().__init__(message)
        self.leaf = leaf
        self.axis = axis
        self.actual = actual
        self.allowed = allowed


class StructuralError(LayoutError):
    """Malformed tree: empty internal node, bad leaf, duplicate leaf name."""


class ContentError(LayoutError):
    """A content object raised while resizing or rendering; see ``__cause__``."""

    def __init__(self, message: str, leaf: str):
        super().__init__(message)
        self.leaf = leaf
