"""Content capability

Anything placed in a leaf must be able to take a size and to report its
current display. The engine only talks to content through this protocol.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from termboxer import config


@runtime_checkable
class Content(Protocol):
    """Renderable leaf content.

    ``resize`` is called with the leaf's extent right before ``view``.
    ``view`` returns the display as a list of lines, or as a single string
    with lines separated by newlines.
    """

    def resize(self, width: int, height: int) -> None: ...

    def view(self) -> Sequence[str] | str: ...


class StaticContent:
    """Fixed text that ignores its size.

    Useful for labels and status lines; the engine still enforces that the
    text fits the leaf.
    """

    def __init__(self, text: str = ""):
        self.text = text
        self.width = 0
        self.height = 0

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def view(self) -> list[str]:
        if not self.text:
            return []
        return self.text.split(config.NEWLINE)

    def __repr__(self) -> str:
        return f"StaticContent({self.text!r})"
