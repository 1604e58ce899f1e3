"""Demo: classic five-pane layout

    +-----------------------+
    |         upper         |
    +-------+-------+-------+
    | left  |middle | right |
    +-------+-------+-------+
    |         lower         |
    +-----------------------+

Renders once at the current terminal size (or --width/--height) and
prints the result.
"""

import argparse
import shutil

from rich.console import Console

from termboxer import config
from termboxer.boxer import Boxer
from termboxer.core import InsufficientSpaceError, Node, Orientation
from termboxer.telemetry import get_logger, setup_logging

logger = get_logger(__name__)

UPPER = "upper"
LEFT = "left"
MIDDLE = "middle"
RIGHT = "right"
LOWER = "lower"


class SizeLabel:
    """Shows its own name and the size it was given"""

    def __init__(self, label: str):
        self.label = label
        self.width = 0
        self.height = 0

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def view(self) -> list[str]:
        text = f"{self.label} {self.width}x{self.height}"
        return [text[: self.width]]


def header_footer_split(node: Node, height: int) -> list[int]:
    """One line for the header and footer, the rest for the body"""
    if height < 3:
        raise InsufficientSpaceError(f"body needs at least 3 lines, got {height}")
    return [1, height - 2, 1]


def build_boxer() -> Boxer:
    boxer = Boxer()
    boxer.layout_tree = Node.split(
        [
            boxer.create_leaf(UPPER, SizeLabel("termboxer demo")),
            Node.split(
                [
                    boxer.create_leaf(LEFT, SizeLabel(LEFT)),
                    boxer.create_leaf(MIDDLE, SizeLabel(MIDDLE)),
                    boxer.create_leaf(RIGHT, SizeLabel(RIGHT)),
                ],
                orientation=Orientation.HORIZONTAL,
                draw_border=True,
                name="body",
            ),
            boxer.create_leaf(LOWER, SizeLabel(LOWER)),
        ],
        orientation=Orientation.VERTICAL,
        size_func=header_footer_split,
        name="root",
    )
    return boxer


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Render the termboxer demo layout once")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    args = parser.parse_args(argv)

    setup_logging(config.LOG_LEVEL)

    terminal = shutil.get_terminal_size()
    width = args.width or terminal.columns
    height = args.height or max(terminal.lines - 1, 1)

    boxer = build_boxer()
    boxer.update_size(width, height)
    logger.debug(f"[Demo] rendering at {width}x{height}")

    console = Console(highlight=False)
    console.print(boxer.safe_view(), markup=False, soft_wrap=True)


if __name__ == "__main__":
    main()
