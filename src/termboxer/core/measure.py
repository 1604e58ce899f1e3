"""Display width measurement for terminal lines.

Widths are in terminal cells: ANSI escape sequences take no space and
wide (CJK, fullwidth, most emoji) characters take two.
"""

from rich.cells import cell_len
from rich.text import Text

from termboxer import config


def display_width(line: str) -> int:
    """Printable width of ``line`` in cells."""
    if "\x1b" in line:
        return Text.from_ansi(line).cell_len
    return cell_len(line)


def pad_line(line: str, width: int, fill: str = config.FILL_CHAR) -> str:
    """Right-pad ``line`` with ``fill`` up to ``width`` cells.

    The caller guarantees the line is not wider than ``width``.
    """
    missing = width - display_width(line)
    if missing <= 0:
        return line
    return line + fill * missing


def blank_line(width: int, fill: str = config.FILL_CHAR) -> str:
    return fill * width
