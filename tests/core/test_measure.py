"""Tests for core.measure"""

from termboxer.core.measure import blank_line, display_width, pad_line


class TestDisplayWidth:
    """display_width"""

    def test_ascii(self):
        assert display_width("hello") == 5

    def test_empty(self):
        assert display_width("") == 0

    def test_wide_characters_take_two_cells(self):
        assert display_width("中文") == 4

    def test_mixed(self):
        assert display_width("a中b") == 4

    def test_ansi_escapes_take_no_space(self):
        assert display_width("\x1b[31mred\x1b[0m") == 3

    def test_box_drawing_is_single_cell(self):
        assert display_width("─│") == 2


class TestPadding:
    """pad_line / blank_line"""

    def test_pad_ascii(self):
        assert pad_line("ab", 5) == "ab   "

    def test_pad_wide(self):
        """Padding counts cells, not characters"""
        assert pad_line("中", 4) == "中  "

    def test_pad_ansi(self):
        line = "\x1b[1mab\x1b[0m"
        assert pad_line(line, 4) == line + "  "

    def test_exact_width_unchanged(self):
        assert pad_line("abc", 3) == "abc"

    def test_custom_fill(self):
        assert pad_line("a", 3, fill=".") == "a.."

    def test_blank_line(self):
        assert blank_line(3) == "   "
        assert blank_line(0) == ""
