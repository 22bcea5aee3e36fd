"""Tests for pi_grid.text — column-width helpers"""
from pi_grid.text import expand_tabs, pad_to_width, truncate_to_width, visible_width, wrap_text


class TestVisibleWidth:
    def test_ascii(self):
        assert visible_width("hello") == 5

    def test_empty(self):
        assert visible_width("") == 0

    def test_unicode_cjk(self):
        assert visible_width("中文") == 4

    def test_combining_mark_has_no_width(self):
        assert visible_width("e\u0301") == 1

    def test_newline_not_counted(self):
        assert visible_width("\n") == 0


class TestTruncateToWidth:
    def test_short_string_unchanged(self):
        assert truncate_to_width("hello", 10) == "hello"

    def test_truncates_with_ellipsis(self):
        assert truncate_to_width("hello world", 8) == "hello..."

    def test_empty_ellipsis(self):
        assert truncate_to_width("hello world", 8, "") == "hello wo"

    def test_ellipsis_wider_than_budget(self):
        assert truncate_to_width("hello world", 2) == ".."

    def test_zero_width(self):
        assert truncate_to_width("hello", 0) == ""

    def test_pad(self):
        assert truncate_to_width("hi", 5, pad=True) == "hi   "

    def test_wide_chars_not_split(self):
        result = truncate_to_width("中文字符", 5, "")
        assert result == "中文"
        assert visible_width(truncate_to_width("中文字符", 5, "", pad=True)) == 5


class TestPadding:
    def test_pad_to_width(self):
        assert pad_to_width("ab", 4) == "ab  "
        assert pad_to_width("ab", 4, ".") == "ab.."

    def test_pad_never_cuts(self):
        assert pad_to_width("abcdef", 3) == "abcdef"

    def test_expand_tabs(self):
        assert expand_tabs("a\tb", 2) == "a  b"
        assert expand_tabs("ab") == "ab"


class TestWrapText:
    def test_short_line_unchanged(self):
        assert wrap_text("hello", 20) == ["hello"]

    def test_wraps_at_word_boundary(self):
        assert wrap_text("hello world foo", 8) == ["hello", "world", "foo"]

    def test_breaks_long_word(self):
        assert wrap_text("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_breaks_wide_word(self):
        assert wrap_text("中文字", 4) == ["中文", "字"]

    def test_empty_string(self):
        assert wrap_text("", 20) == [""]

    def test_zero_width(self):
        assert wrap_text("anything", 0) == []

    def test_multiline_input(self):
        assert wrap_text("a\nb", 5) == ["a", "b"]

    def test_lines_fit(self):
        for line in wrap_text("the quick brown fox jumps over the lazy dog", 7):
            assert visible_width(line) <= 7
