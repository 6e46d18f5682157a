"""Test dedent() in isolation."""

import pytest

from markscan.dedent import dedent


class TestNoStripping:
    def test_empty(self):
        assert dedent("") == ""

    def test_single_line(self):
        assert dedent("hello") == "hello"

    def test_multi_line_no_indent(self):
        assert dedent("a\nb\nc") == "a\nb\nc"


class TestBlankEdges:
    def test_all_blank(self):
        assert dedent("\n  \n\t\n") == ""

    def test_leading_blank_lines_dropped(self):
        assert dedent("\n   \nhello") == "hello"

    def test_trailing_blank_lines_dropped(self):
        assert dedent("hello\n  \n") == "hello"

    def test_interior_blank_lines_kept(self):
        assert dedent("a\n\nb") == "a\n\nb"


class TestIndentStripping:
    def test_single_line_indent_removed(self):
        assert dedent("    hello") == "hello"

    def test_common_indent(self):
        assert dedent("    line1\n    line2") == "line1\nline2"

    def test_minimum_indent_wins(self):
        assert dedent("    a\n  b\n      c") == "  a\nb\n    c"

    def test_tabs(self):
        assert dedent("\ta\n\t\tb") == "a\n\tb"

    def test_blank_lines_do_not_count(self):
        assert dedent("    a\n\n    b") == "a\n\nb"

    def test_short_blank_line_emptied(self):
        assert dedent("    a\n  \n    b") == "a\n\nb"

    def test_long_blank_line_keeps_excess(self):
        assert dedent("  a\n      \n  b") == "a\n    \nb"

    def test_trailing_whitespace_kept(self):
        assert dedent("  a  \n  b") == "a  \nb"


class TestTypicalBlock:
    def test_template_literal(self):
        source = """
            <div>
              // note
            </div>
        """
        assert dedent(source) == "<div>\n  // note\n</div>"

    @pytest.mark.parametrize(
        "source",
        ["  a\n    b", "\n\n  x\n", "\t<p>\n\t\t</p>\n", "a"],
    )
    def test_idempotent(self, source):
        once = dedent(source)
        assert dedent(once) == once


class TestContract:
    def test_non_str_raises_type_error(self):
        with pytest.raises(TypeError):
            dedent(None)  # type: ignore[arg-type]
