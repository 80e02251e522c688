"""Tests for offset to line/column mapping."""

import pytest

from doc_breadcrumbs.core import LineColumn, LineIndex, TextRange, offset_to_line_column


class TestLineIndex:
    """Tests for LineIndex."""

    def test_single_line(self):
        assert offset_to_line_column("hello", 3) == LineColumn(line=0, column=3)

    def test_line_boundaries(self):
        lines = LineIndex("ab\ncd\n")

        assert lines.offset_to_line_column(2) == LineColumn(0, 2)
        assert lines.offset_to_line_column(3) == LineColumn(1, 0)
        assert lines.offset_to_line_column(6) == LineColumn(2, 0)
        assert lines.line_start(2) == 6

    def test_crlf_and_lone_cr(self):
        lines = LineIndex("a\r\nb\rc")

        assert lines.offset_to_line_column(3) == LineColumn(1, 0)
        assert lines.offset_to_line_column(5) == LineColumn(2, 0)
        assert lines.line_start(2) == 5

    def test_offsets_are_clamped(self):
        lines = LineIndex("abc")

        assert lines.offset_to_line_column(-5) == LineColumn(0, 0)
        assert lines.offset_to_line_column(99) == LineColumn(0, 3)

    def test_indentation(self):
        lines = LineIndex("top\n\t  nested()\n    \n")

        assert lines.indentation_at(0) == ""
        assert lines.indentation_at(10) == "\t  "
        assert lines.indentation_at(17) == "    "


class TestValueObjects:
    """Validation on position value objects."""

    def test_negative_line_rejected(self):
        with pytest.raises(ValueError):
            LineColumn(line=-1, column=0)

    def test_reversed_range_rejected(self):
        with pytest.raises(ValueError):
            TextRange(start=LineColumn(2, 0), end=LineColumn(1, 4))
