"""Offset to line/column mapping over a source text."""

from bisect import bisect_right

from doc_breadcrumbs.core.models import LineColumn

_INDENT_CHARS = frozenset(" \t")


class LineIndex:
    """
    Precomputed line starts for a text.

    Lines and columns are 0-indexed. ``\\n``, ``\\r\\n`` and a lone ``\\r``
    each terminate a line.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        starts = [0]
        i = 0
        length = len(text)
        while i < length:
            char = text[i]
            if char == "\r":
                if i + 1 < length and text[i + 1] == "\n":
                    i += 1
                starts.append(i + 1)
            elif char == "\n":
                starts.append(i + 1)
            i += 1
        self._line_starts = starts

    def offset_to_line_column(self, offset: int) -> LineColumn:
        """Convert an absolute character offset to a line/column pair."""
        offset = max(0, min(offset, len(self._text)))
        line = bisect_right(self._line_starts, offset) - 1
        return LineColumn(line=line, column=offset - self._line_starts[line])

    def line_start(self, line: int) -> int:
        """Offset of the first character of ``line``."""
        return self._line_starts[line]

    def indentation_at(self, offset: int) -> str:
        """Leading whitespace of the line containing ``offset``."""
        line = self.offset_to_line_column(offset).line
        start = end = self._line_starts[line]
        while end < len(self._text) and self._text[end] in _INDENT_CHARS:
            end += 1
        return self._text[start:end]


def offset_to_line_column(text: str, offset: int) -> LineColumn:
    """One-off conversion; build a ``LineIndex`` when converting many offsets."""
    return LineIndex(text).offset_to_line_column(offset)
