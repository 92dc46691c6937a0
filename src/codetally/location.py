"""Map node spans and character offsets onto source lines."""

from __future__ import annotations

from codetally.model import LineSpan
from codetally.tree import SyntaxNode

_EMPTY_SPAN = LineSpan(0, 0, 0)


def line_at(text: str, offset: int) -> int:
    """Return the 0-based index of the line containing *offset*."""
    return text.count("\n", 0, max(offset, 0))


def line_end_column(text: str, line_index: int) -> int:
    """Return the length of line *line_index*, or 0 if there is no such line."""
    lines = text.split("\n")
    if 0 <= line_index < len(lines):
        return len(lines[line_index])
    return 0


def span_lines(text: str, node: SyntaxNode | None) -> LineSpan:
    """Return the 1-based line range of *node* and its non-blank line count.

    The span end offset is inclusive.  Nodes without a span resolve to
    ``(0, 0, 0)``.
    """
    if node is None or node.span is None:
        return _EMPTY_SPAN

    start, end = node.span
    start_line = text.count("\n", 0, max(start, 0)) + 1
    fragments = text[start : end + 1].split("\n")
    end_line = start_line + len(fragments) - 1
    loc = sum(1 for fragment in fragments if fragment.strip())
    return LineSpan(start_line, end_line, loc)
