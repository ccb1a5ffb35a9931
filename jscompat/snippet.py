"""Evidence snippet extraction around a matched source span."""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate

from .constants import SNIPPET_CONTEXT_LINES
from .model import CodeSnippet


class LineIndex:
    """Lines of a text and the character offset each line starts at.

    Built once per text; lookups are a binary search over line starts.
    """

    def __init__(self, text: str) -> None:
        self.lines = text.split("\n")
        self.starts = list(accumulate((len(line) + 1 for line in self.lines[:-1]), initial=0))
        # One past the trailing newline slot of the last line.
        self._limit = self.starts[-1] + len(self.lines[-1]) + 1

    def line_index(self, offset: int) -> int | None:
        """0-based line holding offset, or None past the end of the text."""
        if offset >= self._limit:
            return None
        return max(0, bisect_right(self.starts, offset) - 1)

    def position(self, offset: int) -> tuple[int, int]:
        """0-based (line, column) of offset, clamped to the end of the last line."""
        index = self.line_index(offset)
        if index is None:
            last = len(self.lines) - 1
            return last, len(self.lines[last])
        return index, offset - self.starts[index]


def _locate(index: LineIndex, start: int, end: int) -> tuple[int, int, int]:
    """Return (start_line_index, start_column, end_line_index), all 0-based."""
    start_index, start_column = index.position(start)
    end_index = index.line_index(end)
    if end_index is None:
        end_index = len(index.lines) - 1
    return start_index, start_column, max(end_index, start_index)


def extract_snippet(
    text: str,
    start: int,
    end: int,
    index: LineIndex | None = None,
) -> CodeSnippet:
    """Build evidence for the half-open character span [start, end) of text.

    The context window holds the matched lines plus up to
    ``SNIPPET_CONTEXT_LINES`` lines on either side, clipped to the document.
    Pass a prebuilt ``index`` of text when extracting many snippets from it.
    """
    if index is None:
        index = LineIndex(text)
    end = max(end, start)
    start_index, start_column, end_index = _locate(index, start, end)

    lines = index.lines
    context_first = max(0, start_index - SNIPPET_CONTEXT_LINES)
    context_last = min(len(lines), end_index + 1 + SNIPPET_CONTEXT_LINES)

    return CodeSnippet(
        context_text="\n".join(lines[context_first:context_last]),
        context_start_line=context_first + 1,
        match_line=start_index + 1,
        match_column=start_column,
        match_length=end - start,
        match_text=text[start:end],
    )
