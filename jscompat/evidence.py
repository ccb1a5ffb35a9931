"""Per-analysis accumulator of feature keys and their evidence snippets."""

from __future__ import annotations

from collections.abc import Iterator

from .model import CodeSnippet
from .snippet import LineIndex, extract_snippet


class EvidenceCollector:
    """Map of feature key to an insertion-ordered set of snippets.

    Keys keep first-detection order. Snippets compare by value, so recording
    the same span twice for a key stores it once.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = LineIndex(text)
        self._snippets: dict[str, dict[CodeSnippet, None]] = {}

    def add(self, key: str, start: int, end: int) -> CodeSnippet:
        snippet = extract_snippet(self._text, start, end, self._index)
        self._snippets.setdefault(key, {}).setdefault(snippet, None)
        return snippet

    def keys(self) -> list[str]:
        return list(self._snippets)

    def snippets(self, key: str) -> tuple[CodeSnippet, ...]:
        return tuple(self._snippets.get(key, ()))

    def __contains__(self, key: object) -> bool:
        return key in self._snippets

    def __iter__(self) -> Iterator[str]:
        return iter(self._snippets)

    def __len__(self) -> int:
        return len(self._snippets)
