"""tree-sitter adapter that turns JavaScript text into a syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from tree_sitter import Language, Node, Parser
import tree_sitter_typescript

from .exceptions import SourceParseError
from .snippet import LineIndex
from .util.debug import debug_log

# The TSX grammar is a superset of JavaScript: it also takes type annotations,
# JSX, decorators, import attributes and assertions, top-level return/await
# and hashbang lines.
JS_LANGUAGE = Language(tree_sitter_typescript.language_tsx())


def _byte_to_char_table(text: str, data: bytes) -> list[int] | None:
    if len(data) == len(text):
        return None
    table = [0] * (len(data) + 1)
    position = 0
    for index, char in enumerate(text):
        width = len(char.encode("utf-8", "surrogatepass"))
        for step in range(width):
            table[position + step] = index
        position += width
    table[position] = len(text)
    return table


@dataclass(frozen=True)
class SourceTree:
    """A parsed program together with the text it was parsed from."""

    text: str
    root: Node
    _char_at_byte: list[int] | None = field(default=None, repr=False)

    def char_offset(self, byte_offset: int) -> int:
        if self._char_at_byte is None:
            return byte_offset
        return self._char_at_byte[min(byte_offset, len(self._char_at_byte) - 1)]

    def span(self, node: Node) -> tuple[int, int]:
        """Character span [start, end) of node in the source text."""
        return self.char_offset(node.start_byte), self.char_offset(node.end_byte)

    def node_text(self, node: Node) -> str:
        start, end = self.span(node)
        return self.text[start:end]


def _first_error(root: Node) -> Node | None:
    """Depth-first search for the earliest ERROR or MISSING node."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _diagnostic(tree: SourceTree, node: Node | None) -> tuple[str, int, int]:
    offset = tree.char_offset(node.start_byte) if node is not None else 0
    line_index, column = LineIndex(tree.text).position(offset)
    line = line_index + 1
    if node is not None and node.is_missing:
        return f"Missing {node.type!r} ({line}:{column})", line, column
    return f"Unexpected token ({line}:{column})", line, column


def parse_source(text: str) -> SourceTree:
    """Parse text permissively; raise SourceParseError if it is not valid JavaScript."""
    data = text.encode("utf-8", "surrogatepass")
    parsed = Parser(JS_LANGUAGE).parse(data)
    tree = SourceTree(
        text=text,
        root=parsed.root_node,
        _char_at_byte=_byte_to_char_table(text, data),
    )

    if tree.root.has_error:
        message, line, column = _diagnostic(tree, _first_error(tree.root))
        debug_log("parse failed: %s", message)
        raise SourceParseError(message, line=line, column=column)
    return tree
