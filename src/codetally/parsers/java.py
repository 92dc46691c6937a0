"""Java tree producer backed by tree-sitter.

tree-sitter nodes are converted into :class:`~codetally.tree.SyntaxNode`
values.  Node kinds use camelCase grammar names (``class_declaration``
becomes ``classDeclaration``) and identifiers become ``Identifier`` tokens.
Field children land in slots named after the field; every other named
child goes, in document order, into a ``children`` list slot.
"""

from __future__ import annotations

import logging

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser

from codetally.parsers.base import ParseError
from codetally.tree import SyntaxNode

logger = logging.getLogger(__name__)

# Slot for children that are not attached to a grammar field.
_UNNAMED_SLOT = "children"

# tree-sitter node types renamed to token kinds.
_TOKEN_KINDS = {"identifier": "Identifier"}


class JavaSyntaxError(ParseError):
    """Java source text that tree-sitter could not parse cleanly."""

    def __init__(self, line: int, column: int, snippet: str = "") -> None:
        self.line = line
        self.column = column
        self.snippet = snippet
        message = f"Syntax error at line {line}, column {column}"
        if snippet:
            message += f": {snippet!r}"
        super().__init__(message)


class TreeSitterJavaParser:
    """Parse Java source into a SyntaxNode tree."""

    def __init__(self) -> None:
        self._language = Language(tsjava.language())

    def parse(self, text: str) -> SyntaxNode:
        source = text.encode("utf-8", errors="surrogatepass")
        # Parser objects carry state between parses; one per call keeps
        # concurrent callers independent.
        tree = Parser(self._language).parse(source)
        root = tree.root_node

        if root.has_error:
            raise _syntax_error(root, source)

        offsets = _char_offsets(source, text)
        converted = _convert(root, offsets)
        logger.debug("Parsed %d bytes into a '%s' tree", len(source), converted.kind)
        return converted


def _kind(node_type: str) -> str:
    """Translate a tree-sitter node type into a camelCase node kind."""
    if node_type in _TOKEN_KINDS:
        return _TOKEN_KINDS[node_type]
    head, *rest = node_type.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _char_offsets(source: bytes, text: str) -> list[int] | None:
    """Map byte offsets of *source* onto character offsets of *text*.

    Returns None for pure ASCII input, where both coincide.
    """
    if len(source) == len(text):
        return None
    offsets: list[int] = []
    for index, char in enumerate(text):
        offsets.extend([index] * len(char.encode("utf-8", errors="surrogatepass")))
    offsets.append(len(text))
    return offsets


def _span(node: Node, offsets: list[int] | None) -> tuple[int, int] | None:
    """Inclusive character span of *node*, or None for an empty node."""
    start, end = node.start_byte, node.end_byte
    if end <= start:
        return None
    if offsets is None:
        return (start, end - 1)
    return (offsets[start], offsets[end - 1])


def _convert(root: Node, offsets: list[int] | None) -> SyntaxNode:
    """Convert a tree-sitter subtree without recursing on the Python stack."""
    converted = SyntaxNode(kind=_kind(root.type), span=_span(root, offsets))
    pending = [(root, converted)]

    while pending:
        ts_node, node = pending.pop()
        for index, child in enumerate(ts_node.children):
            if not child.is_named:
                continue
            child_node = SyntaxNode(kind=_kind(child.type), span=_span(child, offsets))
            field = ts_node.field_name_for_child(index)
            if field is None:
                node.children.setdefault(_UNNAMED_SLOT, []).append(child_node)
            elif field not in node.children:
                node.children[field] = child_node
            else:
                existing = node.children[field]
                if isinstance(existing, list):
                    existing.append(child_node)
                else:
                    node.children[field] = [existing, child_node]
            pending.append((child, child_node))

    return converted


def _syntax_error(root: Node, source: bytes) -> JavaSyntaxError:
    """Build an error pointing at the first ERROR or MISSING node."""
    node = root
    while True:
        culprit = next(
            (c for c in node.children if c.is_error or c.is_missing or c.has_error),
            None,
        )
        if culprit is None or culprit.is_error or culprit.is_missing:
            node = culprit or node
            break
        node = culprit

    row, column = node.start_point
    snippet = source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
    snippet = snippet.splitlines()[0] if snippet else node.type
    return JavaSyntaxError(row + 1, column + 1, snippet)
