"""Label-driven search over a heterogeneous syntax tree.

A tree is made of :class:`SyntaxNode` values.  Each node carries a ``kind``
label, an optional inclusive ``(start, end)`` character span into the source
text, and an ordered mapping of child slots.  A slot holds either a single
node or a list of nodes.  Nothing here knows what a class or a method is.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class SyntaxNode:
    """A labeled node with an optional source span and named child slots."""

    kind: str
    span: tuple[int, int] | None = None
    children: dict[str, SyntaxNode | list[SyntaxNode]] = field(
        default_factory=dict
    )

    def iter_children(self) -> Iterator[SyntaxNode]:
        """Yield direct children, slot by slot, in slot insertion order."""
        for slot in self.children.values():
            if isinstance(slot, list):
                yield from slot
            elif slot is not None:
                yield slot

    @classmethod
    def from_cst(cls, data: dict[str, Any]) -> SyntaxNode:
        """Build a tree from a java-parser style CST mapping.

        Rule nodes look like ``{"name": ..., "location": {"startOffset": ...,
        "endOffset": ...}, "children": {slot: [...]}}``; tokens carry
        ``image``, ``startOffset``/``endOffset`` and ``tokenType.name``.
        """
        kind = data.get("name")
        if kind is None:
            kind = (data.get("tokenType") or {}).get("name", "")

        location = data.get("location") or data
        start = location.get("startOffset")
        end = location.get("endOffset")
        span = (start, end) if start is not None and end is not None else None

        children: dict[str, SyntaxNode | list[SyntaxNode]] = {}
        for slot, value in (data.get("children") or {}).items():
            if isinstance(value, list):
                children[slot] = [cls.from_cst(item) for item in value if item]
            elif value:
                children[slot] = cls.from_cst(value)

        return cls(kind=kind, span=span, children=children)


def find_all(root: SyntaxNode | None, kind: str) -> list[SyntaxNode]:
    """Return every node labeled *kind* under *root*, in pre-order.

    Matches nested inside other matches are returned as well.
    """
    results: list[SyntaxNode] = []
    if root is None:
        return results

    # Explicit stack keeps deep trees clear of the recursion limit.
    stack = [root]
    while stack:
        node = stack.pop()
        if node.kind == kind:
            results.append(node)
        stack.extend(reversed(list(node.iter_children())))
    return results


def find_first(root: SyntaxNode | None, kind: str) -> SyntaxNode | None:
    """Return the first node labeled *kind* in pre-order, or None."""
    if root is None:
        return None
    stack = [root]
    while stack:
        node = stack.pop()
        if node.kind == kind:
            return node
        stack.extend(reversed(list(node.iter_children())))
    return None


def node_text(text: str, node: SyntaxNode | None) -> str:
    """Return the source text covered by *node*, or "" without a span."""
    if node is None or node.span is None:
        return ""
    start, end = node.span
    return text[start : end + 1]
