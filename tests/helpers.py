"""Builders for hand-made Java-shaped syntax trees with exact spans."""

from __future__ import annotations

from codetally.tree import SyntaxNode


class SourceBuilder:
    """Accumulate source text while remembering where each piece starts."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def add(self, piece: str) -> int:
        start = self._length
        self._parts.append(piece)
        self._length += len(piece)
        return start

    @property
    def text(self) -> str:
        return "".join(self._parts)


def identifier(start: int, name: str) -> SyntaxNode:
    return SyntaxNode("Identifier", (start, start + len(name) - 1))


def _method(src: SourceBuilder, name: str, loc: int) -> SyntaxNode:
    """A method whose body block spans exactly *loc* non-blank lines (loc >= 2)."""
    start = src.add("    void ")
    name_start = src.add(name)
    src.add("() ")
    block_start = src.add("{\n")
    for n in range(loc - 2):
        src.add(f"        int v{n} = {n};\n")
    close = src.add("    }") + 4
    src.add("\n")
    return SyntaxNode(
        "methodDeclaration",
        (start, close),
        {
            "Identifier": [identifier(name_start, name)],
            "methodBody": [SyntaxNode("block", (block_start, close))],
        },
    )


def java_unit(classes: dict[str, list[int]]) -> tuple[str, SyntaxNode]:
    """Build source text and tree for classes mapped to their method body LOCs.

    Methods are named ``m0``, ``m1``... in order.
    """
    src = SourceBuilder()
    class_nodes = []
    for class_name, method_locs in classes.items():
        start = src.add("class ")
        name_start = src.add(class_name)
        src.add(" {\n")
        methods = [_method(src, f"m{i}", loc) for i, loc in enumerate(method_locs)]
        end = src.add("}")
        src.add("\n")
        class_nodes.append(
            SyntaxNode(
                "classDeclaration",
                (start, end),
                {
                    "Identifier": [identifier(name_start, class_name)],
                    "classBody": [
                        SyntaxNode("classBody", None, {"methodDeclaration": methods})
                    ],
                },
            )
        )

    text = src.text
    root = SyntaxNode(
        "compilationUnit",
        (0, len(text) - 1) if text else None,
        {"typeDeclaration": class_nodes},
    )
    return text, root
