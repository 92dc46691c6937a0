"""Extract class and method descriptors from a parsed compilation unit."""

from __future__ import annotations

from codetally.location import span_lines
from codetally.model import ClassInfo, MethodInfo
from codetally.tree import SyntaxNode, find_all, find_first, node_text

# Node kinds that count as type declarations, in reporting order.
TYPE_DECL_KINDS = ("classDeclaration", "interfaceDeclaration", "enumDeclaration")

# Node kinds that count as method-like declarations, in reporting order.
METHOD_DECL_KINDS = ("methodDeclaration", "constructorDeclaration")

IDENTIFIER = "Identifier"
BLOCK = "block"

ANONYMOUS_CLASS = "Anonymous"
UNNAMED_METHOD = "constructor"


def extract_types(root: SyntaxNode | None) -> list[SyntaxNode]:
    """Return all type declarations: classes, then interfaces, then enums.

    Nested declarations are returned alongside their enclosing ones.
    """
    types: list[SyntaxNode] = []
    for kind in TYPE_DECL_KINDS:
        types.extend(find_all(root, kind))
    return types


def extract_methods(type_node: SyntaxNode) -> list[SyntaxNode]:
    """Return the methods, then the constructors, found under *type_node*."""
    methods: list[SyntaxNode] = []
    for kind in METHOD_DECL_KINDS:
        methods.extend(find_all(type_node, kind))
    return methods


def method_body_loc(text: str, method_node: SyntaxNode) -> int:
    """LOC of the method's body block, or of the whole declaration without one."""
    body = find_first(method_node, BLOCK)
    if body is not None:
        return span_lines(text, body).loc
    return span_lines(text, method_node).loc


def extract_method(text: str, method_node: SyntaxNode, class_name: str) -> MethodInfo:
    """Build the descriptor of a single method or constructor."""
    identifier = find_first(method_node, IDENTIFIER)
    method_name = node_text(text, identifier) if identifier else UNNAMED_METHOD

    location = span_lines(text, method_node)
    return MethodInfo(
        name=f"{class_name}.{method_name}",
        loc=method_body_loc(text, method_node),
        start_line=location.start_line,
        end_line=location.end_line,
    )


def extract_class(
    text: str, type_node: SyntaxNode
) -> tuple[ClassInfo, list[MethodInfo]]:
    """Build the descriptor of a type declaration and of all its methods."""
    identifier = find_first(type_node, IDENTIFIER)
    class_name = node_text(text, identifier) if identifier else ANONYMOUS_CLASS

    location = span_lines(text, type_node)
    method_nodes = extract_methods(type_node)

    class_info = ClassInfo(
        name=class_name,
        loc=location.loc,
        method_count=len(method_nodes),
        start_line=location.start_line,
        end_line=location.end_line,
    )
    methods = [extract_method(text, node, class_name) for node in method_nodes]
    return class_info, methods
