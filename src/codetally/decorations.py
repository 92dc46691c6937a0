"""Classify methods and classes into inline decoration buckets."""

from __future__ import annotations

from codetally.extract import IDENTIFIER, extract_methods, extract_types, method_body_loc
from codetally.location import line_at, line_end_column
from codetally.model import DecorationRecord, Decorations
from codetally.parsers import ParseFunc, default_parse
from codetally.recommendations import METHOD_LOC_DANGER
from codetally.tree import SyntaxNode, find_first

DEFAULT_METHOD_LOC_THRESHOLD = 10
DEFAULT_CLASS_METHOD_THRESHOLD = 10


def _anchor(text: str, identifier: SyntaxNode, label: str) -> DecorationRecord:
    line = line_at(text, identifier.span[0])
    return DecorationRecord(
        anchor_line=line,
        anchor_column=line_end_column(text, line),
        label=label,
    )


def _method_count_label(count: int) -> str:
    return f"{count} method" if count == 1 else f"{count} methods"


def classify(
    root: SyntaxNode | None,
    text: str,
    method_loc_threshold: int = DEFAULT_METHOD_LOC_THRESHOLD,
    class_method_threshold: int = DEFAULT_CLASS_METHOD_THRESHOLD,
) -> Decorations:
    """Bucket every named type and method declaration of *root*.

    Methods above the fixed danger ceiling are always ``method_danger``;
    *method_loc_threshold* only moves the warning boundary.  Declarations
    without a located identifier are skipped.
    """
    decorations = Decorations()

    for type_node in extract_types(root):
        identifier = find_first(type_node, IDENTIFIER)
        if identifier is None or identifier.span is None:
            continue

        method_nodes = extract_methods(type_node)
        record = _anchor(text, identifier, _method_count_label(len(method_nodes)))
        if len(method_nodes) > class_method_threshold:
            decorations.class_warning.append(record)
        else:
            decorations.class_good.append(record)

        for method_node in method_nodes:
            method_identifier = find_first(method_node, IDENTIFIER)
            if method_identifier is None or method_identifier.span is None:
                continue

            loc = method_body_loc(text, method_node)
            record = _anchor(text, method_identifier, f"{loc} LOC")
            if loc > METHOD_LOC_DANGER:
                decorations.method_danger.append(record)
            elif loc > method_loc_threshold:
                decorations.method_warning.append(record)
            else:
                decorations.method_good.append(record)

    return decorations


def analyze_for_decorations(
    text: str,
    method_loc_threshold: int = DEFAULT_METHOD_LOC_THRESHOLD,
    class_method_threshold: int = DEFAULT_CLASS_METHOD_THRESHOLD,
    parse: ParseFunc | None = None,
) -> Decorations:
    """Parse *text* and classify its declarations; parse errors propagate."""
    parse = parse or default_parse()
    return classify(parse(text), text, method_loc_threshold, class_method_threshold)
