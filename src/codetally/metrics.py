"""Aggregate per-file metrics for the full analysis report."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from codetally.extract import extract_class, extract_types
from codetally.model import MethodInfo, Metrics
from codetally.parsers import ParseFunc, default_parse
from codetally.recommendations import generate_findings
from codetally.tree import SyntaxNode

logger = logging.getLogger(__name__)

# Lines starting with these prefixes are treated as comments.
_COMMENT_PREFIXES = ("//", "/*", "*")


def count_file_loc(text: str) -> int:
    """Count non-blank lines that do not start like a comment.

    Only the first characters of each line are inspected: continuation lines
    of a block comment without a leading ``*`` are counted, and trailing
    comments do not exclude a line.
    """
    count = 0
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped and not stripped.startswith(_COMMENT_PREFIXES):
            count += 1
    return count


def average_loc(methods: Sequence[MethodInfo]) -> str | int:
    """Mean method LOC as a two-decimal string, or 0 without methods."""
    if not methods:
        return 0
    mean = sum(m.loc for m in methods) / len(methods)
    # Decimal(float) is exact, so ties round up like JavaScript toFixed.
    return str(Decimal(mean).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def aggregate(root: SyntaxNode | None, text: str, file_name: str = "") -> Metrics:
    """Collect class and method descriptors of *root* into a Metrics record.

    Findings are not generated here.
    """
    metrics = Metrics(file_name=file_name, total_loc=count_file_loc(text))

    for type_node in extract_types(root):
        class_info, methods = extract_class(text, type_node)
        metrics.classes.append(class_info)
        metrics.methods.extend(methods)

    metrics.total_classes = len(metrics.classes)
    metrics.total_methods = len(metrics.methods)
    metrics.avg_loc_per_method = average_loc(metrics.methods)

    logger.debug(
        "%s: %d classes, %d methods, %d LOC",
        file_name or "<source>",
        metrics.total_classes,
        metrics.total_methods,
        metrics.total_loc,
    )
    return metrics


def analyze(text: str, file_name: str = "", parse: ParseFunc | None = None) -> Metrics:
    """Parse *text* and return its metrics together with recommendations.

    Errors raised by the parser propagate unchanged.
    """
    parse = parse or default_parse()
    root = parse(text)

    metrics = aggregate(root, text, file_name)
    generate_findings(metrics)
    return metrics
