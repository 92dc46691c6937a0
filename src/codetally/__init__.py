"""Structural size metrics and refactoring hints for Java source files."""

from __future__ import annotations

from codetally.decorations import analyze_for_decorations, classify
from codetally.metrics import aggregate, analyze
from codetally.model import (
    ClassInfo,
    DecorationRecord,
    Decorations,
    Finding,
    LineSpan,
    MethodInfo,
    Metrics,
)
from codetally.recommendations import generate_findings, order_findings
from codetally.tree import SyntaxNode, find_all, find_first

__all__ = [
    "ClassInfo",
    "DecorationRecord",
    "Decorations",
    "Finding",
    "LineSpan",
    "MethodInfo",
    "Metrics",
    "SyntaxNode",
    "aggregate",
    "analyze",
    "analyze_for_decorations",
    "classify",
    "find_all",
    "find_first",
    "generate_findings",
    "order_findings",
]
