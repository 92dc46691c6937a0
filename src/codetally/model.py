"""Data model for per-file structural metrics and inline decorations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class LineSpan(NamedTuple):
    """1-based inclusive line range of a node plus its non-blank line count."""

    start_line: int
    end_line: int
    loc: int


@dataclass(frozen=True)
class MethodInfo:
    """A method or constructor declaration."""

    name: str  # "ClassName.methodName"
    loc: int
    start_line: int
    end_line: int


@dataclass(frozen=True)
class ClassInfo:
    """A class, interface, or enum declaration."""

    name: str
    loc: int
    method_count: int
    start_line: int
    end_line: int


@dataclass
class Finding:
    """A report-level refactoring recommendation."""

    kind: str  # "warning", "info", "suggestion", "success"
    severity: str  # "high", "medium", "low"
    message: str
    line: int
    suggestion: str | None = None


@dataclass
class Metrics:
    """Complete result of analyzing one compilation unit."""

    file_name: str
    total_classes: int = 0
    total_methods: int = 0
    total_loc: int = 0
    methods: list[MethodInfo] = field(default_factory=list)
    classes: list[ClassInfo] = field(default_factory=list)
    # Two-decimal string, or the integer 0 when there are no methods.
    avg_loc_per_method: str | int = 0
    issues: list[Finding] = field(default_factory=list)


@dataclass(frozen=True)
class DecorationRecord:
    """An inline annotation anchored at the end of a source line."""

    anchor_line: int  # 0-based
    anchor_column: int
    label: str


@dataclass
class Decorations:
    """Decoration records bucketed by severity."""

    method_good: list[DecorationRecord] = field(default_factory=list)
    method_warning: list[DecorationRecord] = field(default_factory=list)
    method_danger: list[DecorationRecord] = field(default_factory=list)
    class_good: list[DecorationRecord] = field(default_factory=list)
    class_warning: list[DecorationRecord] = field(default_factory=list)

    def buckets(self) -> dict[str, list[DecorationRecord]]:
        """Return the buckets keyed by name, in display order."""
        return {
            "method_good": self.method_good,
            "method_warning": self.method_warning,
            "method_danger": self.method_danger,
            "class_good": self.class_good,
            "class_warning": self.class_warning,
        }
