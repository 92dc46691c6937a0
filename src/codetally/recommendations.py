"""Derive refactoring recommendations from aggregated file metrics."""

from __future__ import annotations

from collections.abc import Iterable

from codetally.model import Finding, Metrics

# Fixed report thresholds.  The decoration path takes its own, configurable
# method warning threshold; these constants are deliberately not parameters.
METHOD_LOC_WARNING = 10
METHOD_LOC_DANGER = 20
CLASS_METHOD_LIMIT = 10
CLASS_LOC_LIMIT = 200
SINGLE_CLASS_FILE_LOC = 200
FEW_CLASSES_FILE_LOC = 300
FEW_CLASSES = 3
WELL_SEPARATED_CLASSES = 5

SEVERITY_RANK = {"high": 0, "medium": 1, "low": 2}


def generate_findings(metrics: Metrics) -> list[Finding]:
    """Append every applicable finding to ``metrics.issues`` and return it.

    Each rule is evaluated against the same metrics snapshot.  Findings are
    appended in rule order; use :func:`order_findings` for presentation.
    """
    issues = metrics.issues

    for method in metrics.methods:
        if method.loc > METHOD_LOC_DANGER:
            issues.append(
                Finding(
                    kind="warning",
                    severity="high",
                    message=(
                        f"Method '{method.name}' has {method.loc} lines. "
                        f"Consider extracting to smaller methods "
                        f"(target: <{METHOD_LOC_DANGER} LOC)."
                    ),
                    line=method.start_line,
                    suggestion="Extract method, break into smaller units",
                )
            )

    medium = [
        m for m in metrics.methods if METHOD_LOC_WARNING < m.loc <= METHOD_LOC_DANGER
    ]
    if medium:
        issues.append(
            Finding(
                kind="info",
                severity="medium",
                message=(
                    f"{len(medium)} method(s) between "
                    f"{METHOD_LOC_WARNING}-{METHOD_LOC_DANGER} lines. "
                    "Consider if they can be simplified."
                ),
                line=medium[0].start_line,
            )
        )

    for cls in metrics.classes:
        if cls.method_count > CLASS_METHOD_LIMIT:
            issues.append(
                Finding(
                    kind="warning",
                    severity="high",
                    message=(
                        f"Class '{cls.name}' has {cls.method_count} methods. "
                        "Consider splitting into multiple classes "
                        "(Single Responsibility Principle)."
                    ),
                    line=cls.start_line,
                    suggestion=(
                        "Extract class, apply design patterns "
                        "(Strategy, Facade, etc.)"
                    ),
                )
            )

    for cls in metrics.classes:
        if cls.loc > CLASS_LOC_LIMIT:
            issues.append(
                Finding(
                    kind="warning",
                    severity="high",
                    message=(
                        f"Class '{cls.name}' has {cls.loc} lines. "
                        "Very large class - high refactoring priority."
                    ),
                    line=cls.start_line,
                    suggestion="Split into multiple cohesive classes",
                )
            )

    if metrics.total_classes == 1 and metrics.total_loc > SINGLE_CLASS_FILE_LOC:
        issues.append(
            Finding(
                kind="suggestion",
                severity="medium",
                message=(
                    f"Only 1 class found with {metrics.total_loc} LOC. "
                    "Strong candidate for extracting additional classes."
                ),
                line=1,
                suggestion=(
                    "Identify cohesive responsibilities and extract them "
                    "into new classes"
                ),
            )
        )
    elif metrics.total_classes < FEW_CLASSES and metrics.total_loc > FEW_CLASSES_FILE_LOC:
        issues.append(
            Finding(
                kind="suggestion",
                severity="medium",
                message=(
                    f"Only {metrics.total_classes} classes found with "
                    f"{metrics.total_loc} LOC. Consider extracting more classes."
                ),
                line=1,
                suggestion="Look for data + behavior that belongs together",
            )
        )

    if metrics.total_methods > 0 and all(
        m.loc <= METHOD_LOC_WARNING for m in metrics.methods
    ):
        issues.append(
            Finding(
                kind="success",
                severity="low",
                message=(
                    f"Excellent! All methods are ≤{METHOD_LOC_WARNING} lines. "
                    "Great adherence to the principle of small methods."
                ),
                line=1,
            )
        )

    if metrics.total_classes >= WELL_SEPARATED_CLASSES:
        issues.append(
            Finding(
                kind="success",
                severity="low",
                message=(
                    f"Good class separation with {metrics.total_classes} classes. "
                    "This promotes maintainability."
                ),
                line=1,
            )
        )

    return issues


def order_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Return *findings* sorted high, medium, low; ties keep append order."""
    return sorted(findings, key=lambda f: SEVERITY_RANK.get(f.severity, len(SEVERITY_RANK)))
