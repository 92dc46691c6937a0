"""Render Metrics to a standalone HTML report or a JSON document."""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from html import escape
from pathlib import Path
from string import Template

from codetally.model import ClassInfo, Finding, MethodInfo, Metrics
from codetally.recommendations import METHOD_LOC_DANGER, METHOD_LOC_WARNING, order_findings

_TEMPLATE_PATH = Path(__file__).with_name("template.html")

_TOP_METHODS = 15
_CLASS_METHODS_MEDIUM = 5
_CLASS_METHODS_HIGH = 10

_ICONS = {"warning": "⚠️", "info": "ℹ️", "success": "✅"}
_DEFAULT_ICON = "💡"

_NO_ISSUES = (
    '<div class="issue success"><div class="issue-header"><span class="icon">🎉</span>'
    '<span class="issue-message">Perfect! No issues found. '
    "Your code structure is excellent.</span></div></div>"
)


def quality_score(metrics: Metrics) -> int:
    """Blend class separation and method size into a 0-100 score."""
    class_score = min(100, metrics.total_classes * 15)
    method_score = max(0.0, 100 - float(metrics.avg_loc_per_method) * 3)
    return math.floor((class_score + method_score) / 2 + 0.5)


def _score_band(score: int) -> tuple[str, str]:
    if score > 70:
        return "#4ec9b0", "Excellent"
    if score > 40:
        return "#dcdcaa", "Good"
    return "#f48771", "Needs Improvement"


def _method_row(method: MethodInfo) -> str:
    if method.loc > METHOD_LOC_DANGER:
        css, status = "bad", "❌ Too long"
    elif method.loc > METHOD_LOC_WARNING:
        css, status = "medium", "⚠️ Medium"
    else:
        css, status = "good", "✅ Good"
    return (
        f"<tr><td>{escape(method.name)}</td>"
        f'<td class="{css}"><strong>{method.loc}</strong></td>'
        f'<td class="{css}">{status}</td>'
        f"<td>Lines {method.start_line}-{method.end_line}</td></tr>"
    )


def _class_row(cls: ClassInfo) -> str:
    if cls.method_count > _CLASS_METHODS_HIGH:
        css = "bad"
    elif cls.method_count > _CLASS_METHODS_MEDIUM:
        css = "medium"
    else:
        css = "good"
    return (
        f"<tr><td>{escape(cls.name)}</td><td>{cls.loc}</td>"
        f'<td class="{css}"><strong>{cls.method_count}</strong></td>'
        f"<td>Lines {cls.start_line}-{cls.end_line}</td></tr>"
    )


def _issue_block(finding: Finding) -> str:
    icon = _ICONS.get(finding.kind, _DEFAULT_ICON)
    block = (
        f'<div class="issue {escape(finding.kind)}"><div class="issue-header">'
        f'<span class="icon">{icon}</span>'
        f'<span class="issue-message">{escape(finding.message)}</span></div>'
    )
    if finding.suggestion:
        block += f'<div class="issue-suggestion">💡 {escape(finding.suggestion)}</div>'
    return block + "</div>"


def render_report(metrics: Metrics, file_name: str) -> str:
    """Return the HTML report for *metrics*."""
    top_methods = sorted(metrics.methods, key=lambda m: m.loc, reverse=True)[:_TOP_METHODS]
    method_rows = "\n".join(_method_row(m) for m in top_methods)
    class_rows = "\n".join(_class_row(c) for c in metrics.classes)
    issues = "\n".join(_issue_block(f) for f in order_findings(metrics.issues))

    score = quality_score(metrics)
    score_color, score_text = _score_band(score)

    template = Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))
    return template.safe_substitute(
        FILE_NAME=escape(file_name),
        SCORE_COLOR=score_color,
        SCORE_TEXT=score_text,
        TOTAL_SCORE=score,
        TOTAL_CLASSES=metrics.total_classes,
        AVG_LOC=metrics.avg_loc_per_method,
        TOTAL_METHODS=metrics.total_methods,
        TOTAL_LOC=metrics.total_loc,
        ISSUES=issues or _NO_ISSUES,
        METHOD_ROWS=method_rows
        or '<tr><td colspan="4" class="empty">No methods found</td></tr>',
        CLASS_ROWS=class_rows
        or '<tr><td colspan="4" class="empty">No classes found</td></tr>',
    )


def metrics_to_dict(metrics: Metrics) -> dict:
    """Serialize *metrics* with findings in presentation order."""
    data = asdict(metrics)
    data["issues"] = [asdict(f) for f in order_findings(metrics.issues)]
    return data


def render_json(metrics: Metrics) -> str:
    return json.dumps(metrics_to_dict(metrics), indent=2, ensure_ascii=False)


def write_report(metrics: Metrics, output_path: Path, fmt: str = "html") -> None:
    """Write the report for *metrics* to *output_path*."""
    if fmt == "json":
        content = render_json(metrics)
    else:
        content = render_report(metrics, metrics.file_name)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
