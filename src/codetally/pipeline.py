"""Orchestrator: read → parse → analyze → render."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from codetally.config import Thresholds, load_config
from codetally.decorations import analyze_for_decorations
from codetally.metrics import analyze
from codetally.model import Decorations
from codetally.parsers import ParseFunc
from codetally.renderer.html import write_report
from codetally.tree import SyntaxNode

logger = logging.getLogger(__name__)


def load_cst(cst_file: Path) -> ParseFunc:
    """Parse function that returns a pre-parsed java-parser CST read from JSON."""
    with open(cst_file, encoding="utf-8") as f:
        root = SyntaxNode.from_cst(json.load(f))
    logger.debug("Loaded CST '%s' from %s", root.kind, cst_file)
    return lambda text: root


def default_output(source_file: Path, fmt: str = "html") -> Path:
    """Report path next to *source_file*, e.g. ``Foo-metrics.html``."""
    return source_file.with_name(f"{source_file.stem}-metrics.{fmt}")


def resolve_thresholds(
    source_file: Path,
    *,
    method_loc_threshold: int | None = None,
    class_method_threshold: int | None = None,
) -> Thresholds:
    """Project configuration next to *source_file*, overridden by explicit values."""
    config = load_config(source_file.resolve().parent)
    return Thresholds(
        method_loc_threshold=method_loc_threshold or config.method_loc_threshold,
        class_method_threshold=class_method_threshold or config.class_method_threshold,
    )


def run(
    source_file: Path,
    *,
    output: Path | None = None,
    fmt: str = "html",
    open_browser: bool = False,
    parse: ParseFunc | None = None,
) -> Path:
    """Analyze *source_file*, write its report, and return the report path."""
    source_file = source_file.resolve()
    text = source_file.read_text(encoding="utf-8")

    metrics = analyze(text, source_file.name, parse=parse)
    logger.debug("Findings: %d", len(metrics.issues))

    out_path = output or default_output(source_file, fmt)
    write_report(metrics, out_path, fmt)

    logger.info("Generated %s", out_path)

    if open_browser:
        import webbrowser

        webbrowser.open(out_path.resolve().as_uri())

    return out_path


def run_decorations(
    source_file: Path, thresholds: Thresholds, parse: ParseFunc | None = None
) -> Decorations:
    """Classify the declarations of *source_file* for inline display."""
    text = source_file.read_text(encoding="utf-8")
    return analyze_for_decorations(
        text,
        thresholds.method_loc_threshold,
        thresholds.class_method_threshold,
        parse=parse,
    )


def format_decorations(decorations: Decorations) -> list[str]:
    """One ``line:column  bucket  label`` row per record, sorted by position."""
    rows = [
        (record.anchor_line, record.anchor_column, bucket, record.label)
        for bucket, records in decorations.buckets().items()
        for record in records
    ]
    rows.sort(key=lambda row: (row[0], row[1]))
    return [f"{line + 1}:{column}  {bucket}  {label}" for line, column, bucket, label in rows]
