"""Explicit state for an editor's live decoration feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from codetally.config import Thresholds
from codetally.decorations import analyze_for_decorations
from codetally.model import Decorations
from codetally.parsers import ParseFunc

logger = logging.getLogger(__name__)

JAVA_LANGUAGE_ID = "java"


@dataclass(frozen=True)
class Document:
    """A snapshot of an open editor document."""

    text: str
    path: Path | None = None
    language_id: str = JAVA_LANGUAGE_ID


@dataclass
class DecorationSession:
    """Whether decorations are shown, and for which document."""

    enabled: bool = True
    active_document: Document | None = None
    thresholds: Thresholds = field(default_factory=Thresholds)
    parse: ParseFunc | None = None

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def toggle(self) -> bool:
        """Flip the enabled flag and return its new value."""
        self.enabled = not self.enabled
        return self.enabled

    def set_active_document(self, document: Document | None) -> None:
        self.active_document = document

    def update(self) -> Decorations:
        """Classify the active document.

        Returns empty buckets when disabled, without a Java document, or when
        analysis of the document fails.
        """
        document = self.active_document
        if not self.enabled or document is None:
            return Decorations()
        if document.language_id != JAVA_LANGUAGE_ID:
            return Decorations()

        try:
            return analyze_for_decorations(
                document.text,
                self.thresholds.method_loc_threshold,
                self.thresholds.class_method_threshold,
                parse=self.parse,
            )
        except Exception:
            logger.exception("Decoration update failed for %s", document.path or "<buffer>")
            return Decorations()
