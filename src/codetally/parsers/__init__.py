"""Tree producers and normalization of their calling conventions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from codetally.parsers.base import ParseError, UnsupportedParserError
from codetally.tree import SyntaxNode

logger = logging.getLogger(__name__)

ParseFunc = Callable[[str], SyntaxNode]

__all__ = [
    "ParseError",
    "ParseFunc",
    "UnsupportedParserError",
    "default_parse",
    "resolve_parse",
]

_default_parse: ParseFunc | None = None


def resolve_parse(producer: Any) -> ParseFunc:
    """Locate a usable ``parse(text) -> SyntaxNode`` entry point on *producer*.

    Probed in order: a parser class (instantiated, then its ``parse``), an
    object with a ``parse`` method, a plain callable, and an object whose
    ``default`` attribute has a ``parse`` method.
    """
    if isinstance(producer, type):
        try:
            instance = producer()
        except TypeError:
            logger.debug("%s cannot be constructed without arguments", producer)
        else:
            parse = getattr(instance, "parse", None)
            if callable(parse):
                return parse

    parse = getattr(producer, "parse", None)
    if callable(parse):
        return parse

    if callable(producer) and not isinstance(producer, type):
        return producer

    default = getattr(producer, "default", None)
    parse = getattr(default, "parse", None)
    if callable(parse):
        return parse

    raise UnsupportedParserError(
        f"Unsupported parser API: {producer!r} exposes no parse entry point"
    )


def default_parse() -> ParseFunc:
    """Return the normalized parse function of the bundled Java parser."""
    global _default_parse

    if _default_parse is None:
        from codetally.parsers.java import TreeSitterJavaParser

        _default_parse = resolve_parse(TreeSitterJavaParser)
    return _default_parse
