"""Parse errors raised by tree producers."""


class ParseError(ValueError):
    """Raised when a tree producer cannot build a tree from source text."""


class UnsupportedParserError(TypeError):
    """Raised when no usable parse entry point can be found on a producer."""
