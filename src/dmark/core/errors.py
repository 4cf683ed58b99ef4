"""
Error types for D-Mark parsing and configuration.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .position import Position


class DMarkError(Exception):
    """Base exception for all D-Mark errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseErrorKind(str, Enum):
    """Grammar violations, one per kind. Values match the canonical kind names."""

    UNEXPECTED_EOF = "UnexpectedEOF"
    UNEXPECTED_EOL = "UnexpectedEOL"
    UNEXPECTED_ESCAPE_SEQUENCE = "UnexpectedEscapeSequence"
    UNEXPECTED_RIGHT_BRACE = "UnexpectedRightBrace"
    UNEXPECTED_CONTENT_AFTER_BLOCK_NAME = "UnexpectedContentAfterBlockName"
    EXPECTED_LEFT_BRACE = "ExpectedLeftBrace"
    EXPECTED_RIGHT_BRACE = "ExpectedRightBrace"
    EXPECTED_HASH = "ExpectedHash"
    EXPECTED_SPACE = "ExpectedSpace"
    INVALID_CHAR_IN_NAME = "InvalidCharInName"

    @property
    def description(self) -> str:
        return _KIND_DESCRIPTIONS[self]


_KIND_DESCRIPTIONS = {
    ParseErrorKind.UNEXPECTED_EOF: "unexpected end of input",
    ParseErrorKind.UNEXPECTED_EOL: "unexpected end of line",
    ParseErrorKind.UNEXPECTED_ESCAPE_SEQUENCE: "unexpected escape sequence (only %%, %] and %, are allowed)",
    ParseErrorKind.UNEXPECTED_RIGHT_BRACE: "unexpected right brace, }",
    ParseErrorKind.UNEXPECTED_CONTENT_AFTER_BLOCK_NAME: "unexpected content after block name (expected a space or end of line)",
    ParseErrorKind.EXPECTED_LEFT_BRACE: "expected a left brace, {",
    ParseErrorKind.EXPECTED_RIGHT_BRACE: "expected a right brace, }",
    ParseErrorKind.EXPECTED_HASH: "expected a hash, #",
    ParseErrorKind.EXPECTED_SPACE: "expected a space",
    ParseErrorKind.INVALID_CHAR_IN_NAME: "invalid character in name",
}


class ParseError(DMarkError):
    """
    Raised when D-Mark source cannot be parsed.

    The first grammar violation aborts the parse. ``kind`` and ``position``
    (zero-based) are the authoritative result; ``context`` is optional
    presentation data attached by the ErrorReporter.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        position: Position,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        self.position = position
        super().__init__(f"{kind.value}: {kind.description}", context)

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __repr__(self) -> str:
        return f"ParseError({self.kind.value}, {self.position})"


class ConfigError(DMarkError):
    """
    Raised when the dmark.toml configuration is invalid.

    Examples:
    - Malformed TOML
    - Unknown output format
    - Unknown logging level
    """

    pass


class ParserInvariantError(RuntimeError):
    """
    Raised when the parser reaches a state its own grammar checks rule out.

    This signals a bug in the parser, not bad input, and is therefore not a
    DMarkError.
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (0-indexed)
        before: The line preceding the failing line, if any
        current: The failing line
        file: Optional path to the source file
    """

    line: int
    column: int
    before: str | None = None
    current: str = ""
    file: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Location header followed by the numbered source lines and a marker
        """
        if self.file:
            location = f"{self.file}:{self.line}:{self.column}"
        else:
            location = f"line {self.line}, column {self.column}"
        return f"{location}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        """Format the source lines with line numbers and a marker under the column."""
        formatted = []
        if self.before is not None:
            formatted.append(f"{self.line - 1:4d} | {self.before}")

        prefix = f"{self.line:4d} | "
        formatted.append(prefix + self.current)
        formatted.append(" " * (len(prefix) + self.column) + "^")

        return "\n".join(formatted)


def make_parse_error(
    kind: ParseErrorKind,
    position: Position,
    context: ErrorContext | None = None,
) -> ParseError:
    """
    Helper to create a ParseError.

    Args:
        kind: Grammar violation
        position: Position of the offending character (or end of input)
        context: Optional rendered source context

    Returns:
        ParseError for the given kind and position
    """
    return ParseError(kind, position, context)
