"""
Human-readable reporting of parse errors.

Rebuilds up to two lines of source around a failure position so that the
error can be shown with a marker under the offending column.
"""

from pathlib import Path

from .errors import ErrorContext, ParseError


class ErrorReporter:
    """Attach source context to ParseErrors raised while parsing ``text``."""

    def __init__(self, text: str, file: Path | None = None):
        self.lines = text.split("\n")
        self.file = file

    def context_for(self, error: ParseError) -> ErrorContext:
        """
        Build the ErrorContext for ``error``.

        The context holds the failing line and, unless it is the first line,
        the line before it.
        """
        line = error.position.line
        before = self.lines[line - 1] if line > 0 else None
        current = self.lines[line] if line < len(self.lines) else ""

        return ErrorContext(
            line=line + 1,
            column=error.position.column,
            before=before,
            current=current,
            file=self.file,
        )

    def attach(self, error: ParseError) -> ParseError:
        """Return a copy of ``error`` carrying its source context."""
        return ParseError(error.kind, error.position, self.context_for(error))

    def report(self, error: ParseError) -> str:
        """Render ``error`` as a multi-line message."""
        context = error.context or self.context_for(error)
        return f"parse error: {error.message}\n{context.format()}"
