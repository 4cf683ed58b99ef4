"""
Character scanner for D-Mark source text.

Holds the whole input in memory and exposes single-character lookahead and
consumption with position tracking. Newlines are always ``\\n``.
"""

from .errors import ParseErrorKind, make_parse_error
from .position import Position, PositionTracker


class Scanner:
    """Random-access view over the source text with a tracked cursor."""

    def __init__(self, text: str):
        """
        Initialize scanner.

        Args:
            text: Complete source text, already decoded
        """
        self.text = text
        self.tracker = PositionTracker()

    @property
    def position(self) -> Position:
        """Current cursor position."""
        return self.tracker.snapshot()

    def peek(self) -> str | None:
        """Get current character or None if at end."""
        offset = self.tracker.offset
        if offset >= len(self.text):
            return None
        return self.text[offset]

    def peek_next(self) -> str | None:
        """Peek one character past the current one."""
        offset = self.tracker.offset + 1
        if offset >= len(self.text):
            return None
        return self.text[offset]

    def advance(self) -> None:
        """Move to next character, updating line/column. No-op at end."""
        c = self.peek()
        if c is not None:
            self.tracker.advance(c == "\n")

    def consume(self) -> str:
        """
        Consume and return the current character.

        Raises:
            ParseError: UnexpectedEOF if already at end of input
        """
        c = self.peek()
        if c is None:
            raise make_parse_error(ParseErrorKind.UNEXPECTED_EOF, self.position)
        self.advance()
        return c

    def try_consume(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self.peek() == expected:
            self.advance()
            return True
        return False

    def at_end(self) -> bool:
        return self.tracker.offset >= len(self.text)

    def leading_spaces(self) -> int:
        """Count the spaces starting at the cursor, without consuming them."""
        count = 0
        offset = self.tracker.offset
        while offset < len(self.text) and self.text[offset] == " ":
            offset += 1
            count += 1
        return count

    def blank_line_length(self) -> int | None:
        """
        Measure the blank line starting at the cursor.

        A blank line is zero or more spaces followed by a newline or the end
        of input.

        Returns:
            Number of characters to consume (including the newline), or None
            if the line is not blank
        """
        spaces = self.leading_spaces()
        offset = self.tracker.offset + spaces
        if offset >= len(self.text):
            return spaces
        if self.text[offset] == "\n":
            return spaces + 1
        return None

    def skip(self, count: int) -> None:
        """Advance over ``count`` characters that lookahead has already checked."""
        for _ in range(count):
            self.advance()
