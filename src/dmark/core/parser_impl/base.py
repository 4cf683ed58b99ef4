"""
Base parser class for D-Mark.

Provides scanner plumbing, the identifier grammar and error helpers used by
all grammar mixins.
"""

from ..errors import ParseError, ParseErrorKind, make_parse_error
from ..position import Position
from ..scanner import Scanner


def is_name_head_char(c: str | None) -> bool:
    """First character of a name: an ASCII letter."""
    return c is not None and c.isascii() and c.isalpha()


def is_name_tail_char(c: str | None) -> bool:
    """Subsequent characters of a name: ASCII letters, digits, ``-`` or ``_``."""
    return c is not None and c.isascii() and (c.isalnum() or c in "-_")


class BaseParser:
    """
    Base parser class with scanner utilities.

    This class provides the foundation for recursive descent parsing,
    including character matching, the shared identifier grammar and
    error generation.
    """

    def __init__(self, text: str):
        """
        Initialize parser.

        Args:
            text: Complete source text
        """
        self.scanner = Scanner(text)

    def error(self, kind: ParseErrorKind, position: Position | None = None) -> ParseError:
        """Build a ParseError at ``position`` (default: the cursor)."""
        return make_parse_error(kind, position or self.scanner.position)

    def expect(self, expected: str, kind: ParseErrorKind) -> None:
        """
        Consume ``expected`` or fail.

        Raises:
            ParseError: UnexpectedEOF at end of input, ``kind`` on any other character
        """
        c = self.scanner.peek()
        if c is None:
            raise self.error(ParseErrorKind.UNEXPECTED_EOF)
        if c != expected:
            raise self.error(kind)
        self.scanner.advance()

    def parse_name(self) -> str:
        """
        Read an identifier (element name or attribute key).

        Raises:
            ParseError: UnexpectedEOF at end of input, InvalidCharInName if
                the first character is not an ASCII letter
        """
        c = self.scanner.peek()
        if c is None:
            raise self.error(ParseErrorKind.UNEXPECTED_EOF)
        if not is_name_head_char(c):
            raise self.error(ParseErrorKind.INVALID_CHAR_IN_NAME)

        chars = [c]
        self.scanner.advance()
        while is_name_tail_char(self.scanner.peek()):
            chars.append(self.scanner.consume())
        return "".join(chars)
