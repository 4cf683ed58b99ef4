"""
Attribute list parsing for D-Mark.

Handles the optional bracketed list after an element name:

    #p[lang=en,draft] text
    %link[href=a%,b]{text}

Values run until ``]`` or ``,``; ``%`` escapes ``%``, ``]`` and ``,``.
A key without ``=`` is a flag whose value is the key itself. A repeated
key overwrites the earlier value.
"""

from typing import TYPE_CHECKING, Any

from ..errors import ParseErrorKind, ParserInvariantError

ATTRIBUTE_ESCAPABLE = frozenset("%],")


class AttributeParserMixin:
    """
    Mixin providing attribute list parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    # Type stubs for methods provided by BaseParser
    if TYPE_CHECKING:
        scanner: Any
        error: Any
        parse_name: Any

    def parse_attributes(self) -> dict[str, str]:
        """
        Parse an optional attribute list.

        Returns:
            Attribute values by key; empty if no list is present
        """
        attributes: dict[str, str] = {}

        if not self.scanner.try_consume("["):
            return attributes

        if self.scanner.try_consume("]"):
            return attributes

        while True:
            key = self.parse_name()

            has_value = self.scanner.try_consume("=")
            if has_value:
                attributes[key] = self.parse_attribute_value()
            else:
                attributes[key] = key

            c = self.scanner.peek()
            if c == "]":
                self.scanner.advance()
                break
            if c == ",":
                self.scanner.advance()
                continue
            if has_value:
                raise ParserInvariantError(
                    f"attribute value ended on {c!r} at {self.scanner.position}"
                )
            raise self.error(ParseErrorKind.UNEXPECTED_EOF)

        return attributes

    def parse_attribute_value(self) -> str:
        """
        Read an attribute value, decoding escapes.

        The terminating ``]`` or ``,`` is left for the caller.

        Raises:
            ParseError: UnexpectedEOF, UnexpectedEOL or UnexpectedEscapeSequence
        """
        chars = []

        while True:
            c = self.scanner.peek()
            if c is None:
                raise self.error(ParseErrorKind.UNEXPECTED_EOF)

            if c in "],":
                break

            if c == "\n":
                raise self.error(ParseErrorKind.UNEXPECTED_EOL)

            self.scanner.advance()
            if c != "%":
                chars.append(c)
                continue

            escaped = self.scanner.peek()
            if escaped is None:
                raise self.error(ParseErrorKind.UNEXPECTED_EOF)
            if escaped == "\n":
                raise self.error(ParseErrorKind.UNEXPECTED_EOL)
            if escaped not in ATTRIBUTE_ESCAPABLE:
                raise self.error(ParseErrorKind.UNEXPECTED_ESCAPE_SEQUENCE)
            self.scanner.advance()
            chars.append(escaped)

        return "".join(chars)
