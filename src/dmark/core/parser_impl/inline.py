"""
Inline content parsing for D-Mark.

Parses one line of running text into text runs, escaped characters and
inline elements:

    #p Some %em{emphasised %code[lang=rb]{text}} and a literal %% sign.

``%`` followed by ``%``, ``}`` or ``#`` is an escape for that character;
``%`` followed by anything else starts an inline element.
"""

from typing import TYPE_CHECKING, Any

from ..errors import ParseErrorKind, ParserInvariantError
from ..nodes import ElementNode, Node, TextNode

INLINE_ESCAPABLE = frozenset("%}#")

# Characters that end a plain text run
TEXT_STOP = frozenset("%}\n")


class InlineParserMixin:
    """
    Mixin providing inline content parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    # Type stubs for methods provided by BaseParser and other mixins
    if TYPE_CHECKING:
        scanner: Any
        error: Any
        expect: Any
        parse_name: Any
        parse_attributes: Any

    def parse_inline_run(self) -> list[Node]:
        """
        Parse inline nodes up to a newline, ``}`` or end of input.

        The terminator is not consumed.

        Returns:
            Nodes in document order
        """
        nodes: list[Node] = []

        while True:
            c = self.scanner.peek()
            if c is None or c in "\n}":
                break
            if c == "%":
                nodes.append(self.parse_percent())
            else:
                nodes.append(self.parse_text_run())

        return nodes

    def parse_text_run(self) -> TextNode:
        """Read plain text up to the next ``%``, ``}``, newline or end of input."""
        chars = []
        c = self.scanner.peek()
        while c is not None and c not in TEXT_STOP:
            chars.append(c)
            self.scanner.advance()
            c = self.scanner.peek()
        return TextNode(content="".join(chars))

    def parse_percent(self) -> Node:
        """
        Parse what follows a ``%``: an escaped character or an inline element.

        Raises:
            ParseError: UnexpectedEOF if the input ends right after the ``%``
        """
        self.scanner.advance()

        c = self.scanner.peek()
        if c is None:
            raise self.error(ParseErrorKind.UNEXPECTED_EOF)

        if c in INLINE_ESCAPABLE:
            self.scanner.advance()
            return TextNode(content=c)

        return self.parse_inline_element()

    def parse_inline_element(self) -> ElementNode:
        """
        Parse ``name[attributes]{children}``; the ``%`` is already consumed.

        Raises:
            ParseError: InvalidCharInName, ExpectedLeftBrace, ExpectedRightBrace
                or UnexpectedEOF
        """
        name = self.parse_name()
        attributes = self.parse_attributes()
        self.expect("{", ParseErrorKind.EXPECTED_LEFT_BRACE)
        children = self.parse_inline_run()
        self.expect("}", ParseErrorKind.EXPECTED_RIGHT_BRACE)

        return ElementNode(name=name, attributes=attributes, children=children)

    def parse_end_of_line(self) -> None:
        """
        Finish a line of inline content.

        Consumes the newline if there is one; end of input is also accepted.

        Raises:
            ParseError: UnexpectedRightBrace on a stray ``}``
            ParserInvariantError: on anything else, which the inline grammar
                never stops at
        """
        c = self.scanner.peek()
        if c is None:
            return
        if c == "\n":
            self.scanner.advance()
            return
        if c == "}":
            raise self.error(ParseErrorKind.UNEXPECTED_RIGHT_BRACE)
        raise ParserInvariantError(
            f"inline content ended on {c!r} at {self.scanner.position}"
        )
