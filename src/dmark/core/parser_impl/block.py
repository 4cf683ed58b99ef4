"""
Block parsing for D-Mark.

Handles block elements and their indented bodies:

    #ul
      #li[id=first] First item,
        continued on a second line.

      #li Second item

A block header is ``#name[attributes]`` followed by end of line or by a
single space and inline content. Each nesting level is two spaces. Lines
indented one level deeper than the block either start a child block or
continue the block's inline content.
"""

from typing import TYPE_CHECKING, Any

from ..errors import ParseErrorKind
from ..nodes import ElementNode, Node, TextNode
from .base import is_name_head_char

INDENT_WIDTH = 2


class BlockParserMixin:
    """
    Mixin providing block element parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    # Type stubs for methods provided by BaseParser and other mixins
    if TYPE_CHECKING:
        scanner: Any
        error: Any
        expect: Any
        parse_name: Any
        parse_attributes: Any
        parse_inline_run: Any
        parse_end_of_line: Any

    def skip_blank_lines(self) -> int:
        """
        Consume consecutive blank lines.

        Returns:
            Number of blank lines consumed
        """
        count = 0
        while not self.scanner.at_end():
            length = self.scanner.blank_line_length()
            if length is None:
                break
            self.scanner.skip(length)
            count += 1
        return count

    def parse_block(self, indent: int) -> ElementNode:
        """
        Parse a block element and everything nested under it.

        Args:
            indent: Nesting level of the block's header line

        Returns:
            ElementNode with header content, continuation lines and child blocks
        """
        name, attributes, children = self.parse_block_header()
        self.parse_block_body(indent, children)
        return ElementNode(name=name, attributes=attributes, children=children)

    def parse_block_header(self) -> tuple[str, dict[str, str], list[Node]]:
        """
        Parse ``#name[attributes]`` and any inline content on the same line.

        Raises:
            ParseError: ExpectedHash, InvalidCharInName or
                UnexpectedContentAfterBlockName
        """
        self.expect("#", ParseErrorKind.EXPECTED_HASH)
        name = self.parse_name()
        attributes = self.parse_attributes()
        children: list[Node] = []

        c = self.scanner.peek()
        if c is None:
            pass
        elif c == "\n":
            self.scanner.advance()
        elif c == " ":
            self.scanner.advance()
            children.extend(self.parse_inline_run())
            self.parse_end_of_line()
        else:
            raise self.error(ParseErrorKind.UNEXPECTED_CONTENT_AFTER_BLOCK_NAME)

        return name, attributes, children

    def parse_block_body(self, indent: int, children: list[Node]) -> None:
        """
        Parse the lines belonging to a block opened at ``indent``.

        Stops at end of input or at the first non-blank line indented less
        than ``indent + 1`` levels; that line is left for the caller.
        Continuation lines are joined to earlier content with newline text
        nodes, one more for each blank line in between.

        Args:
            indent: Nesting level of the enclosing block
            children: The block's children so far; extended in place
        """
        pending_blanks = 0
        child_indent = indent + 1

        while not self.scanner.at_end():
            blank = self.scanner.blank_line_length()
            if blank is not None:
                self.scanner.skip(blank)
                pending_blanks += 1
                continue

            if self.scanner.leading_spaces() // INDENT_WIDTH < child_indent:
                break

            self.parse_indentation(child_indent)

            if self.at_block_start():
                children.append(self.parse_block(child_indent))
                continue

            if children:
                children.append(TextNode(content="\n"))
            children.extend(TextNode(content="\n") for _ in range(pending_blanks))
            pending_blanks = 0

            children.extend(self.parse_inline_run())
            self.parse_end_of_line()

    def parse_indentation(self, level: int) -> None:
        """
        Consume exactly ``level`` indentation units. Surplus spaces are left as content.

        Raises:
            ParseError: ExpectedSpace if a non-space is found
        """
        for _ in range(level * INDENT_WIDTH):
            self.expect(" ", ParseErrorKind.EXPECTED_SPACE)

    def at_block_start(self) -> bool:
        """True if the cursor is on ``#`` followed by a name character."""
        return self.scanner.peek() == "#" and is_name_head_char(self.scanner.peek_next())
