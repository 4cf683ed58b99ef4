"""
D-Mark Parser Package.

The parser is built from mixins, one per grammar layer:

- BlockParserMixin: block headers and indented bodies
- InlineParserMixin: text runs, escapes and inline elements
- AttributeParserMixin: bracketed attribute lists

The main exports are:
- Parser: The complete parser class
- parse_document: Parse source text, attaching source context to errors
- parse_file: Parse a UTF-8 file

Usage:
    from dmark.core.parser_impl import parse_document

    nodes = parse_document("#p Hello, %em{world}!")
"""

import logging
from pathlib import Path

from ..errors import ParseError
from ..nodes import ElementNode
from ..reporter import ErrorReporter
from .attributes import AttributeParserMixin
from .base import BaseParser
from .block import BlockParserMixin
from .inline import InlineParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    BlockParserMixin,
    InlineParserMixin,
    AttributeParserMixin,
):
    """
    Complete D-Mark parser.

    Each instance parses one input once. Nesting is handled by native
    recursion, so pathologically deep input can raise RecursionError.
    """

    def parse(self) -> list[ElementNode]:
        """
        Parse the entire document.

        Returns:
            Top-level block elements in document order

        Raises:
            ParseError: On the first grammar violation (no context attached)
        """
        nodes: list[ElementNode] = []

        self.skip_blank_lines()

        while not self.scanner.at_end():
            nodes.append(self.parse_block(0))

        return nodes


def parse_document(text: str, file: Path | None = None) -> list[ElementNode]:
    """
    Parse D-Mark source text.

    Args:
        text: Complete source text
        file: Optional source path, used only in error context

    Returns:
        Top-level nodes in document order

    Raises:
        ParseError: With kind, position and source context
    """
    logger.debug("Parsing %d characters from %s", len(text), file or "<string>")

    try:
        nodes = Parser(text).parse()
    except ParseError as e:
        logger.debug("Parse failed: %s at %s", e.kind.value, e.position)
        raise ErrorReporter(text, file).attach(e) from None

    logger.debug("Parsed %d top-level nodes", len(nodes))
    return nodes


def parse_file(path: Path) -> list[ElementNode]:
    """Read ``path`` as UTF-8 and parse it."""
    text = path.read_text(encoding="utf-8")
    return parse_document(text, path)


__all__ = [
    "Parser",
    "parse_document",
    "parse_file",
]
