"""
D-Mark - a parser for an indentation-sensitive lightweight markup language.

    #p[lang=en] I %em{love} markup!
      #note Nested blocks are indented by two spaces.

Parsing produces a tree of ElementNode and TextNode values that downstream
code can reduce with a Translator.
"""

from ._version import get_version
from .core.errors import (
    ConfigError,
    DMarkError,
    ErrorContext,
    ParseError,
    ParseErrorKind,
    ParserInvariantError,
)
from .core.nodes import ElementNode, Node, TextNode
from .core.parser_impl import Parser, parse_document, parse_file
from .core.position import Position
from .core.translator import Translator

__version__ = get_version()

__all__ = [
    "__version__",
    "ElementNode",
    "Node",
    "TextNode",
    "Parser",
    "parse_document",
    "parse_file",
    "Position",
    "Translator",
    "DMarkError",
    "ParseError",
    "ParseErrorKind",
    "ParserInvariantError",
    "ConfigError",
    "ErrorContext",
]
