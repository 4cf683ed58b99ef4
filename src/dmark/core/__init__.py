"""Core D-Mark functionality: document tree, scanner, parser, error reporting, translation."""

from .config import DMarkConfig, load_config
from .errors import (
    ConfigError,
    DMarkError,
    ErrorContext,
    ParseError,
    ParseErrorKind,
    ParserInvariantError,
)
from .nodes import ElementNode, Node, TextNode
from .parser_impl import Parser, parse_document, parse_file
from .position import Position
from .reporter import ErrorReporter
from .translator import Translator

__all__ = [
    "DMarkConfig",
    "load_config",
    "ConfigError",
    "DMarkError",
    "ErrorContext",
    "ParseError",
    "ParseErrorKind",
    "ParserInvariantError",
    "ElementNode",
    "Node",
    "TextNode",
    "Parser",
    "parse_document",
    "parse_file",
    "Position",
    "ErrorReporter",
    "Translator",
]
