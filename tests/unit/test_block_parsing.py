"""Tests for block elements, indentation and blank-line handling."""

import pytest

from dmark import ElementNode, ParseError, ParseErrorKind, Parser, TextNode, parse_document
from dmark.core.nodes import Node


def text(content: str) -> TextNode:
    return TextNode(content=content)


def element(name: str, *children: Node, **attributes: str) -> ElementNode:
    return ElementNode(name=name, attributes=attributes, children=children)


class TestDocuments:
    def test_empty_document(self) -> None:
        assert parse_document("") == []

    def test_blank_document(self) -> None:
        assert parse_document("\n  \n\n") == []

    def test_single_block(self) -> None:
        assert parse_document("#p hai") == [element("p", text("hai"))]

    def test_trailing_newline(self) -> None:
        assert parse_document("#p hai\n") == [element("p", text("hai"))]

    def test_leading_blank_lines(self) -> None:
        assert parse_document("\n\n#p hai") == [element("p", text("hai"))]

    def test_sibling_blocks(self) -> None:
        assert parse_document("#p one\n#p two") == [
            element("p", text("one")),
            element("p", text("two")),
        ]

    def test_blank_lines_between_top_level_blocks(self) -> None:
        assert parse_document("#p one\n\n\n#p two") == [
            element("p", text("one")),
            element("p", text("two")),
        ]

    def test_block_without_content(self) -> None:
        assert parse_document("#hr") == [element("hr")]

    def test_block_without_content_followed_by_newline(self) -> None:
        assert parse_document("#hr\n#hr") == [element("hr"), element("hr")]

    def test_sample_document(self, sample_document: str) -> None:
        assert parse_document(sample_document) == [
            element("h1", text("Introduction")),
            element(
                "p",
                text("I "),
                element("em", text("love")),
                text(" "),
                element(
                    "link",
                    text("markup"),
                    href="https://example.com/?a=1,b=2",
                ),
                text("."),
                text("\n"),
                text("It continues here."),
                lang="en",
            ),
            element(
                "ul",
                element("li", text("One")),
                element("li", text("Two "), text("%")),
            ),
        ]


class TestNesting:
    def test_child_block(self) -> None:
        assert parse_document("#ul\n  #li one\n  #li two") == [
            element("ul", element("li", text("one")), element("li", text("two")))
        ]

    def test_child_block_after_header_content(self) -> None:
        assert parse_document("#p foo\n  #p bar") == [
            element("p", text("foo"), element("p", text("bar")))
        ]

    def test_deep_nesting(self) -> None:
        assert parse_document("#a\n  #b\n    #c\n      #d x") == [
            element("a", element("b", element("c", element("d", text("x")))))
        ]

    def test_dedent_returns_to_parent(self) -> None:
        assert parse_document("#a\n  #b\n    x\n  y") == [
            element("a", element("b", text("x")), text("\n"), text("y"))
        ]

    def test_dedent_to_top_level(self) -> None:
        assert parse_document("#a\n  #b\n    #c x\n#d y") == [
            element("a", element("b", element("c", text("x")))),
            element("d", text("y")),
        ]

    def test_nested_blocks_with_blank_lines(self) -> None:
        assert parse_document("#p foo\n \n  #p bar\n  \n\n    #p qux") == [
            element("p", text("foo"), element("p", text("bar"), element("p", text("qux"))))
        ]

    def test_child_block_with_attributes(self) -> None:
        assert parse_document("#ul\n  #li[id=first] one") == [
            element("ul", element("li", text("one"), id="first"))
        ]


class TestContinuationLines:
    def test_continuation_after_header_content(self) -> None:
        assert parse_document("#p foo\n  bar") == [
            element("p", text("foo"), text("\n"), text("bar"))
        ]

    def test_continuation_without_header_content(self) -> None:
        assert parse_document("#p\n  foo\n  bar") == [
            element("p", text("foo"), text("\n"), text("bar"))
        ]

    def test_blank_lines_become_newlines(self) -> None:
        assert parse_document("#p foo\n\n  donkey\n\n    giraffe\n") == [
            element(
                "p",
                text("foo"),
                text("\n"),
                text("\n"),
                text("donkey"),
                text("\n"),
                text("\n"),
                text("  giraffe"),
            )
        ]

    def test_trailing_blank_lines_dropped(self) -> None:
        assert parse_document("#p foo\n  bar\n\n\n") == [
            element("p", text("foo"), text("\n"), text("bar"))
        ]

    def test_blank_line_before_child_block_is_not_content(self) -> None:
        assert parse_document("#p foo\n\n  #q bar") == [
            element("p", text("foo"), element("q", text("bar")))
        ]

    def test_surplus_indentation_is_content(self) -> None:
        assert parse_document("#p\n   hi") == [element("p", text(" hi"))]

    def test_continuation_with_inline_element(self) -> None:
        assert parse_document("#p foo\n  %em{bar}") == [
            element("p", text("foo"), text("\n"), element("em", text("bar")))
        ]

    def test_escaped_hash_starts_continuation(self) -> None:
        assert parse_document("#p hi\n  %#foo") == [
            element("p", text("hi"), text("\n"), text("#"), text("foo"))
        ]

    def test_hash_without_name_is_content(self) -> None:
        assert parse_document("#listing\n  calc_foo()\n  # => 123") == [
            element("listing", text("calc_foo()"), text("\n"), text("# => 123"))
        ]

    def test_lone_hash_is_content(self) -> None:
        assert parse_document("#p\n  #") == [element("p", text("#"))]


class TestBlockErrors:
    @pytest.mark.parametrize(
        ("source", "kind", "line", "column"),
        [
            ("#", ParseErrorKind.UNEXPECTED_EOF, 0, 1),
            ("# p", ParseErrorKind.INVALID_CHAR_IN_NAME, 0, 1),
            ("#1p", ParseErrorKind.INVALID_CHAR_IN_NAME, 0, 1),
            ("#-p", ParseErrorKind.INVALID_CHAR_IN_NAME, 0, 1),
            ("hello", ParseErrorKind.EXPECTED_HASH, 0, 0),
            (" #p hi", ParseErrorKind.EXPECTED_HASH, 0, 0),
            ("#p hi\nfoo", ParseErrorKind.EXPECTED_HASH, 1, 0),
            ("#p hi\n #x", ParseErrorKind.EXPECTED_HASH, 1, 0),
            ("#p%a{b}", ParseErrorKind.UNEXPECTED_CONTENT_AFTER_BLOCK_NAME, 0, 2),
            ("#p.x", ParseErrorKind.UNEXPECTED_CONTENT_AFTER_BLOCK_NAME, 0, 2),
            ("#p[a=b]x", ParseErrorKind.UNEXPECTED_CONTENT_AFTER_BLOCK_NAME, 0, 7),
        ],
    )
    def test_error_kind_and_position(
        self, source: str, kind: ParseErrorKind, line: int, column: int
    ) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_document(source)
        assert exc_info.value.kind == kind
        assert (exc_info.value.line, exc_info.value.column) == (line, column)

    def test_expected_space_in_indentation(self) -> None:
        parser = Parser("  x")
        with pytest.raises(ParseError) as exc_info:
            parser.parse_indentation(2)
        assert exc_info.value.kind == ParseErrorKind.EXPECTED_SPACE
        assert exc_info.value.column == 2

    def test_indentation_consumes_exact_width(self) -> None:
        parser = Parser("     x")
        parser.parse_indentation(2)
        assert parser.scanner.position.column == 4
        assert parser.scanner.peek() == " "


class TestParser:
    def test_parse_returns_list(self) -> None:
        assert Parser("#p a\n#p b").parse() == [
            element("p", text("a")),
            element("p", text("b")),
        ]

    def test_raw_parser_errors_have_no_context(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Parser("#p }").parse()
        assert exc_info.value.context is None

    def test_deep_nesting_beyond_recursion_limit(self) -> None:
        depth = 2000
        source = "\n".join("  " * level + "#d" for level in range(depth))
        with pytest.raises(RecursionError):
            parse_document(source)
