"""
Generic visitor for reducing a D-Mark tree to another representation.

Subclasses implement one method per node kind. Recursion into children is
provided; each child receives a context value derived from its parent's.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from .nodes import ElementNode, Node, TextNode

T = TypeVar("T")


class Translator(ABC, Generic[T]):
    """
    Base class for tree translators producing values of type ``T``.

    Example:

        class PlainText(Translator[str]):
            def translate_element(self, node, children, context):
                return "".join(children)

            def translate_text(self, node, context):
                return node.content
    """

    def translate(self, node: Node, context: Any = None) -> T:
        """Translate ``node`` and, for elements, all of its descendants."""
        if isinstance(node, ElementNode):
            child_context = self.child_context(node, context)
            children = [self.translate(child, child_context) for child in node.children]
            return self.translate_element(node, children, context)
        if isinstance(node, TextNode):
            return self.translate_text(node, context)
        raise TypeError(f"Cannot translate {type(node).__name__}")

    def translate_all(self, nodes: Iterable[Node], context: Any = None) -> list[T]:
        """Translate a sequence of sibling nodes with the same context."""
        return [self.translate(node, context) for node in nodes]

    def child_context(self, node: ElementNode, context: Any) -> Any:
        """Context passed to each child of ``node``. Defaults to the parent's context."""
        return context

    @abstractmethod
    def translate_element(self, node: ElementNode, children: list[T], context: Any) -> T:
        """Combine an element with its already translated children."""
        pass

    @abstractmethod
    def translate_text(self, node: TextNode, context: Any) -> T:
        """Translate a text node."""
        pass
