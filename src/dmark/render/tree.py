"""
Rich tree rendering of parsed D-Mark documents.
"""

from collections.abc import Sequence
from typing import Any

from rich.text import Text
from rich.tree import Tree

from dmark.core.nodes import ElementNode, Node, TextNode
from dmark.core.translator import Translator

STYLES = {
    "element": "bold cyan",
    "attribute": "yellow",
    "text": "green",
    "root": "bright_black",
}


class TreeTranslator(Translator[Tree]):
    """Translate nodes into rich Tree widgets."""

    def translate_element(self, node: ElementNode, children: list[Tree], context: Any) -> Tree:
        label = Text(node.name, style=STYLES["element"])
        for key, value in node.attributes.items():
            label.append(f" {key}={value!r}", style=STYLES["attribute"])

        tree = Tree(label)
        tree.children.extend(children)
        return tree

    def translate_text(self, node: TextNode, context: Any) -> Tree:
        return Tree(Text(repr(node.content), style=STYLES["text"]))


def render_tree(nodes: Sequence[Node], title: str = "document") -> Tree:
    """Build a single tree with one branch per top-level node."""
    root = Tree(Text(title, style=STYLES["root"]))
    root.children.extend(TreeTranslator().translate_all(nodes))
    return root
