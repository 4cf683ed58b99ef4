"""Output formats for parsed documents: rich trees and JSON."""

from .serialize import to_data, to_json
from .tree import TreeTranslator, render_tree

__all__ = [
    "TreeTranslator",
    "render_tree",
    "to_data",
    "to_json",
]
