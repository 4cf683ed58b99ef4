"""
Document tree types produced by the D-Mark parser.

A parsed document is an ordered list of nodes. Each node is either an
element (name, attributes, ordered children) or a run of text. Nodes are
immutable once built.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

NAME_PATTERN = r"^[A-Za-z][A-Za-z0-9_-]*$"

_NAME_RE = re.compile(NAME_PATTERN)


class TextNode(BaseModel):
    """
    A run of text.

    Attributes:
        content: The decoded text (escape sequences already resolved)
    """

    kind: Literal["text"] = "text"
    content: str

    model_config = ConfigDict(frozen=True)


class ElementNode(BaseModel):
    """
    A block or inline element.

    Attributes:
        name: Element name (identifier)
        attributes: Attribute values by key; a flag attribute maps to its own name.
            Stored as a read-only mapping, dumped as a plain dict.
        children: Child nodes in document order
    """

    kind: Literal["element"] = "element"
    name: str = Field(pattern=NAME_PATTERN)
    attributes: dict[str, str] = Field(default_factory=dict, validate_default=True)
    children: tuple[Node, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("attributes")
    @classmethod
    def _check_attribute_keys(cls, value: dict[str, str]) -> Mapping[str, str]:
        for key in value:
            if not _NAME_RE.fullmatch(key):
                raise ValueError(f"invalid attribute key: {key!r}")
        return MappingProxyType(value)

    @field_serializer("attributes")
    def _dump_attributes(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def text_content(self) -> str:
        """Concatenate the text of all descendant text nodes in document order."""
        parts = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.content)
            else:
                parts.append(child.text_content())
        return "".join(parts)


Node = Annotated[Union[ElementNode, TextNode], Field(discriminator="kind")]

ElementNode.model_rebuild()
