"""JSON serialisation of parsed D-Mark documents."""

import json
from collections.abc import Sequence
from typing import Any

from dmark.core.nodes import Node


def to_data(nodes: Sequence[Node]) -> list[dict[str, Any]]:
    """Dump nodes to plain JSON-compatible data."""
    return [node.model_dump(mode="json") for node in nodes]


def to_json(nodes: Sequence[Node], indent: int | None = 2) -> str:
    return json.dumps(to_data(nodes), indent=indent, ensure_ascii=False)
