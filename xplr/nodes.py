"""Tree of key/value nodes built from parsed documents."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

DISPLAYED_LAYERS = 2
MAX_STRING_LENGTH = 150


def _truncate(text: str) -> str:
    if len(text) > MAX_STRING_LENGTH:
        return text[:MAX_STRING_LENGTH] + "..."
    return text


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


@dataclass(eq=False)
class Node:
    """A node in the tree: a key, a display value and optional children."""

    key: str
    value: str = ""
    children: list[Node] | None = None
    expand: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        mine = self.children or []
        theirs = other.children or []
        return (
            self.key == other.key
            and self.value == other.value
            and self.expand == other.expand
            and len(mine) == len(theirs)
            and all(a == b for a, b in zip(mine, theirs))
        )

    def __str__(self) -> str:
        if self.children:
            inner = " ".join(str(child) for child in self.children)
            text = f"{self.key}: {{{inner}}}"
        elif self.value:
            text = f"{self.key}: {self.value}"
        else:
            text = self.key
        return _truncate(text)

    def short_string(self) -> str:
        """Space-separated values of the leaves below this node."""
        if self.children is not None:
            text = " ".join(child.short_string() for child in self.children)
        else:
            text = self.value
        return _truncate(text)


def build_tree(data: Mapping[str, Any], display_layers: int = 0) -> list[Node]:
    """Build the top-level nodes of a mapping, expanding the first layers."""
    return _make_tree(data, 0, display_layers)


def _make_tree(data: Mapping[str, Any], layer: int, display_layers: int) -> list[Node]:
    return [make_node(key, value, layer, display_layers) for key, value in data.items()]


def make_node(key: str, value: Any, layer: int = 0, display_layers: int = 0) -> Node:
    """Build a node (and its subtree) for one key and value."""
    node = Node(key=str(key), expand=layer < display_layers)
    if isinstance(value, str):
        node.value = value
    elif isinstance(value, bool):
        node.value = "true" if value else "false"
    elif isinstance(value, int):
        node.value = str(value)
    elif isinstance(value, float):
        node.value = _format_float(value)
    elif isinstance(value, list):
        node.children = [
            make_node(str(index), child, layer + 1, display_layers)
            for index, child in enumerate(value)
        ]
        node.value = node.short_string()
    elif isinstance(value, Mapping):
        node.children = _make_tree(value, layer + 1, display_layers)
        node.value = node.short_string()
    return node


def dfs(nodes: list[Node], visit: Callable[[Node, int], None], layer: int = 0) -> None:
    """Call visit on each node depth first, descending only into expanded nodes."""
    for node in nodes:
        visit(node, layer)
        if node.children is not None and node.expand:
            dfs(node.children, visit, layer + 1)