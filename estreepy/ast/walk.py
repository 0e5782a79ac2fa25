"""Traversal helpers over decoded ESTree dictionaries."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeAlias

EstreeNode: TypeAlias = dict[str, Any]


def is_node(value: object) -> bool:
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def child_nodes(node: EstreeNode) -> Iterator[EstreeNode]:
    for value in node.values():
        if is_node(value):
            yield value
        elif isinstance(value, list):
            for item in value:
                if is_node(item):
                    yield item


def iter_nodes(root: EstreeNode) -> Iterator[EstreeNode]:
    """Yield every node in source (pre-)order without recursion."""
    stack: list[EstreeNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(child_nodes(node))))


def iter_nodes_of_type(root: EstreeNode, node_type: str) -> Iterator[EstreeNode]:
    return (node for node in iter_nodes(root) if node["type"] == node_type)


def iter_literals(root: EstreeNode) -> Iterator[EstreeNode]:
    return iter_nodes_of_type(root, "Literal")
