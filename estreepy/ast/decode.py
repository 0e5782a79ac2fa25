"""Decode the engine's JSON program into a native ESTree object graph."""

from __future__ import annotations

import json
from typing import Any

from estreepy.ast.literal import is_placeholder_literal, literal_source, realize_literal


def revive_node(node: dict[str, Any]) -> dict[str, Any]:
    """JSON object hook that repairs `Literal` values lost in transit.

    Runs per decoded object, children first, so no second pass over the tree is needed.
    """
    if not is_placeholder_literal(node):
        return node

    source = literal_source(node)
    if source is not None:
        node["value"] = realize_literal(source)
    return node


def decode_program(text: str | bytes | bytearray) -> dict[str, Any]:
    """Decode program JSON; malformed input raises `json.JSONDecodeError`."""
    program = json.loads(text, object_hook=revive_node)
    if not isinstance(program, dict):
        raise ValueError(f"Program JSON must decode to an object, got {type(program).__name__}")
    return program
