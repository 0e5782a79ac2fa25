"""Native ESTree object graph over the engine's JSON program."""

from estreepy.ast.decode import decode_program, revive_node
from estreepy.ast.literal import (
    BigIntSource,
    LiteralSource,
    RealizedLiteral,
    RegexSource,
    UnsupportedRegexError,
    compile_regex,
    literal_source,
    realize_bigint,
    realize_literal,
    realize_regex,
)
from estreepy.ast.walk import (
    EstreeNode,
    child_nodes,
    is_node,
    iter_literals,
    iter_nodes,
    iter_nodes_of_type,
)

__all__ = [
    "BigIntSource",
    "EstreeNode",
    "LiteralSource",
    "RealizedLiteral",
    "RegexSource",
    "UnsupportedRegexError",
    "child_nodes",
    "compile_regex",
    "decode_program",
    "is_node",
    "iter_literals",
    "iter_nodes",
    "iter_nodes_of_type",
    "literal_source",
    "realize_bigint",
    "realize_literal",
    "realize_regex",
    "revive_node",
]
