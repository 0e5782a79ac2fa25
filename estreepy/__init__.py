"""Lazily realized ESTree parse results over an external parsing engine."""

from estreepy.parser import (
    BindingNotFoundError,
    ParserBinding,
    ParserOptions,
    RawParseResultData,
    parse_async,
    parse_sync,
    register_binding,
)
from estreepy.pipeline import ParseResult, wrap

__all__ = [
    "BindingNotFoundError",
    "ParseResult",
    "ParserBinding",
    "ParserOptions",
    "RawParseResultData",
    "parse_async",
    "parse_sync",
    "register_binding",
    "wrap",
]
