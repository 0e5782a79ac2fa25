"""Literal value reconstruction for `Literal` nodes that JSON cannot carry.

Big integers and regular expressions arrive with a `null` value plus a side
channel holding their source form; the helpers here turn that source form back
into native Python values.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any, Final, TypeAlias

logger = logging.getLogger(__name__)

LiteralSource: TypeAlias = "BigIntSource | RegexSource"
RealizedLiteral: TypeAlias = int | re.Pattern[str]

_REGEX_FLAGS: Final[dict[str, re.RegexFlag]] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}
# Stateful matching flags; Python compiles the same pattern either way.
_NEUTRAL_REGEX_FLAGS: Final[frozenset[str]] = frozenset("dguy")

_RADIX_PREFIXES: Final[tuple[str, ...]] = ("0x", "0X", "0o", "0O", "0b", "0B")
# Stays under the interpreter's int/str conversion digit limit (4300 by default).
_DECIMAL_CHUNK_DIGITS: Final[int] = 4000

# JavaScript character classes are ASCII-only; Python's follow Unicode.
_ASCII_ESCAPES: Final[dict[str, str]] = {
    "d": r"(?a:\d)",
    "D": r"(?a:\D)",
    "w": r"(?a:\w)",
    "W": r"(?a:\W)",
    "b": r"(?a:\b)",
    "B": r"(?a:\B)",
}
_ASCII_CLASS_ESCAPES: Final[dict[str, str]] = {
    "d": "0-9",
    "D": r"\x00-\x2f\x3a-\U0010ffff",
    "w": "0-9A-Za-z_",
    "W": r"\x00-\x2f\x3a-\x40\x5b-\x5e\x60\x7b-\U0010ffff",
}
# Without the `s` flag `.` stops at every ECMAScript line terminator.
_JS_DOT: Final[str] = r"[^\n\r\u2028\u2029]"


@dataclass(frozen=True, slots=True)
class BigIntSource:
    numeral: str


@dataclass(frozen=True, slots=True)
class RegexSource:
    pattern: str
    flags: str = ""


class UnsupportedRegexError(ValueError):
    """The regex source cannot be expressed with Python's `re` module."""


def is_placeholder_literal(node: dict[str, Any]) -> bool:
    return node.get("type") == "Literal" and "value" in node and node["value"] is None


def literal_source(node: dict[str, Any]) -> LiteralSource | None:
    """Classify the side channel carried by a `Literal` node, if any."""
    numeral = node.get("bigint")
    if isinstance(numeral, str):
        return BigIntSource(numeral)

    regex = node.get("regex")
    if isinstance(regex, dict) and isinstance(regex.get("pattern"), str):
        flags = regex.get("flags")
        return RegexSource(regex["pattern"], flags if isinstance(flags, str) else "")

    return None


def realize_bigint(source: BigIntSource) -> int:
    numeral = source.numeral.strip().removesuffix("n").replace("_", "")
    if numeral.startswith(_RADIX_PREFIXES):
        return int(numeral, 0)
    return _parse_decimal(numeral)


def _parse_decimal(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _DECIMAL_CHUNK_DIGITS):
        chunk = digits[start : start + _DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return value


def regex_flags(flags: str) -> re.RegexFlag:
    compiled = re.RegexFlag(0)
    seen: set[str] = set()
    for flag in flags:
        if flag in seen:
            raise UnsupportedRegexError(f"Duplicate regex flag `{flag}`")
        seen.add(flag)
        if flag in _REGEX_FLAGS:
            compiled |= _REGEX_FLAGS[flag]
        elif flag not in _NEUTRAL_REGEX_FLAGS:
            raise UnsupportedRegexError(f"Unsupported regex flag `{flag}`")
    return compiled


def translate_pattern(pattern: str, flags: str = "") -> str:
    """Rewrite an ECMAScript pattern into Python's `re` spelling.

    Named groups and backreferences change syntax; `\\d`, `\\w`, `\\b` and their
    negations are pinned to ASCII; `$` only matches at the very end and `.` stops
    at every line terminator unless the `m` or `s` flag says otherwise.
    """
    multiline = "m" in flags
    dotall = "s" in flags
    out: list[str] = []
    index = 0
    length = len(pattern)
    in_class = False
    while index < length:
        char = pattern[index]
        if char == "\\" and index + 1 < length:
            if not in_class and pattern.startswith("k<", index + 1):
                close = pattern.find(">", index + 3)
                if close != -1:
                    out.append(f"(?P={pattern[index + 3 : close]})")
                    index = close + 1
                    continue
            escaped = pattern[index + 1]
            table = _ASCII_CLASS_ESCAPES if in_class else _ASCII_ESCAPES
            out.append(table.get(escaped, pattern[index : index + 2]))
            index += 2
            continue

        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif pattern.startswith("(?<", index) and not pattern.startswith(("(?<=", "(?<!"), index):
            out.append("(?P<")
            index += 3
            continue
        elif char == "$" and not multiline:
            out.append(r"\Z")
            index += 1
            continue
        elif char == "." and not dotall:
            out.append(_JS_DOT)
            index += 1
            continue

        out.append(char)
        index += 1
    return "".join(out)


def compile_regex(source: RegexSource) -> re.Pattern[str]:
    """Compile a regex literal; raises `UnsupportedRegexError` or `re.error` on failure."""
    flags = regex_flags(source.flags)
    return re.compile(translate_pattern(source.pattern, source.flags), flags)


def realize_regex(source: RegexSource) -> re.Pattern[str] | None:
    try:
        return compile_regex(source)
    except (re.error, UnsupportedRegexError, OverflowError, RecursionError) as exc:
        logger.debug("Leaving regex literal /%s/%s unrealized: %s", source.pattern, source.flags, exc)
        return None


def realize_literal(source: LiteralSource) -> RealizedLiteral | None:
    match source:
        case BigIntSource():
            return realize_bigint(source)
        case RegexSource():
            return realize_regex(source)


__all__ = [
    "BigIntSource",
    "LiteralSource",
    "RealizedLiteral",
    "RegexSource",
    "UnsupportedRegexError",
    "compile_regex",
    "is_placeholder_literal",
    "literal_source",
    "realize_bigint",
    "realize_literal",
    "realize_regex",
    "regex_flags",
    "translate_pattern",
]
