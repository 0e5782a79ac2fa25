"""Static evaluation and checking of `aria-*` JSX attribute values."""

from __future__ import annotations

import math
import re
from typing import Any, Final

from estreepy.aria import AriaPropType, AriaPropTypeRule
from estreepy.ast import EstreeNode


class _NotStatic:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<not static>"


NOT_STATIC: Final = _NotStatic()
"""Marker for attribute values that cannot be known without running the code."""


def attribute_name(attribute: EstreeNode) -> str | None:
    name = attribute.get("name")
    if not isinstance(name, dict) or name.get("type") != "JSXIdentifier":
        return None
    return name.get("name")


def attribute_value(attribute: EstreeNode) -> Any:
    """Value of a JSX attribute as the browser would see it, or `NOT_STATIC`.

    A bare attribute (`<div aria-hidden />`) is `True`; `"true"`/`"false"` strings
    are read as booleans.
    """
    value = attribute.get("value")
    if value is None:
        return True
    match value.get("type"):
        case "Literal":
            resolved = value.get("value")
        case "JSXExpressionContainer":
            resolved = static_value(value.get("expression") or {})
        case _:
            return NOT_STATIC
    if resolved is None:
        return NOT_STATIC
    if isinstance(resolved, str) and resolved.lower() in ("true", "false"):
        return resolved.lower() == "true"
    return resolved


def static_value(expression: EstreeNode) -> Any:
    match expression.get("type"):
        case "Literal":
            value = expression.get("value")
            if value is None or isinstance(value, re.Pattern):
                return NOT_STATIC
            return value
        case "TemplateLiteral":
            return _template_text(expression)
        case "UnaryExpression":
            argument = static_value(expression.get("argument") or {})
            if argument is NOT_STATIC:
                return NOT_STATIC
            return _apply_unary(expression.get("operator"), argument)
        case _:
            return NOT_STATIC


def _template_text(template: EstreeNode) -> str:
    quasis = template.get("quasis", [])
    expressions = template.get("expressions", [])
    parts: list[str] = []
    for index, quasi in enumerate(quasis):
        cooked = quasi.get("value", {}).get("cooked")
        parts.append(cooked if cooked is not None else quasi.get("value", {}).get("raw", ""))
        if index < len(expressions):
            expression = expressions[index]
            placeholder = expression.get("name") if expression.get("type") == "Identifier" else ""
            parts.append("${" + (placeholder or "") + "}")
    return "".join(parts)


def _apply_unary(operator: str | None, argument: Any) -> Any:
    match operator:
        case "!":
            return not _is_truthy(argument)
        case "-":
            return -_to_number(argument)
        case "+":
            return _to_number(argument)
        case "~":
            number = _to_number(argument)
            return ~int(number) if math.isfinite(number) else -1
        case _:
            return NOT_STATIC


def _is_truthy(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _to_number(value: Any) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, str):
        try:
            int(value.strip())
        except ValueError:
            return False
        return True
    return False


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return not math.isnan(value)
    if isinstance(value, str):
        try:
            return not math.isnan(float(value.strip()))
        except ValueError:
            return False
    return False


def is_valid_value(rule: AriaPropTypeRule, value: Any) -> bool:
    allowed = rule.allowed_values or frozenset()
    match rule.prop_type:
        case AriaPropType.BOOLEAN:
            return isinstance(value, bool) or (rule.allow_undefined and value == "undefined")
        case AriaPropType.STRING | AriaPropType.ID | AriaPropType.ID_LIST:
            return isinstance(value, str)
        case AriaPropType.TRISTATE:
            return isinstance(value, bool) or value == "mixed"
        case AriaPropType.INTEGER:
            return _is_integer(value)
        case AriaPropType.NUMBER:
            return _is_number(value)
        case AriaPropType.TOKEN:
            if isinstance(value, bool):
                return rule.allow_boolean_values
            return isinstance(value, str) and value.lower() in allowed
        case AriaPropType.TOKEN_LIST:
            return isinstance(value, str) and all(token.lower() in allowed for token in value.split(" "))


def describe_expected(rule: AriaPropTypeRule) -> str:
    match rule.prop_type:
        case AriaPropType.BOOLEAN:
            return "`true`, `false` or `undefined`" if rule.allow_undefined else "`true` or `false`"
        case AriaPropType.STRING:
            return "a string"
        case AriaPropType.ID:
            return "an element id"
        case AriaPropType.ID_LIST:
            return "a space-separated list of element ids"
        case AriaPropType.TRISTATE:
            return "`true`, `false` or `mixed`"
        case AriaPropType.INTEGER:
            return "an integer"
        case AriaPropType.NUMBER:
            return "a number"
        case AriaPropType.TOKEN | AriaPropType.TOKEN_LIST:
            tokens = [f"`{token}`" for token in sorted(rule.allowed_values or ())]
            if rule.allow_boolean_values:
                tokens = ["`true`", "`false`", *tokens]
            prefix = "one of" if rule.prop_type == AriaPropType.TOKEN else "a space-separated list of"
            return f"{prefix} {', '.join(tokens)}"
