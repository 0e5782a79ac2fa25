"""Generate the static ARIA attribute type table from the authored descriptors."""

from __future__ import annotations

from collections.abc import Iterable
import json
from typing import Final

from estreepy.aria.model import AriaPropType
from estreepy.aria.properties import ARIA_PROPERTIES, AriaPropertyDescriptor

GENERATED_MODULE: Final[str] = "estreepy/aria/prop_types.py"

_HEADER: Final[tuple[str, ...]] = (
    "# This file is generated by scripts/generate_aria_prop_types.py. Do not edit by hand.",
    '"""ARIA attribute value type rules, keyed by attribute name in definition order."""',
    "",
    "from collections.abc import Mapping",
    "from types import MappingProxyType",
    "from typing import Final",
    "",
    "from estreepy.aria.model import AriaPropType, AriaPropTypeRule",
    "",
    "ARIA_PROP_TYPES: Final[Mapping[str, AriaPropTypeRule]] = MappingProxyType(",
    "    {",
)
_FOOTER: Final[tuple[str, ...]] = (
    "    }",
    ")",
)


class AuthoredDataError(ValueError):
    """The authored descriptor table cannot produce a valid lookup table."""


def _prop_type(name: str, tag: str) -> AriaPropType:
    try:
        return AriaPropType(tag)
    except ValueError:
        expected = ", ".join(member.value for member in AriaPropType)
        raise AuthoredDataError(f"`{name}` has unrecognized type `{tag}`; expected one of {expected}") from None


def _split_values(name: str, values: Iterable[object]) -> tuple[list[str], bool]:
    tokens: list[str] = []
    allow_boolean_values = False
    for value in values:
        if isinstance(value, bool):
            allow_boolean_values = True
        elif isinstance(value, str):
            tokens.append(value)
        else:
            raise AuthoredDataError(f"`{name}` has value {value!r}; expected a string or a boolean")
    return tokens, allow_boolean_values


def _literal(value: str) -> str:
    return json.dumps(value)


def render_entry(name: str, descriptor: AriaPropertyDescriptor) -> str:
    prop_type = _prop_type(name, descriptor["type"])
    if "values" in descriptor:
        tokens, allow_boolean_values = _split_values(name, descriptor["values"])
        allowed_values = "frozenset({" + ", ".join(_literal(token) for token in tokens) + "})" if tokens else "frozenset()"
    else:
        allowed_values = "None"
        allow_boolean_values = False
    allow_undefined = bool(descriptor.get("allowundefined", False))
    return (
        f"        {_literal(name)}: AriaPropTypeRule(AriaPropType.{prop_type.name}, "
        f"{allowed_values}, {allow_undefined}, {allow_boolean_values}),"
    )


def generate(
    properties: Iterable[tuple[str, AriaPropertyDescriptor]] = ARIA_PROPERTIES,
) -> str:
    """Render the lookup table module; identical input yields identical text."""
    lines = list(_HEADER)
    seen: set[str] = set()
    for name, descriptor in properties:
        if name in seen:
            raise AuthoredDataError(f"`{name}` is defined more than once")
        seen.add(name)
        lines.append(render_entry(name, descriptor))
    lines.extend(_FOOTER)
    return "\n".join(lines) + "\n"
