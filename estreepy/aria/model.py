"""ARIA attribute type rule model shared by the generator and the lint rule."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class AriaPropType(StrEnum):
    ID = "id"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TOKEN = "token"
    TOKEN_LIST = "tokenlist"
    ID_LIST = "idlist"
    # true/false or "mixed"
    TRISTATE = "tristate"


@dataclass(frozen=True, slots=True)
class AriaPropTypeRule:
    """Accepted values of one `aria-*` attribute.

    `allowed_values` only ever holds string tokens; whether `true`/`false` are
    accepted as well is tracked by `allow_boolean_values`.
    """

    prop_type: AriaPropType
    allowed_values: frozenset[str] | None = None
    allow_undefined: bool = False
    allow_boolean_values: bool = False
