"""Authored ARIA attribute descriptors, in definition order.

Source data for `estreepy/aria/prop_types.py`; regenerate it with
`scripts/generate_aria_prop_types.py` after editing this table.
"""

from __future__ import annotations

from typing import Final, NotRequired, TypedDict


class AriaPropertyDescriptor(TypedDict):
    type: str
    values: NotRequired[tuple[str | bool, ...]]
    allowundefined: NotRequired[bool]


ARIA_PROPERTIES: Final[tuple[tuple[str, AriaPropertyDescriptor], ...]] = (
    ("aria-activedescendant", {"type": "id"}),
    ("aria-atomic", {"type": "boolean"}),
    ("aria-autocomplete", {"type": "token", "values": ("inline", "list", "both", "none")}),
    ("aria-braillelabel", {"type": "string"}),
    ("aria-brailleroledescription", {"type": "string"}),
    ("aria-busy", {"type": "boolean"}),
    ("aria-checked", {"type": "tristate"}),
    ("aria-colcount", {"type": "integer"}),
    ("aria-colindex", {"type": "integer"}),
    ("aria-colspan", {"type": "integer"}),
    ("aria-controls", {"type": "idlist"}),
    ("aria-current", {"type": "token", "values": ("page", "step", "location", "date", "time", True, False)}),
    ("aria-describedby", {"type": "idlist"}),
    ("aria-description", {"type": "string"}),
    ("aria-details", {"type": "id"}),
    ("aria-disabled", {"type": "boolean"}),
    ("aria-dropeffect", {"type": "tokenlist", "values": ("copy", "execute", "link", "move", "none", "popup")}),
    ("aria-errormessage", {"type": "id"}),
    ("aria-expanded", {"type": "boolean", "allowundefined": True}),
    ("aria-flowto", {"type": "idlist"}),
    ("aria-grabbed", {"type": "boolean", "allowundefined": True}),
    ("aria-haspopup", {"type": "token", "values": (False, True, "menu", "listbox", "tree", "grid", "dialog")}),
    ("aria-hidden", {"type": "boolean", "allowundefined": True}),
    ("aria-invalid", {"type": "token", "values": ("grammar", False, "spelling", True)}),
    ("aria-keyshortcuts", {"type": "string"}),
    ("aria-label", {"type": "string"}),
    ("aria-labelledby", {"type": "idlist"}),
    ("aria-level", {"type": "integer"}),
    ("aria-live", {"type": "token", "values": ("assertive", "off", "polite")}),
    ("aria-modal", {"type": "boolean"}),
    ("aria-multiline", {"type": "boolean"}),
    ("aria-multiselectable", {"type": "boolean"}),
    ("aria-orientation", {"type": "token", "values": ("vertical", "undefined", "horizontal")}),
    ("aria-owns", {"type": "idlist"}),
    ("aria-placeholder", {"type": "string"}),
    ("aria-posinset", {"type": "integer"}),
    ("aria-pressed", {"type": "tristate"}),
    ("aria-readonly", {"type": "boolean"}),
    ("aria-relevant", {"type": "tokenlist", "values": ("additions", "all", "removals", "text")}),
    ("aria-required", {"type": "boolean"}),
    ("aria-roledescription", {"type": "string"}),
    ("aria-rowcount", {"type": "integer"}),
    ("aria-rowindex", {"type": "integer"}),
    ("aria-rowspan", {"type": "integer"}),
    ("aria-selected", {"type": "boolean", "allowundefined": True}),
    ("aria-setsize", {"type": "integer"}),
    ("aria-sort", {"type": "token", "values": ("ascending", "descending", "none", "other")}),
    ("aria-valuemax", {"type": "number"}),
    ("aria-valuemin", {"type": "number"}),
    ("aria-valuenow", {"type": "number"}),
    ("aria-valuetext", {"type": "string"}),
)
