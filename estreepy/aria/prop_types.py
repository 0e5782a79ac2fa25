# This file is generated by scripts/generate_aria_prop_types.py. Do not edit by hand.
"""ARIA attribute value type rules, keyed by attribute name in definition order."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from estreepy.aria.model import AriaPropType, AriaPropTypeRule

ARIA_PROP_TYPES: Final[Mapping[str, AriaPropTypeRule]] = MappingProxyType(
    {
        "aria-activedescendant": AriaPropTypeRule(AriaPropType.ID, None, False, False),
        "aria-atomic": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-autocomplete": AriaPropTypeRule(AriaPropType.TOKEN, frozenset({"inline", "list", "both", "none"}), False, False),
        "aria-braillelabel": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
        "aria-brailleroledescription": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
        "aria-busy": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-checked": AriaPropTypeRule(AriaPropType.TRISTATE, None, False, False),
        "aria-colcount": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-colindex": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-colspan": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-controls": AriaPropTypeRule(AriaPropType.ID_LIST, None, False, False),
        "aria-current": AriaPropTypeRule(AriaPropType.TOKEN, frozenset({"page", "step", "location", "date", "time"}), False, True),
        "aria-describedby": AriaPropTypeRule(AriaPropType.ID_LIST, None, False, False),
        "aria-description": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
        "aria-details": AriaPropTypeRule(AriaPropType.ID, None, False, False),
        "aria-disabled": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-dropeffect": AriaPropTypeRule(AriaPropType.TOKEN_LIST, frozenset({"copy", "execute", "link", "move", "none", "popup"}), False, False),
        "aria-errormessage": AriaPropTypeRule(AriaPropType.ID, None, False, False),
        "aria-expanded": AriaPropTypeRule(AriaPropType.BOOLEAN, None, True, False),
        "aria-flowto": AriaPropTypeRule(AriaPropType.ID_LIST, None, False, False),
        "aria-grabbed": AriaPropTypeRule(AriaPropType.BOOLEAN, None, True, False),
        "aria-haspopup": AriaPropTypeRule(AriaPropType.TOKEN, frozenset({"menu", "listbox", "tree", "grid", "dialog"}), False, True),
        "aria-hidden": AriaPropTypeRule(AriaPropType.BOOLEAN, None, True, False),
        "aria-invalid": AriaPropTypeRule(AriaPropType.TOKEN, frozenset({"grammar", "spelling"}), False, True),
        "aria-keyshortcuts": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
        "aria-label": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
        "aria-labelledby": AriaPropTypeRule(AriaPropType.ID_LIST, None, False, False),
        "aria-level": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-live": AriaPropTypeRule(AriaPropType.TOKEN, frozenset({"assertive", "off", "polite"}), False, False),
        "aria-modal": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-multiline": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-multiselectable": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-orientation": AriaPropTypeRule(AriaPropType.TOKEN, frozenset({"vertical", "undefined", "horizontal"}), False, False),
        "aria-owns": AriaPropTypeRule(AriaPropType.ID_LIST, None, False, False),
        "aria-placeholder": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
        "aria-posinset": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-pressed": AriaPropTypeRule(AriaPropType.TRISTATE, None, False, False),
        "aria-readonly": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-relevant": AriaPropTypeRule(AriaPropType.TOKEN_LIST, frozenset({"additions", "all", "removals", "text"}), False, False),
        "aria-required": AriaPropTypeRule(AriaPropType.BOOLEAN, None, False, False),
        "aria-roledescription": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
        "aria-rowcount": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-rowindex": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-rowspan": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-selected": AriaPropTypeRule(AriaPropType.BOOLEAN, None, True, False),
        "aria-setsize": AriaPropTypeRule(AriaPropType.INTEGER, None, False, False),
        "aria-sort": AriaPropTypeRule(AriaPropType.TOKEN, frozenset({"ascending", "descending", "none", "other"}), False, False),
        "aria-valuemax": AriaPropTypeRule(AriaPropType.NUMBER, None, False, False),
        "aria-valuemin": AriaPropTypeRule(AriaPropType.NUMBER, None, False, False),
        "aria-valuenow": AriaPropTypeRule(AriaPropType.NUMBER, None, False, False),
        "aria-valuetext": AriaPropTypeRule(AriaPropType.STRING, None, False, False),
    }
)
