"""ARIA attribute type rules: authored descriptors, generator and generated table."""

from estreepy.aria.generate import GENERATED_MODULE, AuthoredDataError, generate, render_entry
from estreepy.aria.model import AriaPropType, AriaPropTypeRule
from estreepy.aria.prop_types import ARIA_PROP_TYPES
from estreepy.aria.properties import ARIA_PROPERTIES, AriaPropertyDescriptor

__all__ = [
    "ARIA_PROPERTIES",
    "ARIA_PROP_TYPES",
    "GENERATED_MODULE",
    "AriaPropType",
    "AriaPropTypeRule",
    "AriaPropertyDescriptor",
    "AuthoredDataError",
    "generate",
    "render_entry",
]
