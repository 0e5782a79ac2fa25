"""Text ranges and line lookup."""

from estreepy.text.text import LineIndex, TextRange, slice_text_range, utf16_length

__all__ = [
    "LineIndex",
    "TextRange",
    "slice_text_range",
    "utf16_length",
]
