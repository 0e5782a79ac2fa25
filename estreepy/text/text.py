from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TextRange:
    """
    Half-open range [start, end) of character offsets into source text.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> TextRange:
        return TextRange(offset, offset)

    @staticmethod
    def of_node(node: object) -> TextRange:
        """Range of an ESTree node carrying `start`/`end` offsets, or an empty range at 0."""
        if isinstance(node, dict):
            start = node.get("start")
            end = node.get("end")
            if isinstance(start, int) and isinstance(end, int) and 0 <= start <= end:
                return TextRange(start, end)
        return TextRange.empty(0)

    def is_empty(self) -> bool:
        return self.start == self.end

    def within(self, length: int) -> bool:
        """Check if the range fits inside a text of the given length."""
        return self.end <= length

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Offset to zero-based (line, column) lookup over a fixed text.

    Columns are counted in UTF-16 code units, as source maps expect.
    """

    text: str
    line_starts: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self):
        starts = [0]
        for index, char in enumerate(self.text):
            if char == "\n":
                starts.append(index + 1)
        object.__setattr__(self, "line_starts", tuple(starts))

    def line_col(self, offset: int) -> tuple[int, int]:
        if offset < 0 or offset > len(self.text):
            raise ValueError(f"Offset {offset} is outside of text of length {len(self.text)}")
        line = bisect_right(self.line_starts, offset) - 1
        line_start = self.line_starts[line]
        return (line, utf16_length(self.text[line_start:offset]))

    @property
    def line_count(self) -> int:
        return len(self.line_starts)


def utf16_length(text: str) -> int:
    return sum(2 if ord(char) > 0xFFFF else 1 for char in text)


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start : range.end]
