"""Pure-Python edit buffer with source map export.

Offsets always refer to the original text, no matter how many edits were made.
Text inserted at an offset attaches either to the content left of it
(`*_left`) or to the content right of it (`*_right`); left attachments render
first.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import TypeAlias

from estreepy.edit.sourcemap import Segment, SourceMap, SourceMapOptions, encode_mappings
from estreepy.text import LineIndex, TextRange, utf16_length

logger = logging.getLogger(__name__)

_Piece: TypeAlias = tuple[str, int | None, bool]


class EditBuffer:
    def __init__(self, original: str) -> None:
        self.original = original
        self._intro = ""
        self._outro = ""
        self._left: dict[int, str] = {}
        self._right: dict[int, str] = {}
        # None keeps the original character; a string replaces it ("" hides it).
        self._edits: list[str | None] = [None] * len(original)

    def __len__(self) -> int:
        return len(self.to_string())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"EditBuffer(original={self.original!r}, changed={self.has_changed()})"

    def prepend(self, content: str) -> EditBuffer:
        self._intro = content + self._intro
        return self

    def append(self, content: str) -> EditBuffer:
        self._outro += content
        return self

    def prepend_left(self, index: int, content: str) -> EditBuffer:
        self._check_offset(index)
        self._left[index] = content + self._left.get(index, "")
        return self

    def append_left(self, index: int, content: str) -> EditBuffer:
        self._check_offset(index)
        self._left[index] = self._left.get(index, "") + content
        return self

    def prepend_right(self, index: int, content: str) -> EditBuffer:
        self._check_offset(index)
        self._right[index] = content + self._right.get(index, "")
        return self

    def append_right(self, index: int, content: str) -> EditBuffer:
        self._check_offset(index)
        self._right[index] = self._right.get(index, "") + content
        return self

    def overwrite(self, start: int, end: int, content: str) -> EditBuffer:
        """Replace original characters in [start, end) with `content`.

        Text inserted strictly inside the range is discarded; insertions at its
        boundaries are kept.
        """
        span = self._check_range(start, end)
        if span.is_empty():
            raise ValueError("Cannot overwrite a zero-length range; use append_left or prepend_right instead")
        for offset in range(span.start + 1, span.end):
            self._left.pop(offset, None)
            self._right.pop(offset, None)
            self._edits[offset] = ""
        self._edits[span.start] = content
        return self

    def update(self, start: int, end: int, content: str) -> EditBuffer:
        return self.overwrite(start, end, content)

    def remove(self, start: int, end: int) -> EditBuffer:
        span = self._check_range(start, end)
        for offset in range(span.start, span.end):
            self._edits[offset] = ""
        return self

    def has_changed(self) -> bool:
        return self.to_string() != self.original

    def to_string(self) -> str:
        return "".join(text for text, _, _ in self._pieces())

    def generate_source_map(self, options: SourceMapOptions | None = None) -> SourceMap:
        resolved = options if options is not None else SourceMapOptions()
        lines = self._mapping_lines(hires=resolved.hires)
        logger.debug("Generated source map with %d line(s) for %r", len(lines), resolved.source)
        return SourceMap(
            mappings=encode_mappings(lines),
            sources=(resolved.source,),
            file=resolved.file,
            sources_content=(self.original,) if resolved.include_content else None,
        )

    def to_sourcemap_string(self, options: SourceMapOptions | None = None) -> str:
        return self.generate_source_map(options).to_json()

    def to_sourcemap_url(self, options: SourceMapOptions | None = None) -> str:
        return self.generate_source_map(options).to_url()

    def to_sourcemap_object(self, options: SourceMapOptions | None = None) -> SourceMap:
        return self.generate_source_map(options)

    def _check_offset(self, index: int) -> None:
        if not TextRange.empty(index).within(len(self.original)):
            raise ValueError(f"Offset {index} is outside of the original text")

    def _check_range(self, start: int, end: int) -> TextRange:
        span = TextRange(start, end)
        if not span.within(len(self.original)):
            raise ValueError(f"Range {span!r} is outside of the original text")
        return span

    def _pieces(self) -> Iterator[_Piece]:
        """Yield (text, original offset it maps to, whether it is original text)."""
        yield self._intro, None, False
        length = len(self.original)
        index = 0
        while True:
            yield self._left.get(index, ""), None, False
            yield self._right.get(index, ""), None, False
            if index == length:
                break
            edit = self._edits[index]
            if edit is not None:
                yield edit, index, False
                index += 1
                continue
            end = index + 1
            while (
                end < length
                and self._edits[end] is None
                and end not in self._left
                and end not in self._right
            ):
                end += 1
            yield self.original[index:end], index, True
            index = end
        yield self._outro, None, False

    def _mapping_lines(self, *, hires: bool) -> list[list[Segment]]:
        line_index = LineIndex(self.original)
        lines: list[list[Segment]] = [[]]
        column = 0
        for text, origin, is_original in self._pieces():
            if not text:
                continue
            if origin is not None and not is_original:
                original_line, original_column = line_index.line_col(origin)
                lines[-1].append((column, 0, original_line, original_column))

            previous = "\n"
            for offset, char in enumerate(text):
                if is_original and char != "\n" and (offset == 0 or hires or previous == "\n"):
                    original_line, original_column = line_index.line_col(origin + offset)
                    lines[-1].append((column, 0, original_line, original_column))
                if char == "\n":
                    lines.append([])
                    column = 0
                else:
                    column += utf16_length(char)
                previous = char
        return lines
