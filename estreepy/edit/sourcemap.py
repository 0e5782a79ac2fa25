"""Source Map v3 model and Base64 VLQ mapping encoder."""

from __future__ import annotations

import base64
from collections.abc import Sequence
from dataclasses import dataclass, field
import json
from typing import Any, Final, TypeAlias

Segment: TypeAlias = tuple[int, int, int, int]
"""(generated column, source index, original line, original column)."""

_BASE64_DIGITS: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VLQ_SHIFT: Final[int] = 5
_VLQ_MASK: Final[int] = (1 << _VLQ_SHIFT) - 1
_VLQ_CONTINUATION: Final[int] = 1 << _VLQ_SHIFT

DATA_URL_PREFIX: Final[str] = "data:application/json;charset=utf-8;base64,"


@dataclass(frozen=True, slots=True)
class SourceMapOptions:
    """Options accepted by the edit buffer's source map exports."""

    source: str | None = None
    file: str | None = None
    include_content: bool = False
    hires: bool = False


def encode_vlq(value: int) -> str:
    vlq = ((-value) << 1) | 1 if value < 0 else value << 1
    digits: list[str] = []
    while True:
        digit = vlq & _VLQ_MASK
        vlq >>= _VLQ_SHIFT
        if vlq:
            digit |= _VLQ_CONTINUATION
        digits.append(_BASE64_DIGITS[digit])
        if not vlq:
            return "".join(digits)


def encode_mappings(lines: Sequence[Sequence[Segment]]) -> str:
    """Encode per-generated-line segments into the `mappings` field.

    Generated columns are relative within a line; source index, original line and
    original column are relative to the previous segment across the whole map.
    """
    previous_source = 0
    previous_line = 0
    previous_column = 0
    encoded_lines: list[str] = []
    for segments in lines:
        previous_generated = 0
        encoded: list[str] = []
        for generated_column, source, line, column in segments:
            encoded.append(
                encode_vlq(generated_column - previous_generated)
                + encode_vlq(source - previous_source)
                + encode_vlq(line - previous_line)
                + encode_vlq(column - previous_column)
            )
            previous_generated = generated_column
            previous_source = source
            previous_line = line
            previous_column = column
        encoded_lines.append(",".join(encoded))
    return ";".join(encoded_lines)


@dataclass(frozen=True, slots=True)
class SourceMap:
    mappings: str
    sources: tuple[str | None, ...]
    file: str | None = None
    sources_content: tuple[str, ...] | None = None
    names: tuple[str, ...] = field(default=())
    version: int = 3

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"version": self.version}
        if self.file is not None:
            payload["file"] = self.file
        payload["sources"] = list(self.sources)
        if self.sources_content is not None:
            payload["sourcesContent"] = list(self.sources_content)
        payload["names"] = list(self.names)
        payload["mappings"] = self.mappings
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def to_url(self) -> str:
        encoded = base64.b64encode(self.to_json().encode("utf-8")).decode("ascii")
        return DATA_URL_PREFIX + encoded

    def __str__(self) -> str:
        return self.to_json()
