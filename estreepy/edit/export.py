"""Source map export capability attached to a parse result's edit buffer."""

from __future__ import annotations

from dataclasses import dataclass
import functools
from typing import Any, Protocol, runtime_checkable

from estreepy.edit.sourcemap import SourceMapOptions


@runtime_checkable
class SourceMapPrimitives(Protocol):
    """Native export primitives every edit buffer handed out by a binding provides."""

    def to_sourcemap_string(self, options: SourceMapOptions | None = None) -> str: ...

    def to_sourcemap_url(self, options: SourceMapOptions | None = None) -> str: ...

    def to_sourcemap_object(self, options: SourceMapOptions | None = None) -> Any: ...


@dataclass(frozen=True, slots=True)
class SourceMapExport:
    """Three renderings of one map, each recomputed from the buffer on every call."""

    buffer: SourceMapPrimitives
    options: SourceMapOptions | None = None

    def to_string(self) -> str:
        return self.buffer.to_sourcemap_string(self.options)

    def to_url(self) -> str:
        return self.buffer.to_sourcemap_url(self.options)

    def to_map(self) -> Any:
        return self.buffer.to_sourcemap_object(self.options)

    def __str__(self) -> str:
        return self.to_string()


class MapExportingBuffer:
    """Shares the raw edit buffer and adds `generate_map`.

    Every other attribute is looked up on the raw buffer, so edits made through
    either object are visible through both.
    """

    __slots__ = ("_buffer",)

    def __init__(self, buffer: SourceMapPrimitives) -> None:
        self._buffer = buffer

    @property
    def buffer(self) -> SourceMapPrimitives:
        return self._buffer

    def generate_map(self, options: SourceMapOptions | None = None) -> SourceMapExport:
        return SourceMapExport(self._buffer, options)

    def __getattr__(self, name: str) -> Any:
        if name == "_buffer":
            raise AttributeError(name)
        value = getattr(self._buffer, name)
        if not callable(value):
            return value

        @functools.wraps(value)
        def keep_wrapper(*args: Any, **kwargs: Any) -> Any:
            returned = value(*args, **kwargs)
            # Chained mutators hand back this wrapper, not the raw buffer.
            return self if returned is self._buffer else returned

        return keep_wrapper

    def __str__(self) -> str:
        return str(self._buffer)

    def __repr__(self) -> str:
        return f"MapExportingBuffer({self._buffer!r})"
