"""Lazily realized parse result carrier."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging
import threading
from typing import TYPE_CHECKING, Any, Final

from estreepy.ast import decode_program
from estreepy.diagnostics import has_errors
from estreepy.edit import MapExportingBuffer

if TYPE_CHECKING:
    from estreepy.ast import EstreeNode
    from estreepy.parser import RawParseResult

logger = logging.getLogger(__name__)


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Final = _Unset()

_VIEW_SLOTS: Final[tuple[str, ...]] = ("_program", "_module", "_comments", "_errors", "_edit_buffer")


@dataclass(slots=True, eq=False)
class ParseResult:
    """Parse-once/consume-many view over a raw engine result.

    Each view is computed on first access and the same object is returned
    afterwards. Each view has its own lock, so a result shared between threads
    computes every view once and a slow decode never holds up the other views.
    """

    raw: RawParseResult
    _program: Any = field(default=_UNSET, init=False, repr=False)
    _module: Any = field(default=_UNSET, init=False, repr=False)
    _comments: Any = field(default=_UNSET, init=False, repr=False)
    _errors: Any = field(default=_UNSET, init=False, repr=False)
    _edit_buffer: Any = field(default=_UNSET, init=False, repr=False)
    _locks: dict[str, threading.Lock] = field(
        default_factory=lambda: {slot: threading.Lock() for slot in _VIEW_SLOTS},
        init=False,
        repr=False,
    )

    @property
    def program(self) -> EstreeNode:
        """ESTree program with big-integer and regex literal values restored."""
        return self._load("_program", lambda: decode_program(self.raw.program))

    @property
    def tree(self) -> EstreeNode:
        return self.program

    @property
    def module(self) -> Any:
        return self._load("_module", lambda: self.raw.module)

    @property
    def comments(self) -> Any:
        return self._load("_comments", lambda: self.raw.comments)

    @property
    def errors(self) -> Any:
        return self._load("_errors", lambda: self.raw.errors)

    @property
    def edit_buffer(self) -> MapExportingBuffer:
        return self._load("_edit_buffer", lambda: MapExportingBuffer(self.raw.magic_string))

    @property
    def has_errors(self) -> bool:
        return has_errors(self.errors)

    def _load(self, slot: str, compute: Callable[[], Any]) -> Any:
        value = getattr(self, slot)
        if value is not _UNSET:
            return value
        with self._locks[slot]:
            value = getattr(self, slot)
            if value is _UNSET:
                value = compute()
                setattr(self, slot, value)
                logger.debug("Populated parse result view %s", slot.lstrip("_"))
        return value


def wrap(raw: RawParseResult) -> ParseResult:
    return ParseResult(raw)
