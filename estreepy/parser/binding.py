"""Contract with the external parsing engine.

A binding parses one source file and returns a raw result whose `program` is
JSON text; everything else is handed over as-is. Bindings are registered
explicitly or discovered through the `estreepy.bindings` entry point group.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from importlib.metadata import entry_points
import logging
from typing import Any, Final, Protocol, runtime_checkable

from estreepy.parser.options import ParserOptions

logger = logging.getLogger(__name__)

BINDING_ENTRY_POINT_GROUP: Final[str] = "estreepy.bindings"


class RawParseResult(Protocol):
    @property
    def program(self) -> str | bytes: ...

    @property
    def module(self) -> Any: ...

    @property
    def comments(self) -> Sequence[Any]: ...

    @property
    def errors(self) -> Sequence[Any]: ...

    @property
    def magic_string(self) -> Any: ...


@dataclass(slots=True)
class RawParseResultData:
    """Plain carrier bindings can return instead of their own result type."""

    program: str | bytes
    module: Any
    comments: Sequence[Any]
    errors: Sequence[Any]
    magic_string: Any


@runtime_checkable
class ParserBinding(Protocol):
    def parse_sync(self, filename: str, source_text: str, options: ParserOptions) -> RawParseResult: ...


@runtime_checkable
class AsyncParserBinding(ParserBinding, Protocol):
    async def parse_async(
        self,
        filename: str,
        source_text: str,
        options: ParserOptions,
    ) -> RawParseResult: ...


class BindingNotFoundError(LookupError):
    """No parser binding is registered or installed."""


_registered: ParserBinding | None = None


def register_binding(binding: ParserBinding | None) -> None:
    """Set the process-wide binding; `None` clears it."""
    global _registered
    if binding is not None and not isinstance(binding, ParserBinding):
        raise TypeError(f"{type(binding).__name__} does not implement parse_sync")
    _registered = binding
    if binding is None:
        logger.info("Cleared parser binding")
    else:
        logger.info("Registered parser binding %s", type(binding).__name__)


def get_binding() -> ParserBinding:
    if _registered is not None:
        return _registered

    discovered = sorted(entry_points(group=BINDING_ENTRY_POINT_GROUP), key=lambda ep: ep.name)
    if not discovered:
        raise BindingNotFoundError(
            "No parser binding registered; call register_binding() or install a package "
            f"exposing the `{BINDING_ENTRY_POINT_GROUP}` entry point"
        )

    entry_point = discovered[0]
    loaded = entry_point.load()
    binding = loaded() if isinstance(loaded, type) else loaded
    logger.info("Loaded parser binding %s from entry point %s", type(binding).__name__, entry_point.name)
    register_binding(binding)
    return binding
