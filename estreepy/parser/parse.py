"""Sync and async parse entry points returning lazily realized results."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from estreepy.parser.binding import AsyncParserBinding, ParserBinding, get_binding
from estreepy.parser.options import ParserOptions

if TYPE_CHECKING:
    from estreepy.pipeline import ParseResult

logger = logging.getLogger(__name__)


def _resolve(
    filename: str,
    options: ParserOptions | None,
    binding: ParserBinding | None,
) -> tuple[ParserOptions, ParserBinding]:
    resolved_options = (options if options is not None else ParserOptions()).resolve(filename)
    resolved_binding = binding if binding is not None else get_binding()
    return resolved_options, resolved_binding


def parse_sync(
    filename: str,
    source_text: str,
    options: ParserOptions | None = None,
    *,
    binding: ParserBinding | None = None,
) -> ParseResult:
    """Parse on the calling thread. Binding failures propagate unchanged."""
    from estreepy.pipeline import wrap

    resolved_options, resolved_binding = _resolve(filename, options, binding)
    logger.debug("Parsing %s as %s", filename, resolved_options.lang)
    return wrap(resolved_binding.parse_sync(filename, source_text, resolved_options))


async def parse_async(
    filename: str,
    source_text: str,
    options: ParserOptions | None = None,
    *,
    binding: ParserBinding | None = None,
) -> ParseResult:
    """Parse without blocking the event loop.

    Bindings without a native async entry point run `parse_sync` in a worker thread.
    """
    from estreepy.pipeline import wrap

    resolved_options, resolved_binding = _resolve(filename, options, binding)
    logger.debug("Parsing %s as %s (async)", filename, resolved_options.lang)
    if isinstance(resolved_binding, AsyncParserBinding):
        raw = await resolved_binding.parse_async(filename, source_text, resolved_options)
    else:
        raw = await asyncio.to_thread(resolved_binding.parse_sync, filename, source_text, resolved_options)
    return wrap(raw)
