"""Parse result carriers and pipeline entrypoints."""

from estreepy.pipeline.result import ParseResult, wrap
from estreepy.pipeline.results import LintRunResult

__all__ = [
    "LintRunResult",
    "ParseResult",
    "wrap",
]
