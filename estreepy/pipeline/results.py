"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from estreepy.diagnostics import Diagnostic
from estreepy.pipeline.result import ParseResult


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over a shared parse result."""

    parse: ParseResult
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return any(diagnostic.severity == "error" for diagnostic in self.diagnostics)
