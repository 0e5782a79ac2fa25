"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from estreepy.diagnostics.diagnostic import DiagnosticSeverity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: DiagnosticSeverity = "error"
    category: str | None = None


LINT_ARIA_INVALID_PROP_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_ARIA_INVALID_PROP_VALUE",
    message="Invalid value for ARIA attribute.",
    severity="warning",
    category="lint/a11y",
)
