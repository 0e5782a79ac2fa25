"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from estreepy.text import TextRange

DiagnosticSeverity: TypeAlias = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by estreepy lint rules."""

    code: str
    message: str
    range: TextRange
    severity: DiagnosticSeverity = "error"
    hint: str | None = None
    category: str | None = None
