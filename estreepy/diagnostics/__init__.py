"""Diagnostics."""

from estreepy.diagnostics.codes import LINT_ARIA_INVALID_PROP_VALUE, DiagnosticSpec
from estreepy.diagnostics.diagnostic import Diagnostic, DiagnosticSeverity
from estreepy.diagnostics.engine import Severity, engine_severity, has_errors

__all__ = [
    "LINT_ARIA_INVALID_PROP_VALUE",
    "Diagnostic",
    "DiagnosticSeverity",
    "DiagnosticSpec",
    "Severity",
    "engine_severity",
    "has_errors",
]
