"""Helpers over diagnostics reported by the parsing engine.

Engine diagnostics are passed through untouched; bindings may hand them over as
mappings (decoded JSON) or as objects exposing a `severity` attribute.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum


class Severity(StrEnum):
    ERROR = "Error"
    WARNING = "Warning"
    ADVICE = "Advice"


def engine_severity(error: object) -> Severity | None:
    if isinstance(error, Mapping):
        raw = error.get("severity")
    else:
        raw = getattr(error, "severity", None)
    if raw is None:
        return None
    if isinstance(raw, Severity):
        return raw
    normalized = str(raw).strip().capitalize()
    try:
        return Severity(normalized)
    except ValueError:
        return None


def has_errors(errors: Iterable[object] | None) -> bool:
    """True when any engine diagnostic has error severity.

    Entries without a recognizable severity count as errors.
    """
    if not errors:
        return False
    return any(engine_severity(error) in (Severity.ERROR, None) for error in errors)
