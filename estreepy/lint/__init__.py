"""Lint rules over realized ESTree programs."""

from estreepy.lint.rules import (
    AriaPropTypesRule,
    LintDomain,
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from estreepy.lint.runner import run_lint

__all__ = [
    "AriaPropTypesRule",
    "LintDomain",
    "LintRule",
    "default_lint_rules",
    "run_lint",
    "validate_lint_rules",
]
