"""Lint runner over a shared parse result."""

from __future__ import annotations

from collections.abc import Sequence

from estreepy.diagnostics import Diagnostic
from estreepy.lint.rules import LintRule, default_lint_rules, validate_lint_rules
from estreepy.parser import ParserBinding, ParserOptions, parse_sync
from estreepy.pipeline import LintRunResult, ParseResult


def run_lint(
    filename: str | None = None,
    source_text: str | None = None,
    options: ParserOptions | None = None,
    *,
    parse: ParseResult | None = None,
    rules: Sequence[LintRule] | None = None,
    binding: ParserBinding | None = None,
) -> LintRunResult:
    """Run lint diagnostics from a single parse lifecycle."""
    resolved_parse = _resolve_parse(filename, source_text, options=options, parse=parse, binding=binding)
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules()
    validate_lint_rules(resolved_rules)

    program = resolved_parse.program
    diagnostics: list[Diagnostic] = []
    for rule in resolved_rules:
        diagnostics.extend(rule.run(program))

    return LintRunResult(parse=resolved_parse, diagnostics=_sort_diagnostics(diagnostics))


def _resolve_parse(
    filename: str | None,
    source_text: str | None,
    *,
    options: ParserOptions | None,
    parse: ParseResult | None,
    binding: ParserBinding | None,
) -> ParseResult:
    if parse is not None:
        if options is not None or binding is not None:
            raise ValueError("Pass either parse or options/binding, not both")
        return parse
    if filename is None or source_text is None:
        raise ValueError("Pass filename and source_text, or an existing parse result")
    return parse_sync(filename, source_text, options, binding=binding)


def _sort_diagnostics(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start,
            diagnostic.range.end,
            diagnostic.code,
            diagnostic.message,
        ),
    )
