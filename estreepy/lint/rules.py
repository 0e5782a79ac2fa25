"""Lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, Protocol, TypeAlias

from estreepy.aria import ARIA_PROP_TYPES, AriaPropTypeRule
from estreepy.ast import EstreeNode, iter_nodes_of_type
from estreepy.diagnostics import LINT_ARIA_INVALID_PROP_VALUE, Diagnostic
from estreepy.lint.aria import NOT_STATIC, attribute_name, attribute_value, describe_expected, is_valid_value
from estreepy.text import TextRange

LintDomain: TypeAlias = Literal["correctness", "suspicious", "style"]


class LintRule(Protocol):
    """Lint rule contract over a realized ESTree program."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    def run(self, program: EstreeNode) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class AriaPropTypesRule:
    """Checks static `aria-*` attribute values against the generated ARIA type table."""

    code: str = LINT_ARIA_INVALID_PROP_VALUE.code
    name: str = "ariaProptypes"
    category: str = "a11y"
    domain: LintDomain = "correctness"
    prop_types: Mapping[str, AriaPropTypeRule] | None = None

    def run(self, program: EstreeNode) -> list[Diagnostic]:
        prop_types = self.prop_types if self.prop_types is not None else ARIA_PROP_TYPES
        diagnostics: list[Diagnostic] = []
        for attribute in iter_nodes_of_type(program, "JSXAttribute"):
            name = attribute_name(attribute)
            if name is None:
                continue
            name = name.lower()
            rule = prop_types.get(name)
            if rule is None:
                continue
            value = attribute_value(attribute)
            if value is NOT_STATIC or is_valid_value(rule, value):
                continue
            expected = describe_expected(rule)
            diagnostics.append(
                Diagnostic(
                    code=self.code,
                    message=f"{LINT_ARIA_INVALID_PROP_VALUE.message} `{name}` must be {expected}.",
                    range=TextRange.of_node(attribute),
                    severity=LINT_ARIA_INVALID_PROP_VALUE.severity,
                    hint=f"Set `{name}` to {expected}.",
                    category=LINT_ARIA_INVALID_PROP_VALUE.category,
                )
            )
        return diagnostics


def default_lint_rules() -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        AriaPropTypesRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_domains = {"correctness", "suspicious", "style"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected correctness/suspicious/style."
            )
        if not rule.code.startswith("LINT_"):
            raise ValueError(f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `LINT_` prefix.")
