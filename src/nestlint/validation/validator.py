"""Stylesheet linter: runs all lint rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from nestlint.config import LintConfig
from nestlint.model.diagnostic import Diagnostic
from nestlint.model.tree import RuleTree
from nestlint.parser import parse_stylesheet
from nestlint.validation.rules import ALL_RULES


class LintError(Exception):
    """Raised when linting produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Lint failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[RuleTree, LintConfig], list[Diagnostic]]


def lint(
    tree: RuleTree,
    config: LintConfig | None = None,
    extra_rules: list[RuleFunc] | None = None,
    sink: Callable[[Diagnostic], None] | None = None,
) -> list[Diagnostic]:
    """Run all lint rules against *tree*.

    Returns the full list of diagnostics. When *sink* is given, each
    diagnostic is also passed to it as soon as its rule finishes.
    """
    config = config or LintConfig()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        found = rule(tree, config)
        if sink is not None:
            for diag in found:
                sink(diag)
        diagnostics.extend(found)
    return diagnostics


def lint_source(
    source: str,
    config: LintConfig | None = None,
    source_name: str | None = None,
) -> list[Diagnostic]:
    """Parse *source* and lint it. Raises ParseError on invalid syntax."""
    return lint(parse_stylesheet(source, source_name=source_name), config=config)


def lint_or_raise(
    tree: RuleTree,
    config: LintConfig | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Lint; raises :class:`LintError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = lint(tree, config=config, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise LintError(errors)
    return diagnostics
