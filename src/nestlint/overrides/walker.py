"""Tree walker: compares every rule with its directly nested rules."""

from __future__ import annotations

import logging
from typing import Callable

from nestlint.model.diagnostic import Diagnostic, Severity
from nestlint.model.tree import RuleTree, StyleRule
from nestlint.overrides.matcher import Override, find_overrides
from nestlint.overrides.scope import own_declarations
from nestlint.overrides.selectors import is_exempt

logger = logging.getLogger(__name__)

RULE_NAME = "no-overriding-properties"

Sink = Callable[[Diagnostic], None]


def format_message(
    overridden: str, overriding: str, parent_selector: str, child_selector: str
) -> str:
    return (
        f'Property "{overridden}" from "{parent_selector}" is overridden by '
        f'"{overriding}" in nested selector "{child_selector}"'
    )


def _diagnostic(
    tree: RuleTree,
    override: Override,
    parent_selector: str,
    child: StyleRule,
    severity: Severity,
) -> Diagnostic:
    child_selector = f"{parent_selector}{child.selector}"
    return Diagnostic(
        rule=RULE_NAME,
        severity=severity,
        message=format_message(
            override.overridden, override.overriding, parent_selector, child_selector
        ),
        overridden=override.overridden,
        overriding=override.overriding,
        parent_selector=parent_selector,
        child_selector=child_selector,
        line=override.declaration.line,
        column=override.declaration.column,
        source=tree.source,
    )


def check_overrides(
    tree: RuleTree,
    enabled: bool,
    sink: Sink,
    severity: Severity = Severity.ERROR,
) -> None:
    """Report to *sink* every parent property overridden by a nested rule.

    Each rule is compared only with the style rules written directly in its
    body. Exempt child selectors skip that one comparison; the child is still
    compared with its own nested rules when the walk reaches it.
    """
    if not enabled:
        return

    for parent in tree.rules():
        parent_props = own_declarations(tree, parent.index)
        if not parent_props:
            continue

        parent_selector = tree.full_selector(parent.index)

        for child in tree.nested_rules(parent.index):
            if is_exempt(child.selector):
                logger.debug("Skipping exempt selector %r under %r", child.selector, parent_selector)
                continue

            child_props = own_declarations(tree, child.index)
            found = find_overrides(parent_props, child_props)
            logger.debug(
                "Compared %r with nested %r: %d override(s)",
                parent_selector,
                child.selector,
                len(found),
            )
            for override in found:
                sink(_diagnostic(tree, override, parent_selector, child, severity))


def collect_overrides(
    tree: RuleTree,
    enabled: bool = True,
    severity: Severity = Severity.ERROR,
) -> list[Diagnostic]:
    """Run :func:`check_overrides` and return the diagnostics as a list."""
    diagnostics: list[Diagnostic] = []
    check_overrides(tree, enabled, diagnostics.append, severity=severity)
    return diagnostics
