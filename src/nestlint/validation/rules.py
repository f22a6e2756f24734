"""Lint rules for nested stylesheets.

Each rule is a function taking a RuleTree and a LintConfig and returning a
list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from nestlint.config import LintConfig
from nestlint.model.diagnostic import Diagnostic
from nestlint.model.tree import RuleTree
from nestlint.overrides.walker import RULE_NAME, collect_overrides


def check_overriding_properties(tree: RuleTree, config: LintConfig) -> list[Diagnostic]:
    """Properties of a rule should not be re-declared by a directly nested rule."""
    return collect_overrides(tree, enabled=config.enabled, severity=config.severity)


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_overriding_properties,
]

__all__ = ["ALL_RULES", "RULE_NAME", "check_overriding_properties"]
