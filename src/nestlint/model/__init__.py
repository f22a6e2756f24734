"""nestlint model layer -- public type re-exports."""

from nestlint.model.diagnostic import Diagnostic, Severity
from nestlint.model.tree import (
    ROOT,
    AtRule,
    Block,
    BlockRef,
    Child,
    Declaration,
    RuleTree,
    StyleRule,
)

__all__ = [
    # tree
    "ROOT",
    "Declaration",
    "BlockRef",
    "Child",
    "StyleRule",
    "AtRule",
    "Block",
    "RuleTree",
    # diagnostic
    "Severity",
    "Diagnostic",
]
