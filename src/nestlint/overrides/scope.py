"""Own-declaration extraction for a single block."""

from __future__ import annotations

from nestlint.model.tree import Declaration, RuleTree

ScopeMap = dict[str, Declaration]


def own_declarations(tree: RuleTree, index: int) -> ScopeMap:
    """Map each property declared directly in block *index* to its declaration.

    Declarations inside nested blocks are skipped. When a property appears
    twice in the same scope the later declaration wins; the key keeps the
    position of its first occurrence.
    """
    properties: ScopeMap = {}
    for decl in tree.walk_declarations(index):
        if decl.parent != index:
            continue
        properties[decl.prop] = decl
    return properties
