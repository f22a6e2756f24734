"""Override matching between a parent scope and one nested child scope."""

from __future__ import annotations

from dataclasses import dataclass

from nestlint.model.tree import Declaration
from nestlint.overrides.scope import ScopeMap
from nestlint.overrides.shorthands import overrides


@dataclass(frozen=True)
class Override:
    """A parent property made ineffective by a child declaration."""

    overridden: str
    overriding: str
    declaration: Declaration


def find_overrides(parent: ScopeMap, child: ScopeMap) -> list[Override]:
    """Return every override of *parent* properties by *child* properties.

    Results follow child order, then parent order. An exact re-declaration
    is reported once and stops the search for that child property; otherwise
    a shorthand is reported once per parent longhand it covers.
    """
    results: list[Override] = []
    for prop, decl in child.items():
        if prop in parent:
            results.append(Override(overridden=prop, overriding=prop, declaration=decl))
            continue
        for parent_prop in parent:
            if overrides(prop, parent_prop):
                results.append(
                    Override(overridden=parent_prop, overriding=prop, declaration=decl)
                )
    return results
