"""Shorthand properties and the longhands they control.

Overlap is decided from property names alone. A shorthand always counts as
setting every longhand it expands to, whatever its value (``margin: 0``
resets all four sides just like ``margin: 1px 2px 3px 4px``).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

_SIDES = ("top", "right", "bottom", "left")

SHORTHANDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "margin": tuple(f"margin-{side}" for side in _SIDES),
    "padding": tuple(f"padding-{side}" for side in _SIDES),
    "border": (
        "border-width",
        "border-style",
        "border-color",
        "border-top",
        "border-right",
        "border-bottom",
        "border-left",
    ),
    "border-width": tuple(f"border-{side}-width" for side in _SIDES),
    "border-style": tuple(f"border-{side}-style" for side in _SIDES),
    "border-color": tuple(f"border-{side}-color" for side in _SIDES),
    "border-top": ("border-top-width", "border-top-style", "border-top-color"),
    "border-right": ("border-right-width", "border-right-style", "border-right-color"),
    "border-bottom": ("border-bottom-width", "border-bottom-style", "border-bottom-color"),
    "border-left": ("border-left-width", "border-left-style", "border-left-color"),
    "border-radius": (
        "border-top-left-radius",
        "border-top-right-radius",
        "border-bottom-right-radius",
        "border-bottom-left-radius",
    ),
    "background": (
        "background-color",
        "background-image",
        "background-position",
        "background-size",
        "background-repeat",
        "background-origin",
        "background-clip",
        "background-attachment",
    ),
    "font": (
        "font-style",
        "font-variant",
        "font-weight",
        "font-size",
        "line-height",
        "font-family",
    ),
    "flex": ("flex-grow", "flex-shrink", "flex-basis"),
    "flex-flow": ("flex-direction", "flex-wrap"),
})


def _closure(name: str) -> frozenset[str]:
    """Every longhand reachable from *name* through nested shorthands."""
    seen: set[str] = set()
    stack = list(SHORTHANDS.get(name, ()))
    while stack:
        prop = stack.pop()
        if prop in seen:
            continue
        seen.add(prop)
        stack.extend(SHORTHANDS.get(prop, ()))
    return frozenset(seen)


# border -> border-top -> border-top-width is resolved here once.
_EXPANSIONS: Mapping[str, frozenset[str]] = MappingProxyType(
    {name: _closure(name) for name in SHORTHANDS}
)

_EMPTY: frozenset[str] = frozenset()


def is_shorthand(name: str) -> bool:
    return name in SHORTHANDS


def longhands(name: str) -> tuple[str, ...]:
    """Direct longhands of *name*, in table order. Empty for non-shorthands."""
    return SHORTHANDS.get(name, ())


def expands_to(name: str) -> frozenset[str]:
    """All properties set by shorthand *name*, nested shorthands included."""
    return _EXPANSIONS.get(name, _EMPTY)


def overrides(candidate: str, target: str) -> bool:
    """True if declaring *candidate* replaces an earlier *target*."""
    return candidate == target or target in expands_to(candidate)
