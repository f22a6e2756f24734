"""Selector classification for nested rules.

Nested selectors that add a pseudo-class (``&:hover``), a pseudo-element
(``&::before``) or an attribute selector (``&[disabled]``) describe a state
or variant of the parent. Re-declaring a parent property there is expected,
so those pairs are never compared.

The check works on the raw selector text and does not parse selector grammar.
"""

from __future__ import annotations


def has_pseudo_class(selector: str) -> bool:
    return ":" in selector and "::" not in selector


def has_pseudo_element(selector: str) -> bool:
    return "::" in selector


def has_attribute_selector(selector: str) -> bool:
    return "[" in selector and "]" in selector


def is_exempt(selector: str) -> bool:
    """True if the nested *selector* is excluded from override checking."""
    return (
        has_pseudo_class(selector)
        or has_pseudo_element(selector)
        or has_attribute_selector(selector)
    )
