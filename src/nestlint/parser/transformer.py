"""Lark Transformer that converts a stylesheet parse tree into a RuleTree."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from nestlint.model.tree import ROOT, RuleTree
from nestlint.parser.errors import ParseError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Splits a DECLARATION token into property and raw value.
_DECL_RE = re.compile(r"(?P<prop>[$\w-]+)\s*:(?P<value>.*)", re.DOTALL)

# Splits an AT_RULE token into name and params.
_AT_RULE_RE = re.compile(r"@(?P<name>[\w-]+)(?P<params>.*)", re.DOTALL)

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
# `//` right after `:`, `(`, `=` or a quote starts a URL, not a comment.
_LINE_COMMENT_RE = re.compile(r"""(?<![:("'=])//[^\n]*""")


def _normalize_prop(raw: str) -> str:
    """Lowercase standard properties; custom properties and variables keep case."""
    if raw.startswith(("--", "$")):
        return raw
    return raw.lower()


def _strip_comments(text: str) -> str:
    return _LINE_COMMENT_RE.sub("", _COMMENT_RE.sub("", text)).strip()


def _position(token: Token) -> tuple[int | None, int | None]:
    return getattr(token, "line", None), getattr(token, "column", None)


class _Sentinel:
    """Intermediate objects produced bottom-up and assembled top-down."""


class _Decl(_Sentinel):
    def __init__(
        self, prop: str, value: str, important: bool, line: int | None, column: int | None
    ):
        self.prop = prop
        self.value = value
        self.important = important
        self.line = line
        self.column = column


class _Rule(_Sentinel):
    def __init__(
        self,
        selector: str,
        statements: list[_Sentinel],
        line: int | None,
        column: int | None,
    ):
        self.selector = selector
        self.statements = statements
        self.line = line
        self.column = column


class _AtRule(_Sentinel):
    def __init__(
        self,
        name: str,
        params: str,
        statements: list[_Sentinel] | None,
        line: int | None,
        column: int | None,
    ):
        self.name = name
        self.params = params
        self.statements = statements
        self.line = line
        self.column = column


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into intermediate sentinel objects."""

    def declaration(self, items: list[Token]) -> _Decl:
        token = items[0]
        match = _DECL_RE.match(str(token))
        if match is None:  # pragma: no cover - the grammar guarantees a colon
            raise ParseError(f"Malformed declaration: {token!s}", *_position(token))
        value = _COMMENT_RE.sub("", match.group("value")).strip()
        important = False
        bang = _IMPORTANT_RE.search(value)
        if bang:
            important = True
            value = value[: bang.start()].rstrip()
        line, column = _position(token)
        return _Decl(_normalize_prop(match.group("prop")), value, important, line, column)

    def block(self, items: list[object]) -> list[_Sentinel]:
        return [item for item in items if isinstance(item, _Sentinel)]

    def rule(self, items: list[object]) -> _Rule:
        token = items[0]
        selector = _strip_comments(str(token))
        statements = items[1] if len(items) > 1 else []
        line, column = _position(token)  # type: ignore[arg-type]
        return _Rule(selector, statements, line, column)  # type: ignore[arg-type]

    def at_rule(self, items: list[object]) -> _AtRule:
        token = items[0]
        match = _AT_RULE_RE.match(str(token))
        name = match.group("name") if match else str(token).lstrip("@")
        params = _strip_comments(match.group("params")) if match else ""
        statements = items[1] if len(items) > 1 else None
        line, column = _position(token)  # type: ignore[arg-type]
        return _AtRule(name, params, statements, line, column)  # type: ignore[arg-type]

    def start(self, items: list[object]) -> list[_Sentinel]:
        return [item for item in items if isinstance(item, _Sentinel)]


def _process_statements(statements: list[_Sentinel], tree: RuleTree, parent: int) -> None:
    """Add *statements* to the body of *parent*, recursing into nested blocks.

    Parents are appended to the arena before their children, so arena order
    equals source pre-order.
    """
    for stmt in statements:
        if isinstance(stmt, _Decl):
            tree.add_declaration(
                stmt.prop,
                stmt.value,
                parent=parent,
                important=stmt.important,
                line=stmt.line,
                column=stmt.column,
            )

        elif isinstance(stmt, _Rule):
            rule = tree.add_rule(stmt.selector, parent=parent, line=stmt.line, column=stmt.column)
            _process_statements(stmt.statements, tree, rule.index)

        elif isinstance(stmt, _AtRule):
            at_rule = tree.add_at_rule(
                stmt.name,
                stmt.params,
                parent=parent,
                has_block=stmt.statements is not None,
                line=stmt.line,
                column=stmt.column,
            )
            if stmt.statements is not None:
                _process_statements(stmt.statements, tree, at_rule.index)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_stylesheet(source: str, source_name: str | None = None) -> RuleTree:
    """Parse nested stylesheet source into a RuleTree."""
    try:
        parse_tree = _parser().parse(source)
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        # Lark reports -1 for positions at end of input.
        if line is not None and line < 0:
            line = None
        if column is not None and column < 0:
            column = None
        raise ParseError(str(e), line=line, column=column, source=source_name) from e
    statements = StylesheetTransformer().transform(parse_tree)
    tree = RuleTree(source=source_name)
    _process_statements(statements, tree, ROOT)
    logger.debug(
        "Parsed %d block(s) from %s", len(tree.blocks), source_name or "<string>"
    )
    return tree
