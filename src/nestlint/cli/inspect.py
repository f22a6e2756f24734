"""CLI command: nestlint inspect -- display the rule tree of a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestlint.model.tree import ROOT, AtRule, Declaration, RuleTree, StyleRule
from nestlint.overrides.scope import own_declarations
from nestlint.overrides.selectors import is_exempt
from nestlint.overrides.shorthands import is_shorthand, longhands
from nestlint.parser import ParseError, parse_stylesheet


def _describe(tree: RuleTree, block: StyleRule | AtRule) -> str:
    indent = "  " * (tree.depth(block.index) + 1)
    if isinstance(block, AtRule):
        params = f" {block.params}" if block.params else ""
        return f"{indent}@{block.name}{params}"
    parts = [f'{indent}{block.selector}  path="{tree.full_selector(block.index)}"']
    parts.append(f"own={len(own_declarations(tree, block.index))}")
    # Only a rule nested directly in another rule is ever paired.
    if isinstance(tree.parent_of(block.index), StyleRule) and is_exempt(block.selector):
        parts.append("exempt")
    return "  ".join(parts)


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def inspect(stylesheet: str) -> None:
    """Parse a stylesheet and display its rule tree.

    Shows each rule with its full selector path and own-declaration count,
    followed by every declaration with its location.
    """
    path = Path(stylesheet)

    try:
        tree = parse_stylesheet(path.read_text(encoding="utf-8"), source_name=str(path))
    except ParseError as exc:
        click.echo(f"Parse error: {exc.location}: {exc}", err=True)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Parse error: {path}: {exc}", err=True)
        sys.exit(1)

    rules = sum(1 for _ in tree.rules())
    click.echo(f"Stylesheet: {path.name}")
    click.echo(f"Blocks: {len(tree.blocks)} ({rules} rule(s))")
    click.echo()

    click.echo("Rules:")
    for block in tree.walk():
        click.echo(_describe(tree, block))
    click.echo()

    click.echo("Declarations:")
    for decl in tree.walk_declarations():
        click.echo(_describe_declaration(tree, decl))


def _describe_declaration(tree: RuleTree, decl: Declaration) -> str:
    if decl.parent == ROOT:
        owner = "<root>"
    else:
        block = tree.block(decl.parent)
        owner = f"@{block.name}" if isinstance(block, AtRule) else tree.full_selector(block.index)
    important = " !important" if decl.important else ""
    location = f"{decl.line}:{decl.column}" if decl.line is not None else "?"
    line = f"  {location}  {owner}  {decl.prop}: {decl.value}{important}"
    if is_shorthand(decl.prop):
        line += f"  [sets {', '.join(longhands(decl.prop))}]"
    return line
