"""CLI command: nestlint lint -- report overridden properties in stylesheets."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from nestlint.config import ConfigError, LintConfig, find_config, load_config
from nestlint.model.diagnostic import Diagnostic, Severity
from nestlint.parser import ParseError
from nestlint.validation import lint_source

logger = logging.getLogger(__name__)


def _resolve_config(config_path: str | None) -> LintConfig:
    if config_path:
        return load_config(config_path)
    found = find_config(Path.cwd())
    if found is not None:
        logger.debug("Using config file %s", found)
        return load_config(found)
    return LintConfig()


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON config file (defaults to .nestlintrc.json in the working directory).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format for diagnostics.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def lint(files: tuple[str, ...], config_path: str | None, output_format: str, verbose: bool) -> None:
    """Lint stylesheet FILES for properties overridden by nested rules.

    Exits with code 1 if any error-severity diagnostic or parse error is
    found, 2 if the configuration is invalid, and 0 otherwise.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _resolve_config(config_path)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(2)

    diagnostics: list[Diagnostic] = []
    parse_failures = 0
    for name in files:
        path = Path(name)
        try:
            source = path.read_text(encoding="utf-8")
            diagnostics.extend(lint_source(source, config=config, source_name=str(path)))
        except ParseError as exc:
            parse_failures += 1
            click.echo(f"Parse error: {exc.location}: {exc}", err=True)
        except (OSError, UnicodeDecodeError) as exc:
            parse_failures += 1
            click.echo(f"Parse error: {path}: {exc}", err=True)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    if output_format == "json":
        click.echo(json.dumps([d.to_dict() for d in diagnostics], indent=2))
    else:
        for diag in diagnostics:
            click.echo(str(diag))
        if diagnostics:
            click.echo()
        click.echo(
            f"Summary: {len(files)} file(s), {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    if errors or parse_failures:
        sys.exit(1)
    sys.exit(0)
