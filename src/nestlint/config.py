"""Lint configuration and option validation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from nestlint.model.diagnostic import Severity
from nestlint.overrides.walker import RULE_NAME

CONFIG_FILENAME = ".nestlintrc.json"

_SEVERITIES = {"error": Severity.ERROR, "warning": Severity.WARNING}


class ConfigError(Exception):
    """Raised when rule options or a config file are invalid."""


@dataclass(frozen=True)
class LintConfig:
    enabled: bool = True
    severity: Severity = Severity.ERROR


def config_from_option(option: Any) -> LintConfig:
    """Validate a rule option value and build a LintConfig from it.

    Accepted forms: ``true``, ``false``, ``null`` (disabled), or
    ``[enabled, {"severity": "error" | "warning"}]``.
    """
    if option is None:
        return LintConfig(enabled=False)
    if isinstance(option, bool):
        return LintConfig(enabled=option)
    if isinstance(option, list) and 1 <= len(option) <= 2:
        primary = option[0]
        if not isinstance(primary, bool):
            raise ConfigError(
                f'Invalid option value {primary!r} for rule "{RULE_NAME}": expected true or false'
            )
        secondary = option[1] if len(option) == 2 else {}
        if not isinstance(secondary, dict):
            raise ConfigError(f'Secondary options for rule "{RULE_NAME}" must be an object')
        unknown = set(secondary) - {"severity"}
        if unknown:
            raise ConfigError(
                f'Unknown secondary option(s) for rule "{RULE_NAME}": {", ".join(sorted(unknown))}'
            )
        severity_name = secondary.get("severity", "error")
        if severity_name not in _SEVERITIES:
            raise ConfigError(
                f'Invalid severity {severity_name!r} for rule "{RULE_NAME}": '
                f"use one of {', '.join(sorted(_SEVERITIES))}"
            )
        return LintConfig(enabled=primary, severity=_SEVERITIES[severity_name])
    raise ConfigError(
        f'Invalid option value {option!r} for rule "{RULE_NAME}": expected true or false'
    )


def config_from_dict(data: Any) -> LintConfig:
    """Build a LintConfig from a parsed ``{"rules": {...}}`` document."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")
    rules = data.get("rules", {})
    if not isinstance(rules, dict):
        raise ConfigError('"rules" must be a JSON object')
    if RULE_NAME not in rules:
        return LintConfig()
    return config_from_option(rules[RULE_NAME])


def load_config(path: str | Path) -> LintConfig:
    """Read and validate a JSON config file."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    return config_from_dict(data)


def find_config(start: str | Path = ".") -> Path | None:
    """Return the config file in *start*, if there is one."""
    candidate = Path(start) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None
