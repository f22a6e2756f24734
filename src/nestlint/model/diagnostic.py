"""Diagnostic model: structured findings reported by lint rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single property override found in a stylesheet.

    Attributes:
        rule: Identifier of the lint rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        overridden: The parent property that loses its effect.
        overriding: The nested property responsible for the override.
        parent_selector: Full selector path of the outer rule.
        child_selector: ``parent_selector`` followed directly by the nested selector.
        line: 1-based line of the overriding declaration, if known.
        column: 1-based column of the overriding declaration, if known.
        source: Name of the linted file, if any.
    """

    rule: str
    severity: Severity
    message: str
    overridden: str
    overriding: str
    parent_selector: str
    child_selector: str
    line: int | None = None
    column: int | None = None
    source: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_shorthand(self) -> bool:
        """True when a shorthand overrode a different longhand."""
        return self.overridden != self.overriding

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "overridden": self.overridden,
            "overriding": self.overriding,
            "parent_selector": self.parent_selector,
            "child_selector": self.child_selector,
            "shorthand": self.is_shorthand,
            "line": self.line,
            "column": self.column,
            "source": self.source,
        }

    def __str__(self) -> str:
        location = ""
        if self.source:
            location = self.source
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        prefix = f"{location.lstrip(':')}: " if location else ""
        return f"{prefix}{self.severity.value}: {self.message} ({self.rule})"
