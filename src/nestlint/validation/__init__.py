from nestlint.validation.validator import LintError, lint, lint_or_raise, lint_source

__all__ = ["LintError", "lint", "lint_or_raise", "lint_source"]
