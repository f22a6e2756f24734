"""nestlint - detect properties overridden by nested style rules."""

__version__ = "0.1.0"
