"""
Exception types raised by stylegate.

Violations are findings, not errors; only conditions that stop a run
live here.
"""

from __future__ import annotations

from pathlib import Path


class StyleGateError(Exception):
    """Base class for fatal stylegate errors."""


class TokenSourceMissingError(StyleGateError):
    """The CSS file that defines the design tokens does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path.name} not found")


class ConfigError(StyleGateError):
    """The configuration file is malformed."""


class FileReadError(StyleGateError):
    """The token stylesheet or a scan target exists but could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"could not read {path.name}: {cause}")
