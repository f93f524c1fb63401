"""
Base types and protocols for the pluggable check system.

Defines the contract that every prototype check follows, plus the data
containers for scan context, findings, and results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable

from stylegate.config import LintConfig
from stylegate.tokens import TokenSet


# =============================================================================
# Findings
# =============================================================================


class ViolationType(str, Enum):
    """Kinds of design-system violation."""

    UNKNOWN_COLOR = "UNKNOWN_COLOR"
    RGB_COLOR = "RGB_COLOR"
    HARDCODED_FONT = "HARDCODED_FONT"
    HARDCODED_SHADOW = "HARDCODED_SHADOW"
    HARDCODED_RADIUS = "HARDCODED_RADIUS"
    UNKNOWN_COLOR_IN_STYLE = "UNKNOWN_COLOR_IN_STYLE"
    MISSING_STYLESHEET = "MISSING_STYLESHEET"
    MISSING_FONT = "MISSING_FONT"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Violation:
    """A single departure from the token usage policy.

    Attributes:
        file: Base name of the offending file.
        line: 1-based line number, or 0 for file-level findings.
        type: Classified violation kind.
        value: The raw offending text.
        message: Human-readable explanation.
    """

    file: str
    line: int
    type: ViolationType
    value: str
    message: str

    @property
    def location(self) -> str:
        """``file:line``, or just ``file`` for file-level findings."""
        if self.line > 0:
            return f"{self.file}:{self.line}"
        return self.file

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "line": self.line,
            "type": self.type.value,
            "value": self.value,
            "message": self.message,
        }


# =============================================================================
# Data Containers
# =============================================================================


@dataclass
class ScanContext:
    """Everything a check needs to inspect one file."""

    file_name: str
    """Base name of the file being scanned (used in findings)."""

    text: str
    """Full file content."""

    tokens: TokenSet
    """Approved palette."""

    config: LintConfig = field(default_factory=LintConfig)
    """Run configuration (required assets, etc.)."""

    def line_at(self, offset: int) -> int:
        """1-based line number of a character offset into ``text``."""
        return self.text.count("\n", 0, offset) + 1


@dataclass
class ValidatorResult:
    """Result returned by a check after running over one file."""

    validator: str
    """Name of the check that produced this result."""

    violations: list[Violation] = field(default_factory=list)
    """Findings, in the order they were detected."""

    @property
    def passed(self) -> bool:
        return not self.violations


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


@runtime_checkable
class Validator(Protocol):
    """Protocol for checks.

    Categories:
        - "inline": ``style="..."`` attribute checks
        - "style-block": embedded ``<style>`` element checks
        - "document": whole-file presence checks
    """

    @property
    def name(self) -> str:
        """Unique identifier for this check."""
        ...

    @property
    def category(self) -> str:
        """Check category: 'inline', 'style-block', or 'document'."""
        ...

    def validate(self, context: ScanContext) -> ValidatorResult:
        """Scan one file and return its findings."""
        ...


# =============================================================================
# Base Classes (Optional Implementations)
# =============================================================================


class BaseValidator:
    """Optional base class providing common check functionality."""

    def __init__(self, name: str, category: str) -> None:
        self._name = name
        self._category = category

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> str:
        return self._category

    def validate(self, context: ScanContext) -> ValidatorResult:
        """Override this method in subclasses."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement validate()"
        )

    def _make_result(self, violations: Optional[list[Violation]] = None) -> ValidatorResult:
        """Helper to create a ValidatorResult with this check's name."""
        return ValidatorResult(validator=self.name, violations=violations or [])

    @staticmethod
    def _violation(
        context: ScanContext,
        line: int,
        kind: ViolationType,
        value: str,
        message: str,
    ) -> Violation:
        return Violation(
            file=context.file_name,
            line=line,
            type=kind,
            value=value,
            message=message,
        )
