"""
Run orchestration.

Builds the palette, enumerates prototypes, applies exemptions and scans the
rest. All state for a run is carried in the returned RunResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from .config import LintConfig
from .exemptions import ExemptionPolicies
from .scanner import scan_file
from .tokens import extract_tokens
from .validators import Validator, Violation

logger = logging.getLogger(__name__)


# =============================================================================
# Result Types
# =============================================================================


@dataclass
class FileResult:
    """Outcome for one candidate file."""

    name: str
    violations: list[Violation] = field(default_factory=list)
    exempt_reason: Optional[str] = None
    """Set when the file was skipped by an exemption policy."""

    @property
    def exempt(self) -> bool:
        return self.exempt_reason is not None

    @property
    def passed(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.name,
            "exempt_reason": self.exempt_reason,
            "violations": [v.to_dict() for v in self.violations],
        }


@dataclass
class RunResult:
    """Aggregated result of linting one directory."""

    palette_size: int
    """Number of colors in the allow-set."""

    files: list[FileResult] = field(default_factory=list)
    """One entry per candidate file, in enumeration order."""

    @property
    def total_violations(self) -> int:
        return sum(len(f.violations) for f in self.files)

    @property
    def failing_files(self) -> list[FileResult]:
        return [f for f in self.files if f.violations]

    @property
    def passed(self) -> bool:
        return not self.failing_files

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "palette_size": self.palette_size,
            "files": [f.to_dict() for f in self.files],
            "total_violations": self.total_violations,
            "failing_files": len(self.failing_files),
            "passed": self.passed,
        }


# =============================================================================
# Enumeration
# =============================================================================


def find_candidates(root: Path, extension: str) -> list[Path]:
    """List files in ``root`` (non-recursive) ending with ``extension``.

    The suffix match is case-sensitive and results are sorted by name.
    """
    return sorted(
        (p for p in root.iterdir() if p.name.endswith(extension) and p.is_file()),
        key=lambda p: p.name,
    )


# =============================================================================
# Orchestration
# =============================================================================


def run(
    root: Path,
    config: Optional[LintConfig] = None,
    validators: Optional[Sequence[Validator]] = None,
) -> RunResult:
    """Lint every prototype in ``root``.

    Args:
        root: Directory holding the token stylesheet and the HTML files.
        config: Run configuration; defaults apply when omitted.
        validators: Checks to run; all registered checks when omitted.

    Returns:
        RunResult covering every candidate file, exempt or scanned.

    Raises:
        TokenSourceMissingError: If the token stylesheet is absent. No HTML
            file is read in that case.
        FileReadError: If a candidate file cannot be read.
    """
    config = config or LintConfig()

    tokens = extract_tokens(
        config.token_source_path(root),
        always_allowed=config.always_allowed_colors,
    )
    result = RunResult(palette_size=len(tokens))

    candidates = find_candidates(root, config.extension)
    logger.info(f"Found {len(candidates)} {config.extension} files in {root}")

    exemptions = ExemptionPolicies.from_config(config)

    for path in candidates:
        reason = exemptions.reason_for(path.name)
        if reason is not None:
            logger.debug(f"Skipping {path.name}: {reason}")
            result.files.append(FileResult(name=path.name, exempt_reason=reason))
            continue

        violations = scan_file(path, tokens, config, validators)
        result.files.append(FileResult(name=path.name, violations=violations))

    return result
