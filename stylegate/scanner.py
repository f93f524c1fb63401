"""
Per-file scanning.

Runs every registered check against a single prototype and flattens their
findings. Checks never short-circuit one another.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import LintConfig
from .errors import FileReadError
from .tokens import TokenSet
from .validators import ScanContext, Validator, Violation, registry
from .validators import design  # noqa: F401  (registers built-in checks)

logger = logging.getLogger(__name__)


def read_file(path: Path) -> str:
    """Read a scan target in full.

    Raises:
        FileReadError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileReadError(path, e) from e


def scan_text(
    file_name: str,
    text: str,
    tokens: TokenSet,
    config: Optional[LintConfig] = None,
    validators: Optional[Sequence[Validator]] = None,
) -> list[Violation]:
    """Scan in-memory HTML and return all findings in check order."""
    context = ScanContext(
        file_name=file_name,
        text=text,
        tokens=tokens,
        config=config or LintConfig(),
    )
    checks = registry.list_all() if validators is None else validators

    violations: list[Violation] = []
    for check in checks:
        result = check.validate(context)
        if result.violations:
            logger.debug(f"{file_name}: {check.name} found {len(result.violations)}")
        violations.extend(result.violations)
    return violations


def scan_file(
    path: Path,
    tokens: TokenSet,
    config: Optional[LintConfig] = None,
    validators: Optional[Sequence[Validator]] = None,
) -> list[Violation]:
    """Read and scan one HTML file.

    Raises:
        FileReadError: If the file cannot be read.
    """
    return scan_text(path.name, read_file(path), tokens, config, validators)
