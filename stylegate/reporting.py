"""
Report rendering.

Handles:
- Human-readable console report (per-file status, itemized violations,
  summary)
- JSON output
"""

from __future__ import annotations

import json

from .runner import FileResult, RunResult
from .utils import Logger, log as default_log


def _render_file(file: FileResult, log: Logger) -> None:
    if file.exempt:
        suffix = f" (exempt — {file.exempt_reason})" if file.exempt_reason else " (exempt)"
        log.success(f"{file.name}{suffix}")
        return

    if file.passed:
        log.success(file.name)
    else:
        log.failure(f"{file.name} — {len(file.violations)} violation(s):")
        for v in file.violations:
            log.detail(f"[{v.type}] {v.location} → {v.message}")
            if v.value:
                log.dim(f"value: {v.value}")
    log.info()


def render_human(result: RunResult, log: Logger = default_log, file_kind: str = "HTML") -> None:
    """Write the console report for a finished run."""
    log.info(f"Design system: {result.palette_size} colors in palette")
    log.info()

    if not result.files:
        log.info(f"No {file_kind} files found.")
        return

    for file in result.files:
        _render_file(file, log)

    log.rule()
    log.info()
    if result.passed:
        log.success(f"ALL CLEAN — {len(result.files)} files, 0 violations")
        log.info()
        log.info("All prototypes conform to the design system.")
    else:
        log.failure(
            f"{result.total_violations} violation(s) in "
            f"{len(result.failing_files)} file(s)"
        )
        log.info()
        log.info("Fix violations to ensure brand consistency.")


def render_json(result: RunResult) -> str:
    """Render a run as JSON."""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
