"""
Embedded ``<style>`` block check.

Scans each ``<style>`` element line by line for hex colors outside the
palette. Two kinds of line are skipped:

- custom-property lines (containing both ``--`` and ``:``), where new
  tokens may legitimately be declared
- lines whose first non-blank characters are ``/*`` or ``//``

Comment detection is line-start only. A comment that continues onto later
lines, or one that starts mid-line, is still scanned.
"""

from __future__ import annotations

import re

from ..base import BaseValidator, ScanContext, ValidatorResult, Violation, ViolationType
from ..registry import register_validator


# =============================================================================
# Patterns
# =============================================================================

STYLE_BLOCK_PATTERN = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)

# Lookahead stops a longer literal from matching as a shorter prefix
HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{3,8}(?![0-9A-Fa-f])")

COMMENT_PREFIXES = ("/*", "//")


def is_skipped_line(line: str) -> bool:
    """Return True for custom-property and comment-opening lines."""
    if "--" in line and ":" in line:
        return True
    return line.strip().startswith(COMMENT_PREFIXES)


# =============================================================================
# Validator
# =============================================================================


@register_validator
class StyleBlockValidator(BaseValidator):
    """Flags off-palette hex colors inside embedded stylesheets."""

    def __init__(self) -> None:
        super().__init__("style-block", "style-block")

    def validate(self, context: ScanContext) -> ValidatorResult:
        violations: list[Violation] = []

        for block in STYLE_BLOCK_PATTERN.finditer(context.text):
            block_start = context.line_at(block.start())

            # Offset 0 is the line holding the opening <style> tag
            for offset, line in enumerate(block.group(1).split("\n")):
                if is_skipped_line(line):
                    continue

                for hex_match in HEX_PATTERN.finditer(line):
                    color = hex_match.group(0)
                    if context.tokens.allows(color):
                        continue
                    violations.append(self._violation(
                        context,
                        block_start + offset,
                        ViolationType.UNKNOWN_COLOR_IN_STYLE,
                        color,
                        f"Color {color} in <style> block not in design system",
                    ))

        return self._make_result(violations)
