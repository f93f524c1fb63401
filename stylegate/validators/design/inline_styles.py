"""
Inline style attribute check.

Every ``style="..."`` attribute is inspected for values that should come
from design tokens instead:

- hex colors outside the palette (UNKNOWN_COLOR)
- any rgb()/rgba() call, regardless of the resulting color (RGB_COLOR)
- font-family, box-shadow and border-radius declarations in an attribute
  that contains no ``var(`` reference (HARDCODED_*)

The ``var(`` test looks at the whole attribute value, not the individual
declaration, so ``style="color: var(--x); font-family: Arial"`` passes.
"""

from __future__ import annotations

import re

from ..base import BaseValidator, ScanContext, ValidatorResult, Violation, ViolationType
from ..registry import register_validator


# =============================================================================
# Patterns
# =============================================================================

STYLE_ATTR_PATTERN = re.compile(r'style\s*=\s*"([^"]*)"', re.IGNORECASE)

HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{3,8}")

RGB_CALL_PATTERN = re.compile(r"rgba?\s*\(")
RGB_VALUE_PATTERN = re.compile(r"rgba?\s*\([^)]+\)")

FONT_DECL_PATTERN = re.compile(r"font-family\s*:")
FONT_VALUE_PATTERN = re.compile(r"font-family\s*:[^;]+")

SHADOW_DECL_PATTERN = re.compile(r"box-shadow\s*:")
SHADOW_VALUE_PATTERN = re.compile(r"box-shadow\s*:[^;]+")

RADIUS_DECL_PATTERN = re.compile(r"border-radius\s*:")
RADIUS_VALUE_PATTERN = re.compile(r"border-radius\s*:\s*([^;]+)")

VAR_REFERENCE = "var("

# Structural radii that never need a token
ALLOWED_RADIUS_VALUES = frozenset({"0", "50%", "0px"})


# =============================================================================
# Validator
# =============================================================================


@register_validator
class InlineStyleValidator(BaseValidator):
    """Flags hardcoded design values inside ``style`` attributes."""

    def __init__(self) -> None:
        super().__init__("inline-style", "inline")

    def validate(self, context: ScanContext) -> ValidatorResult:
        violations: list[Violation] = []
        for match in STYLE_ATTR_PATTERN.finditer(context.text):
            line = context.line_at(match.start())
            violations.extend(self.check_style_value(context, match.group(1), line))
        return self._make_result(violations)

    def check_style_value(
        self, context: ScanContext, style: str, line: int
    ) -> list[Violation]:
        """Run every inline rule against one attribute value."""
        found: list[Violation] = []

        for hex_match in HEX_PATTERN.finditer(style):
            color = hex_match.group(0)
            if not context.tokens.allows(color):
                found.append(self._violation(
                    context, line, ViolationType.UNKNOWN_COLOR, color,
                    f"Hardcoded color {color} not in design system palette",
                ))

        if RGB_CALL_PATTERN.search(style):
            rgb = RGB_VALUE_PATTERN.search(style)
            if rgb:
                found.append(self._violation(
                    context, line, ViolationType.RGB_COLOR, rgb.group(0),
                    "Use CSS custom properties instead of rgb/rgba",
                ))

        uses_var = VAR_REFERENCE in style

        if FONT_DECL_PATTERN.search(style) and not uses_var:
            font = FONT_VALUE_PATTERN.search(style)
            if font:
                found.append(self._violation(
                    context, line, ViolationType.HARDCODED_FONT, font.group(0),
                    "Font should come from styles.css, not inline",
                ))

        if SHADOW_DECL_PATTERN.search(style) and not uses_var:
            shadow = SHADOW_VALUE_PATTERN.search(style)
            if shadow:
                found.append(self._violation(
                    context, line, ViolationType.HARDCODED_SHADOW, shadow.group(0),
                    "Use var(--shadow-sm/md/lg) instead of hardcoded shadow",
                ))

        if RADIUS_DECL_PATTERN.search(style) and not uses_var:
            radius = RADIUS_VALUE_PATTERN.search(style)
            if radius and radius.group(1).strip() not in ALLOWED_RADIUS_VALUES:
                found.append(self._violation(
                    context, line, ViolationType.HARDCODED_RADIUS, radius.group(0),
                    "Use var(--radius-sm/md/lg/xl/full) instead",
                ))

        return found
