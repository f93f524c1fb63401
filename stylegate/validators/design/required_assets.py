"""
Required asset checks.

File-level (line 0) presence tests: every prototype must pull in the shared
stylesheets and the brand font. Both are plain substring tests against the
whole document, so a mention in a comment satisfies them too.
"""

from __future__ import annotations

from ..base import BaseValidator, ScanContext, ValidatorResult, Violation, ViolationType
from ..registry import register_validator


@register_validator
class RequiredStylesheetValidator(BaseValidator):
    """Each configured stylesheet name must appear in the file."""

    def __init__(self) -> None:
        super().__init__("required-stylesheets", "document")

    def validate(self, context: ScanContext) -> ValidatorResult:
        violations: list[Violation] = []
        for sheet, message in context.config.required_stylesheets:
            if sheet not in context.text:
                violations.append(self._violation(
                    context, 0, ViolationType.MISSING_STYLESHEET, sheet, message,
                ))
        return self._make_result(violations)


@register_validator
class RequiredFontValidator(BaseValidator):
    """The brand font must be imported under one of its spellings."""

    def __init__(self) -> None:
        super().__init__("required-font", "document")

    def validate(self, context: ScanContext) -> ValidatorResult:
        config = context.config
        if any(spelling in context.text for spelling in config.font_spellings):
            return self._make_result()

        font = config.required_font
        return self._make_result([self._violation(
            context, 0, ViolationType.MISSING_FONT, font,
            f"Must import {font} from Google Fonts",
        )])
