"""
Design system checks for HTML prototypes.

Importing this package registers every check with the global registry.
Import order is registration order, which is also report order:

1. Inline ``style`` attributes
2. Embedded ``<style>`` blocks
3. Required stylesheets
4. Required brand font
"""

from .inline_styles import InlineStyleValidator
from .style_blocks import StyleBlockValidator, is_skipped_line
from .required_assets import RequiredFontValidator, RequiredStylesheetValidator

__all__ = [
    "InlineStyleValidator",
    "StyleBlockValidator",
    "is_skipped_line",
    "RequiredStylesheetValidator",
    "RequiredFontValidator",
]
