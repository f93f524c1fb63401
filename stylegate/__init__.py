"""
stylegate - design-token linter for HTML prototypes.

Checks that every prototype in a directory uses only the palette declared
in the ``:root`` block of ``styles.css``, with no inline rgb() colors,
hardcoded fonts, shadows or radii, and that each page loads the shared
stylesheets and brand font.

Usage:
    stylegate [--root DIR] [--config FILE] [--json] [--no-color] [-v]
    python -m stylegate
"""

from .cli import __version__, main

__all__ = ["__version__", "main"]
